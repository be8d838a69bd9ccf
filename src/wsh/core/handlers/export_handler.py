# src/wsh/core/handlers/export_handler.py
import logging
import os
from typing import List

from wsh.core.context.shell_context import ShellContext
from wsh.core.parser import split_assignment, substitute_token
from wsh.core.utils.diagnostics import report_error

logger = logging.getLogger(__name__)


def handle_export(args: List[str], ctx: ShellContext) -> int:
    """
    Handles 'export NAME=VALUE'.

    Sets an environment variable that is inherited by every program started
    afterwards, overwriting any existing value. A '$NAME' value is resolved
    first, so 'export Y=$X' exports the current value of X.

    Args:
        args (List[str]): Arguments; the first one must be NAME=VALUE.
        ctx (ShellContext): The shell context used for '$NAME' lookups.

    Returns:
        int: Exit code (0 for success, 1 for usage or OS errors).
    """
    if not args:
        report_error("export requires an argument")
        return 1

    assignment = split_assignment(args[0])
    if assignment is None:
        report_error("export requires VAR=VALUE format")
        return 1

    name, value = assignment
    value = substitute_token(value, ctx.variables)
    try:
        os.environ[name] = value
    except (ValueError, OSError) as e:
        report_error(str(e))
        return 1

    logger.debug("Exported %s", name)
    return 0
