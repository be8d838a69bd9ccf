# src/wsh/core/handlers/cd_handler.py
import logging
import os
from typing import List

from wsh.core.context.shell_context import ShellContext
from wsh.core.utils.diagnostics import report_error

logger = logging.getLogger(__name__)


def handle_cd(args: List[str], _ctx: ShellContext) -> int:
    """Changes the working directory of the shell process."""
    if not args:
        report_error('expected argument to "cd"')
        return 1

    try:
        os.chdir(args[0])
    except (OSError, ValueError) as e:
        report_error(getattr(e, "strerror", None) or str(e))
        return 1

    logger.debug("Working directory is now %s", os.getcwd())
    return 0
