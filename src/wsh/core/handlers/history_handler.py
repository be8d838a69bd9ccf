# src/wsh/core/handlers/history_handler.py
import logging
from typing import List

# core.py is needed for the XNGINE import
from wsh.core import core as shell_core
from wsh.core.context.shell_context import ShellContext
from wsh.core.parser import parse_positive_int
from wsh.core.utils.diagnostics import report_error

logger = logging.getLogger(__name__)

USAGE = """
Usage:
  history          Show the recorded commands, most recent first.
  history set <N>  Keep at most N commands (N > 0).
  history <N>      Run command number N again.
"""


def handle_history(args: List[str], ctx: ShellContext) -> int:
    """
    Handles the 'history' command.

    Args:
        args (List[str]): Arguments after 'history'.
        ctx (ShellContext): The shell context owning the history ring.

    Returns:
        int: Exit code (0 for success or a silent no-op, 1 for a bad 'set').
    """
    if not args:
        for line in ctx.history.format_lines():
            print(line)
        return 0

    subcommand = args[0]

    if subcommand == "set":
        if len(args) < 2:
            report_error("history set requires a number")
            return 1
        capacity = parse_positive_int(args[1])
        if capacity is None:
            report_error("history set requires a positive integer")
            return 1
        ctx.history.resize(capacity)
        return 0

    # The engine replays "history N" itself before dispatching here, so this
    # branch serves direct calls of the handler.
    number = parse_positive_int(subcommand)
    if number is not None:
        return shell_core.XNGINE.replay_history(number, ctx)

    logger.debug("Ignoring 'history %s'", subcommand)
    return 0
