# src/wsh/core/handlers/exit_handler.py
from typing import List

from wsh.core.context.shell_context import ShellContext
from wsh.core.utils.diagnostics import report_error
from wsh.core.xngine import EXIT_SIGNAL


def handle_exit(args: List[str], _ctx: ShellContext) -> int:
    """Signals the shell to stop. The driver releases the context afterwards."""
    if args:
        report_error("exit takes no arguments")
        return 1
    return EXIT_SIGNAL
