# src/wsh/core/handlers/vars_handler.py
from typing import List

from wsh.core.context.shell_context import ShellContext


def handle_vars(_args: List[str], ctx: ShellContext) -> int:
    """Prints every shell-local variable as name=value, in insertion order."""
    for var in ctx.variables:
        print(var.format_for_display())
    return 0
