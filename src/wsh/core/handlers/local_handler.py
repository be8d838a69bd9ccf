# src/wsh/core/handlers/local_handler.py
from typing import List

from wsh.core.context.shell_context import ShellContext
from wsh.core.parser import split_assignment, substitute_token
from wsh.core.utils.diagnostics import report_error


def handle_local(args: List[str], ctx: ShellContext) -> int:
    """
    Handles 'local NAME=VALUE'.

    Stores a shell-local variable. The value is substituted before it is
    stored; a new name is appended to the listing order, an existing one keeps
    its place.
    """
    if not args:
        report_error("local requires an argument")
        return 1

    assignment = split_assignment(args[0])
    if assignment is None:
        report_error("local requires VAR=VALUE format")
        return 1

    name, value = assignment
    ctx.set(name, substitute_token(value, ctx.variables))
    return 0
