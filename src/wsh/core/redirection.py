# src/wsh/core/redirection.py
import logging
from typing import List, Tuple

from wsh.model import RedirectionIntent

logger = logging.getLogger(__name__)

# Ordered longest first: '&>>' must win over '&>', and '>>' over '>'.
# Each entry: (operator, append, redirect_stderr, is_input)
REDIRECTION_OPERATORS: Tuple[Tuple[str, bool, bool, bool], ...] = (
    ("&>>", True, True, False),
    ("&>", False, True, False),
    (">>", True, False, False),
    (">", False, False, False),
    ("<", False, False, True),
)


def parse_redirection(args: List[str]) -> RedirectionIntent:
    """
    Scans the argument vector left to right for the first redirection clause.

    The operand is the rest of the operator token ('>out.txt') or, when the
    operator stands alone, the next token ('> out.txt'). The clause is removed
    from the argument list in place; arguments around it are kept. Only the
    first clause is honored: later operators stay in the list as literal
    arguments.

    Args:
        args (List[str]): The argument vector; modified in place.

    Returns:
        RedirectionIntent: What the child's standard streams should be bound to.
    """
    for i, arg in enumerate(args):
        for op, append, redirect_stderr, is_input in REDIRECTION_OPERATORS:
            if not arg.startswith(op):
                continue

            path = arg[len(op):]
            end = i + 1
            if not path and end < len(args):
                path = args[end]
                end += 1
            del args[i:end]
            logger.debug("Redirection '%s' -> '%s' found at position %d", op, path, i)

            if is_input:
                return RedirectionIntent(input_path=path)
            return RedirectionIntent(
                output_path=path, append=append, redirect_stderr=redirect_stderr
            )
    return RedirectionIntent()
