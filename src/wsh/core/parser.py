# src/wsh/core/parser.py
from __future__ import annotations

import os
import re
from typing import List

from wsh.core.managers.variable_manager import VariableStore

# Token delimiters: space, tab, carriage return, newline and bell.
_SPLIT_PATTERN = re.compile(r"[ \t\r\n\a]+")
# A NAME=VALUE assignment as used by 'export' and 'local'.
ASSIGNMENT_PATTERN = re.compile(r"^([^=]*)=(.*)$", re.DOTALL)
_DIGITS_PATTERN = re.compile(r"[0-9]+")


def split_line(line: str) -> List[str]:
    """Splits a raw line into whitespace-delimited tokens without substitution."""
    return [tok for tok in _SPLIT_PATTERN.split(line or "") if tok]


def substitute_token(token: str, variables: VariableStore) -> str:
    """
    Resolves a '$NAME' token: process environment first, then the shell-local
    variables. Unknown names resolve to an empty string. Tokens without a
    leading '$' are returned unchanged.
    """
    if not token.startswith("$"):
        return token

    name = token[1:]
    env_value = os.environ.get(name) if name else None
    if env_value is not None:
        return env_value

    local_value = variables.get(name)
    if local_value is not None:
        return local_value

    # An unknown variable still yields an (empty) argument
    return ""


def parse_command_line(line: str, variables: VariableStore) -> List[str]:
    """
    Parses the user input into an argument vector.

    Args:
        line (str): The raw input line.
        variables (VariableStore): Shell-local variables used for substitution.

    Returns:
        List[str]: The substituted tokens; the first one is the command name.
    """
    return [substitute_token(tok, variables) for tok in split_line(line)]


def split_assignment(arg: str) -> tuple[str, str] | None:
    """Splits 'NAME=VALUE' on the first '='. Returns None without '=' or NAME."""
    m = ASSIGNMENT_PATTERN.match(arg)
    if not m or not m.group(1):
        return None
    return m.group(1), m.group(2)


def parse_positive_int(token: str) -> int | None:
    """Returns the value of a token made of ASCII digits only, if it is above zero."""
    if not _DIGITS_PATTERN.fullmatch(token):
        return None
    value = int(token)
    return value if value > 0 else None
