# src/wsh/core/exceptions.py
"""
Exceptions raised while preparing or launching an external command.

    ShellError (Base)
    ├── CommandNotFoundError
    ├── RedirectionError
    └── ProcessSpawnError

Every ShellError aborts only the command that raised it; the shell keeps
running. The message is printed to stderr prefixed with 'wsh: '.
"""
from typing import Optional


class ShellError(Exception):
    """Base exception for all recoverable command errors."""

    def __init__(self, message: str, command: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.command = command

    def __str__(self) -> str:
        return self.message


class CommandNotFoundError(ShellError):
    """No executable file matched the command name."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command}", command=command)


class RedirectionError(ShellError):
    """A redirection target could not be opened."""


class ProcessSpawnError(ShellError):
    """The operating system refused to start the child process."""
