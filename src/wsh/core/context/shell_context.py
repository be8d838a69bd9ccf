# src/wsh/core/context/shell_context.py
import logging
from typing import Optional

from wsh.core.managers.config_manager import config_manager
from wsh.core.managers.history_manager import DEFAULT_HISTORY_CAPACITY, HistoryRing
from wsh.core.managers.variable_manager import VariableStore

logger = logging.getLogger(__name__)


class ShellContext:
    """
    Owns the mutable state of one shell session: the shell-local variables and
    the command history. Created once at startup and released with close().
    """

    def __init__(self, history_capacity: Optional[int] = None):
        capacity = history_capacity or config_manager.get_nested(
            "history.capacity", DEFAULT_HISTORY_CAPACITY
        )
        self.variables = VariableStore()
        self.history = HistoryRing(int(capacity))
        self.last_status: int = 0
        self.closed = False

    def set(self, key: str, value: str) -> None:
        """Sets a shell-local variable."""
        self.variables.set(key, value)

    def get(self, key: str) -> Optional[str]:
        """Retrieves a shell-local variable. Returns None if key does not exist."""
        return self.variables.get(key)

    def close(self) -> None:
        """Releases all session state. Safe to call more than once."""
        if self.closed:
            return
        self.variables.clear()
        self.history.clear()
        self.closed = True
        logger.debug("Shell context released.")

    def __repr__(self) -> str:
        return (
            f"<ShellContext vars_count={len(self.variables)} "
            f"history={self.history.count}/{self.history.capacity}>"
        )
