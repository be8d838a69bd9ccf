# src/wsh/core/managers/variable_manager.py
import logging
from typing import Dict, Iterator, Optional

from wsh.model import Variable

logger = logging.getLogger(__name__)


class VariableStore:
    """
    Ordered store of shell-local variables.

    Names are unique; iteration follows first-assignment order, and updating an
    existing variable keeps its original position.
    """

    def __init__(self) -> None:
        self._vars: Dict[str, Variable] = {}

    def set(self, name: str, value: str) -> None:
        """Inserts a new variable or updates the value of an existing one."""
        existing = self._vars.get(name)
        if existing is not None:
            existing.value = value
            logger.debug("Updated shell variable '%s'", name)
        else:
            self._vars[name] = Variable(name=name, value=value)
            logger.debug("Added shell variable '%s'", name)

    def get(self, name: str) -> Optional[str]:
        """Returns the value of a variable, or None if it does not exist."""
        var = self._vars.get(name)
        return var.value if var is not None else None

    def clear(self) -> None:
        self._vars.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[Variable]:
        return iter(list(self._vars.values()))

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"<VariableStore vars_count={len(self._vars)}>"
