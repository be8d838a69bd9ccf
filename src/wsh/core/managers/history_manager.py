# src/wsh/core/managers/history_manager.py
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 5


class HistoryRing:
    """
    Fixed-capacity circular buffer of previously executed command lines.

    Entries are numbered for display and replay from 1 (most recent) to
    ``count`` (oldest). The numbering is derived from ``start`` and ``count``
    every time and never stored alongside the entries.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("history capacity must be positive")
        self._slots: List[Optional[str]] = [None] * capacity
        self.capacity = capacity
        self.count = 0
        self.start = 0

    def add(self, command: str) -> bool:
        """
        Records a command line. Returns False when the line was skipped because
        it equals the most recent entry.
        """
        if self.count > 0:
            last = (self.start + self.count - 1) % self.capacity
            if self._slots[last] == command:
                return False

        if self.count < self.capacity:
            self._slots[(self.start + self.count) % self.capacity] = command
            self.count += 1
        else:
            # Full: overwrite the oldest entry and advance the ring
            self._slots[self.start] = command
            self.start = (self.start + 1) % self.capacity
        logger.debug("History add '%s' (count=%d, start=%d)", command, self.count, self.start)
        return True

    def get(self, number: int) -> Optional[str]:
        """
        Returns the entry with the given 1-based number (1 = most recent), or
        None when the number is out of range.
        """
        if number <= 0 or number > self.count:
            return None
        return self._slots[(self.start + self.count - number) % self.capacity]

    def entries(self) -> List[str]:
        """Returns all entries, most recent first."""
        return [self.get(i) for i in range(1, self.count + 1)]  # type: ignore[misc]

    def resize(self, capacity: int) -> None:
        """
        Reallocates the ring with a new capacity, keeping as many of the most
        recent entries as fit. The logical start is reset to 0.
        """
        if capacity <= 0:
            raise ValueError("history capacity must be positive")

        keep = self.entries()[:capacity]
        slots: List[Optional[str]] = [None] * capacity
        # Oldest kept entry goes into slot 0
        for i, command in enumerate(reversed(keep)):
            slots[i] = command

        logger.info("History capacity changed from %d to %d (%d entries kept)",
                    self.capacity, capacity, len(keep))
        self._slots = slots
        self.capacity = capacity
        self.count = len(keep)
        self.start = 0

    def format_lines(self) -> List[str]:
        return [f"{i}) {command}" for i, command in enumerate(self.entries(), start=1)]

    def clear(self) -> None:
        self._slots = [None] * self.capacity
        self.count = 0
        self.start = 0

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"<HistoryRing capacity={self.capacity} count={self.count} start={self.start}>"
