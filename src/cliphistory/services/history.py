"""In-memory clipboard history.

The history is a most-recent-first list of text snapshots. It never holds
more than ``capacity`` entries and never holds the same snapshot twice in a
row. One :class:`HistoryCache` instance owns the list; everything else gets
copies.
"""

import logging
from typing import List

from cliphistory.constants import EMPTY_SNAPSHOT, HISTORY_CAPACITY
from cliphistory.utils.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class HistoryCache:
    """Bounded, deduplicating clipboard history safe for concurrent use."""

    def __init__(self, capacity: int = HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._entries: List[str] = []
        self._lock = ReadWriteLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def insert(self, text: str) -> bool:
        """Put ``text`` at the front of the history.

        Args:
            text: The observed clipboard content.

        Returns:
            ``True`` when the history changed, ``False`` when ``text`` equals
            the current head and was dropped.
        """
        with self._lock.write_locked():
            if self._entries and self._entries[0] == text:
                return False
            # build the new list before publishing it so readers
            # never see the prepend without the truncation
            entries = [text] + self._entries
            if len(entries) > self._capacity:
                del entries[self._capacity:]
            self._entries = entries
            size = len(entries)

        logger.debug(f"History updated, {size} entries")
        return True

    def head(self) -> str:
        """Return the most recent snapshot, or ``EMPTY_SNAPSHOT`` if none."""
        with self._lock.read_locked():
            if not self._entries:
                return EMPTY_SNAPSHOT
            return self._entries[0]

    def list(self) -> List[str]:
        """Return a copy of the history, most recent first."""
        with self._lock.read_locked():
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

    def __repr__(self) -> str:
        return f"HistoryCache(capacity={self._capacity}, size={len(self)})"
