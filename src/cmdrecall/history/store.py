"""Bounded, deduplicated, most-recent-first command history."""

from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Iterator, List


class HistoryStore:
    """In-memory history of accepted commands.

    Entries are unique and ordered most-recent-first. Re-inserting an
    existing entry moves it to the front; the oldest entries are evicted
    once ``max_size`` is exceeded.
    """

    def __init__(self, max_size: int = 500) -> None:
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        self.max_size = max_size
        # Keys only; the front of the dict is the most recent entry.
        self._entries: "OrderedDict[str, None]" = OrderedDict()

    def insert(self, value: str) -> None:
        """Record ``value`` as the most recent entry.

        The caller is expected to have trimmed and filtered ``value``.
        """
        self._entries[value] = None
        self._entries.move_to_end(value, last=False)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=True)

    def seed(self, entries: Iterable[str]) -> None:
        """Replace contents with ``entries`` given most-recent-first."""
        self._entries.clear()
        for value in entries:
            if value in self._entries:
                continue
            if len(self._entries) >= self.max_size:
                break
            self._entries[value] = None

    def snapshot(self) -> List[str]:
        """Return a copy of the entries, most recent first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value: object) -> bool:
        return value in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
