"""Least-recently-used cache with a fixed capacity."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Hashable


class LRUCache:
    """Mapping that evicts the least recently used key when over capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable) -> Any:
        """Return the value for ``key`` (or None) and mark it as most recently used."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if needed."""
        if key in self._entries:
            self._entries.move_to_end(key)
            self._entries[key] = value
            return
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self.delete_oldest()

    def delete_oldest(self) -> None:
        """Drop the least recently used entry, if any."""
        if self._entries:
            self._entries.popitem(last=False)

    def delete(self, key: Hashable) -> None:
        """Drop ``key`` if it is present."""
        self._entries.pop(key, None)

    def items(self) -> list[tuple[Hashable, Any]]:
        """Return (key, value) pairs, most recently used first."""
        return list(reversed(self._entries.items()))