"""Skip list of integers with per-level back and forward links and duplicate counts."""

from __future__ import annotations

import random
from typing import Iterator, Optional, Protocol

MAX_LEVEL = 10


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class SkipNode:
    """Node present on levels 0..level, holding a value and how often it was added."""

    def __init__(self, level: int, value: int) -> None:
        if level < 0:
            raise ValueError("level must not be negative")
        self.level = level
        self.value = value
        self.count = 1
        self.prev: list[Optional[SkipNode]] = [None] * (level + 1)
        self.next: list[Optional[SkipNode]] = [None] * (level + 1)

    def link(self, level: int, node: SkipNode) -> None:
        """Splice ``node`` next to this one on ``level``.

        It goes before this node when its value is smaller, otherwise after it.
        """
        if level > self.level or level > node.level:
            raise ValueError("both nodes must reach the given level")
        if self.value > node.value:
            before = self.prev[level]
            self.prev[level] = node
            node.next[level] = self
            node.prev[level] = before
            if before is not None:
                before.next[level] = node
        else:
            after = self.next[level]
            self.next[level] = node
            node.prev[level] = self
            node.next[level] = after
            if after is not None:
                after.prev[level] = node


def _neighbour(start: SkipNode, level: int, value: int) -> SkipNode:
    """Walk ``level`` from ``start`` to the node holding ``value`` or next to where it belongs."""
    node = start
    while node.value > value and node.prev[level] is not None:
        node = node.prev[level]
    while node.next[level] is not None and node.next[level].value <= value:
        node = node.next[level]
    return node


class SkipList:
    """Ordered set of integers that counts repeated insertions.

    Each new value has an even chance (decided by ``rng``) of becoming the
    new tallest node, until the height passes ``MAX_LEVEL``.
    """

    def __init__(self, rng: Optional[_RandomSource] = None) -> None:
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self.max_level = -1
        self._roots: list[SkipNode] = []

    def _upgrade(self) -> bool:
        roll = self._rng.randrange(7) % 2
        if self.max_level > MAX_LEVEL:
            return False
        return roll == 1

    def __iter__(self) -> Iterator[int]:
        """Iterate over the distinct values in ascending order."""
        if not self._roots:
            return
        node: Optional[SkipNode] = self._roots[0]
        while node.prev[0] is not None:
            node = node.prev[0]
        while node is not None:
            yield node.value
            node = node.next[0]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def add(self, value: int) -> None:
        """Insert ``value``, or bump its count when it is already present."""
        node = self.search_pos(value)
        if node is None:
            self.max_level = 0
            self._roots.append(SkipNode(0, value))
            return
        if node.value == value:
            node.count += 1
            return
        if self._upgrade():
            self.max_level += 1
            new = SkipNode(self.max_level, value)
            self._roots.append(new)
            for level in range(1, self.max_level):
                _neighbour(self._roots[level], level, value).link(level, new)
        else:
            new = SkipNode(0, value)
        node.link(0, new)

    def search(self, value: int) -> bool:
        """Return True when ``value`` has been added."""
        node = self.search_pos(value)
        return node is not None and node.value == value

    def search_pos(self, value: int) -> Optional[SkipNode]:
        """Return the node holding ``value``, else its bottom-level neighbour; None when empty."""
        if self.max_level == -1:
            return None
        node = self._roots[self.max_level]
        for level in range(node.level, -1, -1):
            node = _neighbour(node, level, value)
            if node.value == value:
                return node
        return node