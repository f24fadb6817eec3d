"""Bounded stacks, including one that reports its minimum in O(1)."""

from __future__ import annotations

from dataclasses import dataclass


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its maximum size."""


class ArrayStack:
    """Last-in, first-out stack with a maximum size."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: int) -> None:
        """Push ``item``; raises StackFullError when the stack is full."""
        if len(self._items) >= self.max_size:
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> int:
        """Remove and return the most recently pushed item."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()


@dataclass(frozen=True)
class _Entry:
    data: int
    min: int


class MinStack:
    """Bounded stack that tracks the minimum of its contents."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._entries: list[_Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, item: int) -> None:
        """Push ``item``; raises StackFullError when the stack is full."""
        if len(self._entries) >= self.max_size:
            raise StackFullError("stack is full")
        current = min(item, self._entries[-1].min) if self._entries else item
        self._entries.append(_Entry(item, current))

    def pop(self) -> int:
        """Remove and return the most recently pushed item."""
        if not self._entries:
            raise IndexError("stack is empty")
        return self._entries.pop().data

    def min(self) -> int:
        """Return the smallest item currently on the stack."""
        if not self._entries:
            raise IndexError("stack is empty")
        return self._entries[-1].min