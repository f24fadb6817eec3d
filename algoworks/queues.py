"""Fixed-size array queues: a compacting linear queue and a ring buffer."""

from __future__ import annotations


class QueueFullError(Exception):
    """Raised when enqueuing onto a queue with no free slot."""


class ArrayQueue:
    """Linear array queue that shifts its items to the front when the tail is reached."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._slots = [0] * max_size
        self._head = 0
        self._tail = 0

    def enqueue(self, item: int) -> None:
        """Append ``item``; raises QueueFullError when every slot is in use."""
        if self._tail == self.max_size:
            if self._head == 0:
                raise QueueFullError("queue is full")
            live = self._slots[self._head:self._tail]
            self._slots[: len(live)] = live
            self._tail -= self._head
            self._head = 0
        self._slots[self._tail] = item
        self._tail += 1

    def dequeue(self) -> int:
        """Remove and return the oldest item."""
        if self._head == self._tail:
            raise IndexError("queue is empty")
        item = self._slots[self._head]
        self._head += 1
        return item

    def slots(self) -> list[int]:
        """Return a copy of the underlying storage."""
        return list(self._slots)


class CircularQueue:
    """Ring-buffer queue; one slot is always left free, so it holds max_size - 1 items."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._slots = [0] * max_size
        self._head = 0
        self._tail = 0

    def enqueue(self, item: int) -> None:
        """Append ``item``; raises QueueFullError when the ring is full."""
        if (self._tail + 1) % self.max_size == self._head:
            raise QueueFullError("queue is full")
        self._slots[self._tail] = item
        self._tail = (self._tail + 1) % self.max_size

    def dequeue(self) -> int:
        """Remove and return the oldest item."""
        if self._head == self._tail:
            raise IndexError("queue is empty")
        item = self._slots[self._head]
        self._head = (self._head + 1) % self.max_size
        return item

    def slots(self) -> list[int]:
        """Return a copy of the underlying storage."""
        return list(self._slots)