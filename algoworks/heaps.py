"""Fixed-capacity binary heaps backed by a Python list."""

from __future__ import annotations

from typing import Iterable, Iterator


class _BinaryHeap:
    """Array-backed binary heap holding at most ``capacity`` integers."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list[int] = []

    def _higher(self, a: int, b: int) -> bool:
        """Return True when ``a`` belongs strictly above ``b``."""
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        """Iterate over the elements in storage (level) order."""
        return iter(list(self._data))

    def clear(self) -> None:
        """Remove every element."""
        self._data.clear()

    def top(self) -> int:
        """Return the element at the top of the heap."""
        if not self._data:
            raise IndexError("heap is empty")
        return self._data[0]

    def add(self, value: int) -> None:
        """Insert ``value``; raises IndexError when the heap is full."""
        if len(self._data) >= self.capacity:
            raise IndexError("heap is full")
        self._data.append(value)
        self.sift_up(len(self._data) - 1)

    def sift_up(self, index: int) -> None:
        """Move the element at ``index`` up until its parent outranks it."""
        data = self._data
        value = data[index]
        while index > 0:
            parent = (index - 1) >> 1
            if not self._higher(value, data[parent]):
                break
            data[index] = data[parent]
            index = parent
        data[index] = value

    def remove(self) -> int:
        """Remove and return the top element."""
        if not self._data:
            raise IndexError("heap is empty")
        data = self._data
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
            self.sift_down(0)
        return top

    def sift_down(self, index: int) -> None:
        """Move the element at ``index`` down below any outranking child."""
        data = self._data
        size = len(data)
        half = size >> 1
        value = data[index]
        while index < half:
            child = (index << 1) + 1
            right = child + 1
            if right < size and self._higher(data[right], data[child]):
                child = right
            if not self._higher(data[child], value):
                break
            data[index] = data[child]
            index = child
        data[index] = value

    def replace(self, value: int) -> None:
        """Replace the top element with ``value`` in a single sift."""
        if not self._data:
            if self.capacity == 0:
                raise IndexError("heap is full")
            self._data.append(value)
            return
        self._data[0] = value
        self.sift_down(0)

    def heapify(self, values: Iterable[int]) -> None:
        """Replace the contents with a copy of ``values`` and build the heap."""
        self._data = list(values)
        self.capacity = max(self.capacity, len(self._data))
        for index in range((len(self._data) >> 1) - 1, -1, -1):
            self.sift_down(index)


class MaxHeap(_BinaryHeap):
    """Binary heap whose top is the largest element."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def _higher(self, a: int, b: int) -> bool:
        return a > b

    def __len__(self) -> int:
        return super().__len__()

    def clear(self) -> None:
        super().clear()

    def top(self) -> int:
        return super().top()

    def add(self, value: int) -> None:
        super().add(value)

    def sift_up(self, index: int) -> None:
        super().sift_up(index)

    def remove(self) -> int:
        return super().remove()

    def sift_down(self, index: int) -> None:
        super().sift_down(index)

    def replace(self, value: int) -> None:
        super().replace(value)

    def heapify(self, values: Iterable[int]) -> None:
        super().heapify(values)


class MinHeap(_BinaryHeap):
    """Binary heap whose top is the smallest element."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def _higher(self, a: int, b: int) -> bool:
        return a < b

    def __len__(self) -> int:
        return super().__len__()

    def clear(self) -> None:
        super().clear()

    def top(self) -> int:
        return super().top()

    def add(self, value: int) -> None:
        super().add(value)

    def sift_up(self, index: int) -> None:
        super().sift_up(index)

    def remove(self) -> int:
        return super().remove()

    def sift_down(self, index: int) -> None:
        super().sift_down(index)

    def replace(self, value: int) -> None:
        super().replace(value)

    def heapify(self, values: Iterable[int]) -> None:
        super().heapify(values)