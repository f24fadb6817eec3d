"""Selecting the k largest values of a sequence with a bounded min-heap."""

from __future__ import annotations

from typing import Iterable

from algoworks.heaps import MinHeap


def top_k(data: Iterable[int], k: int) -> list[int]:
    """Return the ``k`` largest values of ``data`` in min-heap storage order.

    The first element of the result is the smallest of the values kept.
    Fewer than ``k`` inputs yield all of them.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return []
    heap = MinHeap(k)
    for value in data:
        if len(heap) < k:
            heap.add(value)
        elif value > heap.top():
            heap.replace(value)
    return list(heap)