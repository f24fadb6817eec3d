"""Binary search variants and the median of two sorted arrays."""

from __future__ import annotations

from typing import Sequence

from algoworks.sorting import quick_sort


def binary_search(data: Sequence[int], search: int) -> int:
    """Return an index of ``search`` in sorted ``data``, or -1."""
    low, high = 0, len(data) - 1
    while low <= high:
        middle = low + (high - low) // 2
        if data[middle] > search:
            high = middle - 1
        elif data[middle] < search:
            low = middle + 1
        else:
            return middle
    return -1


def first_binary_search(data: Sequence[int], search: int) -> int:
    """Return the index of the first occurrence of ``search`` in sorted ``data``, or -1."""
    low, high = 0, len(data) - 1
    while low <= high:
        middle = low + (high - low) // 2
        if data[middle] > search:
            high = middle - 1
        elif data[middle] < search:
            low = middle + 1
        else:
            if middle == 0 or data[middle - 1] != search:
                return middle
            high = middle - 1
    return -1


def last_binary_search(data: Sequence[int], search: int) -> int:
    """Return the index of the last occurrence of ``search`` in sorted ``data``, or -1."""
    low, high = 0, len(data) - 1
    while low <= high:
        middle = low + (high - low) // 2
        if data[middle] > search:
            high = middle - 1
        elif data[middle] < search:
            low = middle + 1
        else:
            if middle == len(data) - 1 or data[middle + 1] != search:
                return middle
            low = middle + 1
    return -1


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the values of both arrays together."""
    merged = quick_sort(list(nums1) + list(nums2))
    if not merged:
        raise ValueError("at least one array must be non-empty")
    half = len(merged) // 2
    if len(merged) % 2 == 0:
        return (merged[half - 1] + merged[half]) / 2
    return float(merged[half])