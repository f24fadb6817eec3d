"""Classic comparison and distribution sorts over lists of integers.

Functions that the docstring calls "in place" reorder the given list and
return that same list; the others return a new list.
"""

from __future__ import annotations

from algoworks.heaps import MinHeap


def _require_non_negative(data: list[int]) -> None:
    if any(value < 0 for value in data):
        raise ValueError("values must not be negative")


def bubble_sort(data: list[int]) -> list[int]:
    """Exchange sort: compare each slot with every later one, in place."""
    size = len(data)
    for i in range(size):
        for j in range(i + 1, size):
            if data[j] < data[i]:
                data[i], data[j] = data[j], data[i]
    return data


def bubble_sort_optimized(data: list[int]) -> list[int]:
    """Bubble sort that skips the tail already known to be sorted, in place."""
    end = len(data) - 1
    while end > 0:
        last_swap = 0
        for j in range(1, end + 1):
            if data[j] < data[j - 1]:
                data[j - 1], data[j] = data[j], data[j - 1]
                last_swap = j
        end = last_swap - 1
    return data


def insert_sort(data: list[int]) -> list[int]:
    """Insertion sort, in place."""
    for i in range(1, len(data)):
        value = data[i]
        j = i - 1
        while j >= 0 and value < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = value
    return data


def selection_sort(data: list[int]) -> list[int]:
    """Selection sort, in place."""
    size = len(data)
    for i in range(size - 1):
        smallest = min(range(i, size), key=data.__getitem__)
        if smallest != i:
            data[i], data[smallest] = data[smallest], data[i]
    return data


def bucket_sort(data: list[int]) -> list[int]:
    """Bucket sort of non-negative integers, in place.

    Each value goes to bucket ``value * (n - 1) // max``; buckets are then
    insertion-sorted and concatenated.
    """
    if not data:
        raise ValueError("cannot bucket-sort an empty list")
    _require_non_negative(data)
    maximum = max(data)
    if maximum == 0:
        return data
    count = len(data)
    buckets: list[list[int]] = [[] for _ in range(count)]
    for value in data:
        buckets[value * (count - 1) // maximum].append(value)
    data[:] = [value for bucket in buckets for value in insert_sort(bucket)]
    return data


def count_sort(data: list[int]) -> list[int]:
    """Counting sort of non-negative integers, in place."""
    if len(data) <= 1:
        return data
    _require_non_negative(data)
    counts = [0] * (max(data) + 1)
    for value in data:
        counts[value] += 1
    data[:] = [value for value, times in enumerate(counts) for _ in range(times)]
    return data


def count_sort_stable(data: list[int]) -> list[int]:
    """Stable counting sort of non-negative integers using prefix sums; returns a new list."""
    if len(data) <= 1:
        return list(data)
    _require_non_negative(data)
    counts = [0] * (max(data) + 1)
    for value in data:
        counts[value] += 1
    for i in range(1, len(counts)):
        counts[i] += counts[i - 1]
    result = [0] * len(data)
    for value in reversed(data):
        counts[value] -= 1
        result[counts[value]] = value
    return result


def count_sort_offset(data: list[int]) -> list[int]:
    """Stable counting sort indexed from the minimum value; returns a new list.

    Offsetting by the minimum keeps the count table small and admits negatives.
    """
    if len(data) <= 1:
        return list(data)
    low, high = min(data), max(data)
    counts = [0] * (high - low + 1)
    for value in data:
        counts[value - low] += 1
    for i in range(1, len(counts)):
        counts[i] += counts[i - 1]
    result = [0] * len(data)
    for value in reversed(data):
        counts[value - low] -= 1
        result[counts[value - low]] = value
    return result


def heap_sort(data: list[int]) -> list[int]:
    """Sort by building a min-heap and draining it; returns a new list."""
    heap = MinHeap(len(data))
    heap.heapify(data)
    return [heap.remove() for _ in range(len(data))]


def merge_sort(data: list[int], begin: int, end: int) -> list[int]:
    """Top-down merge sort of the half-open range ``[begin, end)``, in place."""
    if end - begin > 1:
        mid = (begin + end) >> 1
        merge_sort(data, begin, mid)
        merge_sort(data, mid, end)
        _merge(data, begin, mid, end)
    return data


def _merge(data: list[int], begin: int, mid: int, end: int) -> None:
    left = data[begin:mid]
    right = data[mid:end]
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    data[begin:end] = merged


def quick_sort(data: list[int]) -> list[int]:
    """Quick sort pivoting on the first element; returns a new list."""
    if len(data) <= 1:
        return list(data)
    pivot, rest = data[0], data[1:]
    left = [value for value in rest if value <= pivot]
    right = [value for value in rest if value > pivot]
    return quick_sort(left) + [pivot] + quick_sort(right)


def radix_sort(data: list[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers, in place."""
    if not data:
        raise ValueError("cannot radix-sort an empty list")
    _require_non_negative(data)
    maximum = max(data)
    place = 1
    while place <= maximum:
        counts = [0] * 10
        for value in data:
            counts[value // place % 10] += 1
        for digit in range(1, 10):
            counts[digit] += counts[digit - 1]
        ordered = [0] * len(data)
        for value in reversed(data):
            digit = value // place % 10
            counts[digit] -= 1
            ordered[counts[digit]] = value
        data[:] = ordered
        place *= 10
    return data


def _step_sequence(size: int) -> list[int]:
    steps = []
    step = size >> 1
    while step >= 1:
        steps.append(step)
        step >>= 1
    return steps


def shell_sort(data: list[int]) -> list[int]:
    """Shell sort with the halving step sequence n/2, n/4, ..., 1, in place."""
    size = len(data)
    for step in _step_sequence(size):
        for i in range(step, size, step):
            j = i - step
            while j >= 0 and data[j + step] < data[j]:
                data[j], data[j + step] = data[j + step], data[j]
                j -= step
    return data