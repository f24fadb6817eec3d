"""Small arithmetic puzzles: series sums, digit-list addition, range sums and k-sums."""

from __future__ import annotations

from itertools import accumulate
from typing import Optional, Sequence

from algoworks.linked_lists import ListNode


def add_number(n: int) -> int:
    """Return 1 + 2 + ... + n by looping."""
    return sum(range(1, n + 1))


def add_number_formula(n: int) -> int:
    """Return 1 + 2 + ... + n by Gauss's formula."""
    return (1 + n) * n // 2


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> ListNode:
    """Add two numbers stored as digit lists, least significant digit first."""
    if l1 is None and l2 is None:
        return ListNode(0)
    sentinel = ListNode(0)
    tail = sentinel
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return sentinel.next


def _check_range(size: int, i: int, j: int) -> None:
    if i < 0 or j >= size:
        raise IndexError("range out of bounds")


class NumArray:
    """Range sums computed on demand, O(j - i) per query."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._data = list(nums)

    def sum_range(self, i: int, j: int) -> int:
        """Return the sum of elements ``i`` through ``j`` inclusive."""
        _check_range(len(self._data), i, j)
        return sum(self._data[i:j + 1])


class PrefixSumArray:
    """Range sums answered in O(1) from precomputed prefix sums."""

    def __init__(self, nums: Sequence[int]) -> None:
        self._prefix = list(accumulate(nums, initial=0))

    def sum_range(self, i: int, j: int) -> int:
        """Return the sum of elements ``i`` through ``j`` inclusive."""
        _check_range(len(self._prefix) - 1, i, j)
        if i > j:
            return 0
        return self._prefix[j + 1] - self._prefix[i]


def number_of_matches(n: int) -> int:
    """Matches played in a knockout among ``n`` teams: every match removes one team."""
    if n < 1:
        raise ValueError("there must be at least one team")
    return n - 1


def number_of_matches_simulated(n: int) -> int:
    """Matches played in a knockout among ``n`` teams, counted round by round."""
    if n < 1:
        raise ValueError("there must be at least one team")
    total = 0
    while n != 1:
        matches = n // 2
        total += matches
        n = matches + (n & 1)
    return total


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the first index pair whose values add to ``target``, or an empty list."""
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                return [i, j]
    return []


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple of values that sums to zero."""
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i in range(count - 2):
        if i > 0 and values[i] == values[i - 1]:
            continue
        left, right = i + 1, count - 1
        while left < right:
            total = values[i] + values[left] + values[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([values[i], values[left], values[right]])
                left += 1
                right -= 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
    return result