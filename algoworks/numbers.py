"""Integer puzzles: trapped rain water, Fibonacci, maximum subarray, reversal and parsing."""

from __future__ import annotations

from typing import Sequence

INT32_MAX = (1 << 31) - 1
INT32_MIN = -(1 << 31)


def water_volume(heights: Sequence[int]) -> int:
    """Return how much rain water collects between steps of the given heights.

    The tallest step splits the profile: water left of it is bounded by the
    running maximum from the left, water right of it by the one from the right.
    """
    if not heights:
        return 0
    peak = max(range(len(heights)), key=heights.__getitem__)
    volume = 0
    for side in (heights[:peak], reversed(heights[peak + 1:])):
        highest = 0
        for height in side:
            if height > highest:
                highest = height
            else:
                volume += highest - height
    return volume


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion (exponential time)."""
    if n < 2:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def fibonacci_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number in linear time."""
    if n <= 1:
        return n
    first, second = 0, 1
    for _ in range(n - 1):
        first, second = second, first + second
    return second


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run, keeping a running sum."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def dp_max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a contiguous run by dynamic programming; 0 when empty."""
    if not nums:
        return 0
    best = ending_here = nums[0]
    for value in nums[1:]:
        ending_here = value + ending_here if ending_here > 0 else value
        best = max(best, ending_here)
    return best


def reverse_int(x: int) -> int:
    """Reverse the decimal digits of ``x``; return 0 when the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if result > INT32_MAX or result < INT32_MIN:
        return 0
    return result


def my_atoi(text: str) -> int:
    """Parse a leading signed integer from ``text``, clamping to the 32-bit range.

    Surrounding whitespace is ignored; parsing stops at the first non-digit.
    """
    text = text.strip()
    if not text:
        return 0
    sign = 1
    if text[0] == "-":
        sign = -1
        text = text[1:]
    elif text[0] == "+":
        text = text[1:]
    result = 0
    for char in text:
        if char not in "0123456789":
            break
        result = result * 10 + (ord(char) - ord("0"))
        if result > INT32_MAX:
            return INT32_MAX if sign == 1 else INT32_MIN
    return result * sign