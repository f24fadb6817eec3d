"""String puzzles: bracket matching, palindromes, minimum window, search and reversal."""

from __future__ import annotations

from collections import Counter

_PAIRS = {")": "(", "]": "[", "}": "{"}


def is_valid(s: str) -> bool:
    """Return True when ``s`` consists of properly nested ()[]{} brackets.

    Any other character, or an unmatched closing bracket, makes it invalid;
    unclosed opening brackets are not checked.
    """
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS and stack and stack[-1] == _PAIRS[char]:
            stack.pop()
        else:
            return False
    return True


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring by dynamic programming.

    Among equally long palindromes the one starting furthest right wins.
    """
    size = len(s)
    is_pal = [[False] * size for _ in range(size)]
    best = ""
    for i in range(size - 1, -1, -1):
        for j in range(i, size):
            if s[i] == s[j] and (j - i <= 1 or is_pal[i + 1][j - 1]):
                is_pal[i][j] = True
                if j - i + 1 > len(best):
                    best = s[i:j + 1]
    return best


def _expand(s: str, i: int, j: int) -> str:
    while i >= 0 and j < len(s) and s[i] == s[j]:
        i -= 1
        j += 1
    return s[i + 1:j]


def longest_palindrome_expand(s: str) -> str:
    """Return the longest palindromic substring by expanding around each centre.

    Among equally long palindromes the one starting furthest left wins.
    """
    best = ""
    for i in range(len(s)):
        for candidate in (_expand(s, i, i), _expand(s, i, i + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t`` with multiplicity.

    Returns an empty string when no such window exists or either input is empty.
    """
    if not s or not t:
        return ""
    wanted = Counter(t)
    window: Counter[str] = Counter()
    matched = 0
    start, end = 0, -1
    best_start, best_length = -1, len(s) + 1
    while start < len(s):
        if end + 1 < len(s) and matched < len(t):
            end += 1
            char = s[end]
            window[char] += 1
            if window[char] <= wanted[char]:
                matched += 1
            continue
        if matched == len(t) and end - start + 1 < best_length:
            best_length = end - start + 1
            best_start = start
        char = s[start]
        window[char] -= 1
        if window[char] < wanted[char]:
            matched -= 1
        start += 1
    if best_start == -1:
        return ""
    return s[best_start:best_start + best_length]


def str_str(haystack: str, needle: str) -> int:
    """Return the first index of ``needle`` in ``haystack``, 0 for an empty needle, else -1."""
    return haystack.find(needle)


def reverse_str(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]