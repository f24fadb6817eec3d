"""Text figures printed to standard output."""

from __future__ import annotations


def multiplication_table() -> None:
    """Print the lower triangle of the 9 x 9 multiplication table."""
    for i in range(1, 10):
        print("".join(f"{i} x {j} = {i * j}  " for j in range(1, i + 1)))


def pyramid(level: int) -> None:
    """Print a centred pyramid of asterisks ``level`` rows high."""
    for i in range(1, level + 1):
        print(" " * (level - i) + "*" * (2 * i - 1))