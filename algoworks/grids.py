"""Two-dimensional grids: sparse-array storage, Pascal's triangle and zigzag text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class SparseEntry:
    """One non-zero cell; the first entry of a sparse array holds the grid size instead."""

    row: int
    col: int
    val: int


def create_array(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` by ``cols`` grid of zeros."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    return [[0] * cols for _ in range(rows)]


def save_sparse_array(
    data: Iterable[Iterable[int]], sparse: Iterable[SparseEntry]
) -> list[SparseEntry]:
    """Return ``sparse`` followed by an entry for every non-zero cell of ``data``."""
    entries = list(sparse)
    for row, cells in enumerate(data):
        entries.extend(
            SparseEntry(row, col, value) for col, value in enumerate(cells) if value != 0
        )
    return entries


def recover_sparse_array(sparse: Iterable[SparseEntry]) -> list[list[int]]:
    """Rebuild the grid whose size is the first entry and whose cells are the rest."""
    entries = list(sparse)
    if not entries:
        raise ValueError("sparse array needs a size entry")
    size, *cells = entries
    grid = create_array(size.row, size.col)
    for entry in cells:
        grid[entry.row][entry.col] = entry.val
    return grid


def triangles(n: int) -> list[list[int]]:
    """Return the first ``n`` rows of Pascal's triangle, zero-padded to ``n`` columns."""
    grid = create_array(n, n)
    for i in range(n):
        for j in range(i + 1):
            grid[i][j] = 1 if j in (0, i) else grid[i - 1][j - 1] + grid[i - 1][j]
    return grid


def triangle_row(n: int) -> list[int]:
    """Return row ``n`` (counting from 0) of Pascal's triangle."""
    if n < 0:
        raise ValueError("row must not be negative")
    row = [1] + [0] * n
    for i in range(1, n + 1):
        for j in range(i, 0, -1):
            row[j] += row[j - 1]
    return row


def z_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    if len(s) <= 2 or num_rows == 1:
        return s
    rows = [""] * num_rows
    position, step = 0, -1
    for char in s:
        rows[position] += char
        if position in (0, num_rows - 1):
            step = -step
        position += step
    return "".join(rows)