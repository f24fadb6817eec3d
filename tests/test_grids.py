import pytest

from algoworks.grids import (
    SparseEntry,
    create_array,
    recover_sparse_array,
    save_sparse_array,
    triangle_row,
    triangles,
    z_convert,
)

ROWS, COLS = 11, 11


def _chess_map():
    grid = create_array(ROWS, COLS)
    grid[1][2], grid[2][3] = 1, 2
    return grid


def _expected_rows():
    default = [0] * ROWS
    two = [0] * ROWS
    three = [0] * ROWS
    two[2], three[3] = 1, 2
    return default, two, three


def _sparse():
    return [SparseEntry(ROWS, COLS, 0), SparseEntry(1, 2, 1), SparseEntry(2, 3, 2)]


def test_create_sparse_array():
    default, two, three = _expected_rows()
    grid = _chess_map()
    assert len(grid) == ROWS
    for index, row in enumerate(grid):
        expected = {1: two, 2: three}.get(index, default)
        assert row == expected


def test_save_sparse_array():
    saved = save_sparse_array(_chess_map(), [SparseEntry(ROWS, COLS, 0)])
    assert saved == _sparse()


def test_recover_sparse_array():
    default, two, three = _expected_rows()
    grid = recover_sparse_array(_sparse())
    assert len(grid) == ROWS
    for index, row in enumerate(grid):
        expected = {1: two, 2: three}.get(index, default)
        assert row == expected


def test_sparse_round_trip():
    grid = create_array(4, 6)
    grid[0][5], grid[3][0], grid[2][2] = 7, -1, 3
    sparse = save_sparse_array(grid, [SparseEntry(4, 6, 0)])
    assert recover_sparse_array(sparse) == grid


def test_save_does_not_mutate_input():
    header = [SparseEntry(ROWS, COLS, 0)]
    save_sparse_array(_chess_map(), header)
    assert header == [SparseEntry(ROWS, COLS, 0)]


def test_recover_empty_raises():
    with pytest.raises(ValueError):
        recover_sparse_array([])


def test_create_array_negative_raises():
    with pytest.raises(ValueError):
        create_array(-1, 2)


def test_triangles():
    assert triangles(3) == [[1, 0, 0], [1, 1, 0], [1, 2, 1]]


def test_triangle_row():
    assert triangle_row(3) == [1, 3, 3, 1]


@pytest.mark.parametrize("n", range(1, 8))
def test_triangle_row_matches_last_triangle_row(n):
    assert triangle_row(n - 1) == triangles(n)[n - 1]


def test_triangle_row_negative_raises():
    with pytest.raises(ValueError):
        triangle_row(-1)


def test_z_convert():
    assert z_convert("LEETCODEISHIRING", 3) == "LCIRETOESIIGEDHN"
    assert z_convert("LEETCODEISHIRING", 4) == "LDREOEIIECIHNTSG"


def test_z_convert_short_or_single_row():
    assert z_convert("ab", 5) == "ab"
    assert z_convert("LEETCODE", 1) == "LEETCODE"


def test_z_convert_preserves_characters():
    text = "LEETCODEISHIRING"
    assert sorted(z_convert(text, 5)) == sorted(text)


def test_z_convert_bad_rows():
    with pytest.raises(ValueError):
        z_convert("abcdef", 0)