import pytest

from dsalab.address import column_major_address, row_major_address

BASE, ROWS, COLS, SIZE = 1000, 3, 4, 4


@pytest.mark.parametrize("func", [row_major_address, column_major_address])
def test_first_element_at_base(func):
    assert func(BASE, ROWS, COLS, SIZE, 0, 0) == BASE


def test_row_major_adjacent_columns():
    for i in range(ROWS):
        for j in range(COLS - 1):
            a = row_major_address(BASE, ROWS, COLS, SIZE, i, j)
            b = row_major_address(BASE, ROWS, COLS, SIZE, i, j + 1)
            assert b - a == SIZE


def test_column_major_adjacent_rows():
    for j in range(COLS):
        for i in range(ROWS - 1):
            a = column_major_address(BASE, ROWS, COLS, SIZE, i, j)
            b = column_major_address(BASE, ROWS, COLS, SIZE, i + 1, j)
            assert b - a == SIZE


@pytest.mark.parametrize("func", [row_major_address, column_major_address])
def test_addresses_are_distinct_and_contiguous(func):
    addresses = sorted(
        func(BASE, ROWS, COLS, SIZE, i, j) for i in range(ROWS) for j in range(COLS)
    )
    assert addresses == list(range(BASE, BASE + ROWS * COLS * SIZE, SIZE))


def test_layouts_agree_on_last_element():
    last_row = row_major_address(BASE, ROWS, COLS, SIZE, ROWS - 1, COLS - 1)
    last_col = column_major_address(BASE, ROWS, COLS, SIZE, ROWS - 1, COLS - 1)
    assert last_row == last_col


@pytest.mark.parametrize("func", [row_major_address, column_major_address])
@pytest.mark.parametrize("i,j", [(ROWS, 0), (0, COLS), (-1, 0), (0, -1)])
def test_out_of_bounds_raises(func, i, j):
    with pytest.raises(IndexError):
        func(BASE, ROWS, COLS, SIZE, i, j)