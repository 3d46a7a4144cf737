"""Memory address of an element of a two-dimensional array."""

__all__ = ["row_major_address", "column_major_address"]


def _check_bounds(rows: int, cols: int, i: int, j: int) -> None:
    if not (0 <= i < rows and 0 <= j < cols):
        raise IndexError(f"Indices out of bounds: [{i}][{j}] in a {rows}x{cols} array")


def row_major_address(
    base: int, rows: int, cols: int, element_size: int, i: int, j: int
) -> int:
    """Return the address of ``arr[i][j]`` when stored in row-major order."""
    _check_bounds(rows, cols, i, j)
    return base + element_size * (i * cols + j)


def column_major_address(
    base: int, rows: int, cols: int, element_size: int, i: int, j: int
) -> int:
    """Return the address of ``arr[i][j]`` when stored in column-major order."""
    _check_bounds(rows, cols, i, j)
    return base + element_size * (j * rows + i)