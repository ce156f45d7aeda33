"""
Loop Hero Optimizer - Coordinate Utilities

Grids are addressed with a row-major linear index:

     0 |  1 |  2 |  3
     4 |  5 |  6 |  7
     8 |  9 | 10 | 11 ...
"""

# Neighbor offsets as (row, col) deltas
ORTHOGONAL_DELTAS = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_DELTAS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
MOORE_DELTAS = ORTHOGONAL_DELTAS + DIAGONAL_DELTAS


def row_of(index: int, cols: int) -> int:
    """Row of a linear index."""
    return index // cols


def col_of(index: int, cols: int) -> int:
    """Column of a linear index."""
    return index % cols


def to_index(row: int, col: int, cols: int) -> int:
    """Linear index of a (row, col) position."""
    return row * cols + col


def in_bounds(index: int, rows: int, cols: int) -> bool:
    """Check that a linear index addresses a cell of a rows x cols grid."""
    return 0 <= index < rows * cols


def is_border(row: int, col: int, rows: int, cols: int) -> bool:
    """Check if a position lies on the outer ring of the grid."""
    return row == 0 or col == 0 or row == rows - 1 or col == cols - 1


def are_orthogonal(a: int, b: int, cols: int) -> bool:
    """Check if two indices are one step apart along a single axis."""
    dr = abs(row_of(a, cols) - row_of(b, cols))
    dc = abs(col_of(a, cols) - col_of(b, cols))
    return dr + dc == 1


def neighbor_indices(
    index: int,
    rows: int,
    cols: int,
    deltas: tuple[tuple[int, int], ...] = ORTHOGONAL_DELTAS,
) -> list[int]:
    """
    Get the linear indices of the cells around a cell.

    Args:
        index: Center cell
        rows: Grid height
        cols: Grid width
        deltas: Offsets to visit (ORTHOGONAL_DELTAS or MOORE_DELTAS)

    Returns:
        Indices of the neighbors that exist, in delta order
    """
    row = row_of(index, cols)
    col = col_of(index, cols)
    result = []
    for dr, dc in deltas:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            result.append(to_index(nr, nc, cols))
    return result
