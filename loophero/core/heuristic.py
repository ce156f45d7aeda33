"""
Loop Hero Optimizer - Heuristic Seed

Builds one full grid quickly so the exhaustive search starts with a
non-trivial best value to prune against.

The river starts at the top left corner and zig-zags to the right: one step
right, one step down, one step right, ... bouncing back up when it hits the
bottom edge (and down again at the top) until it reaches the last column.
Everything else is landscape.
"""

from .grid import Grid
from .landscape import LandscapeKind

DOWN = 1
UP = -1


def zigzag_path(rows: int, cols: int) -> list[tuple[int, int]]:
    """
    Cells of the zig-zag river, in placement order.

    Each column holds at most two river cells (entered horizontally, left
    vertically), so the path never revisits a cell.

    Degenerate shapes:
        1 row:    straight river along row 0
        1 column: single river tile at (0, 0)

    Args:
        rows: Grid height
        cols: Grid width

    Returns:
        List of (row, col) positions starting at (0, 0)
    """
    row, col = 0, 0
    heading = DOWN
    horizontal = True
    path = [(row, col)]

    while col < cols - 1:
        if horizontal:
            col += 1
        else:
            if rows == 1:
                horizontal = True
                continue
            next_row = row + heading
            if not 0 <= next_row < rows:
                heading = -heading
                next_row = row + heading
            row = next_row
        horizontal = not horizontal
        path.append((row, col))

    return path


def heuristic_grid(rows: int, cols: int, landscape: LandscapeKind) -> Grid:
    """
    Full grid with a zig-zag river and landscape everywhere else.

    Built through the regular placement operations, so counters are exact
    and the river cursor ends at the last zig-zag cell.
    """
    grid = Grid.for_landscape(rows, cols, landscape)

    for row, col in zigzag_path(rows, cols):
        placed = grid.place_river(grid.index(row, col))
        assert placed, f"zig-zag river rejected at ({row}, {col})"

    for index in range(grid.capacity):
        if grid.is_placeable(index):
            grid.place_landscape(index)

    return grid
