"""
Loop Hero Optimizer - Text Renderer

Draws a grid as a bordered ASCII table:

  -------------
  | R | R | M |
  -------------
  | M | R | M |
  -------------
"""

from ..core.grid import Grid, Terrain
from ..core.landscape import LandscapeKind

INDENT = "  "


def cell_label(kind: Terrain, landscape: LandscapeKind) -> str:
    """Three-character cell body for a tile kind."""
    if kind == Terrain.RIVER:
        return " R "
    if kind == Terrain.LANDSCAPE:
        return f" {landscape.label} "
    return "   "


def render_lines(grid: Grid, landscape: LandscapeKind) -> list[str]:
    """Table lines, without trailing newlines."""
    border = INDENT + "----" * grid.cols + "-"
    lines = [border]
    for row in grid.kinds():
        cells = "".join("|" + cell_label(kind, landscape) for kind in row)
        lines.append(INDENT + cells + "|")
        lines.append(border)
    return lines


def render_text(grid: Grid, landscape: LandscapeKind) -> str:
    """Whole table as one string."""
    return "\n".join(render_lines(grid, landscape))
