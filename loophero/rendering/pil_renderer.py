"""
Loop Hero Optimizer - PIL Renderer

PIL-based rendering for saving optimized grids as PNG images.
"""

try:
    from PIL import Image, ImageDraw
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.grid import Grid, Terrain
from ..core.landscape import LandscapeKind

DEFAULT_CELL_SIZE = 32

COLOR_EMPTY = (48, 48, 48)
COLOR_RIVER = (64, 120, 232)
COLOR_RIVER_PATH = (160, 200, 255)
COLOR_GRID = (20, 20, 20)

# Fill colour for landscape tiles of each kind
LANDSCAPE_COLORS = {
    LandscapeKind.MEADOW: (92, 228, 48),
    LandscapeKind.THICKET: (0, 110, 40),
    LandscapeKind.MOUNTAIN: (150, 140, 130),
    LandscapeKind.SUBURB: (200, 160, 90),
}


def tile_color(kind: Terrain, landscape: LandscapeKind) -> tuple[int, int, int]:
    if kind == Terrain.RIVER:
        return COLOR_RIVER
    if kind == Terrain.LANDSCAPE:
        return LANDSCAPE_COLORS[landscape]
    return COLOR_EMPTY


def render_grid_to_image(
    grid: Grid,
    landscape: LandscapeKind,
    cell_size: int = DEFAULT_CELL_SIZE,
    show_grid: bool = True,
    show_river_path: bool = True,
) -> Image.Image:
    """
    Render a grid to a PIL Image.

    Args:
        grid: Grid to draw
        landscape: Landscape kind (selects the landscape colour)
        cell_size: Edge length of one cell in pixels
        show_grid: Draw cell borders
        show_river_path: Draw a line through the river in placement order

    Returns:
        PIL Image object of size (cols * cell_size, rows * cell_size)
    """
    if cell_size < 1:
        raise ValueError(f"cell_size must be positive (got {cell_size})")

    img = Image.new("RGB", (grid.cols * cell_size, grid.rows * cell_size), COLOR_EMPTY)
    draw = ImageDraw.Draw(img)

    for row, kinds in enumerate(grid.kinds()):
        for col, kind in enumerate(kinds):
            x0 = col * cell_size
            y0 = row * cell_size
            draw.rectangle(
                (x0, y0, x0 + cell_size - 1, y0 + cell_size - 1),
                fill=tile_color(kind, landscape),
                outline=COLOR_GRID if show_grid else None,
            )

    if show_river_path and len(grid.river_path) > 1:
        half = cell_size // 2
        points = []
        for index in grid.river_path:
            row, col = grid.position(index)
            points.append((col * cell_size + half, row * cell_size + half))
        draw.line(points, fill=COLOR_RIVER_PATH, width=max(1, cell_size // 8))

    return img


def save_grid_png(
    grid: Grid,
    landscape: LandscapeKind,
    path: str,
    cell_size: int = DEFAULT_CELL_SIZE,
) -> Image.Image:
    """Render a grid and write it to a PNG file."""
    img = render_grid_to_image(grid, landscape, cell_size=cell_size)
    img.save(path)
    return img
