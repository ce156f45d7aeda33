"""Integration tests: optimize a grid, then render it as text and PNG."""

import pytest
from PIL import Image

from loophero.core.grid import Terrain
from loophero.core.landscape import LandscapeKind
from loophero.core.scoring import score_grid
from loophero.core.search import optimize
from loophero.rendering.pil_renderer import save_grid_png
from loophero.rendering.text_renderer import render_lines


@pytest.mark.parametrize("kind", list(LandscapeKind))
def test_table_shows_every_tile_of_the_optimum(kind):
    """The text table has one row per grid row and labels each tile."""
    result = optimize(2, 3, kind)
    assert result.score == score_grid(result.grid, kind)

    lines = render_lines(result.grid, kind)
    body = "\n".join(lines)
    landscapes = sum(
        1 for i in range(result.grid.capacity) if result.grid.tile(i).kind == Terrain.LANDSCAPE
    )
    assert body.count(kind.label) == landscapes
    assert body.count("R") == len(result.grid.river_path)


def test_mountain_optimum_to_png(tmp_path):
    result = optimize(3, 3, LandscapeKind.MOUNTAIN)
    png_path = tmp_path / "mountain_3x3.png"

    img = save_grid_png(result.grid, LandscapeKind.MOUNTAIN, str(png_path), cell_size=12)
    assert img.size == (36, 36)

    with Image.open(png_path) as saved:
        assert saved.size == (36, 36)
