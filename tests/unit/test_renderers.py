"""Unit tests for ASCII and PNG grid rendering."""

import pytest

from loophero.core.grid import Terrain
from loophero.core.landscape import LandscapeKind
from loophero.rendering.pil_renderer import (
    COLOR_EMPTY,
    COLOR_RIVER,
    LANDSCAPE_COLORS,
    render_grid_to_image,
    save_grid_png,
    tile_color,
)
from loophero.rendering.text_renderer import cell_label, render_lines, render_text


class TestTextRenderer:
    def test_cell_labels(self):
        assert cell_label(Terrain.RIVER, LandscapeKind.SUBURB) == " R "
        assert cell_label(Terrain.LANDSCAPE, LandscapeKind.THICKET) == " T "
        assert cell_label(Terrain.EMPTY, LandscapeKind.MEADOW) == "   "

    def test_seed_table(self, meadow_seed_3x3):
        assert render_lines(meadow_seed_3x3, LandscapeKind.MEADOW) == [
            "  -------------",
            "  | R | R | M |",
            "  -------------",
            "  | M | R | R |",
            "  -------------",
            "  | M | M | M |",
            "  -------------",
        ]

    def test_empty_cells_and_shape(self, make_grid):
        grid = make_grid(["R.", "..", ".L"], LandscapeKind.SUBURB, river=[(0, 0)])
        lines = render_lines(grid, LandscapeKind.SUBURB)
        assert len(lines) == 2 * 3 + 1
        assert lines[1] == "  | R |   |"
        assert lines[5] == "  |   | S |"
        assert all(len(line) == len(lines[0]) for line in lines)

    def test_render_text_joins_lines(self, meadow_seed_3x3):
        text = render_text(meadow_seed_3x3, LandscapeKind.MEADOW)
        assert text.count("\n") == 6
        assert not text.endswith("\n")


class TestPilRenderer:
    def test_tile_colors(self):
        assert tile_color(Terrain.RIVER, LandscapeKind.MEADOW) == COLOR_RIVER
        assert tile_color(Terrain.EMPTY, LandscapeKind.MEADOW) == COLOR_EMPTY
        assert tile_color(Terrain.LANDSCAPE, LandscapeKind.MOUNTAIN) == LANDSCAPE_COLORS[LandscapeKind.MOUNTAIN]

    def test_image_size(self, make_grid):
        grid = make_grid(["L.L", "..."], LandscapeKind.MEADOW)
        img = render_grid_to_image(grid, LandscapeKind.MEADOW, cell_size=10)
        assert img.size == (30, 20)
        assert img.mode == "RGB"

    def test_cell_fill_colors(self, make_grid):
        grid = make_grid(["RL", ".."], LandscapeKind.THICKET, river=[(0, 0)])
        img = render_grid_to_image(grid, LandscapeKind.THICKET, cell_size=16, show_river_path=False)
        assert img.getpixel((8, 8)) == COLOR_RIVER
        assert img.getpixel((24, 8)) == LANDSCAPE_COLORS[LandscapeKind.THICKET]
        assert img.getpixel((8, 24)) == COLOR_EMPTY

    def test_rejects_bad_cell_size(self, meadow_seed_3x3):
        with pytest.raises(ValueError):
            render_grid_to_image(meadow_seed_3x3, LandscapeKind.MEADOW, cell_size=0)

    def test_save_png(self, tmp_path, meadow_seed_3x3):
        path = tmp_path / "seed.png"
        img = save_grid_png(meadow_seed_3x3, LandscapeKind.MEADOW, str(path), cell_size=8)
        assert path.exists()
        assert img.size == (24, 24)
