"""
Loop Hero Optimizer - Board Renderer

Renders the planned grid: cell colors, river path, per-tile values and
the cells the river may grow into next.
"""

from typing import Optional, Tuple

import pygame
from pygame import Rect, Surface

from loophero.core.grid import Grid, Terrain
from loophero.core.landscape import LandscapeKind
from loophero.core.scoring import score_tile
from planner.core.constants import (
    CANVAS_MARGIN,
    COLOR_EMPTY,
    COLOR_GRID,
    COLOR_RIVER,
    COLOR_RIVER_HEAD,
    COLOR_RIVER_TARGET,
    COLOR_TEXT,
    LANDSCAPE_COLORS,
    MAX_CELL_SIZE,
    MIN_CELL_SIZE,
)


def board_layout(canvas_rect: Rect, rows: int, cols: int) -> Tuple[int, int, int]:
    """
    Fit the board into the canvas, centered.

    Returns:
        (origin_x, origin_y, cell_size) in screen pixels
    """
    avail_w = canvas_rect.width - 2 * CANVAS_MARGIN
    avail_h = canvas_rect.height - 2 * CANVAS_MARGIN
    cell_size = min(avail_w // cols, avail_h // rows)
    cell_size = max(MIN_CELL_SIZE, min(MAX_CELL_SIZE, cell_size))

    origin_x = canvas_rect.x + (canvas_rect.width - cell_size * cols) // 2
    origin_y = canvas_rect.y + (canvas_rect.height - cell_size * rows) // 2
    return origin_x, origin_y, cell_size


class BoardRenderer:
    """Renders the planner board."""

    @staticmethod
    def render(
        screen: Surface,
        canvas_rect: Rect,
        grid: Grid,
        landscape: LandscapeKind,
        font: pygame.font.Font,
        show_grid: bool,
        show_tile_scores: bool,
        hover_cell: Optional[int] = None,
    ):
        """
        Render the board.

        Args:
            screen: Pygame surface to draw on
            canvas_rect: Canvas area rectangle
            grid: Grid to render
            landscape: Landscape kind of the grid
            font: Font for tile labels and values
            show_grid: Whether to draw cell outlines
            show_tile_scores: Whether to print each landscape tile's value
            hover_cell: Index under the mouse, highlighted when set
        """
        origin_x, origin_y, cell_size = board_layout(canvas_rect, grid.rows, grid.cols)
        head = grid.river_head
        landscape_color = LANDSCAPE_COLORS[landscape]

        for index, tile in enumerate(grid.tiles):
            row, col = grid.position(index)
            rect = Rect(origin_x + col * cell_size, origin_y + row * cell_size, cell_size, cell_size)

            if tile.kind == Terrain.RIVER:
                color = COLOR_RIVER_HEAD if index == head else COLOR_RIVER
            elif tile.kind == Terrain.LANDSCAPE:
                color = landscape_color
            else:
                color = COLOR_EMPTY
            pygame.draw.rect(screen, color, rect)

            if tile.kind == Terrain.EMPTY and grid.can_place_river(index):
                pygame.draw.rect(screen, COLOR_RIVER_TARGET, rect.inflate(-4, -4), 1)

            if show_tile_scores and tile.kind == Terrain.LANDSCAPE:
                value = score_tile(tile, landscape)
                text = font.render(f"{landscape.label}{value}", True, (0, 0, 0))
                screen.blit(text, text.get_rect(center=rect.center))
            elif tile.kind == Terrain.RIVER:
                text = font.render("R", True, COLOR_TEXT)
                screen.blit(text, text.get_rect(center=rect.center))

        BoardRenderer._render_river_path(screen, grid, origin_x, origin_y, cell_size)

        if show_grid:
            for row in range(grid.rows + 1):
                y = origin_y + row * cell_size
                pygame.draw.line(
                    screen, COLOR_GRID, (origin_x, y), (origin_x + grid.cols * cell_size, y)
                )
            for col in range(grid.cols + 1):
                x = origin_x + col * cell_size
                pygame.draw.line(
                    screen, COLOR_GRID, (x, origin_y), (x, origin_y + grid.rows * cell_size)
                )

        if hover_cell is not None and 0 <= hover_cell < grid.capacity:
            row, col = grid.position(hover_cell)
            rect = Rect(origin_x + col * cell_size, origin_y + row * cell_size, cell_size, cell_size)
            pygame.draw.rect(screen, COLOR_TEXT, rect, 2)

    @staticmethod
    def _render_river_path(screen: Surface, grid: Grid, origin_x: int, origin_y: int, cell_size: int):
        """Connect river tiles in placement order."""
        if len(grid.river_path) < 2:
            return

        half = cell_size // 2
        points = []
        for index in grid.river_path:
            row, col = grid.position(index)
            points.append((origin_x + col * cell_size + half, origin_y + row * cell_size + half))
        pygame.draw.lines(screen, COLOR_RIVER_HEAD, False, points, max(1, cell_size // 10))
