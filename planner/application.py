"""
Loop Hero Optimizer - Planner Application

Main application class that ties the planner state, input handling and
board rendering together.
"""

from pathlib import Path
from typing import List, Optional

import pygame
from pygame import Rect

from loophero.core.landscape import LandscapeKind
from loophero.rendering.pil_renderer import save_grid_png

from .controllers.event_handler import EventHandler
from .controllers.planner_state import PlannerState
from .core.constants import (
    COLOR_BG,
    COLOR_STATUS,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    COLOR_TOOLBAR,
    LANDSCAPE_COLORS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STATUS_HEIGHT,
    TOOLBAR_HEIGHT,
)
from .rendering.board_renderer import BoardRenderer
from .ui.dialogs import save_image_dialog
from .ui.widgets import Button


class PlannerApplication:
    """Main planner application."""

    def __init__(self, rows: int, cols: int, landscape: LandscapeKind, debug: bool = False):
        pygame.init()

        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.RESIZABLE
        )
        pygame.display.set_caption("Loop Hero Landscape Planner")

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_small = pygame.font.SysFont("monospace", 12)

        self.debug = debug
        self.state = PlannerState(rows, cols, landscape)

        self.buttons: List[Button] = []
        self.landscape_buttons: List[Button] = []
        self.btn_grid: Optional[Button] = None
        self._create_ui()

        self.event_handler = EventHandler(
            self.state,
            self.buttons,
            self.screen_width,
            self.screen_height,
            on_solve=self._on_solve,
            on_export=self._on_export,
            on_resize=self._on_resize,
        )

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_ui(self):
        """Create toolbar buttons."""
        # Handler keeps a reference to this list, so refill it in place
        self.buttons.clear()
        x = 10

        for label, callback, width in (
            ("PNG", self._on_export, 50),
            ("Optimize", self._on_solve, 90),
            ("Fill", self.state.fill_landscape, 50),
            ("Clear", self.state.clear, 60),
            ("Undo", self.state.undo, 60),
            ("Redo", self.state.redo, 60),
        ):
            self.buttons.append(Button(Rect(x, 5, width, 30), label, callback))
            x += width + 10

        self.btn_grid = Button(Rect(x, 5, 50, 30), "Grid", self._toggle_grid)
        self.buttons.append(self.btn_grid)
        x += 70

        self.landscape_buttons = []
        for kind in LandscapeKind:
            btn = Button(
                Rect(x, 8, 24, 24),
                kind.label,
                lambda k=kind: self.state.set_landscape(k),
                background_color=LANDSCAPE_COLORS[kind],
            )
            self.buttons.append(btn)
            self.landscape_buttons.append(btn)
            x += 30

        self._update_buttons()

    def _update_buttons(self):
        """Sync button active states with the planner state."""
        self.btn_grid.active = self.state.show_grid
        for kind, btn in zip(LandscapeKind, self.landscape_buttons):
            btn.active = kind is self.state.landscape

    def _toggle_grid(self):
        self.state.show_grid = not self.state.show_grid

    def _on_solve(self):
        """Run the optimizer on the current board size."""
        grid = self.state.grid
        self.state.message = f"Optimizing {grid.rows}x{grid.cols}..."
        self._render()
        self.state.solve(debug=self.debug)

    def _on_export(self):
        """Render the current board to PNG."""
        path = save_image_dialog(f"Export PNG ({self.state.default_image_name()})")
        if not path:
            return
        save_grid_png(self.state.grid, self.state.landscape, path)
        self.state.message = f"Exported {Path(path).name}"

    def _on_resize(self, width: int, height: int):
        """Handle window resize."""
        self.screen_width = width
        self.screen_height = height
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self._create_ui()
        self.event_handler.update_screen_size(width, height)

    def run(self):
        """Main loop."""
        while self.running:
            events = pygame.event.get()
            self.running = self.event_handler.handle_events(events)
            self._update_buttons()
            self._render()
            self.clock.tick(60)

        pygame.quit()

    def _render(self):
        """Render the planner."""
        self.screen.fill(COLOR_BG)
        self._render_toolbar()

        BoardRenderer.render(
            self.screen,
            self.event_handler.get_canvas_rect(),
            self.state.grid,
            self.state.landscape,
            self.font,
            self.state.show_grid,
            self.state.show_tile_scores,
            self.state.hover_cell,
        )

        self._render_status()
        pygame.display.flip()

    def _render_toolbar(self):
        pygame.draw.rect(self.screen, COLOR_TOOLBAR, (0, 0, self.screen_width, TOOLBAR_HEIGHT))
        for button in self.buttons:
            button.render(self.screen, self.font_small if button in self.landscape_buttons else self.font)

    def _render_status(self):
        """Render status bar."""
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)

        state = self.state
        grid = state.grid
        status_parts = [
            f"{state.landscape.name.title()} {grid.rows}x{grid.cols}",
            f"Value: {state.score}",
            f"Filled: {grid.filled_count}/{grid.capacity}",
        ]

        if state.hover_cell is not None:
            row, col = grid.position(state.hover_cell)
            status_parts.append(f"Tile: ({row}, {col}) = {state.tile_score(state.hover_cell)}")

        if state.last_result is not None:
            status_parts.append(f"Best: {state.last_result.score}")

        status_text = "  |  ".join(status_parts)
        text_surf = self.font.render(status_text, True, COLOR_TEXT)
        self.screen.blit(text_surf, (10, self.screen_height - STATUS_HEIGHT + 8))

        if state.message:
            msg_surf = self.font_small.render(state.message, True, COLOR_TEXT_DIM)
            self.screen.blit(
                msg_surf,
                (self.screen_width - msg_surf.get_width() - 10, self.screen_height - STATUS_HEIGHT + 9),
            )
