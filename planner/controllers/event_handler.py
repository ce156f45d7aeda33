"""
Loop Hero Optimizer - Event Handler

Handles user input events including mouse, keyboard, and window events.
"""

from typing import Callable, List, Optional, Tuple

import pygame
from pygame import Rect

from loophero.core.landscape import LandscapeKind

from .planner_state import PlannerState
from planner.core.constants import STATUS_HEIGHT, TOOLBAR_HEIGHT
from planner.rendering.board_renderer import board_layout

# Number keys select a landscape kind by its code
LANDSCAPE_KEYS = {
    pygame.K_0: LandscapeKind.MEADOW,
    pygame.K_1: LandscapeKind.THICKET,
    pygame.K_2: LandscapeKind.MOUNTAIN,
    pygame.K_3: LandscapeKind.SUBURB,
}


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: PlannerState,
        buttons: List,
        screen_width: int,
        screen_height: int,
        on_solve: Callable[[], None],
        on_export: Callable[[], None],
        on_resize: Callable[[int, int], None],
    ):
        """
        Initialize event handler.

        Args:
            state: Planner state
            buttons: List of UI buttons
            screen_width: Screen width
            screen_height: Screen height
            on_solve: Callback for the optimize action
            on_export: Callback for PNG export
            on_resize: Callback for window resize (width, height)
        """
        self.state = state
        self.buttons = buttons
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.on_solve = on_solve
        self.on_export = on_export
        self.on_resize = on_resize

    def update_screen_size(self, width: int, height: int):
        self.screen_width = width
        self.screen_height = height

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                self._handle_key(event)

            for button in self.buttons:
                button.handle_event(event)

            if event.type == pygame.MOUSEBUTTONDOWN:
                cell = self.screen_to_cell(event.pos)
                if cell is None:
                    continue
                if event.button == 1:  # Left click - landscape
                    self.state.place_landscape(cell)
                elif event.button == 3:  # Right click - extend river
                    self.state.place_river(cell)
                elif event.button == 2:  # Middle click - remove
                    self.state.remove(cell)

            elif event.type == pygame.MOUSEMOTION:
                self.state.hover_cell = self.screen_to_cell(event.pos)

            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)

        return True

    def _handle_key(self, event):
        """Handle keyboard input."""
        ctrl = pygame.key.get_mods() & pygame.KMOD_CTRL

        if event.key == pygame.K_z and ctrl:
            self.state.undo()
        elif event.key == pygame.K_y and ctrl:
            self.state.redo()

        elif event.key in (pygame.K_DELETE, pygame.K_BACKSPACE):
            if self.state.hover_cell is not None:
                self.state.remove(self.state.hover_cell)

        elif event.key == pygame.K_o:
            self.on_solve()
        elif event.key == pygame.K_f:
            self.state.fill_landscape()
        elif event.key == pygame.K_c:
            self.state.clear()
        elif event.key == pygame.K_g:
            self.state.show_grid = not self.state.show_grid
        elif event.key == pygame.K_v:
            self.state.show_tile_scores = not self.state.show_tile_scores
        elif event.key == pygame.K_p:
            self.on_export()

        elif event.key in LANDSCAPE_KEYS:
            self.state.set_landscape(LANDSCAPE_KEYS[event.key])

    def get_canvas_rect(self) -> Rect:
        """Get the board drawing area."""
        return Rect(
            0,
            TOOLBAR_HEIGHT,
            self.screen_width,
            self.screen_height - TOOLBAR_HEIGHT - STATUS_HEIGHT,
        )

    def screen_to_cell(self, screen_pos: Tuple[int, int]) -> Optional[int]:
        """Convert screen position to a grid index, or None off the board."""
        grid = self.state.grid
        origin_x, origin_y, cell_size = board_layout(self.get_canvas_rect(), grid.rows, grid.cols)

        local_x = screen_pos[0] - origin_x
        local_y = screen_pos[1] - origin_y
        if local_x < 0 or local_y < 0:
            return None

        col = local_x // cell_size
        row = local_y // cell_size
        if row >= grid.rows or col >= grid.cols:
            return None
        return grid.index(row, col)
