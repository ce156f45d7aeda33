"""
Loop Hero Optimizer - UI Widgets

Toolbar button used by the planner.
"""

import pygame
from pygame import Rect, Surface

from planner.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_HOVER,
    COLOR_GRID,
    COLOR_TEXT,
)


class Button:
    """Simple button widget."""

    def __init__(self, rect: Rect, text: str, callback, background_color=None):
        self.rect = rect
        self.text = text
        self.callback = callback
        self.background_color = background_color
        self.hovered = False
        self.active = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Track hover and fire the callback on left click.

        Returns:
            True if the click landed on this button
        """
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        if self.active:
            color = COLOR_BUTTON_ACTIVE
        elif self.hovered:
            color = COLOR_BUTTON_HOVER
        else:
            color = self.background_color or COLOR_BUTTON
        pygame.draw.rect(screen, color, self.rect)
        pygame.draw.rect(screen, COLOR_TEXT if self.active else COLOR_GRID, self.rect, 1)

        text_surf = font.render(self.text, True, COLOR_TEXT)
        screen.blit(text_surf, text_surf.get_rect(center=self.rect.center))
