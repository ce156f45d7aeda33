"""
Loop Hero Optimizer - Planner Rendering

Pygame drawing of the planned board.
"""

from .board_renderer import BoardRenderer, board_layout

__all__ = ["BoardRenderer", "board_layout"]
