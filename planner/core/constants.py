"""
Loop Hero Optimizer - Planner Constants

Configuration constants for the planner: window layout, cell size and colors.
"""

from loophero.core.landscape import LandscapeKind

# Board defaults
DEFAULT_ROWS = 3
DEFAULT_COLS = 3
DEFAULT_LANDSCAPE = LandscapeKind.MEADOW

# UI Layout
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
CANVAS_MARGIN = 20
MAX_CELL_SIZE = 96
MIN_CELL_SIZE = 16

# Colors
COLOR_BG = (48, 48, 48)
COLOR_TOOLBAR = (32, 32, 32)
COLOR_STATUS = (32, 32, 32)
COLOR_GRID = (80, 80, 80)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DIM = (180, 180, 180)
COLOR_BUTTON = (64, 64, 64)
COLOR_BUTTON_HOVER = (80, 80, 80)
COLOR_BUTTON_ACTIVE = (100, 100, 200)

COLOR_EMPTY = (24, 24, 24)
COLOR_RIVER = (64, 120, 232)
COLOR_RIVER_HEAD = (140, 190, 255)
COLOR_RIVER_TARGET = (255, 255, 0)  # Outline on cells the river may grow into

LANDSCAPE_COLORS = {
    LandscapeKind.MEADOW: (92, 228, 48),
    LandscapeKind.THICKET: (0, 110, 40),
    LandscapeKind.MOUNTAIN: (150, 140, 130),
    LandscapeKind.SUBURB: (200, 160, 90),
}
