"""
Core optimizer functionality.

This package contains the grid model, river rules, landscape scoring and the
branch-and-bound search.
"""

from .grid import MAX_COLS, MAX_ROWS, Grid, Terrain, Tile, validate_dimensions
from .heuristic import heuristic_grid, zigzag_path
from .landscape import InvalidConfigurationError, LandscapeKind
from .scoring import score_grid
from .search import BranchAndBound, SearchResult, SearchState, optimize

__all__ = [
    "MAX_COLS",
    "MAX_ROWS",
    "Grid",
    "Terrain",
    "Tile",
    "validate_dimensions",
    "heuristic_grid",
    "zigzag_path",
    "InvalidConfigurationError",
    "LandscapeKind",
    "score_grid",
    "BranchAndBound",
    "SearchResult",
    "SearchState",
    "optimize",
]
