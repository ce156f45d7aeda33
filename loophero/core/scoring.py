"""
Loop Hero Optimizer - Scoring

One value function per landscape kind. Only landscape tiles score, using the
neighbor counters the grid maintains.
"""

from typing import Callable

from .grid import Grid, Terrain, Tile
from .landscape import LandscapeKind


def meadow_thicket_tile(tile: Tile, tile_value: int) -> int:
    """A tile next to rivers gains twice its value per river."""
    rivers = tile.adjacent_rivers
    if rivers == 0:
        return tile_value
    return tile_value * 2 * rivers


def suburb_tile(tile: Tile, tile_value: int) -> int:
    """Enclosed on all four sides by suburbs: doubled. Otherwise as a meadow."""
    if tile.adjacent_landscapes == 4:
        return 2 * tile_value
    if tile.adjacent_rivers != 0:
        return tile_value * 2 * tile.adjacent_rivers
    return tile_value


def mountain_tile(tile: Tile, tile_value: int) -> int:
    """Value per surrounding mountain, multiplied again by surrounding rivers."""
    mountains = tile.adjacent_landscapes
    return mountains * tile_value + mountains * tile.adjacent_rivers * tile_value


def score_meadow_thicket(grid: Grid, tile_value: int) -> int:
    total = 0
    for tile in grid.tiles:
        if tile.kind == Terrain.LANDSCAPE:
            total += meadow_thicket_tile(tile, tile_value)
    return total


def score_suburb(grid: Grid, tile_value: int) -> int:
    total = 0
    for tile in grid.tiles:
        if tile.kind == Terrain.LANDSCAPE:
            total += suburb_tile(tile, tile_value)
    return total


def score_mountain(grid: Grid, tile_value: int) -> int:
    # Counters include diagonals for mountain grids
    total = 0
    for tile in grid.tiles:
        if tile.kind == Terrain.LANDSCAPE:
            total += mountain_tile(tile, tile_value)
    return total


SCORERS: dict[LandscapeKind, Callable[[Grid, int], int]] = {
    LandscapeKind.MEADOW: score_meadow_thicket,
    LandscapeKind.THICKET: score_meadow_thicket,
    LandscapeKind.MOUNTAIN: score_mountain,
    LandscapeKind.SUBURB: score_suburb,
}

TILE_SCORERS: dict[LandscapeKind, Callable[[Tile, int], int]] = {
    LandscapeKind.MEADOW: meadow_thicket_tile,
    LandscapeKind.THICKET: meadow_thicket_tile,
    LandscapeKind.MOUNTAIN: mountain_tile,
    LandscapeKind.SUBURB: suburb_tile,
}


def score_grid(grid: Grid, landscape: LandscapeKind) -> int:
    """Total value of a grid for a landscape kind."""
    return SCORERS[landscape](grid, landscape.tile_value)


def score_tile(tile: Tile, landscape: LandscapeKind) -> int:
    """Contribution of a single tile; rivers and empty cells score nothing."""
    if tile.kind != Terrain.LANDSCAPE:
        return 0
    return TILE_SCORERS[landscape](tile, landscape.tile_value)
