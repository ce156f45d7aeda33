"""Shared pytest fixtures for grid, scoring and search tests."""

import pytest

from loophero.core.grid import Grid
from loophero.core.heuristic import heuristic_grid
from loophero.core.landscape import LandscapeKind


def build_grid(rows, landscape=LandscapeKind.MEADOW, river=()):
    """
    Build a grid from rows of symbols ('R' river, 'L' landscape, '.' empty).

    River cells are placed in the order given by ``river`` (list of
    (row, col)); every 'L' is placed afterwards.
    """
    grid = Grid.for_landscape(len(rows), len(rows[0]), landscape)
    for row, col in river:
        assert grid.place_river(grid.index(row, col)), f"river rejected at ({row}, {col})"
    for r, line in enumerate(rows):
        for c, symbol in enumerate(line):
            if symbol == "L":
                assert grid.place_landscape(grid.index(r, c))
    return grid


@pytest.fixture
def empty_3x3():
    """Empty 3x3 meadow grid."""
    return Grid.for_landscape(3, 3, LandscapeKind.MEADOW)


@pytest.fixture
def empty_mountain_3x3():
    """Empty 3x3 mountain grid (diagonal counters)."""
    return Grid.for_landscape(3, 3, LandscapeKind.MOUNTAIN)


@pytest.fixture
def meadow_seed_3x3():
    """Zig-zag seed grid for a 3x3 meadow."""
    return heuristic_grid(3, 3, LandscapeKind.MEADOW)


@pytest.fixture
def mountain_seed_3x3():
    """Zig-zag seed grid for a 3x3 mountain."""
    return heuristic_grid(3, 3, LandscapeKind.MOUNTAIN)


@pytest.fixture
def make_grid():
    """Factory building grids from symbol rows (see build_grid)."""
    return build_grid
