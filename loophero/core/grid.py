"""
Loop Hero Optimizer - Grid Model

Tile grid with incrementally maintained adjacency counters and a single
river that must start on the border and grow one orthogonal step at a time.

Placement and removal are the only ways to change a grid; each keeps the
counters, fill bookkeeping and river cursor consistent so scoring never has
to rescan neighbors.
"""

from dataclasses import dataclass
from enum import IntEnum

from .coords import (
    MOORE_DELTAS,
    ORTHOGONAL_DELTAS,
    are_orthogonal,
    col_of,
    in_bounds,
    is_border,
    neighbor_indices,
    row_of,
    to_index,
)
from .landscape import InvalidConfigurationError, LandscapeKind

# Largest grid the optimizer accepts
MAX_ROWS = 20
MAX_COLS = 20


class Terrain(IntEnum):
    """What occupies a tile."""

    EMPTY = -1
    RIVER = 0
    LANDSCAPE = 1


@dataclass
class Tile:
    """A single cell and its neighbor counts."""

    kind: Terrain = Terrain.EMPTY
    adjacent_rivers: int = 0
    adjacent_landscapes: int = 0

    def copy(self) -> "Tile":
        return Tile(self.kind, self.adjacent_rivers, self.adjacent_landscapes)


def validate_dimensions(rows: int, cols: int):
    """
    Reject grid sizes the engine cannot work with.

    Raises:
        InvalidConfigurationError: If either dimension is not a positive
            integer or exceeds MAX_ROWS/MAX_COLS
    """
    if isinstance(rows, bool) or isinstance(cols, bool):
        raise InvalidConfigurationError("Grid dimensions must be integers")
    if not isinstance(rows, int) or not isinstance(cols, int):
        raise InvalidConfigurationError("Grid dimensions must be integers")
    if rows < 1 or cols < 1:
        raise InvalidConfigurationError(
            f"Grid dimensions must be positive (got {rows}x{cols})"
        )
    if rows > MAX_ROWS or cols > MAX_COLS:
        raise InvalidConfigurationError(
            f"Grid of {rows}x{cols} exceeds the {MAX_ROWS}x{MAX_COLS} limit"
        )


class Grid:
    """
    A rows x cols grid of tiles stored as one flat row-major list.

    Adjacency counters count orthogonal neighbors, or all eight surrounding
    cells when ``diagonals`` is set (mountains). River connectivity is always
    orthogonal.

    The river is kept as the ordered list of its tiles; ``river_head`` is the
    last entry and ``previous_river_head`` the one before it.
    """

    def __init__(self, rows: int, cols: int, diagonals: bool = False):
        validate_dimensions(rows, cols)
        self.rows = rows
        self.cols = cols
        self.diagonals = diagonals
        self.capacity = rows * cols
        self.tiles: list[Tile] = [Tile() for _ in range(self.capacity)]
        self.filled_count = 0
        self.river_path: list[int] = []

        # Neighbor tables never change for a given shape, copies share them
        deltas = MOORE_DELTAS if diagonals else ORTHOGONAL_DELTAS
        self._neighbors: tuple[tuple[int, ...], ...] = tuple(
            tuple(neighbor_indices(i, rows, cols, deltas))
            for i in range(self.capacity)
        )

    @classmethod
    def for_landscape(cls, rows: int, cols: int, landscape: LandscapeKind) -> "Grid":
        """Create an empty grid whose counters match a landscape kind."""
        return cls(rows, cols, diagonals=landscape.counts_diagonals)

    # Bookkeeping

    @property
    def is_full(self) -> bool:
        return self.filled_count == self.capacity

    @property
    def empty_count(self) -> int:
        return self.capacity - self.filled_count

    @property
    def river_started(self) -> bool:
        return bool(self.river_path)

    @property
    def river_head(self) -> int | None:
        """Index of the most recently placed river tile."""
        return self.river_path[-1] if self.river_path else None

    @property
    def previous_river_head(self) -> int | None:
        """Index of the river tile placed just before the head."""
        return self.river_path[-2] if len(self.river_path) > 1 else None

    # Queries

    def index(self, row: int, col: int) -> int:
        return to_index(row, col, self.cols)

    def position(self, index: int) -> tuple[int, int]:
        """(row, col) of a linear index."""
        return row_of(index, self.cols), col_of(index, self.cols)

    def tile(self, index: int) -> Tile:
        return self.tiles[index]

    def kind_at(self, row: int, col: int) -> Terrain:
        return self.tiles[to_index(row, col, self.cols)].kind

    def kinds(self) -> list[list[Terrain]]:
        """Tile kinds as a list of rows."""
        return [
            [self.tiles[r * self.cols + c].kind for c in range(self.cols)]
            for r in range(self.rows)
        ]

    def neighbors(self, index: int) -> tuple[int, ...]:
        """Indices whose counters this cell contributes to."""
        return self._neighbors[index]

    def is_placeable(self, index: int) -> bool:
        """
        Check if a tile can be placed at a location.

        Returns:
            False if the index is outside the grid or already occupied
        """
        if not in_bounds(index, self.rows, self.cols):
            return False
        return self.tiles[index].kind == Terrain.EMPTY

    def can_place_river(self, index: int) -> bool:
        """
        Check a river placement without performing it.

        A new river must start on the border; an existing river can only
        grow from its head to an orthogonally adjacent empty cell.
        """
        if not self.is_placeable(index):
            return False
        if not self.river_path:
            row, col = self.position(index)
            return is_border(row, col, self.rows, self.cols)
        return are_orthogonal(index, self.river_path[-1], self.cols)

    # Mutation

    def place_landscape(self, index: int) -> bool:
        """
        Place a landscape tile.

        Returns:
            True if the tile was placed, False if the location was rejected
        """
        if not self.is_placeable(index):
            return False

        self.tiles[index].kind = Terrain.LANDSCAPE
        self.filled_count += 1
        for n in self._neighbors[index]:
            self.tiles[n].adjacent_landscapes += 1
        return True

    def place_river(self, index: int) -> bool:
        """
        Extend the river (or start it) at a location.

        Returns:
            True if the tile was placed, False if the location was rejected
        """
        if not self.can_place_river(index):
            return False

        self.river_path.append(index)
        self.tiles[index].kind = Terrain.RIVER
        self.filled_count += 1
        for n in self._neighbors[index]:
            self.tiles[n].adjacent_rivers += 1
        return True

    def remove_terrain(self, index: int) -> bool:
        """
        Clear a tile, undoing either kind of placement.

        Removing the river head moves the head back to the previous tile;
        removing the last river tile allows a new river to start anywhere on
        the border. River tiles behind the head cannot be removed since that
        would split the river. Clearing such a tile unconditionally, and
        leaving the cursor pointing at the head, is the simpler rule this
        refuses to follow.

        Returns:
            True if a tile was removed, False if there was nothing to remove
            or the removal was rejected
        """
        if not in_bounds(index, self.rows, self.cols):
            return False

        tile = self.tiles[index]
        old_kind = tile.kind
        if old_kind == Terrain.EMPTY:
            return False

        if old_kind == Terrain.RIVER:
            if self.river_path[-1] != index:
                return False
            self.river_path.pop()
            for n in self._neighbors[index]:
                self.tiles[n].adjacent_rivers -= 1
        else:
            for n in self._neighbors[index]:
                self.tiles[n].adjacent_landscapes -= 1

        tile.kind = Terrain.EMPTY
        self.filled_count -= 1
        return True

    def clear(self):
        """Remove every tile."""
        for tile in self.tiles:
            tile.kind = Terrain.EMPTY
            tile.adjacent_rivers = 0
            tile.adjacent_landscapes = 0
        self.filled_count = 0
        self.river_path.clear()

    # Snapshots

    def copy(self) -> "Grid":
        """Deep copy of tiles, counters and river cursor."""
        dup = Grid.__new__(Grid)
        dup.rows = self.rows
        dup.cols = self.cols
        dup.diagonals = self.diagonals
        dup.capacity = self.capacity
        dup.tiles = [tile.copy() for tile in self.tiles]
        dup.filled_count = self.filled_count
        dup.river_path = list(self.river_path)
        dup._neighbors = self._neighbors
        return dup

    def position_key(self) -> tuple[bytes, int | None]:
        """
        Hashable summary of everything that decides which placements are
        possible from here: the fill pattern and the river head.
        """
        pattern = bytes(tile.kind + 1 for tile in self.tiles)
        return pattern, self.river_head

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.cols == other.cols
            and self.diagonals == other.diagonals
            and self.filled_count == other.filled_count
            and self.river_path == other.river_path
            and self.tiles == other.tiles
        )

    def __repr__(self) -> str:
        return (
            f"Grid({self.rows}x{self.cols}, filled={self.filled_count}/"
            f"{self.capacity}, river={self.river_path})"
        )
