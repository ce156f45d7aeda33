"""
Loop Hero Optimizer - Planner State

Holds the board being planned and applies edits to it with undo/redo.
All placement rules come from the grid itself, so the planner can never
build a layout the optimizer would not accept.
"""

from typing import Optional

from loophero.core.grid import Grid, Terrain
from loophero.core.landscape import LandscapeKind
from loophero.core.scoring import score_grid, score_tile
from loophero.core.search import SearchResult, optimize

from .undo_manager import UndoManager


def rebuild_grid(grid: Grid, landscape: LandscapeKind) -> Grid:
    """
    Copy a layout onto a fresh grid for another landscape kind.

    Mountain counters include diagonals, so the tiles are placed again
    rather than relabelled: the river in path order, then the landscapes.
    """
    rebuilt = Grid.for_landscape(grid.rows, grid.cols, landscape)
    for index in grid.river_path:
        rebuilt.place_river(index)
    for index in range(grid.capacity):
        if grid.tile(index).kind == Terrain.LANDSCAPE:
            rebuilt.place_landscape(index)
    return rebuilt


class PlannerState:
    """Manages the planned grid and view settings."""

    def __init__(
        self,
        rows: int,
        cols: int,
        landscape: LandscapeKind,
        undo_manager: Optional[UndoManager] = None,
    ):
        self.landscape = landscape
        self.grid = Grid.for_landscape(rows, cols, landscape)
        self.undo_manager = undo_manager if undo_manager is not None else UndoManager()

        # View settings
        self.show_grid: bool = True
        self.show_tile_scores: bool = True

        # Mouse state
        self.hover_cell: Optional[int] = None

        self.last_result: Optional[SearchResult] = None
        self.message: str = ""

    @property
    def score(self) -> int:
        return score_grid(self.grid, self.landscape)

    def tile_score(self, index: int) -> int:
        """Value one tile currently contributes."""
        return score_tile(self.grid.tile(index), self.landscape)

    def river_targets(self) -> list[int]:
        """Cells where the next river tile may go."""
        return [i for i in range(self.grid.capacity) if self.grid.can_place_river(i)]

    # Edits

    def place_landscape(self, index: int) -> bool:
        if not self.grid.is_placeable(index):
            return False
        self._record()
        self.grid.place_landscape(index)
        self.message = ""
        return True

    def place_river(self, index: int) -> bool:
        if not self.grid.can_place_river(index):
            self.message = "River must start on the border and follow its head"
            return False
        self._record()
        self.grid.place_river(index)
        self.message = ""
        return True

    def remove(self, index: int) -> bool:
        before = self.grid.copy()
        if not self.grid.remove_terrain(index):
            return False
        self.undo_manager.record(self.landscape, before)
        self.message = ""
        return True

    def fill_landscape(self) -> int:
        """Fill every empty cell with landscape. Returns cells filled."""
        empty = [i for i in range(self.grid.capacity) if self.grid.is_placeable(i)]
        if not empty:
            return 0
        self._record()
        for index in empty:
            self.grid.place_landscape(index)
        self.message = ""
        return len(empty)

    def clear(self):
        if self.grid.filled_count == 0:
            return
        self._record()
        self.grid.clear()
        self.message = ""

    def set_landscape(self, landscape: LandscapeKind):
        """Switch landscape kind, keeping the layout."""
        if landscape is self.landscape:
            return
        self._record()
        self.grid = rebuild_grid(self.grid, landscape)
        self.landscape = landscape
        self.last_result = None
        self.message = ""

    def solve(self, debug: bool = False) -> SearchResult:
        """Replace the board with the optimizer's best layout."""
        result = optimize(self.grid.rows, self.grid.cols, self.landscape, debug=debug)
        self._record()
        self.grid = result.grid.copy()
        self.last_result = result
        self.message = f"Optimal value {result.score} ({result.nodes} nodes, {result.elapsed:.2f}s)"
        return result

    # History

    def undo(self) -> bool:
        return self._restore(self.undo_manager.undo(self.landscape, self.grid))

    def redo(self) -> bool:
        return self._restore(self.undo_manager.redo(self.landscape, self.grid))

    def _restore(self, snapshot) -> bool:
        if snapshot is None:
            return False
        if snapshot.landscape is not self.landscape:
            self.last_result = None
        self.landscape, self.grid = snapshot
        self.message = ""
        return True

    def _record(self):
        self.undo_manager.record(self.landscape, self.grid)

    def default_image_name(self) -> str:
        """Suggested file name for a PNG export of the board."""
        return f"{self.landscape.name.lower()}_{self.grid.rows}x{self.grid.cols}.png"
