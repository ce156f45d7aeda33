"""
Loop Hero Optimizer - Undo Manager

Undo/redo history for the planner. Each entry pairs a grid with the
landscape kind it was built for, so switching kinds is undoable like any
other edit.
"""
from typing import NamedTuple, Optional

from loophero.core.grid import Grid
from loophero.core.landscape import LandscapeKind


class Snapshot(NamedTuple):
    """A board as it stood before or after one edit."""

    landscape: LandscapeKind
    grid: Grid


class UndoManager:
    """Bounded undo and redo stacks of board snapshots."""

    def __init__(self, max_undo_levels: int = 100):
        self.undo_stack: list[Snapshot] = []
        self.redo_stack: list[Snapshot] = []
        self.max_undo_levels = max_undo_levels

    def record(self, landscape: LandscapeKind, grid: Grid):
        """
        Remember the board as it is before an edit.

        Any redo history is discarded, and the oldest entry is dropped once
        max_undo_levels is reached.
        """
        self.undo_stack.append(Snapshot(landscape, grid.copy()))
        del self.undo_stack[:-self.max_undo_levels]
        self.redo_stack.clear()

    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def undo(self, landscape: LandscapeKind, grid: Grid) -> Optional[Snapshot]:
        """
        Step back one edit.

        Args:
            landscape: Current landscape kind
            grid: Current grid, kept for redo

        Returns:
            The board before the last edit, or None if there is none
        """
        return self._step(self.undo_stack, self.redo_stack, landscape, grid)

    def redo(self, landscape: LandscapeKind, grid: Grid) -> Optional[Snapshot]:
        """Step forward one undone edit, or return None."""
        return self._step(self.redo_stack, self.undo_stack, landscape, grid)

    @staticmethod
    def _step(source, target, landscape, grid) -> Optional[Snapshot]:
        if not source:
            return None
        target.append(Snapshot(landscape, grid.copy()))
        return source.pop()

    def clear(self):
        self.undo_stack.clear()
        self.redo_stack.clear()
