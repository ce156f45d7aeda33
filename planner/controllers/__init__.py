"""
Loop Hero Optimizer - Controllers Module

Planner state management, undo history and event handling.
"""

from .event_handler import EventHandler
from .planner_state import PlannerState
from .undo_manager import Snapshot, UndoManager

__all__ = ['EventHandler', 'PlannerState', 'Snapshot', 'UndoManager']
