"""
Loop Hero Optimizer - Planner Core

Planner-wide constants.
"""

from . import constants

__all__ = ['constants']
