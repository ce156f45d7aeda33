"""
Loop Hero Optimizer - Planner Package

A Pygame-based planner for laying out river and landscape tiles by hand and
comparing them with the optimizer's best layout.
"""

from .application import PlannerApplication
from .main import main

__all__ = ['PlannerApplication', 'main']
