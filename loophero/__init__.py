"""
Loop Hero Optimizer

Finds the highest-value arrangement of one landscape kind and a single
connected river on a small tile grid.
"""

__version__ = "0.1.0"
