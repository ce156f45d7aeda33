"""
Loop Hero Optimizer - UI Module

Toolbar widgets and the PNG export dialog.
"""

from .dialogs import save_image_dialog
from .widgets import Button

__all__ = ["Button", "save_image_dialog"]
