"""
Grid rendering: ASCII tables for the terminal and PNG images via Pillow.
"""

from .text_renderer import render_lines, render_text

__all__ = ["render_lines", "render_text"]
