"""
Loop Hero Optimizer - File Dialogs

Native save dialog for PNG export via plyer, falling back to tkinter where
plyer has no backend.
"""

from plyer import filechooser

PNG_FILETYPES = [("PNG images", "*.png"), ("All files", "*.*")]


def _tk_save_dialog(title: str) -> str | None:
    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError:
        print("tkinter not available for file dialog")
        return None

    root = tk.Tk()
    root.withdraw()
    path = filedialog.asksaveasfilename(
        title=title, defaultextension=".png", filetypes=PNG_FILETYPES
    )
    root.destroy()
    return path or None


def save_image_dialog(title: str) -> str | None:
    """
    Ask where to write a PNG, appending ".png" when missing.

    Returns:
        Selected file path, or None if canceled
    """
    try:
        result = filechooser.save_file(title=title, filters=PNG_FILETYPES)
    except (OSError, NotImplementedError):
        return _tk_save_dialog(title)
    if not result:
        return None
    path = result[0]
    if not path.lower().endswith(".png"):
        path += ".png"
    return path
