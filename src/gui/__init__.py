"""
gui — PyQt6 read-only viewer for the cheatsheet.

Public API
──────────
show         — open the viewer for a CheatStore and run the event loop
viewmodels   — pure-Python state containers (importable without Qt)

The Qt widgets live in src.gui.main_window and src.gui.pages; they are only
imported when the viewer is actually opened.
"""

from src.gui import viewmodels

__all__ = ["show", "viewmodels"]


def show(store) -> int:
    """Open the viewer window for *store*; returns the Qt exit code."""
    from src.gui.main_window import show as _show
    return _show(store)
