"""
MainWindow — top-level window of the cheatsheet viewer.

Hosts a single CheatsheetPage.  The window never edits the store; it only
displays whatever the store holds when it is opened or refreshed.
"""

import logging
import sys

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget

from src.gui.pages.cheatsheet import CheatsheetPage
from src.store.cheat_store import CheatStore

__all__ = ["MainWindow", "show"]

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Cheatsheet"


class MainWindow(QMainWindow):
    """Root window: hosts the CheatsheetPage and a close shortcut."""

    def __init__(self, store: CheatStore, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(640, 480)

        self._page = CheatsheetPage(store)
        self.setCentralWidget(self._page)

        # Esc closes the viewer, like dismissing a help buffer
        self._quit_shortcut = QShortcut(QKeySequence("Esc"), self)
        self._quit_shortcut.activated.connect(self.close)

    @property
    def page(self) -> CheatsheetPage:
        return self._page


def show(store: CheatStore) -> int:
    """
    Open the cheatsheet viewer for *store* and run the Qt event loop.

    Returns:
        The exit code of QApplication.exec().
    """
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(store)
    window.show()
    logger.info("Showing cheatsheet with %d cheats", len(store))
    return app.exec()
