"""
CheatsheetPage — the read-only cheatsheet display.

Shows the rendered cheatsheet in a monospace, read-only text area.  Group
headers and key columns get their own character formats; typing in the
filter box narrows the table to matching cheats.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ Filter: [_______________________________]│
  │ ┌─────────────────────────────────────┐ │
  │ │ Common                              │ │
  │ │   C-x C-c - leave Emacs.            │ │
  │ │       C-g - cancel the current …    │ │
  │ │                                     │ │
  │ │ Files                               │ │
  │ │   …                                 │ │
  │ └─────────────────────────────────────┘ │
  └─────────────────────────────────────────┘
"""

import logging

from PyQt6.QtGui import QColor, QFont, QFontDatabase, QTextCharFormat, QTextCursor
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from src.formatter.models import StyleTag
from src.gui.viewmodels import CheatsheetViewModel
from src.store.cheat_store import CheatStore

__all__ = ["CheatsheetPage"]

logger = logging.getLogger(__name__)


def _utf16_offset(text: str, index: int) -> int:
    """Convert a code-point index into *text* to the UTF-16 position QTextCursor uses."""
    return len(text[:index].encode("utf-16-le")) // 2


def _char_format(tag: StyleTag) -> QTextCharFormat:
    fmt = QTextCharFormat()
    if tag is StyleTag.GROUP:
        fmt.setFontWeight(QFont.Weight.Bold.value)
        fmt.setForeground(QColor("#2b6cb0"))
    elif tag is StyleTag.KEY:
        fmt.setForeground(QColor("#b7791f"))
    return fmt


class CheatsheetPage(QWidget):
    """Filter box plus the read-only, style-tagged cheatsheet text."""

    def __init__(self, store: CheatStore, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = CheatsheetViewModel(store)
        self._build_ui()
        self._apply_rendered()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        # Filter bar
        filter_row = QHBoxLayout()
        filter_row.addWidget(QLabel("Filter:"))
        self._filter_edit = QLineEdit()
        self._filter_edit.setPlaceholderText("Group, key or description…")
        self._filter_edit.textChanged.connect(self._on_filter_changed)
        filter_row.addWidget(self._filter_edit)
        layout.addLayout(filter_row)

        # Cheatsheet text
        self._text_view = QPlainTextEdit()
        self._text_view.setReadOnly(True)
        self._text_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self._text_view.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self._text_view.setPlaceholderText("No cheats registered.")
        layout.addWidget(self._text_view)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_filter_changed(self, text: str) -> None:
        self._vm.set_filter(text)
        self._apply_rendered()

    def _apply_rendered(self) -> None:
        text = self._vm.text
        self._text_view.setPlainText(text)
        cursor = QTextCursor(self._text_view.document())
        for span in self._vm.spans:
            cursor.setPosition(_utf16_offset(text, span.start))
            cursor.setPosition(_utf16_offset(text, span.end), QTextCursor.MoveMode.KeepAnchor)
            cursor.mergeCharFormat(_char_format(span.tag))
        self._text_view.moveCursor(QTextCursor.MoveOperation.Start)

    # ── Public API ─────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Re-render after the underlying store changed."""
        self._vm.refresh()
        self._apply_rendered()

    def text(self) -> str:
        """Return the text currently displayed."""
        return self._text_view.toPlainText()
