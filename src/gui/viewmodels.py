"""
GUI ViewModels — pure-Python state containers.

No Qt imports here; every class is testable without a display.
Qt widgets observe these objects and update themselves in response to state
changes.

Public API
──────────
CheatsheetViewModel  — rendered cheatsheet text + style spans, with filtering
"""

import logging

from src.formatter.models import StyledText
from src.formatter.table import format_all
from src.store.cheat_store import CheatStore
from src.store.grouping import snapshot
from src.store.models import Cheat

__all__ = ["CheatsheetViewModel"]

logger = logging.getLogger(__name__)


class CheatsheetViewModel:
    """
    Holds the rendered view of a CheatStore.

    Attributes
    ──────────
    store        — the CheatStore being displayed (never mutated here)
    filter_text  — substring matched against group, key and description
                   (case-insensitive); empty shows everything
    rendered     — StyledText of the visible cheats, updated by refresh()
    """

    def __init__(self, store: CheatStore) -> None:
        self.store:       CheatStore = store
        self.filter_text: str        = ""
        self.rendered:    StyledText = StyledText()
        self.refresh()

    def _matches(self, cheat: Cheat) -> bool:
        query = self.filter_text.strip().lower()
        if not query:
            return True
        return any(query in text.lower() for text in (cheat.group, cheat.key, cheat.description))

    @property
    def visible_cheats(self) -> list[Cheat]:
        """Cheats of the store that match filter_text, in insertion order."""
        return [c for c in self.store.cheats if self._matches(c)]

    @property
    def group_names(self) -> list[str]:
        """Names of the groups currently shown, in display order."""
        return [g.name for g in snapshot(self.visible_cheats)]

    @property
    def text(self) -> str:
        return self.rendered.text

    @property
    def spans(self):
        return self.rendered.spans

    def set_filter(self, text: str) -> None:
        """Update filter_text and re-render."""
        self.filter_text = text
        self.refresh()

    def refresh(self) -> StyledText:
        """Re-render the visible cheats from the store."""
        self.rendered = format_all(snapshot(self.visible_cheats))
        logger.debug("Cheatsheet view refreshed: %d chars, filter=%r",
                     len(self.rendered.text), self.filter_text)
        return self.rendered
