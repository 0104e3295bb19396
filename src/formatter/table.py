"""
Table formatter — renders grouped cheats as aligned text.

Output layout for one group::

    Common
      C-x C-c - leave Emacs.
          C-g - cancel the current command.
    <blank line>

The key column is right-justified to ``2 + longest key`` characters of that
group, so every row of a group has its " - " separator at the same column.
"""

import logging
from typing import TYPE_CHECKING, Iterable

from src.exceptions import EmptyGroupError
from src.formatter.models import StyledText, StyleTag
from src.store.models import Cheat, Group

if TYPE_CHECKING:
    from src.store.cheat_store import CheatStore

__all__ = [
    "KEY_PADDING",
    "SEPARATOR",
    "key_column_width",
    "format_cheat_row",
    "format_group",
    "format_all",
    "render_styled",
    "render",
]

logger = logging.getLogger(__name__)

KEY_PADDING = 2
SEPARATOR   = " - "


def key_column_width(group: Group) -> int:
    """Return ``KEY_PADDING + max(len(key))`` over *group*; EmptyGroupError if empty."""
    if not group.cheats:
        raise EmptyGroupError(group.name)
    return KEY_PADDING + max(len(c.key) for c in group.cheats)


def format_cheat_row(cheat: Cheat, width: int) -> StyledText:
    """Render one row: right-justified key, separator, description, newline."""
    row = StyledText()
    # Same result as cheat.key.rjust(width), with the key kept as its own span
    row.append(" " * max(0, width - len(cheat.key)))
    row.append(cheat.key, StyleTag.KEY)
    row.append(f"{SEPARATOR}{cheat.description}\n")
    return row


def format_group(group: Group) -> StyledText:
    """Render a group header, its rows and a trailing blank line."""
    width = key_column_width(group)
    out = StyledText()
    out.append(group.name, StyleTag.GROUP)
    out.append("\n")
    for cheat in group.cheats:
        out.extend(format_cheat_row(cheat, width))
    out.append("\n")
    return out


def format_all(groups: Iterable[Group]) -> StyledText:
    """Render every group in order into a single StyledText."""
    out = StyledText()
    for group in groups:
        out.extend(format_group(group))
    return out


def render_styled(store: "CheatStore") -> StyledText:
    """Render the current contents of *store*, keeping style spans."""
    groups = store.get_snapshot()
    logger.debug("Rendering %d groups (%d cheats)", len(groups), len(store))
    return format_all(groups)


def render(store: "CheatStore") -> str:
    """Render the current contents of *store* as plain text."""
    return render_styled(store).text
