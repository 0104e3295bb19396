"""
formatter — renders grouped cheats as aligned, style-tagged text.

Public API
──────────
StyleTag        — advisory presentation tag (group header / key column)
StyledText      — rendered text plus style spans
format_group    — one group → header, aligned rows, blank line
format_all      — every group, concatenated in order
render          — CheatStore → plain text
render_styled   — CheatStore → StyledText
"""

from src.formatter.models import StyledSpan, StyledText, StyleTag
from src.formatter.table import (
    format_all,
    format_cheat_row,
    format_group,
    key_column_width,
    render,
    render_styled,
)

__all__ = [
    "StyleTag",
    "StyledSpan",
    "StyledText",
    "key_column_width",
    "format_cheat_row",
    "format_group",
    "format_all",
    "render",
    "render_styled",
]
