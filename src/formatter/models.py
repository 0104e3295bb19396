"""Data models for the formatter module — styled text produced by the table formatter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

__all__ = ["StyleTag", "StyledSpan", "StyledText"]


class StyleTag(str, Enum):
    GROUP = "group"   # group header line
    KEY   = "key"     # key column of a cheat row


@dataclass(frozen=True)
class StyledSpan:
    """Half-open character range [start, end) of StyledText.text carrying *tag*."""
    start: int
    end:   int
    tag:   StyleTag


@dataclass
class StyledText:
    """
    Rendered cheatsheet text plus advisory style spans.

    Spans are presentation hints for the viewer; two renders are equal when
    their ``text`` is equal.
    """
    text:  str              = ""
    spans: list[StyledSpan] = field(default_factory=list)

    def append(self, chunk: str, tag: Optional[StyleTag] = None) -> None:
        """Append *chunk*, tagging its range with *tag* when given."""
        if tag is not None and chunk:
            start = len(self.text)
            self.spans.append(StyledSpan(start, start + len(chunk), tag))
        self.text += chunk

    def extend(self, other: "StyledText") -> None:
        """Append *other*, shifting its spans to the end of this text."""
        offset = len(self.text)
        self.spans.extend(
            StyledSpan(s.start + offset, s.end + offset, s.tag) for s in other.spans
        )
        self.text += other.text

    def spans_for(self, tag: StyleTag) -> list[str]:
        """Return the substrings tagged with *tag*, in order."""
        return [self.text[s.start:s.end] for s in self.spans if s.tag == tag]

    def __str__(self) -> str:
        return self.text
