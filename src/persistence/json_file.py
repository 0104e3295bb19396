"""
JsonCheatFile — cheat list stored as an array under a fixed key of a JSON object.

File layout::

    {
      "version": 1,
      "cheatlist": [
        {"group": "Common", "key": "C-x C-c", "description": "leave Emacs."}
      ]
    }

Only the text of the ``cheatlist`` value is rewritten on save; every other
byte of the file (other entries, their escapes, number spelling, indentation)
is kept as written.
"""

import json
from typing import Any, Sequence

from src.exceptions import FileFormatError, PersistencePatternNotFoundError
from src.store.models import Cheat

from .base import CheatFile

__all__ = ["JsonCheatFile"]

_WHITESPACE = " \t\n\r"


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


class JsonCheatFile(CheatFile):
    """JSON backend for CheatFile."""

    indent = "  "

    def parse(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise FileFormatError(f"Invalid JSON in {self.path}: {exc}") from exc

    def _not_found(self) -> PersistencePatternNotFoundError:
        return PersistencePatternNotFoundError(f"No {self.entry_name!r} entry found in {self.path}")

    def _document(self, text: str) -> dict:
        data = self.parse(text)
        if not isinstance(data, dict) or self.entry_name not in data:
            raise self._not_found()
        return data

    def _entry_span(self, text: str) -> tuple[int, int]:
        """
        Return the [start, end) span of the entry's value in *text*.

        *text* must already be a valid JSON object (see _document); with
        duplicate keys the last one wins, as in json.loads().
        """
        decoder = json.JSONDecoder()
        pos = _skip_ws(text, 0)
        pos = _skip_ws(text, pos + 1)            # past "{"
        span = None
        while pos < len(text) and text[pos] != "}":
            key, pos = decoder.raw_decode(text, pos)
            pos = _skip_ws(text, _skip_ws(text, pos) + 1)   # past ":"
            start = pos
            _, pos = decoder.raw_decode(text, pos)
            if key == self.entry_name:
                span = (start, pos)
            pos = _skip_ws(text, pos)
            if text[pos] == ",":
                pos = _skip_ws(text, pos + 1)
        if span is None:
            raise self._not_found()
        return span

    def _format_list(self, cheats: Sequence[Cheat], outer: str) -> str:
        """One cheat object per line, indented one level below *outer*."""
        if not cheats:
            return "[]"
        inner = outer + self.indent
        items = ",\n".join(inner + json.dumps(c.to_dict(), ensure_ascii=False) for c in cheats)
        return f"[\n{items}\n{outer}]"

    def extract(self, text: str) -> list:
        return self._document(text)[self.entry_name]

    def replace(self, text: str, cheats: Sequence[Cheat]) -> str:
        self._document(text)
        start, end = self._entry_span(text)
        line_start = text.rfind("\n", 0, start) + 1
        line = text[line_start:start]
        outer = line[:len(line) - len(line.lstrip(" \t"))]
        return text[:start] + self._format_list(cheats, outer) + text[end:]

    def new_document(self, cheats: Sequence[Cheat]) -> str:
        entry = f"{self.indent}{json.dumps(self.entry_name)}: {self._format_list(cheats, self.indent)}"
        return f"{{\n{entry}\n}}\n"
