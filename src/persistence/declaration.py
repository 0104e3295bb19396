"""
DeclarationCheatFile — cheat list kept as a one-line literal assignment in a source file.

The target file may contain anything, as long as it holds exactly one line of
the form::

    cheatlist = [{'group': 'Common', 'key': 'C-x C-c', 'description': 'leave Emacs.'}]

save() swaps the list literal on that line and leaves every other byte of the
file alone, including anything after the literal on the same line (comments,
further statements).  A declaration spread over several lines does not match
and is reported as not found rather than guessed at.
"""

import ast
import re
from typing import Any, Optional, Sequence

from src.exceptions import FileFormatError, PersistencePatternNotFoundError
from src.store.models import Cheat

from .base import CheatFile

__all__ = ["DeclarationCheatFile"]

# Candidate lines only; the extent of the literal is taken from the parsed line
_DECLARATION_TEMPLATE = r"^(?P<indent>[ \t]*){name}[ \t]*=[ \t]*\["


class DeclarationCheatFile(CheatFile):
    """Source-file backend for CheatFile."""

    @property
    def pattern(self) -> "re.Pattern[str]":
        return re.compile(
            _DECLARATION_TEMPLATE.format(name=re.escape(self.entry_name)),
            re.MULTILINE,
        )

    @staticmethod
    def serialize(cheats: Sequence[Cheat]) -> str:
        """Return *cheats* as a single-line Python list literal."""
        return repr([c.to_dict() for c in cheats])

    def parse(self, text: str) -> Any:
        try:
            return ast.literal_eval(text.strip())
        except (ValueError, SyntaxError) as exc:
            raise FileFormatError(f"Not a literal data structure in {self.path}: {exc}") from exc

    def _value_span(self, line: str) -> Optional[tuple[int, int]]:
        """
        Return the [start, end) character span of the list literal in *line*,
        or None when *line* is not a complete ``<name> = [...]`` assignment.
        """
        try:
            tree = ast.parse(line)
        except (SyntaxError, ValueError):
            return None
        if not tree.body:
            return None
        stmt = tree.body[0]
        if not (
            isinstance(stmt, ast.Assign)
            and len(stmt.targets) == 1
            and isinstance(stmt.targets[0], ast.Name)
            and stmt.targets[0].id == self.entry_name
            and isinstance(stmt.value, ast.List)
        ):
            return None
        try:
            ast.literal_eval(stmt.value)
        except ValueError:
            return None
        # ast offsets count UTF-8 bytes
        encoded = line.encode("utf-8")
        start = len(encoded[:stmt.value.col_offset].decode("utf-8"))
        end = len(encoded[:stmt.value.end_col_offset].decode("utf-8"))
        return start, end

    def _locate(self, text: str) -> tuple[int, int]:
        for match in self.pattern.finditer(text):
            line_start = match.start() + len(match.group("indent"))
            line_end = text.find("\n", line_start)
            if line_end == -1:
                line_end = len(text)
            span = self._value_span(text[line_start:line_end].rstrip("\r"))
            if span is not None:
                return line_start + span[0], line_start + span[1]
        raise PersistencePatternNotFoundError(
            f"No single-line '{self.entry_name} = [...]' declaration found in {self.path}"
        )

    def extract(self, text: str) -> list:
        start, end = self._locate(text)
        return self.parse(text[start:end])

    def replace(self, text: str, cheats: Sequence[Cheat]) -> str:
        start, end = self._locate(text)
        return text[:start] + self.serialize(cheats) + text[end:]

    def new_document(self, cheats: Sequence[Cheat]) -> str:
        return f"{self.entry_name} = {self.serialize(cheats)}\n"
