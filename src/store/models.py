"""Data models for the store module."""

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional

from src.exceptions import MissingFieldError
from src.store.accessor import field_str, require_str

__all__ = ["Cheat", "Group", "DEFAULT_CHEATS"]


@dataclass(frozen=True)
class Cheat:
    """
    One labelled key binding.

    Fields
    ──────
    group        — category the cheat is listed under, e.g. "Common"
    key          — key combination shown in the left column, e.g. "C-x C-c"
    description  — free text shown in the right column
    name         — reserved identifier; persisted but never rendered

    Two cheats are the same cheat iff all four fields are equal.
    """
    group:       str
    key:         str
    description: str
    name:        Optional[str] = None

    def __post_init__(self) -> None:
        for attr in ("group", "key", "description"):
            value = getattr(self, attr)
            if not isinstance(value, str):
                raise MissingFieldError(attr)
        # Blank group or key would render an unreadable header / zero-width column
        if not self.group or not self.key:
            raise MissingFieldError("group" if not self.group else "key")
        if self.name is not None and not isinstance(self.name, str):
            raise TypeError(f"cheat name must be a string, got {type(self.name).__name__}")

    def to_dict(self) -> dict:
        d = {"group": self.group, "key": self.key, "description": self.description}
        if self.name is not None:
            d["name"] = self.name
        return d

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "Cheat":
        """Build a Cheat from a loosely typed mapping (see store.accessor)."""
        return cls(
            group=require_str(record, "group"),
            key=require_str(record, "key"),
            description=require_str(record, "description"),
            name=field_str(record, "name"),
        )

    def __str__(self) -> str:
        return f"[{self.group}] {self.key} - {self.description}"


@dataclass(frozen=True)
class Group:
    """A named bucket of cheats, derived on demand from a CheatStore."""
    name:   str
    cheats: tuple[Cheat, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.cheats)

    def __iter__(self) -> Iterator[Cheat]:
        return iter(self.cheats)


# Built-in seed value for a brand-new cheat file
DEFAULT_CHEATS: tuple[Cheat, ...] = (
    Cheat(group="Common", key="C-x C-c", description="leave Emacs."),
    Cheat(group="Common", key="C-g",     description="cancel the current command."),
    Cheat(group="Files",  key="C-x C-f", description="open a file."),
    Cheat(group="Files",  key="C-x C-s", description="save the current buffer."),
    Cheat(group="Help",   key="C-h k",   description="describe a key binding."),
)
