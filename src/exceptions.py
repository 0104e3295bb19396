"""
Project-wide custom exception hierarchy.
All modules raise subclasses of CheatsheetBaseError — never bare Exception.
"""

__all__ = [
    "CheatsheetBaseError",
    "CheatError",
    "MissingFieldError",
    "EmptyGroupError",
    "PersistenceError",
    "PersistencePatternNotFoundError",
    "PersistenceIOError",
    "FileFormatError",
]


class CheatsheetBaseError(Exception):
    """Root exception for all cheatsheet errors."""


# ── Cheats / formatting ───────────────────────────────────────────────────────

class CheatError(CheatsheetBaseError):
    """Base class for errors about cheat records and their rendering."""


class MissingFieldError(CheatError):
    """Raised when a required cheat field (group, key, description) is absent."""

    def __init__(self, field: str, record=None) -> None:
        self.field = field
        self.record = record
        super().__init__(f"cheat is missing required field {field!r}")


class EmptyGroupError(CheatError):
    """Raised when a group with zero cheats is handed to the formatter."""

    def __init__(self, group_name: str) -> None:
        self.group_name = group_name
        super().__init__(f"group {group_name!r} has no cheats to format")


# ── Persistence ───────────────────────────────────────────────────────────────

class PersistenceError(CheatsheetBaseError):
    """Base class for cheat-file load/save errors."""


class PersistencePatternNotFoundError(PersistenceError):
    """Raised when the cheat-list declaration cannot be located in the target file."""


class PersistenceIOError(PersistenceError):
    """Raised when the cheat file cannot be read or written."""


class FileFormatError(PersistenceError):
    """Raised when the cheat file content cannot be parsed."""
