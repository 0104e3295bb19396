"""
Field access over loosely typed cheat records.

Cheat files written by hand (or by older tooling) do not always agree on
shape: a record may use plain keys (``"group"``) or keyword-style keys
(``":group"``), and a value may be a plain string or a symbol-like object
such as an Enum member.  These helpers normalise all of that to ``str``.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from src.exceptions import MissingFieldError

__all__ = ["FIELDS", "REQUIRED_FIELDS", "field_str", "require_str"]

FIELDS          = ("group", "key", "description", "name")
REQUIRED_FIELDS = ("group", "key", "description")


def _lookup(record: Mapping[str, Any], field: str) -> Any:
    for tag in (field, f":{field}"):
        if tag in record:
            return record[tag]
    return None


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    name = getattr(value, "name", None)
    if isinstance(name, str):
        return name
    return str(value)


def field_str(record: Mapping[str, Any], field: str) -> Optional[str]:
    """
    Return the string form of *field* in *record*, or None when absent.

    Symbol-like values are converted to their textual name.
    """
    value = _lookup(record, field)
    if value is None:
        return None
    return _as_text(value)


def require_str(record: Mapping[str, Any], field: str) -> str:
    """Like field_str(), but raises MissingFieldError when *field* is absent."""
    value = field_str(record, field)
    if value is None:
        raise MissingFieldError(field, record)
    return value
