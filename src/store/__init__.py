"""
store — in-memory cheat records and the grouping engine.

Public API
──────────
Cheat           — frozen dataclass for one (group, key, description) entry
Group           — derived, ordered view of the cheats sharing a group name
CheatStore      — ordered, de-duplicated cheat list with a modified flag
DEFAULT_CHEATS  — built-in seed value
"""

from src.store.models import DEFAULT_CHEATS, Cheat, Group
from src.store.cheat_store import CheatStore

__all__ = ["Cheat", "Group", "CheatStore", "DEFAULT_CHEATS"]
