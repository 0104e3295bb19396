"""
Grouping engine — derives ordered Group views from a flat cheat sequence.

Group order is the order in which each group name was first encountered;
cheat order inside a group is insertion order.
"""

from typing import Iterable, Sequence

from src.store.models import Cheat, Group

__all__ = ["distinct_groups", "group_view", "snapshot"]


def distinct_groups(cheats: Iterable[Cheat]) -> list[str]:
    """Return the distinct group names of *cheats* in first-seen order."""
    return list(dict.fromkeys(c.group for c in cheats))


def group_view(cheats: Iterable[Cheat], name: str) -> tuple[Cheat, ...]:
    """Return the cheats belonging to group *name*, preserving relative order."""
    return tuple(c for c in cheats if c.group == name)


def snapshot(cheats: Sequence[Cheat]) -> list[Group]:
    """Return one Group per distinct group name, in first-insertion order."""
    return [Group(name=name, cheats=group_view(cheats, name))
            for name in distinct_groups(cheats)]
