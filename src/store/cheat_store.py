"""
CheatStore — the in-memory, ordered collection of cheats.

Usage::

    store = CheatStore()
    store.add("Common", "C-x C-c", "leave Emacs.")
    store.add_group("Files", [
        {"key": "C-x C-f", "description": "open a file."},
        ("C-x C-s", "save the current buffer."),
    ])

    print(store.render())

    # Persist only when something changed
    if store.modified:
        cheat_file.save(store)
"""

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, Union

from src.exceptions import MissingFieldError
from src.store.grouping import distinct_groups, group_view, snapshot
from src.store.models import DEFAULT_CHEATS, Cheat, Group

__all__ = ["CheatStore"]

logger = logging.getLogger(__name__)

# A partial cheat handed to add_group(): mapping or (key, description[, name])
PartialCheat = Union[Mapping[str, Any], Sequence[str]]


class CheatStore:
    """
    Ordered, de-duplicated list of Cheat records plus a modified flag.

    The flag is best-effort dirty tracking: every add()/clear() call sets it,
    even when the call turned out to be a no-op.  Only mark_saved() clears it.
    """

    def __init__(self, cheats: Optional[Iterable[Cheat]] = None) -> None:
        self._cheats:   list[Cheat] = []
        self._modified: bool        = False
        if cheats:
            self.replace_all(cheats)

    @classmethod
    def seeded(cls) -> "CheatStore":
        """Return a store initialised to the built-in DEFAULT_CHEATS."""
        return cls(DEFAULT_CHEATS)

    # ── Mutation ──────────────────────────────────────────────────────────

    def add_cheat(self, cheat: Cheat) -> bool:
        """
        Append *cheat* unless a structurally equal cheat is already stored.

        Returns:
            True if the list changed, False for a duplicate.
        """
        self._modified = True
        if cheat in self._cheats:
            logger.debug("Duplicate cheat ignored: %s", cheat)
            return False
        self._cheats.append(cheat)
        logger.debug("Added cheat: %s", cheat)
        return True

    def add(
        self,
        group: str,
        key: str,
        description: str,
        name: Optional[str] = None,
    ) -> bool:
        """Validate and add one cheat. Raises MissingFieldError on bad input."""
        return self.add_cheat(Cheat(group=group, key=key, description=description, name=name))

    def add_group(self, group: str, cheats: Iterable[PartialCheat]) -> int:
        """
        Add every partial cheat in *cheats* under *group*.

        Each item is either a mapping with ``key``, ``description`` and an
        optional ``name``, or a ``(key, description[, name])`` sequence.

        Returns:
            Number of cheats actually added (duplicates excluded).
        """
        added = 0
        for partial in cheats:
            if isinstance(partial, Mapping):
                record = dict(partial)
                record["group"] = group
                cheat = Cheat.from_mapping(record)
            elif isinstance(partial, str):
                raise TypeError(f"expected a mapping or (key, description) pair, got {partial!r}")
            else:
                fields = list(partial)
                if len(fields) < 2:
                    raise MissingFieldError("key" if not fields else "description", partial)
                if len(fields) > 3:
                    raise TypeError(f"expected (key, description[, name]), got {len(fields)} items: {partial!r}")
                cheat = Cheat(group, *fields)
            if self.add_cheat(cheat):
                added += 1
        return added

    def clear(self) -> None:
        """Remove every cheat."""
        logger.debug("Clearing %d cheats", len(self._cheats))
        self._cheats.clear()
        self._modified = True

    def replace_all(self, cheats: Iterable[Cheat]) -> None:
        """Replace the contents with *cheats* (de-duplicated, order kept); leaves the store clean."""
        self._cheats = list(dict.fromkeys(cheats))
        self._modified = False

    def mark_saved(self) -> None:
        """Clear the modified flag after a successful save."""
        self._modified = False

    # ── Queries ───────────────────────────────────────────────────────────

    @property
    def cheats(self) -> tuple[Cheat, ...]:
        return tuple(self._cheats)

    @property
    def modified(self) -> bool:
        return self._modified

    def group_names(self) -> list[str]:
        return distinct_groups(self._cheats)

    def group_view(self, name: str) -> tuple[Cheat, ...]:
        return group_view(self._cheats, name)

    def get_snapshot(self) -> list[Group]:
        """Return the ordered list of Groups for the current contents."""
        return snapshot(self._cheats)

    def render(self) -> str:
        """Return the formatted cheatsheet text."""
        from src.formatter.table import render
        return render(self)

    def __len__(self) -> int:
        return len(self._cheats)

    def __iter__(self) -> Iterator[Cheat]:
        return iter(tuple(self._cheats))

    def __contains__(self, cheat: object) -> bool:
        return cheat in self._cheats

    def __repr__(self) -> str:
        return f"CheatStore(cheats={len(self._cheats)}, modified={self._modified})"
