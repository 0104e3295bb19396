"""Abstract base class for cheat-file backends."""

import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from src.exceptions import FileFormatError, PersistenceIOError
from src.store.cheat_store import CheatStore
from src.store.models import Cheat

__all__ = ["CheatFile", "get_cheat_file", "DEFAULT_ENTRY_NAME"]

logger = logging.getLogger(__name__)

# Name of the cheat-list entry (JSON key / assignment target) inside a cheat file
DEFAULT_ENTRY_NAME = "cheatlist"


class CheatFile(ABC):
    """
    A file holding a named cheat-list entry among other, unrelated content.

    save() replaces only that entry; everything else in the file is kept.
    The factory function get_cheat_file() selects the right implementation.
    """

    def __init__(self, path: Union[str, Path], entry_name: str = DEFAULT_ENTRY_NAME) -> None:
        self.path = Path(path).expanduser()
        self.entry_name = entry_name

    # ── Backend hooks ─────────────────────────────────────────────────────

    @abstractmethod
    def parse(self, text: str) -> Any:
        """
        Parse *text* as one literal data structure. Pure, no side effects.

        Raises:
            FileFormatError: *text* is not a valid literal.
        """
        ...

    @abstractmethod
    def extract(self, text: str) -> list:
        """
        Return the raw cheat-list entry found in file content *text*.

        Raises:
            PersistencePatternNotFoundError: The entry is not present.
            FileFormatError: The entry is present but malformed.
        """
        ...

    @abstractmethod
    def replace(self, text: str, cheats: Sequence[Cheat]) -> str:
        """
        Return *text* with the cheat-list entry replaced by *cheats*.

        Raises:
            PersistencePatternNotFoundError: The entry is not present.
        """
        ...

    @abstractmethod
    def new_document(self, cheats: Sequence[Cheat]) -> str:
        """Return the content of a fresh file holding only *cheats*."""
        ...

    # ── File I/O ──────────────────────────────────────────────────────────

    # newline="" on both sides keeps line endings byte-for-byte

    def read_text(self) -> str:
        try:
            with open(self.path, encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError as exc:
            raise FileFormatError(f"{self.path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise PersistenceIOError(f"Cannot read cheat file {self.path}: {exc}") from exc

    def write_text(self, text: str) -> None:
        """Atomically replace the file: write a sibling temp file, then rename it."""
        tmp: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", delete=False, dir=str(self.path.parent), encoding="utf-8",
                newline="", prefix=f".{self.path.name}.", suffix=".tmp",
            ) as f:
                tmp = f.name
                f.write(text)
            if self.path.exists():
                shutil.copymode(self.path, tmp)
            os.replace(tmp, self.path)
        except OSError as exc:
            if tmp is not None and os.path.exists(tmp):
                os.unlink(tmp)
            raise PersistenceIOError(f"Cannot write cheat file {self.path}: {exc}") from exc

    # ── Public API ────────────────────────────────────────────────────────

    def load(self) -> list[Cheat]:
        """Read the file and return its cheats in stored order."""
        raw = self.extract(self.read_text())
        if not isinstance(raw, list):
            raise FileFormatError(
                f"{self.entry_name!r} in {self.path} must be a list, got {type(raw).__name__}"
            )
        cheats = []
        for item in raw:
            if not isinstance(item, dict):
                raise FileFormatError(f"Cheat entry must be an object, got {item!r}")
            cheats.append(Cheat.from_mapping(item))
        logger.debug("Loaded %d cheats from %s", len(cheats), self.path)
        return cheats

    def load_into(self, store: CheatStore) -> CheatStore:
        """Replace the contents of *store* with the file's cheats; returns *store*."""
        store.replace_all(self.load())
        return store

    def save(self, store: CheatStore) -> bool:
        """
        Write *store* into the file's cheat-list entry if it has unsaved changes.

        The new content is computed in full before anything is written, and
        the store's modified flag is cleared only after a successful write.

        Returns:
            True if the file was written, False if the store was unmodified.

        Raises:
            PersistencePatternNotFoundError: The entry is not in the file.
            PersistenceIOError: The file cannot be read or written.
        """
        if not store.modified:
            logger.debug("Store unmodified; not saving %s", self.path)
            return False
        new_text = self.replace(self.read_text(), store.cheats)
        self.write_text(new_text)
        store.mark_saved()
        logger.info("Saved %d cheats to %s", len(store), self.path)
        return True

    def create(self, store: CheatStore) -> None:
        """
        Create a new file holding only the contents of *store*.

        Raises:
            PersistenceIOError: The file already exists or cannot be written.
        """
        if self.path.exists():
            raise PersistenceIOError(f"Cheat file already exists: {self.path}")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceIOError(f"Cannot create {self.path.parent}: {exc}") from exc
        self.write_text(self.new_document(store.cheats))
        store.mark_saved()
        logger.info("Created cheat file %s with %d cheats", self.path, len(store))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self.path)!r}, entry_name={self.entry_name!r})"


def get_cheat_file(
    path: Union[str, Path],
    fmt: Optional[str] = None,
    entry_name: str = DEFAULT_ENTRY_NAME,
) -> CheatFile:
    """
    Factory: return the CheatFile backend for *path*.

    *fmt* is "json" or "declaration"; when omitted it is inferred from the
    suffix (``.json`` → JSON, anything else → declaration).

    Import is deferred to avoid circular imports between sub-modules.
    """
    from .declaration import DeclarationCheatFile
    from .json_file import JsonCheatFile

    if fmt is None:
        fmt = "json" if Path(path).suffix.lower() == ".json" else "declaration"
    if fmt == "json":
        return JsonCheatFile(path, entry_name)
    if fmt == "declaration":
        return DeclarationCheatFile(path, entry_name)
    raise ValueError(f"Unknown cheat file format: {fmt!r} (expected 'json' or 'declaration')")
