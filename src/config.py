"""
Runtime configuration for the cheatsheet tools.

Values come from the environment and can be overridden by CLI flags:

  CHEATSHEET_FILE    — path of the cheat file (default: ~/.cheatsheet/cheats.json)
  CHEATSHEET_ENTRY   — name of the cheat-list entry inside it (default: cheatlist)
  CHEATSHEET_FORMAT  — "json" | "declaration" (default: inferred from suffix)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from src.persistence.base import DEFAULT_ENTRY_NAME, CheatFile, get_cheat_file

__all__ = ["CheatsheetConfig", "load_config", "DEFAULT_CHEAT_FILE"]

logger = logging.getLogger(__name__)

DEFAULT_CHEAT_FILE = "~/.cheatsheet/cheats.json"

_FORMATS = ("json", "declaration")


@dataclass
class CheatsheetConfig:
    """Where the cheat list lives and how it is stored."""
    cheat_file:  str           = DEFAULT_CHEAT_FILE
    entry_name:  str           = DEFAULT_ENTRY_NAME
    file_format: Optional[str] = None    # None = infer from suffix

    @property
    def path(self) -> Path:
        return Path(self.cheat_file).expanduser()

    def cheat_file_backend(self) -> CheatFile:
        """Return the CheatFile backend for this configuration."""
        return get_cheat_file(self.path, fmt=self.file_format, entry_name=self.entry_name)


def load_config(env: Optional[Mapping[str, str]] = None) -> CheatsheetConfig:
    """Build a CheatsheetConfig from *env* (default: os.environ)."""
    env = os.environ if env is None else env
    fmt = env.get("CHEATSHEET_FORMAT", "").strip().lower() or None
    if fmt is not None and fmt not in _FORMATS:
        logger.warning("Ignoring unknown CHEATSHEET_FORMAT=%r (expected one of %s)",
                       fmt, ", ".join(_FORMATS))
        fmt = None
    return CheatsheetConfig(
        cheat_file=env.get("CHEATSHEET_FILE") or DEFAULT_CHEAT_FILE,
        entry_name=env.get("CHEATSHEET_ENTRY") or DEFAULT_ENTRY_NAME,
        file_format=fmt,
    )
