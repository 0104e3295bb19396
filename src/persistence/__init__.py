"""
persistence — reads and writes the cheat list inside an existing file.

Public API
──────────
CheatFile             — abstract backend (load / save / create / parse)
JsonCheatFile         — array under a fixed key of a JSON object (default)
DeclarationCheatFile  — one-line ``cheatlist = [...]`` literal in a source file
get_cheat_file        — factory selecting a backend by format or file suffix
"""

from src.persistence.base import DEFAULT_ENTRY_NAME, CheatFile, get_cheat_file
from src.persistence.declaration import DeclarationCheatFile
from src.persistence.json_file import JsonCheatFile

__all__ = [
    "CheatFile",
    "JsonCheatFile",
    "DeclarationCheatFile",
    "get_cheat_file",
    "DEFAULT_ENTRY_NAME",
]
