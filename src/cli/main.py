"""
CLI entry point for cheatsheet.

Usage
─────
  # Create the cheat file, seeded with a few common bindings
  cheatsheet init

  # Print the aligned cheatsheet
  cheatsheet show

  # Register a binding (saved immediately)
  cheatsheet add --group Common --key "C-x C-c" --description "leave Emacs."

  # Open the read-only viewer window
  cheatsheet view

  # Use another file / the one-line declaration format
  cheatsheet --file ~/.emacs.d/cheats.py --format declaration show

Subcommands are implemented as standalone functions (cmd_init, cmd_show,
cmd_add, …) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
from typing import Optional

from src.config import CheatsheetConfig, load_config
from src.exceptions import CheatsheetBaseError
from src.persistence.base import CheatFile
from src.store.cheat_store import CheatStore

__all__ = [
    "build_parser",
    "cmd_init",
    "cmd_show",
    "cmd_groups",
    "cmd_add",
    "cmd_clear",
    "cmd_view",
    "main",
]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: init | show | view | add | groups | clear
    """
    parser = argparse.ArgumentParser(
        prog="cheatsheet",
        description="Keep a grouped list of key bindings and show it as an aligned table",
    )
    parser.add_argument(
        "--file",
        default=None,
        metavar="PATH",
        help="Cheat file path (default: $CHEATSHEET_FILE or ~/.cheatsheet/cheats.json)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "declaration"],
        default=None,
        help="Cheat file format (default: inferred from the file suffix)",
    )
    parser.add_argument(
        "--entry",
        default=None,
        metavar="NAME",
        help="Name of the cheat-list entry inside the file (default: cheatlist)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── init ──────────────────────────────────────────────────────────────
    init = sub.add_parser("init", help="Create a new cheat file")
    init.add_argument(
        "--empty",
        action="store_true",
        default=False,
        help="Start with an empty list instead of the built-in defaults",
    )

    # ── show / view / groups ──────────────────────────────────────────────
    sub.add_parser("show", help="Print the cheatsheet")
    sub.add_parser("view", help="Open the cheatsheet in a read-only viewer window")
    sub.add_parser("groups", help="List group names with their cheat counts")

    # ── add ───────────────────────────────────────────────────────────────
    add = sub.add_parser("add", help="Add a cheat and save the file")
    add.add_argument("--group", required=True, metavar="GROUP", help="Group name, e.g. Common")
    add.add_argument("--key", required=True, metavar="KEYS", help="Key combination, e.g. 'C-x C-c'")
    add.add_argument(
        "--description",
        required=True,
        metavar="TEXT",
        help="What the key does",
    )
    add.add_argument("--name", default=None, metavar="NAME", help="Optional identifier")

    # ── clear ─────────────────────────────────────────────────────────────
    sub.add_parser("clear", help="Remove every cheat and save the file")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def _resolve_config(ns: argparse.Namespace) -> CheatsheetConfig:
    """Environment configuration with CLI flags applied on top."""
    config = load_config()
    if ns.file:
        config.cheat_file = ns.file
    if ns.format:
        config.file_format = ns.format
    if ns.entry:
        config.entry_name = ns.entry
    return config


def _open_store(cheat_file: CheatFile) -> CheatStore:
    store = CheatStore()
    cheat_file.load_into(store)
    logger.debug("Opened %r with %d cheats", cheat_file, len(store))
    return store


# ── Command implementations ───────────────────────────────────────────────────


def cmd_init(cheat_file: CheatFile, empty: bool = False) -> CheatStore:
    """Create *cheat_file*, seeded with DEFAULT_CHEATS unless *empty*."""
    store = CheatStore() if empty else CheatStore.seeded()
    cheat_file.create(store)
    print(f"Created {cheat_file.path} ({len(store)} cheats)")
    return store


def cmd_show(store: CheatStore) -> str:
    """Print the rendered cheatsheet to stdout and return it."""
    text = store.render()
    sys.stdout.write(text)
    return text


def cmd_groups(store: CheatStore) -> None:
    """Print one line per group: name and number of cheats."""
    groups = store.get_snapshot()
    if not groups:
        print("0 groups found.")
        return
    width = max(len(g.name) for g in groups)
    for group in groups:
        print(f"{group.name:<{width}}  {len(group):>3}")


def cmd_add(
    store: CheatStore,
    cheat_file: CheatFile,
    group: str,
    key: str,
    description: str,
    name: Optional[str] = None,
) -> bool:
    """
    Add one cheat to *store* and save it to *cheat_file*.

    Returns:
        True if the cheat was new, False if it was already present.
    """
    added = store.add(group, key, description, name=name)
    cheat_file.save(store)
    if added:
        print(f"Added [{group}] {key}")
    else:
        print(f"Already present: [{group}] {key}")
    return added


def cmd_clear(store: CheatStore, cheat_file: CheatFile) -> None:
    """Remove every cheat from *store* and save the now-empty list."""
    count = len(store)
    store.clear()
    cheat_file.save(store)
    print(f"Removed {count} cheats.")


def cmd_view(store: CheatStore) -> int:
    """Open the viewer window; returns the Qt event-loop exit code."""
    from src.gui import show
    return show(store)


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    config = _resolve_config(ns)
    try:
        cheat_file = config.cheat_file_backend()
        if ns.subcommand == "init":
            cmd_init(cheat_file, empty=ns.empty)
            return 0

        store = _open_store(cheat_file)

        if ns.subcommand == "show":
            cmd_show(store)
        elif ns.subcommand == "groups":
            cmd_groups(store)
        elif ns.subcommand == "add":
            cmd_add(
                store,
                cheat_file,
                group=ns.group,
                key=ns.key,
                description=ns.description,
                name=ns.name,
            )
        elif ns.subcommand == "clear":
            cmd_clear(store, cheat_file)
        elif ns.subcommand == "view":
            return cmd_view(store)
    except (CheatsheetBaseError, ValueError) as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
