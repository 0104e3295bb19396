"""
cli — command-line interface for cheatsheet.

Entry points
────────────
  python -m src.cli   (via src/cli/__main__.py)
  cheatsheet          (via pyproject.toml [project.scripts])

Subcommands: init | show | view | add | groups | clear
"""

from src.cli.main import build_parser, cmd_add, cmd_clear, cmd_groups, cmd_init, cmd_show, main

__all__ = ["build_parser", "cmd_init", "cmd_show", "cmd_groups", "cmd_add", "cmd_clear", "main"]
