"""
Unit tests for src/cli/ and src/config.py

Coverage plan
─────────────
config        → 4 tests  (defaults, env overrides, bad format ignored, backend)
arg parsing   → 4 tests  (global flags, add / init / show subcommands)
commands      → 5 tests  (init, show, groups, add saves, clear saves)
main()        → 4 tests  (show end-to-end, add end-to-end, missing file
                          error, no subcommand)
─────────────────────────────────────────────────────────────────
Total         = 17 tests
"""

import json

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from src.cli.main import build_parser
    parser = build_parser()
    return parser.parse_args(args)


@pytest.fixture
def cheat_path(tmp_path):
    """A JSON cheat file holding two cheats."""
    path = tmp_path / "cheats.json"
    path.write_text(json.dumps({"cheatlist": [
        {"group": "Common", "key": "C-x C-c", "description": "leave Emacs."},
        {"group": "Files", "key": "C-x C-f", "description": "open a file."},
    ]}), encoding="utf-8")
    return path


@pytest.fixture
def cheat_file(cheat_path):
    from src.persistence import JsonCheatFile
    return JsonCheatFile(cheat_path)


@pytest.fixture
def store(cheat_file):
    from src.store.cheat_store import CheatStore
    return cheat_file.load_into(CheatStore())


# ─────────────────────────────────────────────────────────────────────────────
# 1. Configuration
# ─────────────────────────────────────────────────────────────────────────────

class TestConfig:

    def test_defaults_with_empty_env(self):
        from src.config import DEFAULT_CHEAT_FILE, load_config
        config = load_config(env={})
        assert config.cheat_file == DEFAULT_CHEAT_FILE
        assert config.entry_name == "cheatlist"
        assert config.file_format is None

    def test_env_overrides(self, tmp_path):
        from src.config import load_config
        config = load_config(env={
            "CHEATSHEET_FILE": str(tmp_path / "c.py"),
            "CHEATSHEET_ENTRY": "keys",
            "CHEATSHEET_FORMAT": "Declaration",
        })
        assert config.path == tmp_path / "c.py"
        assert config.entry_name == "keys"
        assert config.file_format == "declaration"

    def test_unknown_format_is_ignored(self):
        from src.config import load_config
        assert load_config(env={"CHEATSHEET_FORMAT": "yaml"}).file_format is None

    def test_backend_follows_config(self, tmp_path):
        from src.config import CheatsheetConfig
        from src.persistence import DeclarationCheatFile
        backend = CheatsheetConfig(cheat_file=str(tmp_path / "c.json"),
                                   file_format="declaration").cheat_file_backend()
        assert isinstance(backend, DeclarationCheatFile)


# ─────────────────────────────────────────────────────────────────────────────
# 2. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_global_flags(self):
        ns = _parse(["--file", "x.json", "--format", "json", "--debug", "show"])
        assert ns.file == "x.json"
        assert ns.format == "json"
        assert ns.debug is True
        assert ns.subcommand == "show"

    def test_add_subcommand_parses_fields(self):
        ns = _parse(["add", "--group", "G", "--key", "C-g", "--description", "cancel"])
        assert (ns.group, ns.key, ns.description, ns.name) == ("G", "C-g", "cancel", None)

    def test_add_requires_key(self):
        with pytest.raises(SystemExit):
            _parse(["add", "--group", "G", "--description", "d"])

    def test_init_empty_defaults_to_false(self):
        assert _parse(["init"]).empty is False


# ─────────────────────────────────────────────────────────────────────────────
# 3. Command implementations
# ─────────────────────────────────────────────────────────────────────────────

class TestCommands:

    def test_init_creates_seeded_file(self, tmp_path, capsys):
        from src.cli.main import cmd_init
        from src.persistence import JsonCheatFile
        from src.store.models import DEFAULT_CHEATS
        cheat_file = JsonCheatFile(tmp_path / "new.json")
        cmd_init(cheat_file)
        assert cheat_file.load() == list(DEFAULT_CHEATS)
        assert "Created" in capsys.readouterr().out

    def test_show_prints_rendered_sheet(self, store, capsys):
        from src.cli.main import cmd_show
        cmd_show(store)
        out = capsys.readouterr().out
        assert out == (
            "Common\n  C-x C-c - leave Emacs.\n\n"
            "Files\n  C-x C-f - open a file.\n\n"
        )

    def test_groups_lists_counts(self, store, capsys):
        from src.cli.main import cmd_groups
        cmd_groups(store)
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["Common", "1"]
        assert lines[1].split() == ["Files", "1"]

    def test_add_saves_to_file(self, store, cheat_file):
        from src.cli.main import cmd_add
        assert cmd_add(store, cheat_file, "Common", "C-g", "cancel.") is True
        assert [c.key for c in cheat_file.load()] == ["C-x C-c", "C-x C-f", "C-g"]

    def test_clear_saves_empty_list(self, store, cheat_file, cheat_path):
        from src.cli.main import cmd_clear
        cmd_clear(store, cheat_file)
        assert json.loads(cheat_path.read_text(encoding="utf-8")) == {"cheatlist": []}


# ─────────────────────────────────────────────────────────────────────────────
# 4. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_show_end_to_end(self, cheat_path, capsys):
        from src.cli.main import main
        assert main(["--file", str(cheat_path), "show"]) == 0
        assert capsys.readouterr().out.startswith("Common\n")

    def test_add_end_to_end(self, cheat_path):
        from src.cli.main import main
        rc = main(["--file", str(cheat_path), "add",
                   "--group", "Help", "--key", "C-h k", "--description", "describe key."])
        assert rc == 0
        data = json.loads(cheat_path.read_text(encoding="utf-8"))
        assert data["cheatlist"][-1]["group"] == "Help"

    def test_missing_file_returns_error(self, tmp_path, capsys):
        from src.cli.main import main
        assert main(["--file", str(tmp_path / "absent.json"), "show"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_subcommand_prints_help(self, capsys):
        from src.cli.main import main
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
