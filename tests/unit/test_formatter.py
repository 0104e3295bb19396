"""
Unit tests for src/formatter/ — table layout and style spans

Coverage plan
─────────────
key_column_width → 2 tests (padding + max, empty group)
format_cheat_row → 2 tests (right-justified key, key span)
format_group     → 3 tests (header/rows/blank line, alignment, empty group)
format_all       → 3 tests (concatenation order, empty, span offsets)
render           → 2 tests (round-trip example, determinism)
─────────────────────────────────────────────────────────────────
Total            = 12 tests
"""

import pytest


def _group(name, *keys):
    from src.store.models import Cheat, Group
    return Group(name=name, cheats=tuple(Cheat(name, k, f"does {k}") for k in keys))


# ─────────────────────────────────────────────────────────────────────────────
# 1. Column width
# ─────────────────────────────────────────────────────────────────────────────

class TestKeyColumnWidth:

    def test_width_is_two_plus_longest_key(self):
        from src.formatter.table import key_column_width
        assert key_column_width(_group("G", "abc", "abcdefg", "abcde")) == 9

    def test_empty_group_raises(self):
        from src.formatter.table import key_column_width
        from src.exceptions import EmptyGroupError
        with pytest.raises(EmptyGroupError):
            key_column_width(_group("Empty"))


# ─────────────────────────────────────────────────────────────────────────────
# 2. Rows and groups
# ─────────────────────────────────────────────────────────────────────────────

class TestFormatCheatRow:

    def test_key_is_right_justified(self):
        from src.formatter.table import format_cheat_row
        from src.store.models import Cheat
        row = format_cheat_row(Cheat("G", "C-g", "cancel"), 6)
        assert row.text == "   C-g - cancel\n"

    def test_key_carries_key_tag(self):
        from src.formatter.table import format_cheat_row
        from src.formatter.models import StyleTag
        from src.store.models import Cheat
        row = format_cheat_row(Cheat("G", "C-g", "cancel"), 6)
        assert row.spans_for(StyleTag.KEY) == ["C-g"]


class TestFormatGroup:

    def test_header_rows_and_blank_line(self):
        from src.formatter.table import format_group
        out = format_group(_group("Common", "C-x C-c"))
        assert out.text == "Common\n  C-x C-c - does C-x C-c\n\n"

    def test_every_row_aligns_separator(self):
        from src.formatter.table import format_group
        out = format_group(_group("G", "abc", "abcdefg", "abcde"))
        rows = out.text.splitlines()[1:-1]
        assert len(rows) == 3
        for row, key in zip(rows, ("abc", "abcdefg", "abcde")):
            # key field (width 9) plus " - " precedes the description
            assert row[:12] == f"{key:>9} - "
            assert row[12:] == f"does {key}"

    def test_empty_group_raises_without_output(self):
        from src.formatter.table import format_all
        from src.exceptions import EmptyGroupError
        with pytest.raises(EmptyGroupError) as exc_info:
            format_all([_group("A", "k"), _group("Empty")])
        assert exc_info.value.group_name == "Empty"


# ─────────────────────────────────────────────────────────────────────────────
# 3. Whole sheet
# ─────────────────────────────────────────────────────────────────────────────

class TestFormatAll:

    def test_groups_concatenated_in_order(self):
        from src.formatter.table import format_all
        out = format_all([_group("A", "a"), _group("B", "bb")])
        assert out.text == "A\n  a - does a\n\nB\n  bb - does bb\n\n"

    def test_no_groups_is_empty_text(self):
        from src.formatter.table import format_all
        out = format_all([])
        assert out.text == ""
        assert out.spans == []

    def test_span_offsets_point_into_full_text(self):
        from src.formatter.table import format_all
        from src.formatter.models import StyleTag
        out = format_all([_group("A", "a"), _group("B", "bb")])
        assert out.spans_for(StyleTag.GROUP) == ["A", "B"]
        assert out.spans_for(StyleTag.KEY) == ["a", "bb"]


class TestRender:

    def test_round_trip_example(self):
        from src.formatter.table import render
        from src.store.cheat_store import CheatStore
        store = CheatStore()
        store.add("Common", "C-x C-c", "leave Emacs.")
        assert render(store) == "Common\n  C-x C-c - leave Emacs.\n\n"

    def test_render_is_deterministic_and_read_only(self):
        from src.formatter.table import render
        from src.store.cheat_store import CheatStore
        store = CheatStore.seeded()
        first = render(store)
        assert render(store) == first
        assert store.modified is False
