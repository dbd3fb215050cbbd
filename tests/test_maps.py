"""Tests for cifra.core.maps — forward/reverse tables and row groups."""

from __future__ import annotations

import pytest

from cifra.core.maps import (
    LETTER_TO_SYMBOL,
    ROW_GROUPS,
    ROW_NAMES,
    SPACE,
    SYMBOL_ROWS,
    SYMBOL_TO_LETTER,
    SYMBOLS,
    build_forward_table,
    derive_reverse_table,
    describe_symbol,
    group_by_row,
)

CANONICAL = "+q ×w ÷e =r /t _y <u >i [o ]p !a @s #d $f %g ^h &j *k (l )ç -z 'x \"c :v ;b ,n ?m .."


class TestForwardTable:

    def test_matches_canonical_pairs(self):
        expected = {pair[0]: pair[1] for pair in CANONICAL.split(" ")}
        assert build_forward_table() == expected

    def test_has_28_entries_without_space(self):
        table = build_forward_table()
        assert len(table) == 28
        assert SPACE not in table

    def test_letters_are_unique(self):
        letters = list(build_forward_table().values())
        assert len(letters) == len(set(letters))

    def test_special_pairs(self):
        assert SYMBOL_TO_LETTER[")"] == "ç"
        assert SYMBOL_TO_LETTER["."] == "."

    def test_returns_fresh_copy(self):
        table = build_forward_table()
        table["+"] = "x"
        assert build_forward_table()["+"] == "q"

    def test_module_table_is_read_only(self):
        with pytest.raises(TypeError):
            SYMBOL_TO_LETTER["+"] = "x"  # type: ignore[index]


class TestReverseTable:

    def test_both_cases_for_every_letter(self):
        for symbol, letter in SYMBOL_TO_LETTER.items():
            assert LETTER_TO_SYMBOL[letter.lower()] == symbol
            assert LETTER_TO_SYMBOL[letter.upper()] == symbol

    def test_key_count(self):
        # 27 letters (a-z plus ç) in two cases, plus '.'
        assert len(LETTER_TO_SYMBOL) == 55

    def test_c_cedilla_both_cases(self):
        assert LETTER_TO_SYMBOL["ç"] == ")"
        assert LETTER_TO_SYMBOL["Ç"] == ")"

    def test_last_registration_wins_on_case_collision(self):
        reverse = derive_reverse_table({"1": "a", "2": "A"})
        assert reverse["a"] == "2"
        assert reverse["A"] == "2"

    def test_derived_from_forward(self):
        assert dict(LETTER_TO_SYMBOL) == derive_reverse_table(build_forward_table())

    def test_reverse_table_is_read_only(self):
        with pytest.raises(TypeError):
            LETTER_TO_SYMBOL["q"] = "?"  # type: ignore[index]


class TestRowGroups:

    def test_three_named_rows(self):
        assert [g.name for g in ROW_GROUPS] == [ROW_NAMES[0], ROW_NAMES[1], ROW_NAMES[2]]

    def test_space_excluded_from_items(self):
        for group in ROW_GROUPS:
            assert all(item.symbol != SPACE for item in group.items)

    def test_items_pair_symbol_with_letter(self):
        first = ROW_GROUPS[0].items[0]
        assert (first.symbol, first.letter) == ("+", "q")
        assert [i.letter for i in ROW_GROUPS[2].items] == ["z", "x", "c", "v", "b", "n", "m", "."]

    def test_item_counts(self):
        assert [len(g.items) for g in ROW_GROUPS] == [10, 10, 8]

    def test_unnamed_row_gets_fallback_name(self):
        groups = group_by_row(rows=[["+"], ["!"], ["-"], ["."]])
        assert groups[3].name == "Row 4"

    def test_unknown_symbol_pairs_with_itself(self):
        groups = group_by_row(rows=[["+", "~"]], forward={"+": "q"}, names={})
        assert [(i.symbol, i.letter) for i in groups[0].items] == [("+", "q"), ("~", "~")]


class TestSymbols:

    def test_29_symbols_including_space(self):
        assert len(SYMBOLS) == 29
        assert SYMBOLS[-1] == SPACE

    def test_symbols_follow_rows(self):
        assert SYMBOLS == tuple(s for row in SYMBOL_ROWS for s in row)

    def test_every_non_space_symbol_is_mapped(self):
        assert set(SYMBOLS) - {SPACE} == set(SYMBOL_TO_LETTER)


def test_describe_symbol():
    assert describe_symbol("]") == "] → p"
    assert describe_symbol(SPACE) == "  → ?"
