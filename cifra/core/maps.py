"""Symbol↔letter substitution maps.

The forward table is the canonical cipher; the reverse table is derived
from it once at import and registers both letter cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

SPACE = " "

_CANONICAL: tuple[tuple[str, str], ...] = (
    # QWERTY row
    ("+", "q"), ("×", "w"), ("÷", "e"), ("=", "r"), ("/", "t"), ("_", "y"),
    ("<", "u"), (">", "i"), ("[", "o"), ("]", "p"),
    # ASDF row
    ("!", "a"), ("@", "s"), ("#", "d"), ("$", "f"), ("%", "g"), ("^", "h"),
    ("&", "j"), ("*", "k"), ("(", "l"), (")", "ç"),
    # ZXCV row
    ("-", "z"), ("'", "x"), ('"', "c"), (":", "v"), (";", "b"), (",", "n"),
    ("?", "m"),
    # Punctuation
    (".", "."),
)

SYMBOL_ROWS: tuple[tuple[str, ...], ...] = (
    ("+", "×", "÷", "=", "/", "_", "<", ">", "[", "]"),
    ("!", "@", "#", "$", "%", "^", "&", "*", "(", ")"),
    ("-", "'", '"', ":", ";", ",", "?", ".", SPACE),
)

ROW_NAMES: dict[int, str] = {
    0: "QWERTY row",
    1: "ASDF row",
    2: "ZXCV row",
}


@dataclass(frozen=True)
class RowItem:
    symbol: str
    letter: str


@dataclass(frozen=True)
class RowGroup:
    name: str
    items: tuple[RowItem, ...]


def build_forward_table() -> dict[str, str]:
    """Return a fresh copy of the canonical symbol → letter table."""
    return dict(_CANONICAL)


def derive_reverse_table(forward: Mapping[str, str]) -> dict[str, str]:
    """Invert *forward*, registering the lowercase and uppercase of each letter.

    Entries are registered in forward-table order, so when two symbols map
    to letters that differ only by case the later symbol wins.
    """
    reverse: dict[str, str] = {}
    for symbol, letter in forward.items():
        reverse[letter] = symbol
        reverse[letter.lower()] = symbol
        reverse[letter.upper()] = symbol
    return reverse


def group_by_row(
    rows: Sequence[Sequence[str]] = SYMBOL_ROWS,
    forward: Mapping[str, str] | None = None,
    names: Mapping[int, str] = ROW_NAMES,
) -> list[RowGroup]:
    """Pair every keyboard symbol with its letter, grouped by row.

    The space key is left out of the items; symbols missing from
    *forward* are paired with themselves.
    """
    if forward is None:
        forward = SYMBOL_TO_LETTER
    groups = []
    for index, row in enumerate(rows):
        items = tuple(
            RowItem(symbol=symbol, letter=forward.get(symbol, symbol))
            for symbol in row
            if symbol != SPACE
        )
        groups.append(RowGroup(name=names.get(index, f"Row {index + 1}"), items=items))
    return groups


def describe_symbol(symbol: str) -> str:
    """Tooltip text for an on-screen key, e.g. ``"] → p"``."""
    return f"{symbol} → {SYMBOL_TO_LETTER.get(symbol, '?')}"


SYMBOL_TO_LETTER: Mapping[str, str] = MappingProxyType(build_forward_table())
LETTER_TO_SYMBOL: Mapping[str, str] = MappingProxyType(derive_reverse_table(SYMBOL_TO_LETTER))
SYMBOLS: tuple[str, ...] = tuple(symbol for row in SYMBOL_ROWS for symbol in row)
ROW_GROUPS: tuple[RowGroup, ...] = tuple(group_by_row())
