"""Pure translation functions (no side effects, fully testable)."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

import cifra.log  # registers TRACE level and logger.trace()
from cifra.core.maps import LETTER_TO_SYMBOL, SPACE, SYMBOL_TO_LETTER

logger = logging.getLogger(__name__)

_ALIASES = {
    "decipher": "symbol_to_letter",
    "cipher": "letter_to_symbol",
}


class Direction(Enum):
    SYMBOL_TO_LETTER = "symbol_to_letter"  # decipher
    LETTER_TO_SYMBOL = "letter_to_symbol"  # cipher

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        """Accept a Direction, its value, its name or ``cipher``/``decipher``.

        Raises ``ValueError`` for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            key = _ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(f"Unknown direction: {value!r}")

    @property
    def other(self) -> "Direction":
        if self is Direction.SYMBOL_TO_LETTER:
            return Direction.LETTER_TO_SYMBOL
        return Direction.SYMBOL_TO_LETTER


def table_for(direction: Direction | str) -> Mapping[str, str]:
    """Return the lookup table used for *direction*."""
    if Direction.parse(direction) is Direction.SYMBOL_TO_LETTER:
        return SYMBOL_TO_LETTER
    return LETTER_TO_SYMBOL


def translate(text: str, direction: Direction | str) -> str:
    """Translate *text* one character at a time.

    Args:
        text:      Source text; may be empty.
        direction: :class:`Direction` (or anything :meth:`Direction.parse`
                   accepts) selecting the forward or reverse table.

    Spaces and characters missing from the selected table are copied
    unchanged, so the result always has the same length as *text*.
    """
    if not text:
        return ""

    table = table_for(direction)

    result = []
    for ch in text:
        if ch == SPACE:
            result.append(ch)
            continue
        converted = table.get(ch)
        if converted is None:
            logger.trace("No mapping for %r, passing through", ch)  # type: ignore[attr-defined]
            result.append(ch)
        else:
            result.append(converted)
    return "".join(result)
