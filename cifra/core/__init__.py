"""Substitution engine: tables, translator, session."""

from cifra.core.maps import LETTER_TO_SYMBOL, ROW_GROUPS, SYMBOL_TO_LETTER
from cifra.core.translator import Direction, translate

__all__ = ["Direction", "LETTER_TO_SYMBOL", "ROW_GROUPS", "SYMBOL_TO_LETTER", "translate"]
