"""Session state dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from cifra.core.translator import Direction


@dataclass
class SessionState:
    direction: Direction = Direction.SYMBOL_TO_LETTER

    # Text shown in the input editor and the output view
    input_text: str = ""
    output_text: str = ""

    def reset(self) -> None:
        """Clear both texts, keeping the direction."""
        self.input_text = ""
        self.output_text = ""
