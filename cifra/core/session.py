"""TranslationSession — caller-side state driven by the window or the CLI."""

from __future__ import annotations

import logging

from cifra.core.event_bus import EventBus
from cifra.core.events import DirectionEventData, EventType, TranslationEventData
from cifra.core.states import SessionState
from cifra.core.translator import Direction, translate

logger = logging.getLogger(__name__)


class TranslationSession:
    """Holds input text, output text and direction.

    Every mutation recomputes the output from the input and publishes
    ``OUTPUT_CHANGED`` on the bus (if one is attached).  Switching the
    direction feeds the *current output* back in as the new input, which
    is how the on-screen mode toggle behaves.
    """

    def __init__(
        self,
        direction: Direction | str = Direction.SYMBOL_TO_LETTER,
        event_bus: EventBus | None = None,
        debug: bool = False,
    ):
        self.state = SessionState(direction=Direction.parse(direction))
        self.event_bus = event_bus
        self.debug = debug

    @property
    def direction(self) -> Direction:
        return self.state.direction

    @property
    def input_text(self) -> str:
        return self.state.input_text

    @property
    def output_text(self) -> str:
        return self.state.output_text

    # -- operations ---------------------------------------------------------

    def set_input(self, text: str) -> str:
        """Replace the input and return the new output."""
        self.state.input_text = text
        self._emit(EventType.INPUT_CHANGED, text)
        return self._retranslate()

    def tap_symbol(self, symbol: str) -> str:
        """Append an on-screen key to the input and return the new output."""
        self._emit(EventType.SYMBOL_TAPPED, symbol)
        return self.set_input(self.state.input_text + symbol)

    def switch_direction(self, direction: Direction | str) -> str:
        """Switch direction, re-translating the current output as new input."""
        previous = self.state.direction
        current = Direction.parse(direction)
        carried = self.state.output_text

        self.state.direction = current
        if self.debug:
            logger.debug("Direction: %s → %s (carrying %r)", previous.value, current.value, carried[:50])
        self._emit(EventType.DIRECTION_CHANGED, DirectionEventData(previous=previous, current=current))
        return self.set_input(carried)

    def toggle_direction(self) -> str:
        return self.switch_direction(self.state.direction.other)

    def clear(self) -> None:
        self.state.reset()
        self._emit(EventType.INPUT_CHANGED, "")
        self._publish_output()

    # -- internal -----------------------------------------------------------

    def _retranslate(self) -> str:
        self.state.output_text = translate(self.state.input_text, self.state.direction)
        if self.debug:
            logger.debug(
                "Translated (%s): %r → %r",
                self.state.direction.value,
                self.state.input_text[:50],
                self.state.output_text[:50],
            )
        self._publish_output()
        return self.state.output_text

    def _publish_output(self) -> None:
        self._emit(
            EventType.OUTPUT_CHANGED,
            TranslationEventData(
                input_text=self.state.input_text,
                output_text=self.state.output_text,
                direction=self.state.direction,
            ),
        )

    def _emit(self, event_type: EventType, data) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(event_type, data)
