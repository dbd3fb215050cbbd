"""Typed event definitions (dataclasses)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from cifra.core.translator import Direction


class EventType(Enum):
    # Session events
    INPUT_CHANGED = auto()
    OUTPUT_CHANGED = auto()
    DIRECTION_CHANGED = auto()
    SYMBOL_TAPPED = auto()
    # Config
    CONFIG_CHANGED = auto()
    # App lifecycle
    APP_QUIT = auto()


@dataclass
class Event:
    type: EventType
    data: Any
    timestamp: float


@dataclass
class TranslationEventData:
    input_text: str
    output_text: str
    direction: Direction


@dataclass
class DirectionEventData:
    previous: Direction
    current: Direction
