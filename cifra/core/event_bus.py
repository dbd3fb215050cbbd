"""EventBus — pub/sub between the translation session and its views."""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from typing import Any, Callable

from cifra.core.events import Event, EventType

logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


class EventBus:
    """Synchronous pub/sub bus; handlers run on the publisher's thread."""

    def __init__(self):
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        try:
            self._handlers[event_type].remove(handler)
        except ValueError:
            pass

    def publish(self, event: Event) -> None:
        """Dispatch *event* to every handler, isolating handler failures."""
        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception("EventBus handler error for %s", event.type)

    def emit(self, event_type: EventType, data: Any = None) -> Event:
        """Build a timestamped event, publish it and return it."""
        event = Event(type=event_type, data=data, timestamp=time.time())
        self.publish(event)
        return event
