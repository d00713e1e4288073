"""EventBus — pub/sub between the keypad, the keyboard and the state manager.

Publishing is synchronous: ``publish()`` returns only after every handler for
the event type has run.  A failing handler is logged and skipped so one broken
view cannot stop the calculator from receiving input.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Iterable

from keycalc.core.events import Event, EventType

logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


class EventBus:
    """Lightweight synchronous pub/sub bus."""

    def __init__(self):
        self._handlers: dict[EventType, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def subscribe_many(self, event_types: Iterable[EventType], handler: Handler) -> None:
        """Register one handler for several event types."""
        for event_type in event_types:
            self.subscribe(event_type, handler)

    def unsubscribe(self, event_type: EventType, handler: Handler) -> None:
        try:
            self._handlers[event_type].remove(handler)
        except ValueError:
            pass

    def unsubscribe_many(self, event_types: Iterable[EventType], handler: Handler) -> None:
        for event_type in event_types:
            self.unsubscribe(event_type, handler)

    def handler_count(self, event_type: EventType) -> int:
        return len(self._handlers.get(event_type, []))

    def publish(self, event: Event) -> None:
        """Dispatch event to all registered handlers synchronously."""
        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception("EventBus handler error for %s", event.type)
