"""StateManager — owns the current calculator state and applies input events."""

from __future__ import annotations

import logging
from collections import deque

import keycalc.log  # registers TRACE level and logger.trace()
from keycalc.core.arithmetic import Operation
from keycalc.core.event_bus import EventBus
from keycalc.core.events import (
    INPUT_EVENTS,
    Event,
    EventType,
    StateChange,
    digit_event,
    operation_event,
    simple_event,
)
from keycalc.core.states import IDLE_STATE, CalculatorState
from keycalc.core.transitions import reduce

logger = logging.getLogger(__name__)


class StateManager:
    """Applies events one at a time and publishes STATE_CHANGED.

    The state value is replaced wholesale on each event.  An event dispatched
    from inside a STATE_CHANGED handler is queued and applied after the
    current one finishes, so events always apply in arrival order.
    """

    def __init__(self, event_bus: EventBus | None = None, debug: bool = False):
        self._state: CalculatorState = IDLE_STATE
        self.event_bus = event_bus
        self.debug = debug
        self._pending: deque[Event] = deque()
        self._dispatching = False

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    # -- bus wiring ----------------------------------------------------------

    def attach(self, event_bus: EventBus) -> None:
        """Subscribe to the input events published on *event_bus*."""
        self.event_bus = event_bus
        event_bus.subscribe_many(INPUT_EVENTS, self.dispatch)

    def detach(self) -> None:
        if self.event_bus is not None:
            self.event_bus.unsubscribe_many(INPUT_EVENTS, self.dispatch)

    # -- dispatch ------------------------------------------------------------

    def dispatch(self, event: Event) -> bool:
        """Apply *event*.  Returns True if the state changed.

        A reentrant call only queues the event and returns False.
        """
        self._pending.append(event)
        if self._dispatching:
            return False

        changed = False
        self._dispatching = True
        try:
            while self._pending:
                changed = self._apply(self._pending.popleft()) or changed
        finally:
            self._dispatching = False
        return changed

    def _apply(self, event: Event) -> bool:
        old = self._state
        new = reduce(old, event)
        if new == old:
            logger.trace("Ignored %s (data=%r) in %s", event.type.name, event.data, old.kind.name)  # type: ignore[attr-defined]
            return False

        self._state = new
        if self.debug:
            logger.debug(
                "State: %s %r → %s %r (on %s)",
                old.kind.name, old.display, new.kind.name, new.display, event.type.name,
            )
        if self.event_bus is not None:
            self.event_bus.publish(simple_event(EventType.STATE_CHANGED, StateChange(old, new, event)))
        return True

    # -- convenience ---------------------------------------------------------

    def on_digit(self, digit: str) -> bool:
        return self.dispatch(digit_event(digit))

    def on_decimal(self) -> bool:
        return self.dispatch(simple_event(EventType.DECIMAL_POINT))

    def on_operation(self, op: Operation | str) -> bool:
        return self.dispatch(operation_event(op))

    def on_calculate(self) -> bool:
        return self.dispatch(simple_event(EventType.CALCULATE))

    def on_clear(self) -> bool:
        return self.dispatch(simple_event(EventType.CLEAR))

    def on_clear_entry(self) -> bool:
        return self.dispatch(simple_event(EventType.CLEAR_ENTRY))

    def reset(self) -> None:
        """Drop queued events and return to the idle state silently."""
        self._pending.clear()
        self._state = IDLE_STATE
