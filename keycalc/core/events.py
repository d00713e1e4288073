"""Typed event definitions (dataclasses)."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from keycalc.core.arithmetic import Operation


class EventType(Enum):
    # Input events
    DIGIT = auto()
    DECIMAL_POINT = auto()
    SET_OPERATION = auto()
    CALCULATE = auto()
    CLEAR = auto()
    CLEAR_ENTRY = auto()
    # State
    STATE_CHANGED = auto()
    # Presentation
    THEME_CHANGED = auto()
    # App lifecycle
    APP_QUIT = auto()


INPUT_EVENTS: frozenset[EventType] = frozenset({
    EventType.DIGIT,
    EventType.DECIMAL_POINT,
    EventType.SET_OPERATION,
    EventType.CALCULATE,
    EventType.CLEAR,
    EventType.CLEAR_ENTRY,
})


@dataclass
class Event:
    type: EventType
    data: Any
    timestamp: float


@dataclass
class StateChange:
    previous: Any       # CalculatorState
    current: Any        # CalculatorState
    trigger: Event


def digit_event(digit: str) -> Event:
    return Event(EventType.DIGIT, digit, time.time())


def operation_event(op: Operation) -> Event:
    return Event(EventType.SET_OPERATION, op, time.time())


def simple_event(event_type: EventType, data: Any = None) -> Event:
    return Event(event_type, data, time.time())
