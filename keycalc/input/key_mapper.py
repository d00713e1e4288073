"""key name ↔ core event mapping helpers."""

from __future__ import annotations

import re

from keycalc.core.arithmetic import Operation
from keycalc.core.events import Event, EventType, digit_event, operation_event, simple_event

# Qt.Key values for the non-printing keys (avoid importing PyQt5 here)
QT_KEY_ESCAPE = 0x01000000
QT_KEY_BACKSPACE = 0x01000003
QT_KEY_RETURN = 0x01000004
QT_KEY_ENTER = 0x01000005

QT_KEY_NAMES: dict[int, str] = {
    QT_KEY_ESCAPE: "Escape",
    QT_KEY_BACKSPACE: "Backspace",
    QT_KEY_RETURN: "Return",
    QT_KEY_ENTER: "Enter",
}

KEY_TO_OPERATION: dict[str, Operation] = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "−": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "×": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
    "÷": Operation.DIVIDE,
}

KEY_TO_EVENT_TYPE: dict[str, EventType] = {
    ".": EventType.DECIMAL_POINT,
    ",": EventType.DECIMAL_POINT,   # keypad decimal on some layouts
    "Enter": EventType.CALCULATE,
    "Return": EventType.CALCULATE,
    "=": EventType.CALCULATE,
    "Escape": EventType.CLEAR,
    "Esc": EventType.CLEAR,
    "Backspace": EventType.CLEAR_ENTRY,
}

# Named keys first, then any single character
_TOKEN_RE = re.compile(r"Enter|Return|Escape|Esc|Backspace|\S")


def key_to_event(key: str) -> Event | None:
    """Return the core event for *key*, or None if the key is not bound."""
    if not key:
        return None
    if len(key) == 1 and key in "0123456789":
        return digit_event(key)
    op = KEY_TO_OPERATION.get(key)
    if op is not None:
        return operation_event(op)
    event_type = KEY_TO_EVENT_TYPE.get(key)
    if event_type is not None:
        return simple_event(event_type)
    return None


def qt_key_name(key_code: int, text: str = "") -> str:
    """Key name for a Qt key press: named keys by code, others by typed text."""
    return QT_KEY_NAMES.get(key_code, text)


def tokenize(line: str) -> list[str]:
    """Split terminal input like ``12+8=`` or ``12 + 8 Enter`` into key names."""
    return _TOKEN_RE.findall(line)
