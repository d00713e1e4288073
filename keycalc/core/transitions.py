"""State transition rules: a pure reducer ``(state, event) -> state``.

Every function returns a new state value and never raises.  Events that do
not apply to the current state (second decimal point, ``=`` with nothing
pending, unknown operator symbols) return the *same* state object.
"""

from __future__ import annotations

import logging
import math

import keycalc.log  # registers TRACE level and logger.trace()
from keycalc.core.arithmetic import Operation, apply, format_number, parse_number
from keycalc.core.events import Event, EventType
from keycalc.core.states import (
    IDLE_STATE,
    ArmedForOperand,
    CalculatorState,
    Chaining,
    Idle,
    ResultShown,
)

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")


# ------------------------------------------------------------------
# Entry buffer
# ------------------------------------------------------------------

def _with_display(state: CalculatorState, display: str) -> CalculatorState:
    """Same variant, new display text; operands and waiting flag kept."""
    if isinstance(state, (ArmedForOperand, Chaining)):
        return type(state)(display, state.previous_value, state.operation)
    return type(state)(display)


def _start_entry(state: CalculatorState, display: str) -> CalculatorState:
    """Leave the waiting state with a fresh display."""
    if isinstance(state, ArmedForOperand):
        return Chaining(display, state.previous_value, state.operation)
    return Idle(display)


def input_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if not isinstance(digit, str) or digit not in DIGITS:
        logger.trace("Ignored digit payload %r", digit)  # type: ignore[attr-defined]
        return state
    if state.waiting_for_new_value:
        return _start_entry(state, digit)
    if state.display == "0":
        return _with_display(state, digit)
    return _with_display(state, state.display + digit)


def input_decimal(state: CalculatorState) -> CalculatorState:
    if state.waiting_for_new_value:
        return _start_entry(state, "0.")
    if "." not in state.display:
        return _with_display(state, state.display + ".")
    return state


# ------------------------------------------------------------------
# Reset
# ------------------------------------------------------------------

def clear(state: CalculatorState) -> CalculatorState:
    return IDLE_STATE


def clear_entry(state: CalculatorState) -> CalculatorState:
    """Reset only the display; a pending operation survives."""
    return _with_display(state, "0")


# ------------------------------------------------------------------
# Operation slot and evaluator
# ------------------------------------------------------------------

def set_operation(state: CalculatorState, op) -> CalculatorState:
    """Store *op* as the pending operator, folding any pending operation first.

    Chaining is strictly left to right: ``2 + 3 × 4`` is ``(2 + 3) × 4``.
    """
    next_op = Operation.from_symbol(op)
    if next_op is None:
        logger.trace("Ignored operation %r", op)  # type: ignore[attr-defined]
        return state

    input_value = parse_number(state.display)

    if not state.has_pending_operation:
        return ArmedForOperand(state.display, input_value, next_op)

    # A NaN pending operand folds as 0
    previous = state.previous_value
    if math.isnan(previous):
        previous = 0.0
    result = apply(state.operation, previous, input_value)
    return ArmedForOperand(format_number(result), result, next_op)


def calculate(state: CalculatorState) -> CalculatorState:
    if not state.has_pending_operation:
        return state
    result = apply(state.operation, state.previous_value, parse_number(state.display))
    return ResultShown(format_number(result))


# ------------------------------------------------------------------
# Dispatch
# ------------------------------------------------------------------

def reduce(state: CalculatorState, event: Event) -> CalculatorState:
    """Apply one input event; non-input events leave *state* untouched."""
    etype = event.type
    if etype is EventType.DIGIT:
        return input_digit(state, event.data)
    if etype is EventType.DECIMAL_POINT:
        return input_decimal(state)
    if etype is EventType.SET_OPERATION:
        return set_operation(state, event.data)
    if etype is EventType.CALCULATE:
        return calculate(state)
    if etype is EventType.CLEAR:
        return clear(state)
    if etype is EventType.CLEAR_ENTRY:
        return clear_entry(state)
    return state
