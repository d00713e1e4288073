"""State definitions: one frozen dataclass per calculator state.

Each variant carries only the fields meaningful to it, so combinations such as
"pending operand without an operator" cannot be represented.  All variants
expose the same flat view (``display``, ``previous_value``, ``operation``,
``waiting_for_new_value``) for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from keycalc.core.arithmetic import Operation, format_number


class State(Enum):
    IDLE = auto()
    ARMED_FOR_OPERAND = auto()
    CHAINING = auto()
    RESULT_SHOWN = auto()


class CalculatorState:
    """Common flat view shared by all state variants."""

    kind: ClassVar[State]
    waiting_for_new_value: ClassVar[bool] = False

    display: str
    previous_value: float | None = None
    operation: Operation | None = None

    @property
    def has_pending_operation(self) -> bool:
        return self.operation is not None and self.previous_value is not None

    def pending_line(self) -> str:
        """Secondary display line, e.g. ``"12 +"``; empty when idle."""
        if not self.has_pending_operation:
            return ""
        return f"{format_number(self.previous_value)} {self.operation.symbol}"

    def snapshot(self) -> dict:
        return {
            'display': self.display,
            'previous_value': self.previous_value,
            'operation': self.operation.symbol if self.operation else None,
            'waiting_for_new_value': self.waiting_for_new_value,
        }


@dataclass(frozen=True)
class Idle(CalculatorState):
    """No pending operation; digits extend the display."""

    kind: ClassVar[State] = State.IDLE
    display: str = "0"


@dataclass(frozen=True)
class ResultShown(CalculatorState):
    """A result was just produced; the next digit starts a new number."""

    kind: ClassVar[State] = State.RESULT_SHOWN
    waiting_for_new_value: ClassVar[bool] = True
    display: str


@dataclass(frozen=True)
class ArmedForOperand(CalculatorState):
    """Operator pressed; the next digit starts the right-hand operand."""

    kind: ClassVar[State] = State.ARMED_FOR_OPERAND
    waiting_for_new_value: ClassVar[bool] = True
    display: str
    previous_value: float
    operation: Operation


@dataclass(frozen=True)
class Chaining(CalculatorState):
    """Right-hand operand is being typed."""

    kind: ClassVar[State] = State.CHAINING
    display: str
    previous_value: float
    operation: Operation


IDLE_STATE = Idle()
