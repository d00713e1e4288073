"""Evaluator: binary operations and number <-> display text conversion.

The display text is the source of truth for the operand being typed, so two
helpers convert between it and floats:

- ``parse_number`` reads the longest leading decimal literal (``"5."`` is 5,
  ``"1e+21"`` is 1e21) and yields NaN when there is none.
- ``format_number`` renders the shortest round-trippable text, without a
  trailing ``.0`` for integral values and in fixed notation for ordinary
  magnitudes.

Division by zero yields 0, not an error and not infinity.  This is a known
quirk kept for compatibility with existing keypads.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from enum import Enum


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol) -> Operation | None:
        """Return the operation for *symbol*, or None if it is not one."""
        if isinstance(symbol, cls):
            return symbol
        if not isinstance(symbol, str):
            return None
        return _SYMBOLS.get(symbol)


_SYMBOLS: dict[str, Operation] = {op.value: op for op in Operation}
# ASCII keyboard aliases and the typographic minus used on the keypad
_SYMBOLS.update({"*": Operation.MULTIPLY, "/": Operation.DIVIDE, "−": Operation.SUBTRACT})

_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Fixed notation is used for decimal exponents in (-6, 21]
_MAX_FIXED_EXP = 21
_MIN_FIXED_EXP = -6


def apply(op: Operation, a: float, b: float) -> float:
    """Apply *op* to ``a`` and ``b``; ``a ÷ 0`` is 0."""
    if op is Operation.ADD:
        return a + b
    if op is Operation.SUBTRACT:
        return a - b
    if op is Operation.MULTIPLY:
        return a * b
    if op is Operation.DIVIDE:
        return a / b if b != 0 else 0.0
    raise ValueError(f"Unsupported operation: {op!r}")


def parse_number(text: str) -> float:
    m = _NUMBER_PREFIX.match(text.lstrip())
    if m is None:
        return math.nan
    return float(m.group(0))


def format_number(value: float) -> str:
    """Render *value* the way a keypad display shows it.

    >>> format_number(20.0)
    '20'
    >>> format_number(0.1 + 0.2)
    '0.30000000000000004'
    >>> format_number(1e21)
    '1e+21'
    """
    if math.isnan(value):
        return "NaN"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)
    if math.isinf(value):
        return "Infinity"

    # repr() is the shortest text that round-trips to the same float
    _sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = exponent + k  # position of the decimal point relative to digits

    if k <= n <= _MAX_FIXED_EXP:
        return digits + "0" * (n - k)
    if 0 < n <= _MAX_FIXED_EXP:
        return digits[:n] + "." + digits[n:]
    if _MIN_FIXED_EXP < n <= 0:
        return "0." + "0" * (-n) + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
