"""Tests for keycalc.core.arithmetic — apply, parse_number, format_number."""

from __future__ import annotations

import math

import pytest

from keycalc.core.arithmetic import Operation, apply, format_number, parse_number


class TestApply:

    def test_basic_operations(self):
        assert apply(Operation.ADD, 2, 3) == 5
        assert apply(Operation.SUBTRACT, 2, 3) == -1
        assert apply(Operation.MULTIPLY, 2, 3) == 6
        assert apply(Operation.DIVIDE, 3, 2) == 1.5

    @pytest.mark.parametrize("a", [0.0, 1.0, -7.5, 1e300])
    def test_divide_by_zero_is_zero(self, a):
        result = apply(Operation.DIVIDE, a, 0.0)
        assert result == 0
        assert not math.isnan(result) and not math.isinf(result)

    def test_divide_by_negative_zero_is_zero(self):
        assert apply(Operation.DIVIDE, 5.0, -0.0) == 0


class TestOperationSymbols:

    def test_from_symbol(self):
        assert Operation.from_symbol("+") is Operation.ADD
        assert Operation.from_symbol("×") is Operation.MULTIPLY
        assert Operation.from_symbol("÷") is Operation.DIVIDE

    def test_ascii_aliases(self):
        assert Operation.from_symbol("*") is Operation.MULTIPLY
        assert Operation.from_symbol("/") is Operation.DIVIDE
        assert Operation.from_symbol("−") is Operation.SUBTRACT

    def test_unknown_symbol(self):
        assert Operation.from_symbol("%") is None
        assert Operation.from_symbol(None) is None
        assert Operation.from_symbol(["+"]) is None

    def test_operation_passes_through(self):
        assert Operation.from_symbol(Operation.SUBTRACT) is Operation.SUBTRACT


class TestParseNumber:

    @pytest.mark.parametrize("text,expected", [
        ("0", 0.0),
        ("12", 12.0),
        ("5.", 5.0),
        ("0.", 0.0),
        ("0.25", 0.25),
        ("-3.5", -3.5),
        ("1e+21", 1e21),
        ("1.5e-7", 1.5e-7),
    ])
    def test_numeric_text(self, text, expected):
        assert parse_number(text) == expected

    def test_reads_longest_numeric_prefix(self):
        assert parse_number("1e+215") == 1e215
        assert parse_number("1e+21.") == 1e21
        assert parse_number("12abc") == 12.0

    def test_infinity(self):
        assert parse_number("Infinity") == math.inf
        assert parse_number("-Infinity") == -math.inf

    def test_non_numeric_is_nan(self):
        assert math.isnan(parse_number("NaN"))
        assert math.isnan(parse_number("abc"))


class TestFormatNumber:

    @pytest.mark.parametrize("value,text", [
        (20.0, "20"),
        (0.0, "0"),
        (-0.0, "0"),
        (-4.0, "-4"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1 / 3, "0.3333333333333333"),
        (123456789.0, "123456789"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (-2.5e-8, "-2.5e-8"),
    ])
    def test_display_text(self, value, text):
        assert format_number(value) == text

    def test_special_values(self):
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"

    def test_integral_results_have_no_decimal_point(self):
        for n in (1.0, 10.0, 99999.0, 2.0 ** 52):
            assert "." not in format_number(n)
            assert "e" not in format_number(n)
