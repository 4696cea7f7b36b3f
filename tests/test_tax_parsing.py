"""Tests for custom rate parsing and rupiah helpers."""

from __future__ import annotations

import math
from decimal import Decimal

import pytest

from core.result import Failure, Success
from services.taxes.money import format_rupiah, js_round, round_half_up, to_decimal
from services.taxes.parsing import (
    RateParseError,
    coerce_rate,
    is_rate_input_allowed,
    parse_rate,
)


class TestParseRate:
    """Tests for parse_rate."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2", "2"),
            ("1,5", "1.5"),
            ("1.5", "1.5"),
            (" 3 ", "3"),
            ("2.5%", "2.5"),
            ("1.2.3", "1.2"),
            ("1,2,3", "1.2"),
            (".5", "0.5"),
            ("5.", "5"),
            ("-1", "-1"),
            ("1e2", "100"),
        ],
    )
    def test_parses_leading_number(self, text: str, expected: str) -> None:
        """The longest leading number is taken."""
        result = parse_rate(text)

        assert isinstance(result, Success)
        assert result.value == Decimal(expected)

    @pytest.mark.parametrize("text", ["", "   ", "abc", ",", ".", "%2"])
    def test_rejects_non_numbers(self, text: str) -> None:
        """Text not starting with a number is a failure."""
        result = parse_rate(text)

        assert isinstance(result, Failure)
        assert isinstance(result.error, RateParseError)
        assert result.error.text == text

    def test_error_string(self) -> None:
        """RateParseError renders the rejected text."""
        assert str(RateParseError(text="abc")) == "Rate is not a number: 'abc'"


class TestCoerceRate:
    """Tests for coerce_rate."""

    def test_valid_rate(self) -> None:
        """Valid text is parsed."""
        assert coerce_rate("0,75") == Decimal("0.75")

    def test_invalid_rate_is_zero(self) -> None:
        """Invalid text falls back to zero."""
        assert coerce_rate("abc") == Decimal("0")


class TestRateInputFilter:
    """Tests for is_rate_input_allowed."""

    @pytest.mark.parametrize("text", ["", "12", "1,5", "1.5", "0,,.", "007"])
    def test_allowed(self, text: str) -> None:
        """Digits, comma and dot pass the filter."""
        assert is_rate_input_allowed(text) is True

    @pytest.mark.parametrize("text", ["1%", "-1", "a", "1 5", "1e2"])
    def test_rejected(self, text: str) -> None:
        """Anything else is rejected."""
        assert is_rate_input_allowed(text) is False


class TestRoundHalfUp:
    """Tests for round_half_up."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("0.5", "1"),
            ("1.5", "2"),
            ("2.5", "3"),
            ("2.4999", "2"),
            ("26499.5", "26500"),
            ("-2.5", "-2"),
            ("-2.6", "-3"),
            ("7", "7"),
        ],
    )
    def test_rounds_halves_toward_positive_infinity(self, value: str, expected: str) -> None:
        """Halves go up, as in the dashboard's display rounding."""
        assert round_half_up(Decimal(value)) == Decimal(expected)


class TestJsRound:
    """Tests for js_round."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.5, 1.0),
            (2.5, 3.0),
            (2.4999, 2.0),
            (-2.5, -2.0),
            (-2.6, -3.0),
            (7.0, 7.0),
        ],
    )
    def test_rounds_halves_toward_positive_infinity(self, value: float, expected: float) -> None:
        """Halves go up, like Math.round."""
        assert js_round(value) == expected

    def test_just_below_half_rounds_down(self) -> None:
        """A binary product a hair under .5 is not rounded up."""
        # (1000 + 110) / 1.11 * 0.0265 in floating point
        assert js_round(((1000 + 1000 * 0.11) / 1.11) * 0.0265) == 26.0

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinity_passes_through(self, value: float) -> None:
        """Infinite figures are returned unchanged."""
        assert js_round(value) == value

    def test_nan_passes_through(self) -> None:
        """NaN is returned unchanged."""
        assert math.isnan(js_round(math.nan))


class TestRupiah:
    """Tests for rupiah conversion and formatting."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("1083500"), "Rp 1.083.500"),
            (Decimal("0"), "Rp 0"),
            (Decimal("999"), "Rp 999"),
            (Decimal("999.5"), "Rp 1.000"),
            (Decimal("-26500"), "-Rp 26.500"),
            (10000000000, "Rp 10.000.000.000"),
        ],
    )
    def test_format(self, amount: Decimal | int, expected: str) -> None:
        """Amounts are shown id-ID style without decimals."""
        assert format_rupiah(amount) == expected

    def test_to_decimal_float_keeps_short_spelling(self) -> None:
        """Floats keep their shortest decimal spelling."""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(5) == Decimal("5")
        assert to_decimal("12.5") == Decimal("12.5")

    def test_to_decimal_whole_float_is_integer(self) -> None:
        """Whole floats carry no fractional exponent."""
        assert str(to_decimal(1083500.0)) == "1083500"

    def test_to_decimal_infinity(self) -> None:
        """Infinite floats become infinite Decimals."""
        assert to_decimal(math.inf) == Decimal("Infinity")
