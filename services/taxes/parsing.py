"""Parsing of the free-text custom PPh rate."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from core.logging import get_logger
from core.result import Result, failure, success

logger = get_logger(__name__)

# Longest leading decimal literal, same prefix rule as a browser's parseFloat
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_ALLOWED_INPUT = re.compile(r"[0-9,.]*")

ZERO = Decimal("0")


@dataclass(frozen=True, slots=True)
class RateParseError:
    """
    Rate text that does not start with a number.

    Attributes:
        text: The rejected input.
        message: Human-readable reason.
    """

    text: str
    message: str = "Rate is not a number"

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.message}: {self.text!r}"


def parse_rate(text: str) -> Result[Decimal, RateParseError]:
    """
    Parse a percentage typed by the user.

    The first comma is read as the decimal separator and trailing garbage
    after the number is ignored, so "1,5" and "1.5%" both give 1.5.

    Args:
        text: Raw input text.

    Returns:
        Result containing the percentage or a RateParseError.
    """
    normalized = text.strip().replace(",", ".", 1)
    match = _LEADING_NUMBER.match(normalized)
    if match is None:
        return failure(RateParseError(text=text))
    return success(Decimal(match.group()))


def coerce_rate(text: str) -> Decimal:
    """Parse a percentage, falling back to 0 for unparsable text."""
    result = parse_rate(text)
    if result.is_failure():
        logger.debug("Custom rate unparsable, using 0", text=text)
    return result.unwrap_or(ZERO)


def is_rate_input_allowed(text: str) -> bool:
    """Check whether text may be typed into the rate field (digits, comma, dot)."""
    return _ALLOWED_INPUT.fullmatch(text) is not None
