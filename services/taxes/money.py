"""Rupiah amounts: conversion, rounding and id-ID display."""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Decimal

HALF = Decimal("0.5")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convert a number to Decimal.

    Floats go through ``repr`` so 0.1 becomes Decimal("0.1") rather than its
    binary expansion, and whole floats become plain integers.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return Decimal(int(value))
        return Decimal(repr(value))
    return Decimal(value)


def js_round(value: float) -> float:
    """
    Round a float to a whole number, halves toward positive infinity.

    Same result as the browser's ``Math.round``, which the dashboard has
    always used: the fraction is tested against 0.5 after flooring, so a
    product that lands just under .5 in binary rounds down.

    >>> js_round(2.5)
    3.0
    >>> js_round(-2.5)
    -2.0
    >>> js_round(26.499999999999996)
    26.0
    """
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    if value - floor >= 0.5:
        return float(floor + 1)
    return float(floor)


def round_half_up(value: Decimal) -> Decimal:
    """
    Round to the nearest whole rupiah, halves toward positive infinity.

    >>> round_half_up(Decimal("26499.5"))
    Decimal('26500')
    >>> round_half_up(Decimal("-2.5"))
    Decimal('-2')
    """
    return (value + HALF).to_integral_value(rounding=ROUND_FLOOR)


def format_rupiah(amount: Decimal | int | float) -> str:
    """
    Format an amount the way the dashboard shows it (id-ID, no decimals).

    >>> format_rupiah(Decimal("1083500"))
    'Rp 1.083.500'
    """
    whole = int(round_half_up(to_decimal(amount)))
    digits = f"{abs(whole):,}".replace(",", ".")
    sign = "-" if whole < 0 else ""
    return f"{sign}Rp {digits}"
