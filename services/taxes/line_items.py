"""Line items and the subtotal they feed into the tax computation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from services.taxes.money import to_decimal

if TYPE_CHECKING:
    from collections.abc import Iterable

ZERO = Decimal("0")


class DiscountMode(str, Enum):
    """How a line discount is expressed."""

    PERCENT = "percent"
    NOMINAL = "nominal"


@dataclass(frozen=True, slots=True)
class LineItem:
    """
    A document line.

    Attributes:
        name: Item name.
        quantity: Ordered quantity.
        price: Unit price in rupiah.
        returned: Quantity returned, deducted at the unit price.
        discount: Percentage or rupiah amount depending on discount_mode.
        discount_mode: How discount is expressed.
    """

    name: str
    quantity: Decimal
    price: Decimal
    returned: Decimal = ZERO
    discount: Decimal = ZERO
    discount_mode: DiscountMode = DiscountMode.PERCENT

    @property
    def line_total(self) -> Decimal:
        """Quantity times price, before returns and discount."""
        return to_decimal(self.quantity) * to_decimal(self.price)

    @property
    def gross(self) -> Decimal:
        """Line total net of returned quantity."""
        return self.line_total - to_decimal(self.returned) * to_decimal(self.price)

    @property
    def discount_amount(self) -> Decimal:
        """Discount in rupiah, never more than the line total."""
        discount = to_decimal(self.discount)
        if self.discount_mode is DiscountMode.PERCENT:
            amount = self.line_total * discount / Decimal("100")
        else:
            amount = discount
        return min(amount, self.line_total)


def compute_subtotal(items: Iterable[LineItem]) -> Decimal:
    """
    Sum line items into the subtotal handed to the tax engine.

    Discounts are taken off the summed gross, and the result never goes
    below zero.
    """
    lines = list(items)
    gross = sum((item.gross for item in lines), ZERO)
    discount = sum((item.discount_amount for item in lines), ZERO)
    return max(gross - discount, ZERO)


def additional_costs(
    freight_in: Decimal | int = ZERO,
    insurance: Decimal | int = ZERO,
) -> Decimal:
    """Costs outside the tax base that purchase documents carry."""
    return to_decimal(freight_in) + to_decimal(insurance)
