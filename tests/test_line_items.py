"""Tests for line items and subtotal computation."""

from __future__ import annotations

from decimal import Decimal

from services.taxes import DiscountMode, LineItem, compute_subtotal
from services.taxes.line_items import additional_costs


class TestLineItem:
    """Tests for LineItem."""

    def test_gross_without_returns(self) -> None:
        """Gross is quantity times price."""
        item = LineItem(name="Paper", quantity=Decimal("10"), price=Decimal("1000"))

        assert item.gross == Decimal("10000")

    def test_gross_deducts_returns(self) -> None:
        """Returned quantity is deducted at the unit price."""
        item = LineItem(
            name="Paper",
            quantity=Decimal("10"),
            price=Decimal("1000"),
            returned=Decimal("2"),
        )

        assert item.gross == Decimal("8000")

    def test_percent_discount_on_line_total(self) -> None:
        """Percent discounts apply to quantity times price."""
        item = LineItem(
            name="Paper",
            quantity=Decimal("10"),
            price=Decimal("1000"),
            returned=Decimal("2"),
            discount=Decimal("10"),
        )

        assert item.discount_amount == Decimal("1000")

    def test_nominal_discount(self) -> None:
        """Nominal discounts are taken as rupiah."""
        item = LineItem(
            name="Toner",
            quantity=Decimal("5"),
            price=Decimal("2000"),
            discount=Decimal("500"),
            discount_mode=DiscountMode.NOMINAL,
        )

        assert item.discount_amount == Decimal("500")

    def test_discount_capped_at_line_total(self) -> None:
        """A discount never exceeds the line total."""
        nominal = LineItem(
            name="Toner",
            quantity=Decimal("5"),
            price=Decimal("2000"),
            discount=Decimal("20000"),
            discount_mode=DiscountMode.NOMINAL,
        )
        percent = LineItem(
            name="Toner",
            quantity=Decimal("5"),
            price=Decimal("2000"),
            discount=Decimal("150"),
        )

        assert nominal.discount_amount == Decimal("10000")
        assert percent.discount_amount == Decimal("10000")


class TestComputeSubtotal:
    """Tests for compute_subtotal."""

    def test_sums_items_net_of_discounts(self) -> None:
        """Subtotal is summed gross minus summed discounts."""
        items = [
            LineItem(
                name="Paper",
                quantity=Decimal("10"),
                price=Decimal("1000"),
                returned=Decimal("2"),
                discount=Decimal("10"),
            ),
            LineItem(
                name="Toner",
                quantity=Decimal("5"),
                price=Decimal("2000"),
                discount=Decimal("500"),
                discount_mode=DiscountMode.NOMINAL,
            ),
        ]

        assert compute_subtotal(items) == Decimal("16500")

    def test_never_negative(self) -> None:
        """Discounts on fully returned lines cannot push the subtotal below zero."""
        items = [
            LineItem(
                name="Paper",
                quantity=Decimal("2"),
                price=Decimal("1000"),
                returned=Decimal("2"),
                discount=Decimal("2000"),
                discount_mode=DiscountMode.NOMINAL,
            ),
        ]

        assert compute_subtotal(items) == Decimal("0")

    def test_empty(self) -> None:
        """No items, zero subtotal."""
        assert compute_subtotal([]) == Decimal("0")

    def test_accepts_generator(self) -> None:
        """Items may be any iterable."""
        items = (
            LineItem(name=f"Item {i}", quantity=Decimal("1"), price=Decimal("100"))
            for i in range(3)
        )

        assert compute_subtotal(items) == Decimal("300")


class TestAdditionalCosts:
    """Tests for additional_costs."""

    def test_sums_freight_and_insurance(self) -> None:
        """Freight-in and insurance are added together."""
        assert additional_costs(Decimal("60000"), Decimal("50000")) == Decimal("110000")

    def test_defaults_to_zero(self) -> None:
        """Sales documents carry no additional costs."""
        assert additional_costs() == Decimal("0")
