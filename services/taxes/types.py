"""Types for the tax computation engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from services.taxes.line_items import LineItem


class TaxMode(str, Enum):
    """Whether the subtotal excludes tax (added on top) or includes it."""

    BEFORE_TAX = "before_tax"
    AFTER_TAX = "after_tax"

    @property
    def label(self) -> str:
        """Tax method label recorded on sales and purchase documents."""
        if self is TaxMode.AFTER_TAX:
            return "After Calculate"
        return "Before Calculate"


class VatRate(str, Enum):
    """PPN percentage in force."""

    ELEVEN = "11"
    TWELVE = "12"

    @property
    def percentage(self) -> Decimal:
        """Rate as a whole percentage (11 or 12)."""
        return Decimal(self.value)

    @property
    def fraction(self) -> Decimal:
        """Rate as a fraction (0.11 or 0.12)."""
        return Decimal(f"0.{self.value}")


class WithholdingScheme(str, Enum):
    """PPh withholding regime."""

    PPH22 = "pph22"
    PPH23 = "pph23"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class TaxConfiguration:
    """
    Input of a single tax computation.

    Attributes:
        subtotal: Pre-tax base figure supplied by the caller.
        mode: Whether the subtotal is tax-exclusive or tax-inclusive.
        vat_rate: PPN percentage in force.
        withholding_scheme: PPh regime.
        custom_rate: Free-text percentage, only used by the custom scheme.
            Comma is accepted as decimal separator; unparsable text means 0.
        additional_costs: Costs outside the tax base that still feed the
            PPh23 base and the grand total (freight-in, insurance).
    """

    subtotal: Decimal
    mode: TaxMode = TaxMode.BEFORE_TAX
    vat_rate: VatRate = VatRate.ELEVEN
    withholding_scheme: WithholdingScheme = WithholdingScheme.PPH23
    custom_rate: str = "0"
    additional_costs: Decimal = Decimal("0")

    def with_changes(self, **changes: Any) -> TaxConfiguration:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class TaxResult:
    """
    Output of a tax computation.

    Monetary figures are whole rupiah.

    Attributes:
        dpp: Taxable base (Dasar Pengenaan Pajak).
        ppn: Value-added tax.
        pph: Withholding tax.
        grand_total: Final payable/receivable amount.
        vat_percentage_applied: 11 or 12.
        withholding_percentage_applied: Reported PPh percentage. Fixed at 2
            for PPh23 even though 2.65% is used in the formula.
        withholding_scheme: Scheme the figures were computed under.
        mode: Mode the figures were computed under.
    """

    dpp: Decimal
    ppn: Decimal
    pph: Decimal
    grand_total: Decimal
    vat_percentage_applied: Decimal
    withholding_percentage_applied: Decimal
    withholding_scheme: WithholdingScheme
    mode: TaxMode

    @property
    def tax_method(self) -> str:
        """Tax method label of the mode used."""
        return self.mode.label

    def as_dict(self) -> dict[str, Any]:
        """Return a plain dict suitable for JSON transport."""
        return {
            "dpp": self.dpp,
            "ppn": self.ppn,
            "pph": self.pph,
            "grand_total": self.grand_total,
            "vat_percentage_applied": self.vat_percentage_applied,
            "withholding_percentage_applied": self.withholding_percentage_applied,
            "withholding_scheme": self.withholding_scheme.value,
            "mode": self.mode.value,
            "tax_method": self.tax_method,
        }


@dataclass(frozen=True, slots=True)
class TaxCalculationRequest:
    """
    Request for the tax calculator service.

    Exactly one of subtotal and items must be given.

    Attributes:
        subtotal: Pre-tax figure already summed by the caller.
        items: Line items to sum into the subtotal instead.
        mode: Whether the subtotal is tax-exclusive or tax-inclusive.
        vat_rate: PPN percentage in force.
        withholding_scheme: PPh regime.
        custom_rate: Free-text custom PPh percentage.
        freight_in: Purchase freight cost, outside the tax base.
        insurance: Purchase insurance cost, outside the tax base.
    """

    subtotal: Decimal | None = None
    items: tuple[LineItem, ...] = ()
    mode: TaxMode = TaxMode.BEFORE_TAX
    vat_rate: VatRate = VatRate.ELEVEN
    withholding_scheme: WithholdingScheme = WithholdingScheme.PPH23
    custom_rate: str = "0"
    freight_in: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
