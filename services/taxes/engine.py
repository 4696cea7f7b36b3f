"""
Tax computation engine.

Turns a subtotal and a TaxConfiguration into DPP, PPN, PPh and the grand
total for Indonesian sales and purchase documents. The computation is pure:
the same configuration always yields the same TaxResult.

Figures are computed in binary floating point with the operation order the
dashboard has always used, so results agree to the rupiah with documents
already issued. dpp, ppn and pph are each rounded to whole rupiah before
they are combined into the grand total. PPh23 rounds its own figure before
that as well. Values become Decimal only in the returned TaxResult.
"""

from __future__ import annotations

from decimal import Decimal

from core.logging import get_logger
from services.taxes.money import js_round, to_decimal
from services.taxes.parsing import coerce_rate
from services.taxes.types import (
    TaxConfiguration,
    TaxMode,
    TaxResult,
    VatRate,
    WithholdingScheme,
)

logger = get_logger(__name__)

VAT_FRACTIONS: dict[VatRate, float] = {
    VatRate.ELEVEN: 0.11,
    VatRate.TWELVE: 0.12,
}

VAT_PERCENTAGES: dict[VatRate, int] = {
    VatRate.ELEVEN: 11,
    VatRate.TWELVE: 12,
}

INCLUSIVE_DIVISORS: dict[VatRate, float] = {
    VatRate.ELEVEN: 1.11,
    VatRate.TWELVE: 1.12,
}

PPH23_RATE = 0.0265
PPH23_BEFORE_TAX_DIVISOR = 1.11
PPH23_AFTER_TAX_DIVISOR = 1.011
PPH23_REPORTED_PERCENTAGE = Decimal("2")

# (upper bound on DPP inclusive, rate, reported percentage); None means unbounded
PPH22_TIERS: tuple[tuple[int | None, float, Decimal], ...] = (
    (500_000_000, 0.01, Decimal("1")),
    (10_000_000_000, 0.015, Decimal("1.5")),
    (None, 0.025, Decimal("2.5")),
)


def compute_dpp(subtotal: float, mode: TaxMode, vat_rate: VatRate) -> float:
    """Derive the unrounded taxable base."""
    if mode is TaxMode.AFTER_TAX:
        return subtotal / INCLUSIVE_DIVISORS[vat_rate]
    if vat_rate is VatRate.TWELVE:
        # Before-tax 12% still computes its base over 11/12 of the subtotal
        return (11 / 12) * subtotal
    return subtotal


def compute_ppn(dpp: float, mode: TaxMode, vat_rate: VatRate) -> float:
    """Derive the unrounded PPN from the unrounded DPP."""
    if mode is TaxMode.AFTER_TAX:
        return (dpp * VAT_PERCENTAGES[vat_rate]) / 100
    return dpp * VAT_FRACTIONS[vat_rate]


def _pph22_tier(dpp: float | Decimal) -> tuple[float, Decimal]:
    for upper_bound, rate, percentage in PPH22_TIERS:
        if upper_bound is None or dpp <= upper_bound:
            return rate, percentage
    raise AssertionError("PPH22_TIERS must end with an unbounded tier")


def pph22_percentage(dpp: float | Decimal) -> Decimal:
    """Return the PPh22 tier percentage for a DPP."""
    return _pph22_tier(dpp)[1]


def compute_pph(
    config: TaxConfiguration,
    cost_base: float,
    dpp: float,
    ppn: float,
) -> tuple[float, Decimal]:
    """
    Derive the withholding tax.

    cost_base is the subtotal plus additional costs; only PPh23 uses it.

    Returns:
        Tuple of (unrounded pph, reported percentage).
    """
    scheme = config.withholding_scheme

    if scheme is WithholdingScheme.PPH23:
        divisor = (
            PPH23_AFTER_TAX_DIVISOR
            if config.mode is TaxMode.AFTER_TAX
            else PPH23_BEFORE_TAX_DIVISOR
        )
        pph = js_round(((cost_base + ppn) / divisor) * PPH23_RATE)
        return pph, PPH23_REPORTED_PERCENTAGE

    if scheme is WithholdingScheme.PPH22:
        rate, percentage = _pph22_tier(dpp)
        return dpp * rate, percentage

    percentage = coerce_rate(config.custom_rate)
    # Overflowing rates become inf, never an exception
    rate = float(percentage) / 100
    return dpp * rate, percentage


def compute(config: TaxConfiguration) -> TaxResult:
    """
    Compute the taxes of a sales or purchase document.

    Never raises for out-of-domain numbers: a negative subtotal flows
    through the formulas, unparsable custom rates count as 0 and
    overflowing rates give infinite figures.

    Args:
        config: Subtotal and tax choices.

    Returns:
        TaxResult with whole-rupiah figures and the percentages applied.
    """
    subtotal = float(config.subtotal)
    additional_costs = float(config.additional_costs)
    cost_base = subtotal + additional_costs

    dpp_raw = compute_dpp(subtotal, config.mode, config.vat_rate)
    ppn_raw = compute_ppn(dpp_raw, config.mode, config.vat_rate)
    pph_raw, pph_percentage = compute_pph(config, cost_base, dpp_raw, ppn_raw)

    dpp = js_round(dpp_raw)
    ppn = js_round(ppn_raw)
    pph = js_round(pph_raw)

    if config.mode is TaxMode.AFTER_TAX:
        grand_total = dpp + ppn - pph + additional_costs
    else:
        # Before tax keeps the caller's subtotal, not the rounded DPP
        grand_total = cost_base + ppn - pph

    result = TaxResult(
        dpp=to_decimal(dpp),
        ppn=to_decimal(ppn),
        pph=to_decimal(pph),
        grand_total=to_decimal(grand_total),
        vat_percentage_applied=config.vat_rate.percentage,
        withholding_percentage_applied=pph_percentage,
        withholding_scheme=config.withholding_scheme,
        mode=config.mode,
    )

    logger.debug(
        "Computed taxes",
        mode=config.mode.value,
        vat_rate=config.vat_rate.value,
        scheme=config.withholding_scheme.value,
        dpp=str(result.dpp),
        ppn=str(result.ppn),
        pph=str(result.pph),
        grand_total=str(result.grand_total),
    )
    return result
