"""Indonesian PPN/PPh tax computation package."""

from services.taxes.engine import compute
from services.taxes.line_items import DiscountMode, LineItem, compute_subtotal
from services.taxes.service import TaxCalculatorError, TaxCalculatorService
from services.taxes.session import TaxCalculationSession
from services.taxes.types import (
    TaxCalculationRequest,
    TaxConfiguration,
    TaxMode,
    TaxResult,
    VatRate,
    WithholdingScheme,
)

__all__ = [
    "DiscountMode",
    "LineItem",
    "TaxCalculationRequest",
    "TaxCalculationSession",
    "TaxCalculatorError",
    "TaxCalculatorService",
    "TaxConfiguration",
    "TaxMode",
    "TaxResult",
    "VatRate",
    "WithholdingScheme",
    "compute",
    "compute_subtotal",
]
