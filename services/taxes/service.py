"""Tax calculation service."""

from __future__ import annotations

from core.logging import get_logger
from core.result import Result, failure, success
from services.taxes.engine import compute
from services.taxes.line_items import additional_costs, compute_subtotal
from services.taxes.money import to_decimal
from services.taxes.types import TaxCalculationRequest, TaxConfiguration, TaxResult

logger = get_logger(__name__)


class TaxCalculatorError(Exception):
    """Error during tax calculation."""

    def __init__(self, message: str) -> None:
        """Initialize with error message."""
        self.message = message
        super().__init__(message)


class TaxCalculatorService:
    """
    Service for calculating PPN and PPh on sales and purchase documents.

    Sales documents pass no freight or insurance; purchase documents pass
    them so they count toward the PPh23 base and the grand total.
    """

    def calculate(
        self,
        request: TaxCalculationRequest,
    ) -> Result[TaxResult, TaxCalculatorError]:
        """
        Calculate taxes for a document.

        Args:
            request: Subtotal or line items plus the tax choices.

        Returns:
            Result containing TaxResult or TaxCalculatorError.
        """
        has_subtotal = request.subtotal is not None
        has_items = bool(request.items)

        if has_subtotal == has_items:
            logger.warning(
                "Invalid tax request",
                has_subtotal=has_subtotal,
                item_count=len(request.items),
            )
            return failure(
                TaxCalculatorError("Provide either a subtotal or line items, not both")
            )

        if request.subtotal is not None:
            subtotal = to_decimal(request.subtotal)
        else:
            subtotal = compute_subtotal(request.items)

        config = TaxConfiguration(
            subtotal=subtotal,
            mode=request.mode,
            vat_rate=request.vat_rate,
            withholding_scheme=request.withholding_scheme,
            custom_rate=request.custom_rate,
            additional_costs=additional_costs(request.freight_in, request.insurance),
        )
        return success(compute(config))

    def calculate_batch(
        self,
        requests: list[TaxCalculationRequest],
    ) -> list[Result[TaxResult, TaxCalculatorError]]:
        """
        Calculate taxes for multiple documents.

        Args:
            requests: List of tax calculation requests.

        Returns:
            List of Results, one per request.
        """
        return [self.calculate(req) for req in requests]
