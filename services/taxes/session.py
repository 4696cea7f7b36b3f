"""
Caller-owned tax configuration state.

A TaxCalculationSession holds what the user has chosen so far on a sales or
purchase form. Every mutation recomputes the taxes synchronously and hands
the new TaxResult to the registered listeners.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from core.config import get_settings
from core.logging import get_logger
from services.taxes.engine import compute
from services.taxes.parsing import is_rate_input_allowed
from services.taxes.types import (
    TaxConfiguration,
    TaxMode,
    TaxResult,
    VatRate,
    WithholdingScheme,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    TaxListener = Callable[[TaxResult], None]

logger = get_logger(__name__)


def default_configuration(subtotal: Decimal = Decimal("0")) -> TaxConfiguration:
    """Build the initial configuration from the ``TAX_*`` settings."""
    tax_settings = get_settings().tax
    return TaxConfiguration(
        subtotal=subtotal,
        mode=TaxMode(tax_settings.default_mode),
        vat_rate=VatRate(tax_settings.default_vat_rate),
        withholding_scheme=WithholdingScheme(tax_settings.default_withholding_scheme),
        custom_rate=tax_settings.default_custom_rate,
    )


class TaxCalculationSession:
    """
    Current tax configuration of one document being edited.

    Example:
        >>> session = TaxCalculationSession()
        >>> unsubscribe = session.subscribe(send_to_form)
        >>> session.update(subtotal=Decimal("1000000")).grand_total
        Decimal('1083500')
    """

    def __init__(
        self,
        config: TaxConfiguration | None = None,
        *,
        listeners: Iterable[TaxListener] = (),
    ) -> None:
        """
        Initialize the session and compute the initial result.

        Listeners given here are not notified of the initial result.

        Args:
            config: Starting configuration (defaults from settings).
            listeners: Callbacks receiving every recomputed result.
        """
        self._config = config if config is not None else default_configuration()
        self._listeners: list[TaxListener] = list(listeners)
        self._result = compute(self._config)

    @property
    def configuration(self) -> TaxConfiguration:
        """Current configuration."""
        return self._config

    @property
    def result(self) -> TaxResult:
        """Result of the current configuration."""
        return self._result

    def subscribe(self, listener: TaxListener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: Any) -> TaxResult:
        """
        Apply configuration changes and recompute.

        Args:
            **changes: TaxConfiguration fields to replace.

        Returns:
            The new TaxResult.
        """
        self._config = self._config.with_changes(**changes)
        logger.debug("Tax configuration changed", fields=sorted(changes))
        return self.recompute()

    def set_custom_rate_text(self, text: str) -> bool:
        """
        Apply text typed into the custom rate field.

        Text with characters other than digits, comma and dot is rejected
        and the configuration stays as it was.

        Returns:
            True if the text was accepted.
        """
        if not is_rate_input_allowed(text):
            logger.debug("Custom rate input rejected", text=text)
            return False
        self.update(custom_rate=text)
        return True

    def recompute(self) -> TaxResult:
        """Recompute the result from scratch and notify listeners."""
        self._result = compute(self._config)
        for listener in list(self._listeners):
            listener(self._result)
        return self._result
