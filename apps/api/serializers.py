"""API serializers for tax calculation."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from rest_framework import serializers

from core.config import get_settings
from services.taxes import (
    DiscountMode,
    LineItem,
    TaxCalculationRequest,
    TaxMode,
    VatRate,
    WithholdingScheme,
)
from services.taxes.parsing import is_rate_input_allowed

MONEY = {"max_digits": 20, "decimal_places": 2}


class LineItemSerializer(serializers.Serializer):
    """Serializer for a document line item."""

    name = serializers.CharField(max_length=255)
    quantity = serializers.DecimalField(min_value=Decimal("0"), **MONEY)
    price = serializers.DecimalField(min_value=Decimal("0"), **MONEY)
    returned = serializers.DecimalField(
        min_value=Decimal("0"), required=False, default=Decimal("0"), **MONEY
    )
    discount = serializers.DecimalField(
        min_value=Decimal("0"), required=False, default=Decimal("0"), **MONEY
    )
    discount_mode = serializers.ChoiceField(
        choices=[mode.value for mode in DiscountMode],
        required=False,
        default=DiscountMode.PERCENT.value,
    )


class TaxCalculationInputSerializer(serializers.Serializer):
    """Serializer for a tax calculation request.

    Omitted tax choices fall back to the ``TAX_*`` settings.
    """

    subtotal = serializers.DecimalField(required=False, allow_null=True, **MONEY)
    items = LineItemSerializer(many=True, required=False)
    mode = serializers.ChoiceField(
        choices=[mode.value for mode in TaxMode],
        required=False,
        default=lambda: get_settings().tax.default_mode,
    )
    vat_rate = serializers.ChoiceField(
        choices=[rate.value for rate in VatRate],
        required=False,
        default=lambda: get_settings().tax.default_vat_rate,
    )
    withholding_scheme = serializers.ChoiceField(
        choices=[scheme.value for scheme in WithholdingScheme],
        required=False,
        default=lambda: get_settings().tax.default_withholding_scheme,
    )
    custom_rate = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=20,
        default=lambda: get_settings().tax.default_custom_rate,
        help_text="Custom PPh percentage; digits, comma and dot only",
    )
    freight_in = serializers.DecimalField(
        min_value=Decimal("0"), required=False, default=Decimal("0"), **MONEY
    )
    insurance = serializers.DecimalField(
        min_value=Decimal("0"), required=False, default=Decimal("0"), **MONEY
    )

    def validate_custom_rate(self, value: str) -> str:
        """Reject characters the rate field does not accept."""
        if not is_rate_input_allowed(value):
            raise serializers.ValidationError(
                "Only digits, comma and dot are allowed."
            )
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        """Require exactly one of subtotal and items."""
        has_subtotal = attrs.get("subtotal") is not None
        has_items = bool(attrs.get("items"))
        if has_subtotal == has_items:
            raise serializers.ValidationError(
                "Provide either a subtotal or line items, not both."
            )
        return attrs

    def to_request(self) -> TaxCalculationRequest:
        """Build the service request from validated data."""
        data = self.validated_data
        items = tuple(
            LineItem(
                name=item["name"],
                quantity=item["quantity"],
                price=item["price"],
                returned=item["returned"],
                discount=item["discount"],
                discount_mode=DiscountMode(item["discount_mode"]),
            )
            for item in data.get("items", [])
        )
        return TaxCalculationRequest(
            subtotal=data.get("subtotal"),
            items=items,
            mode=TaxMode(data["mode"]),
            vat_rate=VatRate(data["vat_rate"]),
            withholding_scheme=WithholdingScheme(data["withholding_scheme"]),
            custom_rate=data["custom_rate"],
            freight_in=data["freight_in"],
            insurance=data["insurance"],
        )


class TaxResultSerializer(serializers.Serializer):
    """Serializer for tax calculation results.

    Figures are sent as decimal strings so large totals keep every digit.
    """

    dpp = serializers.CharField(help_text="Whole rupiah, as a decimal string")
    ppn = serializers.CharField(help_text="Whole rupiah, as a decimal string")
    pph = serializers.CharField(help_text="Whole rupiah, as a decimal string")
    grand_total = serializers.CharField(help_text="Rupiah, as a decimal string")
    vat_percentage_applied = serializers.CharField()
    withholding_percentage_applied = serializers.CharField()
    withholding_scheme = serializers.CharField()
    mode = serializers.CharField()
    tax_method = serializers.CharField()
    formatted = serializers.DictField(child=serializers.CharField())


class HealthCheckSerializer(serializers.Serializer):
    """Serializer for health check response."""

    status = serializers.CharField()
    version = serializers.CharField()
    checks = serializers.DictField(child=serializers.DictField(child=serializers.CharField()))
