"""API views for tax calculation."""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.serializers import (
    HealthCheckSerializer,
    TaxCalculationInputSerializer,
    TaxResultSerializer,
)
from core.health import run_checks
from core.logging import bind_context, clear_context, get_logger
from services.taxes import TaxCalculatorService, TaxResult
from services.taxes.money import format_rupiah

logger = get_logger(__name__)

API_VERSION = "0.1.0"


class TaxCalculationView(APIView):
    """
    Compute PPN, PPh and the grand total of a sales or purchase document.

    The dashboard posts the current tax choices every time one of them
    changes and renders the figures it gets back.
    """

    permission_classes = []

    def post(self, request: Request) -> Response:
        """Validate the tax choices and return the computed figures."""
        input_serializer = TaxCalculationInputSerializer(data=request.data)
        if not input_serializer.is_valid():
            return Response(
                input_serializer.errors,
                status=status.HTTP_400_BAD_REQUEST,
            )

        tax_request = input_serializer.to_request()
        bind_context(
            mode=tax_request.mode.value,
            vat_rate=tax_request.vat_rate.value,
            withholding_scheme=tax_request.withholding_scheme.value,
        )
        try:
            result = TaxCalculatorService().calculate(tax_request)
        finally:
            clear_context()

        if result.is_failure():
            logger.warning("Tax calculation rejected", error=str(result.error))
            return Response(
                {"error": result.error.message},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = TaxResultSerializer(self._build_payload(result.value))
        return Response(serializer.data, status=status.HTTP_200_OK)

    def _build_payload(self, tax_result: TaxResult) -> dict[str, object]:
        """Result fields plus their rupiah display strings."""
        payload = tax_result.as_dict()
        payload["formatted"] = {
            "dpp": format_rupiah(tax_result.dpp),
            "ppn": format_rupiah(tax_result.ppn),
            "pph": format_rupiah(tax_result.pph),
            "grand_total": format_rupiah(tax_result.grand_total),
        }
        return payload


class HealthCheckView(APIView):
    """
    API health check endpoint.

    Returns the health status of the API and the tax engine.
    """

    permission_classes = []  # No auth required for health check

    def get(self, request: Request) -> Response:
        """Return health status."""
        checks = run_checks()
        all_healthy = all(check.get("status") == "healthy" for check in checks.values())

        health_data = {
            "status": "healthy" if all_healthy else "degraded",
            "version": API_VERSION,
            "checks": checks,
        }

        serializer = HealthCheckSerializer(data=health_data)
        serializer.is_valid()
        return Response(
            serializer.data,
            status=status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        )
