"""Health check endpoint for monitoring."""

from __future__ import annotations

from decimal import Decimal

from django.http import JsonResponse

from services.taxes import TaxConfiguration, compute

# PPh23, before tax, 11%: a known figure the engine must reproduce
_REFERENCE_SUBTOTAL = Decimal("1000000")
_REFERENCE_GRAND_TOTAL = Decimal("1083500")


def health_check(_request: object) -> JsonResponse:
    """
    Health check endpoint.

    Args:
        _request: Django HTTP request object (unused but required by Django).

    Returns:
        JsonResponse with health status.
    """
    checks = run_checks()
    all_healthy = all(check.get("status") == "healthy" for check in checks.values())

    health_status = {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }

    return JsonResponse(
        health_status,
        status=200 if all_healthy else 503,
    )


def run_checks() -> dict[str, dict[str, str]]:
    """Run every health check and return their statuses by name."""
    return {
        "tax_engine": _check_tax_engine(),
    }


def _check_tax_engine() -> dict[str, str]:
    """Check the engine still reproduces the reference computation."""
    result = compute(TaxConfiguration(subtotal=_REFERENCE_SUBTOTAL))
    if result.grand_total != _REFERENCE_GRAND_TOTAL:
        return {
            "status": "unhealthy",
            "error": f"expected {_REFERENCE_GRAND_TOTAL}, got {result.grand_total}",
        }
    return {"status": "healthy"}
