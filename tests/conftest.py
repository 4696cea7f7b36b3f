"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from core.config import get_settings
from services.taxes import TaxConfiguration, TaxMode, VatRate, WithholdingScheme


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so environment overrides never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def api_client() -> APIClient:
    """Create an API test client."""
    return APIClient()


@pytest.fixture()
def before_tax_config() -> TaxConfiguration:
    """PPh23, before tax, 11% on one million rupiah."""
    return TaxConfiguration(
        subtotal=Decimal("1000000"),
        mode=TaxMode.BEFORE_TAX,
        vat_rate=VatRate.ELEVEN,
        withholding_scheme=WithholdingScheme.PPH23,
    )
