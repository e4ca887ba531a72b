"""Pytest configuration and fixtures for the DVC pricing engine tests.

This module provides reusable fixtures for testing:
- The bundled chart registry and pricing table
- A small synthetic registry with deliberate data gaps
- Service instances wired to either registry
"""

import os
from typing import Any, Generator

import pytest

# === Environment Setup ===

# Tests always run against the bundled data and without a service fee
os.environ.pop("DVC_CHART_DATA_DIR", None)
os.environ.setdefault("DVC_SERVICE_FEE_PCT", "0")


# === Cache Fixtures ===


@pytest.fixture(autouse=True)
def reset_cached_services() -> Generator[None, None, None]:
    """Reset cached registries and services before and after each test."""
    from dvc_pricing.api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === Bundled Data Fixtures ===


@pytest.fixture
def registry() -> Any:
    """Chart registry loaded from the bundled data."""
    from dvc_pricing.services.chart_registry import ChartRegistry

    return ChartRegistry.from_directory()


@pytest.fixture
def quote_service(registry: Any) -> Any:
    """Quote service over the bundled charts, without a service fee."""
    from dvc_pricing.services.quote import PointsQuoteService

    return PointsQuoteService(registry=registry, service_fee_pct=0)


@pytest.fixture
def cap_service() -> Any:
    """Cap service over the bundled pricing table."""
    from dvc_pricing.services.pricing_caps import PricingCapService

    return PricingCapService()


@pytest.fixture
def payout_service() -> Any:
    """Payout schedule service."""
    from dvc_pricing.services.payouts import PayoutScheduleService

    return PayoutScheduleService()


# === Synthetic Data Fixtures ===


@pytest.fixture
def sample_resorts() -> list[dict[str, Any]]:
    """Two resorts: TST has a 2026 chart, NOC has no chart at all."""
    return [
        {
            "code": "TST",
            "name": "Test Villas",
            "category": "REGULAR",
            "room_types": ["STUDIO", "ONEBR"],
            "views_by_room": {"STUDIO": ["S", "P"], "ONEBR": ["S"]},
        },
        {
            "code": "NOC",
            "name": "No Chart Villas",
            "category": "ADVANTAGE",
            "room_types": ["STUDIO"],
            "views_by_room": {"STUDIO": ["S"]},
        },
    ]


@pytest.fixture
def sample_charts() -> list[dict[str, Any]]:
    """TST 2026 chart.

    Period 1 covers Jan 1 - Jun 30 and has no STUDIO/P rate.
    Period 2 covers Jul 1 - Dec 25; Dec 26-31 is not covered.
    """
    return [
        {
            "resort_code": "TST",
            "year": 2026,
            "periods": [
                {
                    "id": 1,
                    "name": "First half",
                    "ranges": [{"start": "2026-01-01", "end": "2026-06-30"}],
                    "points": {
                        "STUDIO": {"S": {"sun_thu": 10, "fri_sat": 12}},
                        "ONEBR": {"S": {"sun_thu": 20, "fri_sat": 24}},
                    },
                },
                {
                    "id": 2,
                    "name": "Second half",
                    "ranges": [{"start": "2026-07-01", "end": "2026-12-25"}],
                    "points": {
                        "STUDIO": {
                            "S": {"sun_thu": 15, "fri_sat": 18},
                            "P": {"sun_thu": 17, "fri_sat": 20},
                        },
                        "ONEBR": {"S": {"sun_thu": 30, "fri_sat": 36}},
                    },
                },
            ],
        }
    ]


@pytest.fixture
def sample_registry(
    sample_resorts: list[dict[str, Any]], sample_charts: list[dict[str, Any]]
) -> Any:
    """Synthetic registry with a coverage gap and a missing rate."""
    from dvc_pricing.services.chart_registry import ChartRegistry

    return ChartRegistry.from_dicts(sample_resorts, sample_charts)


@pytest.fixture
def sample_quote_service(sample_registry: Any) -> Any:
    """Quote service over the synthetic registry."""
    from dvc_pricing.services.quote import PointsQuoteService

    return PointsQuoteService(registry=sample_registry, service_fee_pct=0)
