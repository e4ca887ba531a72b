"""Unit tests for API dependency providers and cache resets."""

from dvc_pricing.api.dependencies import (
    get_cap_service,
    get_payout_service,
    get_quote_service,
    reset_services,
)
from dvc_pricing.services.chart_registry import get_chart_registry
from dvc_pricing.services.owner_pricing import get_owner_pricing_service
from dvc_pricing.services.payouts import get_payout_schedule_service
from dvc_pricing.services.pricing_caps import get_pricing_cap_service
from dvc_pricing.services.quote import get_points_quote_service


class TestResetServices:
    """Tests for reset_services."""

    def test_providers_are_cached(self) -> None:
        assert get_quote_service() is get_quote_service()
        assert get_cap_service() is get_cap_service()
        assert get_payout_service() is get_payout_service()

    def test_clears_api_providers(self) -> None:
        quote, cap, payout = get_quote_service(), get_cap_service(), get_payout_service()

        reset_services()

        assert get_quote_service() is not quote
        assert get_cap_service() is not cap
        assert get_payout_service() is not payout

    def test_clears_service_getters(self) -> None:
        before = [
            get_points_quote_service(),
            get_pricing_cap_service(),
            get_payout_schedule_service(),
            get_owner_pricing_service(),
        ]

        reset_services()

        after = [
            get_points_quote_service(),
            get_pricing_cap_service(),
            get_payout_schedule_service(),
            get_owner_pricing_service(),
        ]
        assert all(old is not new for old, new in zip(before, after))

    def test_reloads_reference_data(self) -> None:
        registry = get_chart_registry()
        reset_services()
        assert get_chart_registry() is not registry
