"""FastAPI dependency injection providers for engine services.

Services are built once per process with @lru_cache and share the cached
chart registry and pricing table.

Usage in routes:
    from dvc_pricing.api.dependencies import get_quote_service

    @router.post("/points/quote")
    async def quote(
        request: QuoteRequest,
        service: PointsQuoteService = Depends(get_quote_service),
    ):
        ...

Service Dependency Graph:
    ChartRegistry (singleton via get_chart_registry)
        └── PointsQuoteService
    ReadyStayPricingTable (singleton via get_pricing_table)
        └── PricingCapService
    PayoutScheduleService

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from dvc_pricing.services.chart_registry import ChartRegistry, get_chart_registry
from dvc_pricing.services.payouts import PayoutScheduleService
from dvc_pricing.services.pricing_caps import PricingCapService
from dvc_pricing.services.quote import PointsQuoteService
from dvc_pricing.services.seasons import get_pricing_table


def get_registry() -> ChartRegistry:
    """Get the process-wide chart registry."""
    return get_chart_registry()


@lru_cache
def get_quote_service() -> PointsQuoteService:
    """Get cached PointsQuoteService instance.

    Returns:
        PointsQuoteService configured with the registry singleton.
    """
    return PointsQuoteService(registry=get_chart_registry())


@lru_cache
def get_cap_service() -> PricingCapService:
    """Get cached PricingCapService instance.

    Returns:
        PricingCapService configured with the pricing table singleton.
    """
    return PricingCapService(table=get_pricing_table())


@lru_cache
def get_payout_service() -> PayoutScheduleService:
    """Get cached PayoutScheduleService instance."""
    return PayoutScheduleService()


def reset_services() -> None:
    """Clear all cached service instances.

    Call this in test fixtures to ensure clean state between tests.
    Clears both the API providers and the services' own process-wide
    getters, then drops the cached reference data.

    Example:
        @pytest.fixture(autouse=True)
        def reset_state():
            yield
            reset_services()
    """
    from dvc_pricing.services.chart_registry import reset_chart_registry
    from dvc_pricing.services.owner_pricing import get_owner_pricing_service
    from dvc_pricing.services.payouts import get_payout_schedule_service
    from dvc_pricing.services.pricing_caps import get_pricing_cap_service
    from dvc_pricing.services.quote import get_points_quote_service
    from dvc_pricing.services.seasons import reset_pricing_table

    get_quote_service.cache_clear()
    get_cap_service.cache_clear()
    get_payout_service.cache_clear()

    get_points_quote_service.cache_clear()
    get_pricing_cap_service.cache_clear()
    get_payout_schedule_service.cache_clear()
    get_owner_pricing_service.cache_clear()

    reset_chart_registry()
    reset_pricing_table()
