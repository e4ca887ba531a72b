"""Points quoting, pricing caps and payout services."""

from .chart_registry import ChartRegistry, get_chart_registry, reset_chart_registry
from .owner_pricing import OwnerPricingService, get_owner_pricing_service
from .payouts import PayoutScheduleService, get_payout_schedule_service
from .pricing_caps import PricingCapService, get_pricing_cap_service
from .quote import PointsQuoteService, calculate_stay_points, get_points_quote_service, quote_stay
from .room_resolution import resolve_room_and_view
from .seasons import (
    classify_season,
    get_pricing_table,
    get_ready_stay_pricing_band,
    reset_pricing_table,
)

__all__ = [
    "ChartRegistry",
    "get_chart_registry",
    "reset_chart_registry",
    "PointsQuoteService",
    "get_points_quote_service",
    "quote_stay",
    "calculate_stay_points",
    "resolve_room_and_view",
    "classify_season",
    "get_pricing_table",
    "get_ready_stay_pricing_band",
    "reset_pricing_table",
    "PricingCapService",
    "get_pricing_cap_service",
    "PayoutScheduleService",
    "get_payout_schedule_service",
    "OwnerPricingService",
    "get_owner_pricing_service",
]
