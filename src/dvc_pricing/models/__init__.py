"""Pydantic models for the DVC points and pricing engine."""

from .caps import (
    CapSummary,
    NightCapRow,
    OwnerPayoutOptions,
    PricingBand,
    ReadyStayPricingTable,
    SeasonWindow,
    StayGuestPriceCap,
)
from .charts import DateRange, ResortMeta, ResortYearChart, TravelPeriod, WeekRate
from .enums import (
    DayType,
    MilestoneCode,
    MilestoneStatus,
    PayoutStage,
    PricingTier,
    QuoteWarningCode,
    Season,
)
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ChartDataMissingError,
    ErrorCode,
    ErrorResponse,
    InvalidPayoutStageError,
    InvalidStayDatesError,
    PricingError,
    StayDetailsRequiredError,
    UnsupportedResortError,
    UnsupportedRoomError,
)
from .payouts import (
    GuestPriceResult,
    MilestoneProgress,
    MilestoneRow,
    MilestoneStep,
    OwnerAction,
    OwnerPayoutResult,
    PayoutAmount,
)
from .quote import (
    NightPoints,
    NightPointsRow,
    PointsQuote,
    PricedQuote,
    PriceQuoteRequest,
    QuoteRequest,
    QuoteWarning,
    ResortComparison,
    RoomSelection,
    StayPointsRequest,
    StayPointsResult,
)

__all__ = [
    # Enums
    "DayType",
    "MilestoneCode",
    "MilestoneStatus",
    "PayoutStage",
    "PricingTier",
    "QuoteWarningCode",
    "Season",
    # Reference data
    "DateRange",
    "ResortMeta",
    "ResortYearChart",
    "TravelPeriod",
    "WeekRate",
    "PricingBand",
    "ReadyStayPricingTable",
    "SeasonWindow",
    # Points quotes
    "NightPoints",
    "NightPointsRow",
    "PointsQuote",
    "PricedQuote",
    "PriceQuoteRequest",
    "QuoteRequest",
    "QuoteWarning",
    "ResortComparison",
    "RoomSelection",
    "StayPointsRequest",
    "StayPointsResult",
    # Caps
    "CapSummary",
    "NightCapRow",
    "OwnerPayoutOptions",
    "StayGuestPriceCap",
    # Payouts
    "GuestPriceResult",
    "MilestoneProgress",
    "MilestoneRow",
    "MilestoneStep",
    "OwnerAction",
    "OwnerPayoutResult",
    "PayoutAmount",
    # Errors
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "ChartDataMissingError",
    "ErrorCode",
    "ErrorResponse",
    "InvalidPayoutStageError",
    "InvalidStayDatesError",
    "PricingError",
    "StayDetailsRequiredError",
    "UnsupportedResortError",
    "UnsupportedRoomError",
]
