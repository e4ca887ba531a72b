"""Enumeration types for points and pricing models."""

from enum import Enum, IntEnum


class DayType(str, Enum):
    """Weekday bucket used for chart rate lookup."""

    SUN_THU = "sun_thu"
    FRI_SAT = "fri_sat"


class Season(str, Enum):
    """Demand season driving ready-stay price caps."""

    CHRISTMAS = "christmas"
    MARATHON = "marathon"
    HALLOWEEN = "halloween"
    SPRING_BREAK = "spring_break"
    HIGH = "high"
    NORMAL = "normal"


class PricingTier(str, Enum):
    """Resort pricing category."""

    PREMIUM = "PREMIUM"
    REGULAR = "REGULAR"
    ADVANTAGE = "ADVANTAGE"


class QuoteWarningCode(str, Enum):
    """Non-fatal data conditions met while quoting."""

    CHART_YEAR_FALLBACK = "chart_year_fallback"
    MISSING_TRAVEL_PERIOD = "missing_travel_period"
    MISSING_RATE = "missing_rate"


class PayoutStage(IntEnum):
    """Share of the rental amount released at a payout milestone."""

    DEPOSIT = 70
    BALANCE = 30


class MilestoneCode(str, Enum):
    """Operational milestones of a rental."""

    MATCHED = "matched"
    GUEST_VERIFIED = "guest_verified"
    PAYMENT_VERIFIED = "payment_verified"
    BOOKING_PACKAGE_SENT = "booking_package_sent"
    AGREEMENT_SENT = "agreement_sent"
    OWNER_APPROVED = "owner_approved"
    OWNER_BOOKED = "owner_booked"
    DISNEY_CONFIRMATION_UPLOADED = "disney_confirmation_uploaded"
    PAYOUT_70_RELEASED = "payout_70_released"
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    PAYOUT_30_RELEASED = "payout_30_released"
    TESTIMONIAL_REQUESTED = "testimonial_requested"
    ARCHIVED = "archived"


class MilestoneStatus(str, Enum):
    """Completion state of a milestone."""

    PENDING = "pending"
    COMPLETED = "completed"
    BLOCKED = "blocked"
