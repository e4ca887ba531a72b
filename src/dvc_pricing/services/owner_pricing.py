"""Owner payout rates and guest price per point for matched rentals."""

from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache
from typing import Optional, TypedDict

from dvc_pricing.models import GuestPriceResult, OwnerPayoutResult
from dvc_pricing.services.chart_registry import normalize_resort_code


class OwnerRateOverride(TypedDict):
    """Per-resort replacement for the default owner rates."""

    base_rate_per_point_cents: int
    premium_per_point_cents: int


class OwnerPricingService:
    """Service for owner payouts and guest rates in cents per point."""

    DEFAULT_BASE_RATE_PER_POINT_CENTS = 1600
    DEFAULT_HOME_RESORT_PREMIUM_PER_POINT_CENTS = 200

    def __init__(self, resort_overrides: Optional[dict[str, OwnerRateOverride]] = None) -> None:
        """Initialize owner pricing service.

        Args:
            resort_overrides: Owner rates keyed by booking resort code
        """
        self.resort_overrides = {
            normalize_resort_code(code): override
            for code, override in (resort_overrides or {}).items()
        }

    def compute_owner_payout(
        self,
        total_points: Optional[int],
        matched_membership_resort_id: Optional[str],
        booking_resort_id: Optional[str],
    ) -> OwnerPayoutResult:
        """Owner rate and total for a rental.

        The home-resort premium applies when the owner's membership resort
        is the resort being booked.

        Args:
            total_points: Points the stay costs; missing or non-positive
                pays nothing
            matched_membership_resort_id: Owner's home resort
            booking_resort_id: Resort of the booking

        Returns:
            OwnerPayoutResult with the per-point rates and total in cents
        """
        membership = normalize_resort_code(matched_membership_resort_id)
        booking = normalize_resort_code(booking_resort_id)

        override = self.resort_overrides.get(booking) if booking else None
        base_rate = (
            override["base_rate_per_point_cents"]
            if override
            else self.DEFAULT_BASE_RATE_PER_POINT_CENTS
        )
        premium_rate = (
            override["premium_per_point_cents"]
            if override
            else self.DEFAULT_HOME_RESORT_PREMIUM_PER_POINT_CENTS
        )

        premium_applies = bool(membership and booking) and membership == booking
        premium_per_point = premium_rate if premium_applies else 0
        owner_rate = base_rate + premium_per_point
        points = total_points if total_points and total_points > 0 else 0

        return OwnerPayoutResult(
            owner_base_rate_per_point_cents=base_rate,
            owner_premium_per_point_cents=premium_per_point,
            owner_rate_per_point_cents=owner_rate,
            owner_total_cents=points * owner_rate,
            owner_home_resort_premium_applied=premium_applies,
        )

    def compute_guest_price(
        self,
        total_points: Optional[int],
        guest_total_cents: Optional[int],
    ) -> GuestPriceResult:
        """Guest rate per point, rounded half up; None when points are missing."""
        if not total_points or total_points <= 0 or guest_total_cents is None:
            return GuestPriceResult(
                guest_rate_per_point_cents=None,
                guest_total_cents=guest_total_cents or None,
            )

        rate = Decimal(guest_total_cents) / Decimal(total_points)
        return GuestPriceResult(
            guest_rate_per_point_cents=int(rate.quantize(Decimal(1), rounding=ROUND_HALF_UP)),
            guest_total_cents=guest_total_cents,
        )


@lru_cache(maxsize=1)
def get_owner_pricing_service() -> OwnerPricingService:
    """Get the process-wide owner pricing service."""
    return OwnerPricingService()
