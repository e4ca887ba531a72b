"""Ready-stay price cap service.

Each night of a stay gets the guest price cap of its season (plus the
resort modifier, floored at zero). The stay is governed by its strictest
night: the guest is never promised a higher cap than the most restrictive
night allows. The owner ceiling is the cap minus the platform fee per point.

All amounts are USD cents per point unless the name says dollars.
"""

from decimal import ROUND_FLOOR, Decimal
from functools import lru_cache
from typing import Optional

from dvc_pricing.models import (
    CapSummary,
    NightCapRow,
    OwnerPayoutOptions,
    ReadyStayPricingTable,
    StayGuestPriceCap,
)
from dvc_pricing.services.seasons import (
    get_pricing_table,
    get_ready_stay_pricing_band,
    get_resort_modifier_dollars,
)
from dvc_pricing.utils.dates import DateInput, get_night_dates
from dvc_pricing.utils.logging import get_logger, log_quote_operation
from dvc_pricing.utils.money import cents_to_dollars, dollars_to_cents, mean_cents

logger = get_logger(__name__)


class PricingCapService:
    """Service for guest price caps and owner payout ceilings."""

    def __init__(self, table: ReadyStayPricingTable | None = None) -> None:
        """Initialize cap service.

        Args:
            table: Pricing table; defaults to the bundled one
        """
        self.table = table or get_pricing_table()

    @property
    def fee_per_point_cents(self) -> int:
        return self.table.fee_per_point_cents

    @property
    def global_min_owner_payout(self) -> int:
        """Lowest suggested owner payout, in whole dollars per point."""
        return self.table.global_min_owner_payout_dollars

    def compute_caps_for_stay(
        self,
        check_in: DateInput,
        check_out: Optional[DateInput] = None,
        resort_code: Optional[str] = None,
    ) -> CapSummary:
        """Per-night caps and stay-level owner ceilings.

        Args:
            check_in: First night
            check_out: Departure date; missing or not after check-in means
                a single night
            resort_code: Resort calculator code for the modifier

        Returns:
            CapSummary with strictest (minimum) and average caps
        """
        modifier_cents = dollars_to_cents(get_resort_modifier_dollars(resort_code, self.table))

        rows: list[NightCapRow] = []
        for night in get_night_dates(check_in, check_out):
            band = get_ready_stay_pricing_band(night, table=self.table)
            rows.append(
                NightCapRow(
                    night=night,
                    season_type=band.season_type,
                    base_cap_cents=band.guest_cap_cents,
                    resort_modifier_cents=modifier_cents,
                    final_cap_cents=max(0, band.guest_cap_cents + modifier_cents),
                )
            )

        # Ties keep the earliest night
        strictest = rows[0]
        for row in rows[1:]:
            if row.final_cap_cents < strictest.final_cap_cents:
                strictest = row

        average_cap_cents = mean_cents([row.final_cap_cents for row in rows])

        summary = CapSummary(
            nights=rows,
            strictest_cap_cents=strictest.final_cap_cents,
            strictest_season_type=strictest.season_type,
            average_cap_cents=average_cap_cents,
            max_owner_payout_strictest_cents=self._owner_ceiling(strictest.final_cap_cents),
            max_owner_payout_average_cents=self._owner_ceiling(average_cap_cents),
        )

        log_quote_operation(
            logger,
            "compute_caps_for_stay",
            resort_code=resort_code,
            check_in=rows[0].night,
            nights=len(rows),
            cap_cents=summary.strictest_cap_cents,
        )
        return summary

    def get_stay_guest_price_cap(
        self,
        check_in: DateInput,
        check_out: Optional[DateInput] = None,
    ) -> StayGuestPriceCap:
        """Strictest seasonal guest cap for a stay, without resort modifiers."""
        bands = [
            get_ready_stay_pricing_band(night, table=self.table)
            for night in get_night_dates(check_in, check_out)
        ]

        strictest = bands[0]
        for band in bands[1:]:
            if band.guest_cap_cents < strictest.guest_cap_cents:
                strictest = band

        return StayGuestPriceCap(
            cap_dollars=cents_to_dollars(strictest.guest_cap_cents),
            season_type=strictest.season_type,
        )

    def get_max_owner_payout(
        self,
        check_in: DateInput,
        check_out: Optional[DateInput] = None,
    ) -> Decimal:
        """Highest owner payout per point, in dollars."""
        cap = self.get_stay_guest_price_cap(check_in, check_out)
        return max(Decimal(0), cap.cap_dollars - cents_to_dollars(self.fee_per_point_cents))

    def get_suggested_owner_payouts(
        self,
        check_in: DateInput,
        check_out: Optional[DateInput] = None,
    ) -> list[int]:
        """Whole-dollar payout choices at and just below the maximum.

        Choices are raised to the global minimum, then kept only if they are
        positive, unique and not above the maximum.
        """
        max_payout = self.get_max_owner_payout(check_in, check_out)
        return self._suggest_payouts(max_payout)

    def get_owner_payout_options(
        self,
        check_in: DateInput,
        check_out: Optional[DateInput] = None,
    ) -> OwnerPayoutOptions:
        """Maximum owner payout together with the suggested choices."""
        cap = self.get_stay_guest_price_cap(check_in, check_out)
        max_payout = max(Decimal(0), cap.cap_dollars - cents_to_dollars(self.fee_per_point_cents))
        return OwnerPayoutOptions(
            max_owner_payout_dollars=max_payout,
            suggested_payouts_dollars=self._suggest_payouts(max_payout),
            season_type=cap.season_type,
        )

    def _suggest_payouts(self, max_payout: Decimal) -> list[int]:
        ceiling = int(max_payout.to_integral_value(rounding=ROUND_FLOOR))
        options = [
            max(self.global_min_owner_payout, value)
            for value in (ceiling - 2, ceiling - 1, ceiling)
        ]

        unique: list[int] = []
        for value in options:
            if value > 0 and value not in unique and value <= ceiling:
                unique.append(value)

        if not unique and ceiling > 0:
            return [ceiling]
        return unique

    def _owner_ceiling(self, cap_cents: int) -> int:
        return max(0, cap_cents - self.fee_per_point_cents)


@lru_cache(maxsize=1)
def get_pricing_cap_service() -> PricingCapService:
    """Get the process-wide cap service."""
    return PricingCapService()
