"""Points quote service.

Expands a stay into nights, looks up each night in the chart registry and
sums the points. Configuration problems (unknown resort or room, no chart
data at all) fail before any night is looked up; data gaps inside a chart
price the night at zero and are reported as warnings on the quote.
"""

import datetime as dt
import os
from functools import lru_cache
from typing import Optional

from dvc_pricing.models import (
    NightPoints,
    NightPointsRow,
    PointsQuote,
    PricedQuote,
    PriceQuoteRequest,
    PricingTier,
    QuoteRequest,
    QuoteWarning,
    QuoteWarningCode,
    ResortComparison,
    RoomSelection,
    StayDetailsRequiredError,
    StayPointsRequest,
    StayPointsResult,
    UnsupportedRoomError,
)
from dvc_pricing.models.errors import PricingError
from dvc_pricing.services.chart_registry import ChartRegistry, get_chart_registry
from dvc_pricing.services.room_resolution import resolve_room_and_view
from dvc_pricing.utils.dates import (
    DateInput,
    get_night_dates,
    months_between,
    nights_to_check_out,
    parse_optional_ymd,
    parse_ymd,
)
from dvc_pricing.utils.logging import get_logger, log_quote_operation
from dvc_pricing.utils.money import percent_of_cents

logger = get_logger(__name__)

WARNING_MESSAGES: dict[QuoteWarningCode, str] = {
    QuoteWarningCode.CHART_YEAR_FALLBACK: "Priced with the {chart_year} chart; {requested_year} chart not loaded",
    QuoteWarningCode.MISSING_TRAVEL_PERIOD: "No travel period covers this night; counted as 0 points",
    QuoteWarningCode.MISSING_RATE: "No {room}/{view} rate for this night; counted as 0 points",
}


class PointsQuoteService:
    """Service for quoting stays in DVC points and guest dollars."""

    # Guest price per point by resort category, in USD cents
    RATE_BY_CATEGORY_CENTS: dict[PricingTier, int] = {
        PricingTier.PREMIUM: 2500,
        PricingTier.REGULAR: 2300,
        PricingTier.ADVANTAGE: 2000,
    }
    TIER_DISPLAY_NAMES: dict[PricingTier, str] = {
        PricingTier.PREMIUM: "Premium",
        PricingTier.REGULAR: "Regular",
        PricingTier.ADVANTAGE: "Advantage",
    }

    # Premium resorts booked closer than this many months use the regular rate
    PREMIUM_BOOKING_WINDOW_MONTHS = 7

    def __init__(
        self,
        registry: ChartRegistry | None = None,
        service_fee_pct: int | None = None,
    ) -> None:
        """Initialize quote service.

        Args:
            registry: Chart registry; defaults to the process-wide one
            service_fee_pct: Platform fee added to dollar prices. Defaults to
                DVC_SERVICE_FEE_PCT env var, then 0.
        """
        self.registry = registry or get_chart_registry()
        if service_fee_pct is None:
            service_fee_pct = int(os.environ.get("DVC_SERVICE_FEE_PCT", "0"))
        self.service_fee_pct = service_fee_pct

    def quote_stay(self, request: QuoteRequest) -> PointsQuote:
        """Quote a stay in points.

        Args:
            request: Resort, canonical room, optional view, check-in, and a
                night count or check-out date

        Returns:
            PointsQuote with one entry per night and the total

        Raises:
            UnsupportedResortError: If the resort has no chart entry.
            UnsupportedRoomError: If the room is not offered at the resort.
            ChartDataMissingError: If no chart year is loaded for the resort.
        """
        resort = self.registry.get_resort(request.resort_code)
        room = request.room.strip().upper()
        if not resort.supports_room(room):
            raise UnsupportedRoomError(
                details={"resort_code": resort.code, "room_type": request.room}
            )
        view = (request.view or "").strip().upper() or resort.default_view(room)

        nights = self._expand_nights(request)
        requested_year = request.chart_year if request.chart_year is not None else nights[0].year
        # Fails fast when the resort has no chart data at all
        self.registry.resolve_chart_year(resort.code, requested_year)

        nightly: list[NightPoints] = []
        warnings: list[QuoteWarning] = []
        chart_years: set[int] = set()
        fallback_years: set[tuple[int, int]] = set()

        for night in nights:
            rate = self.registry.lookup_night(resort.code, room, view, night, request.chart_year)
            chart_years.add(rate["chart_year"])
            nightly.append(
                NightPoints(
                    date=night,
                    points=rate["points"],
                    day_type=rate["day_type"],
                    period_id=rate["period_id"],
                    chart_year=rate["chart_year"],
                )
            )

            for code in rate["warnings"]:
                if code is QuoteWarningCode.CHART_YEAR_FALLBACK:
                    # One warning per substituted year, not per night
                    key = (rate["requested_year"], rate["chart_year"])
                    if key in fallback_years:
                        continue
                    fallback_years.add(key)
                    warnings.append(
                        QuoteWarning(
                            code=code,
                            message=WARNING_MESSAGES[code].format(
                                chart_year=rate["chart_year"],
                                requested_year=rate["requested_year"],
                            ),
                        )
                    )
                else:
                    warnings.append(
                        QuoteWarning(
                            code=code,
                            message=WARNING_MESSAGES[code].format(room=room, view=view),
                            night=night,
                        )
                    )

        total_points = sum(night.points for night in nightly)

        log_quote_operation(
            logger,
            "quote_stay",
            resort_code=resort.code,
            check_in=nights[0],
            nights=len(nightly),
            total_points=total_points,
            warnings=len(warnings),
            room=room,
            view=view,
        )

        return PointsQuote(
            resort_code=resort.code,
            room=room,
            view=view,
            nightly=nightly,
            total_points=total_points,
            chart_years=sorted(chart_years),
            warnings=warnings,
        )

    def calculate_stay_points(self, request: StayPointsRequest) -> StayPointsResult:
        """Quote a stay described by a booking form.

        Resolves the room label to a canonical room and default view and
        derives the night count from check-in/check-out.

        Raises:
            StayDetailsRequiredError: If resort, room type or check-in is blank.
            InvalidStayDatesError: If check-in is not a valid date.
            UnsupportedResortError: If the resort has no chart entry.
            UnsupportedRoomError: If no candidate room exists at the resort.
        """
        resort_code = (request.resort_code or "").strip()
        room_type = (request.room_type or "").strip()
        check_in = (request.check_in or "").strip()

        if not resort_code:
            raise StayDetailsRequiredError(details={"field": "resort_code"})
        if not room_type:
            raise StayDetailsRequiredError(details={"field": "room_type"})
        if not check_in:
            raise StayDetailsRequiredError(details={"field": "check_in"})

        nights = get_night_dates(check_in, request.check_out)
        selection = resolve_room_and_view(resort_code, room_type, self.registry)

        quote = self.quote_stay(
            QuoteRequest(
                resort_code=resort_code,
                room=selection.room,
                view=selection.view,
                check_in=nights[0],
                nights=len(nights),
            )
        )

        return StayPointsResult(
            nights=[NightPointsRow(night=night.date, points=night.points) for night in quote.nightly],
            total_nights=len(quote.nightly),
            total_points=quote.total_points,
            room=quote.room,
            view=quote.view,
        )

    def calculate_price_per_point(
        self,
        resort_code: str,
        check_in: DateInput,
        booking_date: Optional[DateInput] = None,
    ) -> tuple[int, str]:
        """Guest price per point for a resort and booking window.

        Non-premium resorts always use their category rate. Premium resorts
        use the regular rate when booked less than seven months out.

        Returns:
            Tuple of (price per point in cents, tier display name)
        """
        resort = self.registry.get_resort(resort_code)
        if resort.category is not PricingTier.PREMIUM:
            return (
                self.RATE_BY_CATEGORY_CENTS[resort.category],
                self.TIER_DISPLAY_NAMES[resort.category],
            )

        booked_on = parse_ymd(booking_date, "booking_date") if booking_date else dt.date.today()
        months_in_advance = months_between(parse_ymd(check_in, "check_in"), booked_on)

        tier = PricingTier.REGULAR
        if months_in_advance >= self.PREMIUM_BOOKING_WINDOW_MONTHS:
            tier = PricingTier.PREMIUM
        return self.RATE_BY_CATEGORY_CENTS[tier], self.TIER_DISPLAY_NAMES[tier]

    def price_stay(self, request: PriceQuoteRequest) -> PricedQuote:
        """Quote a stay and convert the points to guest dollars."""
        quote = self.quote_stay(request)
        ppp_cents, tier_name = self.calculate_price_per_point(
            request.resort_code, request.check_in, request.booking_date
        )

        base_cents = quote.total_points * ppp_cents
        fee_cents = percent_of_cents(base_cents, self.service_fee_pct)

        return PricedQuote(
            quote=quote,
            price_per_point_cents=ppp_cents,
            pricing_tier=tier_name,
            fee_pct=self.service_fee_pct,
            base_cents=base_cents,
            fee_cents=fee_cents,
            total_cents=base_cents + fee_cents,
        )

    def quote_all_resorts(
        self,
        check_in: DateInput,
        nights: Optional[int] = None,
        check_out: Optional[DateInput] = None,
        chart_year: Optional[int] = None,
        room_views: Optional[dict[str, list[RoomSelection]]] = None,
    ) -> ResortComparison:
        """Quote the same dates at every resort.

        Args:
            check_in: First night
            nights: Night count (takes precedence over check_out)
            check_out: Departure date
            chart_year: Chart year override
            room_views: Room/view combinations per resort code. Resorts not
                listed are quoted for their studio with its default view.

        Returns:
            ResortComparison; resorts that cannot be quoted appear in errors.
        """
        start = parse_ymd(check_in, "check_in")
        if nights is None and check_out is not None:
            nights = len(get_night_dates(start, check_out))

        comparison = ResortComparison()
        for resort in self.registry.resorts:
            combos = (room_views or {}).get(resort.code)
            try:
                if not combos:
                    combos = [resolve_room_and_view(resort.code, "STUDIO", self.registry)]
                quotes: dict[str, PointsQuote] = {}
                for combo in combos:
                    quotes[combo.room] = self.quote_stay(
                        QuoteRequest(
                            resort_code=resort.code,
                            room=combo.room,
                            view=combo.view,
                            check_in=start,
                            nights=nights,
                            chart_year=chart_year,
                        )
                    )
                comparison.quotes[resort.code] = quotes
            except PricingError as e:
                logger.warning("Skipping %s in comparison: %s", resort.code, e)
                comparison.errors[resort.code] = str(e)

        return comparison

    @staticmethod
    def _expand_nights(request: QuoteRequest) -> list[dt.date]:
        if request.nights is not None:
            return get_night_dates(
                request.check_in, nights_to_check_out(request.check_in, request.nights)
            )
        return get_night_dates(request.check_in, request.check_out)


@lru_cache(maxsize=1)
def get_points_quote_service() -> PointsQuoteService:
    """Get the process-wide quote service."""
    return PointsQuoteService()


def quote_stay(
    resort_code: str,
    room: str,
    check_in: DateInput,
    view: Optional[str] = None,
    nights: Optional[int] = None,
    check_out: Optional[DateInput] = None,
    chart_year: Optional[int] = None,
    service: PointsQuoteService | None = None,
) -> PointsQuote:
    """Quote a stay with plain arguments; see PointsQuoteService.quote_stay."""
    service = service or get_points_quote_service()
    request = QuoteRequest(
        resort_code=resort_code,
        room=room,
        view=view,
        check_in=parse_ymd(check_in, "check_in"),
        nights=nights,
        check_out=parse_optional_ymd(check_out),
        chart_year=chart_year,
    )
    return service.quote_stay(request)


def calculate_stay_points(
    resort_code: str | None,
    room_type: str,
    check_in: str,
    check_out: str = "",
    service: PointsQuoteService | None = None,
) -> StayPointsResult:
    """Points table for a booking-form stay; see PointsQuoteService.calculate_stay_points."""
    service = service or get_points_quote_service()
    return service.calculate_stay_points(
        StayPointsRequest(
            resort_code=resort_code,
            room_type=room_type,
            check_in=check_in,
            check_out=check_out,
        )
    )
