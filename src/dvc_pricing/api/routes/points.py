"""Points quote endpoints.

Provides REST endpoints for:
- Quoting a stay in points with a nightly breakdown
- Quoting a booking-form stay with a loose room label
- Pricing a stay in guest dollars

Data gaps never fail a quote: affected nights count as zero points and are
listed under `warnings`.
"""

from fastapi import APIRouter, Depends

from dvc_pricing.api.dependencies import get_quote_service
from dvc_pricing.models import (
    PointsQuote,
    PricedQuote,
    PriceQuoteRequest,
    QuoteRequest,
    StayPointsRequest,
    StayPointsResult,
)
from dvc_pricing.services.quote import PointsQuoteService

router = APIRouter(tags=["points"])

_ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"description": "Invalid or incomplete stay details"},
    404: {"description": "Resort or room type not supported"},
    500: {"description": "No chart data loaded for the resort"},
}


@router.post(
    "/points/quote",
    summary="Quote a stay in points",
    description="""
Quote a stay at one resort for a canonical room and view.

The stay is given as `check_in` plus either `nights` or `check_out`
(check-out is exclusive). When both are sent, `nights` wins.

**Notes:**
- Each night uses the chart for its own year unless `chart_year` is set
- Fri/Sat nights use the weekend rate
- A missing chart year is replaced by the nearest earlier loaded year and
  reported as a `chart_year_fallback` warning
""",
    response_description="Nightly points and total",
    response_model=PointsQuote,
    responses={
        200: {
            "description": "Stay quoted",
            "content": {
                "application/json": {
                    "example": {
                        "resort_code": "BLT",
                        "room": "STUDIO",
                        "view": "S",
                        "nightly": [
                            {
                                "date": "2026-09-07",
                                "points": 14,
                                "day_type": "sun_thu",
                                "period_id": 1,
                                "chart_year": 2026,
                            },
                            {
                                "date": "2026-09-08",
                                "points": 14,
                                "day_type": "sun_thu",
                                "period_id": 1,
                                "chart_year": 2026,
                            },
                        ],
                        "total_points": 28,
                        "chart_years": [2026],
                        "warnings": [],
                        "nights": 2,
                    }
                }
            },
        },
        **_ERROR_RESPONSES,
    },
)
async def quote_points(
    request: QuoteRequest,
    service: PointsQuoteService = Depends(get_quote_service),
) -> PointsQuote:
    """Quote a stay in points."""
    return service.quote_stay(request)


@router.post(
    "/points/stay",
    summary="Points for a booking-form stay",
    description="""
Resolve a room label such as "Studio" or "2 Bedroom" to the resort's room
code and default view, then quote the nights between check-in and
check-out.

**Notes:**
- A missing, invalid or non-forward check-out is treated as one night
""",
    response_description="Points per night and total",
    response_model=StayPointsResult,
    responses=_ERROR_RESPONSES,
)
async def stay_points(
    request: StayPointsRequest,
    service: PointsQuoteService = Depends(get_quote_service),
) -> StayPointsResult:
    """Quote a booking-form stay."""
    return service.calculate_stay_points(request)


@router.post(
    "/points/price",
    summary="Price a stay in dollars",
    description="""
Quote a stay in points and convert it to the guest price.

The price per point depends on the resort category. Premium resorts booked
less than seven months before check-in are charged the regular rate.

**Notes:**
- Amounts are in USD cents (e.g., 2500 = $25.00)
- `booking_date` defaults to today
""",
    response_description="Points quote with guest price breakdown",
    response_model=PricedQuote,
    responses=_ERROR_RESPONSES,
)
async def price_stay(
    request: PriceQuoteRequest,
    service: PointsQuoteService = Depends(get_quote_service),
) -> PricedQuote:
    """Price a stay in guest dollars."""
    return service.price_stay(request)
