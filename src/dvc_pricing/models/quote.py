"""Points quote models.

Requests carry calendar dates; a stay is described either by a night count
or by a check-out date. Results are ephemeral and never persisted here.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dvc_pricing.models.enums import DayType, QuoteWarningCode

# Longest stay quoted in one request
MAX_STAY_NIGHTS = 60


class RoomSelection(BaseModel):
    """Canonical room and view codes resolved for a resort."""

    model_config = ConfigDict(strict=True, frozen=True)

    room: str
    view: str


class QuoteRequest(BaseModel):
    """Request to quote a stay in points.

    When both nights and check_out are given, nights wins.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "resort_code": "BLT",
                    "room": "STUDIO",
                    "view": "S",
                    "check_in": "2026-09-07",
                    "nights": 2,
                }
            ]
        },
    )

    resort_code: str = Field(..., min_length=1, description="Resort calculator code")
    room: str = Field(..., min_length=1, description="Canonical room code")
    view: Optional[str] = Field(
        default=None,
        description="View code; defaults to the room's first supported view",
    )
    check_in: dt.date = Field(..., description="First night (YYYY-MM-DD)")
    nights: Optional[int] = Field(
        default=None, ge=0, le=MAX_STAY_NIGHTS, description="Number of nights"
    )
    check_out: Optional[dt.date] = Field(
        default=None,
        description="Departure date (exclusive), used when nights is omitted",
    )
    chart_year: Optional[int] = Field(
        default=None,
        description="Chart year to price every night with; defaults to each night's year",
    )


class QuoteWarning(BaseModel):
    """A non-fatal data condition met while quoting."""

    model_config = ConfigDict(strict=True, frozen=True)

    code: QuoteWarningCode
    message: str
    night: Optional[dt.date] = None


class NightPoints(BaseModel):
    """Points for one night of a stay."""

    model_config = ConfigDict(strict=True, frozen=True)

    date: dt.date
    points: int = Field(ge=0)
    day_type: DayType
    period_id: Optional[int] = None
    chart_year: Optional[int] = None


class PointsQuote(BaseModel):
    """Nightly breakdown and total for a stay."""

    model_config = ConfigDict(strict=True)

    resort_code: str
    room: str
    view: str
    nightly: list[NightPoints]
    total_points: int = Field(ge=0)
    chart_years: list[int] = Field(default_factory=list)
    warnings: list[QuoteWarning] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def nights(self) -> int:
        return len(self.nightly)

    @property
    def is_approximate(self) -> bool:
        """True when any night was priced with fallback or missing data."""
        return bool(self.warnings)


class StayPointsRequest(BaseModel):
    """Loosely-typed stay from a booking form."""

    resort_code: Optional[str] = Field(default=None, description="Resort calculator code")
    room_type: str = Field(default="", description="Room label, e.g. 'Studio' or '2 Bedroom'")
    check_in: str = Field(default="", description="Check-in date (YYYY-MM-DD)")
    check_out: str = Field(default="", description="Check-out date (YYYY-MM-DD)")


class NightPointsRow(BaseModel):
    """One row of a stay's points table."""

    model_config = ConfigDict(strict=True, frozen=True)

    night: dt.date
    points: int


class StayPointsResult(BaseModel):
    """Points table for a loosely-typed stay."""

    model_config = ConfigDict(strict=True)

    nights: list[NightPointsRow]
    total_nights: int
    total_points: int
    room: str
    view: str


class PriceQuoteRequest(QuoteRequest):
    """Quote request priced in dollars."""

    booking_date: Optional[dt.date] = Field(
        default=None,
        description="Date the booking is made; defaults to today",
    )


class PricedQuote(BaseModel):
    """A points quote converted to guest dollars.

    All amounts are in USD cents.
    """

    model_config = ConfigDict(strict=True)

    quote: PointsQuote
    price_per_point_cents: int
    pricing_tier: str
    fee_pct: int
    base_cents: int
    fee_cents: int
    total_cents: int


class ResortComparison(BaseModel):
    """Quotes for the same dates across all resorts."""

    model_config = ConfigDict(strict=True)

    # quotes[resort_code][room]
    quotes: dict[str, dict[str, PointsQuote]] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)
