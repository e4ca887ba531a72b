"""Reference-data models for resort metadata and point charts.

These models mirror the JSON assets under dvc_pricing/data and are frozen:
chart data is loaded once per process and never mutated.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dvc_pricing.models.enums import DayType, PricingTier


class WeekRate(BaseModel):
    """Points per night for one room/view in one travel period."""

    model_config = ConfigDict(frozen=True)

    sun_thu: int = Field(ge=0)
    fri_sat: int = Field(ge=0)

    def for_day_type(self, day_type: DayType) -> int:
        """Return the rate for a weekday bucket."""
        if day_type is DayType.FRI_SAT:
            return self.fri_sat
        return self.sun_thu


class DateRange(BaseModel):
    """Inclusive calendar date range."""

    model_config = ConfigDict(frozen=True)

    start: dt.date
    end: dt.date

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.end < self.start:
            raise ValueError(f"range ends before it starts: {self.start} > {self.end}")
        return self

    def contains(self, value: dt.date) -> bool:
        return self.start <= value <= self.end


class TravelPeriod(BaseModel):
    """A set of date ranges sharing one table of point rates."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    ranges: list[DateRange] = Field(min_length=1)
    # points[room][view]
    points: dict[str, dict[str, WeekRate]] = Field(default_factory=dict)

    def contains(self, value: dt.date) -> bool:
        return any(r.contains(value) for r in self.ranges)

    def rate_for(self, room: str, view: str) -> WeekRate | None:
        return self.points.get(room, {}).get(view)


class ResortYearChart(BaseModel):
    """One chart year for one resort."""

    model_config = ConfigDict(frozen=True)

    resort_code: str
    year: int
    periods: list[TravelPeriod]

    def period_for_date(self, value: dt.date) -> TravelPeriod | None:
        """Find the first travel period containing a date."""
        for period in self.periods:
            if period.contains(value):
                return period
        return None


class ResortMeta(BaseModel):
    """Static description of a resort's rooms and views."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    category: PricingTier
    room_types: list[str]
    # Ordered: the first view is the default for the room
    views_by_room: dict[str, list[str]]
    view_names: dict[str, str] = Field(default_factory=dict)
    occupancy: dict[str, int] = Field(default_factory=dict)

    def supports_room(self, room: str) -> bool:
        return room in self.room_types

    def default_view(self, room: str) -> str:
        """First supported view for a room, "S" when none is listed."""
        views = self.views_by_room.get(room) or []
        return views[0] if views else "S"
