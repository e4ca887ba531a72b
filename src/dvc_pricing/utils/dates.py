"""Calendar-date helpers shared by the points and pricing-cap pipelines.

All dates are plain calendar dates (no time of day, no timezone). Stays are
half-open: check-in is the first night, check-out is the morning after the
last night.
"""

import datetime as dt
import re

from dvc_pricing.models.enums import DayType
from dvc_pricing.models.errors import InvalidStayDatesError
from dvc_pricing.models.quote import MAX_STAY_NIGHTS

DateInput = dt.date | str

# YYYY-MM-DD, optionally followed by an ISO time part
_YMD = re.compile(r"(\d{4}-\d{2}-\d{2})(?:T\S*)?")


def parse_ymd(value: DateInput, field: str = "date") -> dt.date:
    """Parse a YYYY-MM-DD string (or pass a date through).

    Args:
        value: Date or ISO date string
        field: Field name reported in the error details

    Returns:
        The calendar date

    Raises:
        InvalidStayDatesError: If the value is not a valid calendar date.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str):
        raise InvalidStayDatesError(details={field: repr(value)})

    match = _YMD.fullmatch(value.strip())
    if match is None:
        raise InvalidStayDatesError(details={field: value})
    try:
        return dt.date.fromisoformat(match.group(1))
    except ValueError:
        raise InvalidStayDatesError(details={field: value}) from None


def parse_optional_ymd(value: DateInput | None) -> dt.date | None:
    """Parse a date leniently, returning None for blank or invalid input."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return parse_ymd(value)
    except InvalidStayDatesError:
        return None


def add_days(value: dt.date, days: int) -> dt.date:
    """Shift a date by a whole number of days.

    Raises:
        InvalidStayDatesError: If the result is outside the supported
            calendar (years 1-9999).
    """
    try:
        return value + dt.timedelta(days=days)
    except OverflowError:
        raise InvalidStayDatesError(
            details={"date": value.isoformat(), "days": str(days)}
        ) from None


def get_night_dates(
    check_in: DateInput,
    check_out: DateInput | None = None,
) -> list[dt.date]:
    """Expand a stay into its nights.

    Nights span [check_in, check_out). A missing, unparseable, same-day or
    inverted check-out collapses the stay to the single check-in night.

    Args:
        check_in: First night of the stay
        check_out: Departure date (exclusive)

    Returns:
        Ordered list of night dates, never empty

    Raises:
        InvalidStayDatesError: If check_in is not a valid date, or the stay
            is longer than MAX_STAY_NIGHTS.
    """
    start = parse_ymd(check_in, "check_in")
    end = parse_optional_ymd(check_out)

    if end is None or end <= start:
        return [start]

    count = (end - start).days
    if count > MAX_STAY_NIGHTS:
        raise InvalidStayDatesError(
            details={"check_out": end.isoformat(), "nights": str(count)}
        )
    return [add_days(start, offset) for offset in range(count)]


def nights_to_check_out(check_in: DateInput, nights: int) -> dt.date:
    """Compute the implicit check-out for a night count.

    Raises:
        InvalidStayDatesError: If the night count is above MAX_STAY_NIGHTS
            or the check-out would fall after year 9999.
    """
    if nights > MAX_STAY_NIGHTS:
        raise InvalidStayDatesError(details={"nights": str(nights)})
    return add_days(parse_ymd(check_in, "check_in"), nights)


def day_type_for(night: dt.date) -> DayType:
    """Classify a night into the Fri/Sat or Sun-Thu rate bucket."""
    # Monday is 0, Friday is 4, Saturday is 5
    if night.weekday() in (4, 5):
        return DayType.FRI_SAT
    return DayType.SUN_THU


def project_to_year(value: dt.date, year: int) -> dt.date:
    """Move a date onto another year, keeping month and day.

    February 29 maps to February 28 when the target year is not a leap year.
    """
    try:
        return value.replace(year=year)
    except ValueError:
        return value.replace(year=year, day=28)


def months_between(later: dt.date, earlier: dt.date) -> int:
    """Calendar-month difference, ignoring the day of month."""
    return (later.year - earlier.year) * 12 + (later.month - earlier.month)


def month_day_key(value: dt.date) -> int:
    """Encode a date's month and day as month*100 + day."""
    return value.month * 100 + value.day
