"""Resort chart registry.

Loads resort metadata and per-year point charts from the bundled JSON data
assets (or another directory) and answers per-night rate lookups.

Lookup policy:
- A requested chart year that is not loaded falls back to the latest loaded
  year not after it, else to the earliest loaded year.
- A night priced with another year's chart is matched to that chart's travel
  periods by month and day.
- A night outside every travel period, or without a rate for the room/view,
  is worth zero points.
"""

import datetime as dt
import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, TypedDict

from dvc_pricing.models import (
    ChartDataMissingError,
    DayType,
    QuoteWarningCode,
    ResortMeta,
    ResortYearChart,
    UnsupportedResortError,
)
from dvc_pricing.utils.dates import DateInput, day_type_for, parse_ymd, project_to_year
from dvc_pricing.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


class NightRate(TypedDict):
    """Result of looking up one night in a chart."""

    points: int
    day_type: DayType
    period_id: int | None
    chart_year: int
    requested_year: int
    warnings: list[QuoteWarningCode]


def normalize_resort_code(code: str | None) -> str:
    """Resort codes are matched case-insensitively."""
    return (code or "").strip().upper()


class ChartRegistry:
    """In-memory registry of resort metadata and chart years."""

    def __init__(
        self,
        resorts: Iterable[ResortMeta],
        charts: Iterable[ResortYearChart],
    ) -> None:
        """Initialize the registry.

        Args:
            resorts: Resort metadata, in display order
            charts: Chart years for any of the resorts
        """
        self._resorts: dict[str, ResortMeta] = {}
        for resort in resorts:
            self._resorts[normalize_resort_code(resort.code)] = resort

        self._charts: dict[str, dict[int, ResortYearChart]] = {}
        for chart in charts:
            code = normalize_resort_code(chart.resort_code)
            if code not in self._resorts:
                logger.warning("Ignoring chart %s/%s for unknown resort", code, chart.year)
                continue
            self._charts.setdefault(code, {})[chart.year] = chart

    # === Construction ===

    @classmethod
    def from_dicts(
        cls,
        resorts: list[dict[str, Any]],
        charts: list[dict[str, Any]],
    ) -> "ChartRegistry":
        """Build a registry from plain dictionaries (tests, fixtures)."""
        return cls(
            resorts=[ResortMeta.model_validate(item) for item in resorts],
            charts=[ResortYearChart.model_validate(item) for item in charts],
        )

    @classmethod
    def from_directory(cls, data_dir: Path | str | None = None) -> "ChartRegistry":
        """Load resorts.json and charts/<year>/<RESORT>.json from a directory.

        Args:
            data_dir: Data directory. Defaults to DVC_CHART_DATA_DIR, then
                the data bundled with the package.

        Returns:
            The loaded registry.

        Raises:
            FileNotFoundError: If resorts.json doesn't exist.
            json.JSONDecodeError: If a data file is invalid JSON.
            pydantic.ValidationError: If a data file doesn't match the schema.
        """
        if data_dir is None:
            data_dir = os.environ.get("DVC_CHART_DATA_DIR") or DEFAULT_DATA_DIR
        data_dir = Path(data_dir)

        with open(data_dir / "resorts.json") as f:
            resorts_data = json.load(f)
        resorts = [ResortMeta.model_validate(item) for item in resorts_data["resorts"]]

        charts: list[ResortYearChart] = []
        for chart_path in sorted((data_dir / "charts").glob("*/*.json")):
            with open(chart_path) as f:
                charts.append(ResortYearChart.model_validate(json.load(f)))

        logger.info(
            f"Loaded {len(resorts)} resorts and {len(charts)} chart years from {data_dir}"
        )
        return cls(resorts=resorts, charts=charts)

    # === Resorts ===

    @property
    def resorts(self) -> list[ResortMeta]:
        return list(self._resorts.values())

    def has_resort(self, code: str | None) -> bool:
        return normalize_resort_code(code) in self._resorts

    def get_resort(self, code: str | None) -> ResortMeta:
        """Get resort metadata.

        Raises:
            UnsupportedResortError: If the code is unknown.
        """
        resort = self._resorts.get(normalize_resort_code(code))
        if resort is None:
            raise UnsupportedResortError(details={"resort_code": str(code)})
        return resort

    # === Chart years ===

    def available_years(self, code: str | None) -> list[int]:
        return sorted(self._charts.get(normalize_resort_code(code), {}))

    def resolve_chart_year(self, code: str | None, requested_year: int) -> int:
        """Pick the chart year used for a requested year.

        Raises:
            UnsupportedResortError: If the resort is unknown.
            ChartDataMissingError: If the resort has no chart in any year.
        """
        resort = self.get_resort(code)
        years = self.available_years(resort.code)
        if not years:
            raise ChartDataMissingError(details={"resort_code": resort.code})
        if requested_year in years:
            return requested_year

        earlier = [year for year in years if year <= requested_year]
        fallback = earlier[-1] if earlier else years[0]
        logger.debug(
            "No %s chart for %s, using %s", resort.code, requested_year, fallback
        )
        return fallback

    def get_chart(self, code: str | None, year: int) -> ResortYearChart:
        """Get the chart for a year, falling back to another loaded year."""
        resort = self.get_resort(code)
        resolved = self.resolve_chart_year(resort.code, year)
        return self._charts[normalize_resort_code(resort.code)][resolved]

    # === Lookups ===

    def lookup_night(
        self,
        code: str | None,
        room: str,
        view: str,
        night: DateInput,
        chart_year: int | None = None,
    ) -> NightRate:
        """Look up the points for one night with full provenance.

        Args:
            code: Resort calculator code
            room: Canonical room code
            view: View code
            night: Night date
            chart_year: Chart year to use; defaults to the night's year

        Returns:
            NightRate with points (zero on data gaps) and warning codes
        """
        night_date = parse_ymd(night, "night")
        requested_year = chart_year if chart_year is not None else night_date.year
        chart = self.get_chart(code, requested_year)
        day_type = day_type_for(night_date)

        warnings: list[QuoteWarningCode] = []
        if chart.year != requested_year:
            warnings.append(QuoteWarningCode.CHART_YEAR_FALLBACK)

        lookup_date = night_date
        if chart.year != night_date.year:
            lookup_date = project_to_year(night_date, chart.year)

        period = chart.period_for_date(lookup_date)
        points = 0
        if period is None:
            warnings.append(QuoteWarningCode.MISSING_TRAVEL_PERIOD)
            logger.warning(
                "No travel period for %s at %s (%s chart)", night_date, chart.resort_code, chart.year
            )
        else:
            rate = period.rate_for(room, view)
            if rate is None:
                warnings.append(QuoteWarningCode.MISSING_RATE)
                logger.warning(
                    "No %s/%s rate in period %s at %s", room, view, period.id, chart.resort_code
                )
            else:
                points = rate.for_day_type(day_type)

        return NightRate(
            points=points,
            day_type=day_type,
            period_id=period.id if period else None,
            chart_year=chart.year,
            requested_year=requested_year,
            warnings=warnings,
        )

    def lookup_rate(
        self,
        code: str | None,
        room: str,
        view: str,
        night: DateInput,
        chart_year: int | None = None,
    ) -> int:
        """Points for one night; zero when the chart has no rate for it."""
        return self.lookup_night(code, room, view, night, chart_year)["points"]

    # === Data audits ===

    def find_coverage_gaps(self, code: str | None, year: int) -> list[dt.date]:
        """Dates of a chart year not covered by any travel period.

        Only exact chart years are audited; no fallback is applied.
        """
        chart = self._exact_chart(code, year)
        return [day for day in _days_of_year(year) if chart.period_for_date(day) is None]

    def find_overlaps(self, code: str | None, year: int) -> list[dt.date]:
        """Dates of a chart year covered by more than one travel period."""
        chart = self._exact_chart(code, year)
        return [
            day
            for day in _days_of_year(year)
            if sum(1 for period in chart.periods if period.contains(day)) > 1
        ]

    def _exact_chart(self, code: str | None, year: int) -> ResortYearChart:
        resort = self.get_resort(code)
        chart = self._charts.get(normalize_resort_code(resort.code), {}).get(year)
        if chart is None:
            raise ChartDataMissingError(
                details={"resort_code": resort.code, "year": str(year)}
            )
        return chart


def _days_of_year(year: int) -> list[dt.date]:
    start = dt.date(year, 1, 1)
    count = (dt.date(year + 1, 1, 1) - start).days
    return [start + dt.timedelta(days=offset) for offset in range(count)]


@lru_cache(maxsize=1)
def get_chart_registry() -> ChartRegistry:
    """Get the process-wide registry, loaded on first use."""
    return ChartRegistry.from_directory()


def reset_chart_registry() -> None:
    """Drop the cached registry (tests, alternate data directories)."""
    get_chart_registry.cache_clear()
