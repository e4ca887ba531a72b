"""Unit tests for ChartRegistry loading and per-night lookups.

Test categories:
- Loading the bundled data and dictionaries
- Chart-year fallback
- Rate lookup by travel period and weekday bucket
- Data gaps (no period, no rate)
- Coverage audits
"""

import datetime as dt
import json
from pathlib import Path
from typing import Any

import pytest

from dvc_pricing.models import (
    ChartDataMissingError,
    DayType,
    QuoteWarningCode,
    UnsupportedResortError,
)
from dvc_pricing.services.chart_registry import ChartRegistry, get_chart_registry


# === Loading ===


class TestRegistryLoading:
    """Tests for building registries."""

    def test_bundled_data_has_all_resorts(self, registry: ChartRegistry) -> None:
        codes = [resort.code for resort in registry.resorts]
        assert codes == ["AKV", "BLT", "BWV", "PVB", "RVA", "SSR", "VGF"]

    def test_bundled_chart_years(self, registry: ChartRegistry) -> None:
        assert registry.available_years("BLT") == [2025, 2026, 2027]
        assert registry.available_years("SSR") == [2026]

    def test_resort_codes_are_case_insensitive(self, registry: ChartRegistry) -> None:
        assert registry.get_resort(" blt ").code == "BLT"
        assert registry.has_resort("vgf")

    def test_unknown_resort_raises(self, registry: ChartRegistry) -> None:
        with pytest.raises(UnsupportedResortError) as exc_info:
            registry.get_resort("XYZ")
        assert exc_info.value.details == {"resort_code": "XYZ"}

    def test_process_registry_is_cached(self) -> None:
        assert get_chart_registry() is get_chart_registry()

    def test_data_dir_from_environment(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        sample_resorts: list[dict[str, Any]],
        sample_charts: list[dict[str, Any]],
    ) -> None:
        """DVC_CHART_DATA_DIR points the registry at another data set."""
        (tmp_path / "charts" / "2026").mkdir(parents=True)
        (tmp_path / "resorts.json").write_text(json.dumps({"resorts": sample_resorts}))
        (tmp_path / "charts" / "2026" / "TST.json").write_text(json.dumps(sample_charts[0]))
        monkeypatch.setenv("DVC_CHART_DATA_DIR", str(tmp_path))

        loaded = ChartRegistry.from_directory()

        assert [resort.code for resort in loaded.resorts] == ["TST", "NOC"]
        assert loaded.available_years("TST") == [2026]

    def test_chart_for_unknown_resort_is_ignored(
        self, sample_resorts: list[dict[str, Any]], sample_charts: list[dict[str, Any]]
    ) -> None:
        orphan = dict(sample_charts[0], resort_code="ZZZ")
        loaded = ChartRegistry.from_dicts(sample_resorts, [orphan])
        assert loaded.available_years("TST") == []


# === Chart Year Resolution ===


class TestChartYearFallback:
    """Tests for resolve_chart_year."""

    def test_exact_year(self, registry: ChartRegistry) -> None:
        assert registry.resolve_chart_year("BLT", 2026) == 2026

    def test_later_year_uses_latest_earlier_chart(self, registry: ChartRegistry) -> None:
        assert registry.resolve_chart_year("BLT", 2099) == 2027
        assert registry.resolve_chart_year("VGF", 2027) == 2026

    def test_earlier_year_uses_earliest_chart(self, registry: ChartRegistry) -> None:
        assert registry.resolve_chart_year("AKV", 2020) == 2025

    def test_resort_without_charts_raises(self, sample_registry: ChartRegistry) -> None:
        with pytest.raises(ChartDataMissingError):
            sample_registry.resolve_chart_year("NOC", 2026)


# === Rate Lookup ===


class TestLookupNight:
    """Tests for lookup_night and lookup_rate."""

    def test_weekday_rate(self, registry: ChartRegistry) -> None:
        """Monday 2026-09-07 is in BLT period 1."""
        rate = registry.lookup_night("BLT", "STUDIO", "S", dt.date(2026, 9, 7))
        assert rate["points"] == 14
        assert rate["day_type"] is DayType.SUN_THU
        assert rate["period_id"] == 1
        assert rate["chart_year"] == 2026
        assert rate["warnings"] == []

    def test_weekend_rate(self, registry: ChartRegistry) -> None:
        """Friday 2026-09-04 uses the Fri/Sat rate."""
        assert registry.lookup_rate("BLT", "STUDIO", "S", "2026-09-04") == 17

    def test_holiday_period(self, registry: ChartRegistry) -> None:
        assert registry.lookup_rate("VGF", "DELUXESTUDIO", "S", "2026-12-31") == 34

    def test_explicit_chart_year(self, registry: ChartRegistry) -> None:
        """A 2026 night priced with the 2027 chart uses 2027 points."""
        rate = registry.lookup_night("BLT", "STUDIO", "S", "2026-09-07", chart_year=2027)
        assert rate["points"] == 15
        assert rate["chart_year"] == 2027
        assert rate["warnings"] == []

    def test_fallback_projects_month_and_day(self, registry: ChartRegistry) -> None:
        """2027-01-01 at VGF falls back to 2026 holiday period with Friday rate."""
        rate = registry.lookup_night("VGF", "DELUXESTUDIO", "S", "2027-01-01")
        assert rate["chart_year"] == 2026
        assert rate["requested_year"] == 2027
        assert rate["period_id"] == 7
        assert rate["day_type"] is DayType.FRI_SAT
        assert rate["points"] == 41
        assert rate["warnings"] == [QuoteWarningCode.CHART_YEAR_FALLBACK]


# === Data Gaps ===


class TestDataGaps:
    """Data gaps price at zero and never raise."""

    def test_uncovered_date_is_zero(self, sample_registry: ChartRegistry) -> None:
        rate = sample_registry.lookup_night("TST", "STUDIO", "S", "2026-12-28")
        assert rate["points"] == 0
        assert rate["period_id"] is None
        assert rate["warnings"] == [QuoteWarningCode.MISSING_TRAVEL_PERIOD]

    def test_missing_view_rate_is_zero(self, sample_registry: ChartRegistry) -> None:
        rate = sample_registry.lookup_night("TST", "STUDIO", "P", "2026-03-02")
        assert rate["points"] == 0
        assert rate["period_id"] == 1
        assert rate["warnings"] == [QuoteWarningCode.MISSING_RATE]

    def test_unknown_view_is_zero(self, registry: ChartRegistry) -> None:
        assert registry.lookup_rate("BLT", "STUDIO", "ZZ", "2026-09-07") == 0


# === Coverage Audits ===


class TestCoverageAudit:
    """Tests for find_coverage_gaps and find_overlaps."""

    @pytest.mark.parametrize("resort_code", ["AKV", "BLT", "BWV", "PVB", "RVA", "SSR", "VGF"])
    def test_bundled_2026_charts_cover_every_date_once(
        self, registry: ChartRegistry, resort_code: str
    ) -> None:
        assert registry.find_coverage_gaps(resort_code, 2026) == []
        assert registry.find_overlaps(resort_code, 2026) == []

    def test_reports_uncovered_dates(self, sample_registry: ChartRegistry) -> None:
        gaps = sample_registry.find_coverage_gaps("TST", 2026)
        assert gaps == [dt.date(2026, 12, day) for day in range(26, 32)]

    def test_audit_requires_exact_year(self, registry: ChartRegistry) -> None:
        with pytest.raises(ChartDataMissingError):
            registry.find_coverage_gaps("SSR", 2027)
