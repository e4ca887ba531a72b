#!/usr/bin/env python3
"""Audit point charts for coverage gaps and overlapping travel periods.

Every date of a chart year must fall in exactly one travel period. Dates in
no period price at zero points; dates in two periods price with whichever
period is listed first.

Usage:
    python scripts/audit_charts.py
    python scripts/audit_charts.py --resort BLT --year 2026
    python scripts/audit_charts.py --data-dir /path/to/data
"""

import argparse
import datetime as dt
import sys

from dvc_pricing.services.chart_registry import ChartRegistry


def summarize_dates(dates: list[dt.date]) -> list[str]:
    """Collapse consecutive dates into 'start..end' spans."""
    spans: list[str] = []
    if not dates:
        return spans

    start = prev = dates[0]
    for day in dates[1:]:
        if day - prev == dt.timedelta(days=1):
            prev = day
            continue
        spans.append(str(start) if start == prev else f"{start}..{prev}")
        start = prev = day
    spans.append(str(start) if start == prev else f"{start}..{prev}")
    return spans


def audit_chart(registry: ChartRegistry, resort_code: str, year: int) -> bool:
    """Print the audit for one chart year. Returns True when it is clean."""
    gaps = registry.find_coverage_gaps(resort_code, year)
    overlaps = registry.find_overlaps(resort_code, year)

    if not gaps and not overlaps:
        print(f"  ✓ {resort_code} {year}")
        return True

    print(f"  ❌ {resort_code} {year}")
    if gaps:
        print(f"    - {len(gaps)} uncovered dates: {', '.join(summarize_dates(gaps))}")
    if overlaps:
        print(f"    - {len(overlaps)} overlapping dates: {', '.join(summarize_dates(overlaps))}")
    return False


def main() -> int:
    """Run the chart audit."""
    parser = argparse.ArgumentParser(description="Audit point charts for gaps and overlaps")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Data directory (default: DVC_CHART_DATA_DIR or the bundled data)",
    )
    parser.add_argument(
        "--resort",
        default=None,
        help="Only audit this resort code",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Only audit this chart year",
    )

    args = parser.parse_args()

    registry = ChartRegistry.from_directory(args.data_dir)
    resorts = [registry.get_resort(args.resort)] if args.resort else registry.resorts

    print("\n🔎 Auditing point charts\n")

    clean = True
    for resort in resorts:
        years = registry.available_years(resort.code)
        if args.year is not None:
            years = [year for year in years if year == args.year]
        if not years:
            print(f"  - {resort.code}: no chart loaded")
            continue
        for year in years:
            clean = audit_chart(registry, resort.code, year) and clean

    if not clean:
        print("\n❌ Chart audit found problems")
        return 1

    print("\n✅ All charts cover every date exactly once")
    return 0


if __name__ == "__main__":
    sys.exit(main())
