"""Seasonal pricing-band table and resort modifiers.

Seasons are assigned by month/day windows checked in a fixed precedence
order; the first window containing the date wins, and dates outside every
window are "normal". Christmas (Dec 15 - Jan 5) is checked before Marathon
(Jan 1 - Jan 15), so Jan 1-5 are Christmas nights.
"""

import json
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from dvc_pricing.models import PricingBand, ReadyStayPricingTable, Season
from dvc_pricing.services.chart_registry import normalize_resort_code
from dvc_pricing.utils.dates import DateInput, month_day_key, parse_ymd
from dvc_pricing.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PRICING_PATH = Path(__file__).parent.parent / "data" / "ready_stay_pricing.json"


def load_pricing_table(json_path: Path | str | None = None) -> ReadyStayPricingTable:
    """Load the ready-stay pricing table from JSON.

    Args:
        json_path: Path to JSON file. If None, uses the bundled table.

    Returns:
        The validated pricing table.
    """
    if json_path is None:
        json_path = DEFAULT_PRICING_PATH
    json_path = Path(json_path)

    with open(json_path) as f:
        data = json.load(f)

    table = ReadyStayPricingTable.model_validate(data)
    logger.info(f"Loaded ready-stay pricing table from {json_path}")
    return table


@lru_cache(maxsize=1)
def get_pricing_table() -> ReadyStayPricingTable:
    """Get the process-wide pricing table, loaded on first use."""
    return load_pricing_table()


def reset_pricing_table() -> None:
    """Drop the cached pricing table."""
    get_pricing_table.cache_clear()


def is_within_window(key: int, start_key: int, end_key: int) -> bool:
    """Cyclic containment test for month*100+day keys.

    A window whose start key is greater than its end key wraps the year end.
    """
    if start_key <= end_key:
        return start_key <= key <= end_key
    return key >= start_key or key <= end_key


def classify_season(
    night: DateInput,
    table: ReadyStayPricingTable | None = None,
) -> Season:
    """Demand season for a calendar date. Only month and day are used."""
    table = table or get_pricing_table()
    key = month_day_key(parse_ymd(night, "night"))

    for window in table.season_windows:
        if is_within_window(key, window.start_key, window.end_key):
            return window.season
    return table.default_season


def get_ready_stay_pricing_band(
    check_in: DateInput,
    resort_id: str | None = None,
    table: ReadyStayPricingTable | None = None,
) -> PricingBand:
    """Pricing band for the season of a date.

    Args:
        check_in: Night to classify
        resort_id: Resort of the listing. Bands are the same at every
            resort; resort modifiers apply only in the cap service.
        table: Pricing table; defaults to the bundled one
    """
    table = table or get_pricing_table()
    return table.bands[classify_season(check_in, table)]


def get_resort_modifier_dollars(
    resort_code: str | None,
    table: ReadyStayPricingTable | None = None,
) -> Decimal:
    """Flat per-point dollar adjustment for a resort; 0 when none is set."""
    table = table or get_pricing_table()
    return table.resort_modifiers_dollars.get(normalize_resort_code(resort_code), Decimal(0))
