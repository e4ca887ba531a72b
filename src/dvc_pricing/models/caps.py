"""Ready-stay pricing band and price-cap models.

All amounts are USD cents per point unless the field name says dollars.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dvc_pricing.models.enums import Season


class SeasonWindow(BaseModel):
    """A month/day window mapped to a season.

    A window whose start is later in the year than its end wraps across
    New Year (e.g. Dec 15 - Jan 5).
    """

    model_config = ConfigDict(frozen=True)

    season: Season
    start_month: int = Field(ge=1, le=12)
    start_day: int = Field(ge=1, le=31)
    end_month: int = Field(ge=1, le=12)
    end_day: int = Field(ge=1, le=31)

    @property
    def start_key(self) -> int:
        return self.start_month * 100 + self.start_day

    @property
    def end_key(self) -> int:
        return self.end_month * 100 + self.end_day

    @property
    def wraps(self) -> bool:
        return self.start_key > self.end_key


class PricingBand(BaseModel):
    """Owner and guest price limits for one season."""

    model_config = ConfigDict(frozen=True)

    season_type: Season
    min_owner_cents: int = Field(ge=0)
    suggested_owner_cents: int = Field(ge=0)
    max_owner_cents: int = Field(ge=0)
    guest_cap_cents: int = Field(ge=0)
    fee_cents: int = Field(ge=0)

    @model_validator(mode="after")
    def check_owner_bounds(self) -> "PricingBand":
        if not self.min_owner_cents <= self.suggested_owner_cents <= self.max_owner_cents:
            raise ValueError(f"owner bounds out of order for {self.season_type.value}")
        return self


class ReadyStayPricingTable(BaseModel):
    """The full static pricing table loaded from ready_stay_pricing.json."""

    model_config = ConfigDict(frozen=True)

    fee_per_point_cents: int = Field(ge=0)
    global_min_owner_payout_dollars: int = Field(ge=0)
    # Precedence order: first matching window wins
    season_windows: list[SeasonWindow] = Field(min_length=1)
    default_season: Season = Season.NORMAL
    bands: dict[Season, PricingBand]
    resort_modifiers_dollars: dict[str, Decimal] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_bands(self) -> "ReadyStayPricingTable":
        missing = [season.value for season in Season if season not in self.bands]
        if missing:
            raise ValueError(f"pricing bands missing for: {', '.join(missing)}")
        return self


class NightCapRow(BaseModel):
    """Guest cap for one night of a stay."""

    model_config = ConfigDict(strict=True, frozen=True)

    night: dt.date
    season_type: Season
    base_cap_cents: int
    resort_modifier_cents: int
    final_cap_cents: int = Field(ge=0)


class CapSummary(BaseModel):
    """Per-night caps and stay-level owner ceilings."""

    model_config = ConfigDict(strict=True)

    nights: list[NightCapRow]
    strictest_cap_cents: int
    strictest_season_type: Season
    average_cap_cents: int
    max_owner_payout_strictest_cents: int
    max_owner_payout_average_cents: int


class StayGuestPriceCap(BaseModel):
    """Strictest guest cap for a stay, without resort modifiers."""

    model_config = ConfigDict(strict=True)

    cap_dollars: Decimal
    season_type: Season


class OwnerPayoutOptions(BaseModel):
    """Maximum owner payout and the suggested choices below it."""

    model_config = ConfigDict(strict=True)

    max_owner_payout_dollars: Decimal
    suggested_payouts_dollars: list[int]
    season_type: Season
