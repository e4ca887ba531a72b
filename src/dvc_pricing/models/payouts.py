"""Owner payout, guest price and milestone models.

All amounts are in USD cents.
"""

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dvc_pricing.models.enums import MilestoneCode, MilestoneStatus, PayoutStage


class MilestoneStep(BaseModel):
    """A milestone shown on the owner's timeline."""

    model_config = ConfigDict(strict=True, frozen=True)

    code: MilestoneCode
    label: str


class MilestoneRow(BaseModel):
    """Recorded state of one milestone for a rental."""

    model_config = ConfigDict(frozen=True)

    code: MilestoneCode
    status: MilestoneStatus = MilestoneStatus.PENDING
    occurred_at: Optional[dt.datetime] = None


class MilestoneProgress(BaseModel):
    """Completed share of the milestone timeline."""

    model_config = ConfigDict(strict=True)

    completed: int
    total: int
    percent: int


class OwnerAction(BaseModel):
    """Next thing the owner needs to do."""

    model_config = ConfigDict(strict=True, frozen=True)

    key: str
    label: str
    description: str


class PayoutAmount(BaseModel):
    """Amount released for one payout stage."""

    model_config = ConfigDict(strict=True)

    stage: PayoutStage
    total_cents: int
    amount_cents: int = Field(ge=0)


class OwnerPayoutResult(BaseModel):
    """Owner rate per point and total payout for a rental."""

    model_config = ConfigDict(strict=True)

    owner_base_rate_per_point_cents: int
    owner_premium_per_point_cents: int
    owner_rate_per_point_cents: int
    owner_total_cents: int
    owner_home_resort_premium_applied: bool


class GuestPriceResult(BaseModel):
    """Guest rate per point derived from a guest total."""

    model_config = ConfigDict(strict=True)

    guest_rate_per_point_cents: Optional[int] = None
    guest_total_cents: Optional[int] = None
