"""API models for resort endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from dvc_pricing.models import PricingTier, ResortMeta


class ResortSummary(BaseModel):
    """Resort entry in the resort list."""

    model_config = ConfigDict(strict=True)

    code: str = Field(..., description="Resort calculator code", examples=["BLT"])
    name: str = Field(..., description="Resort display name")
    category: PricingTier = Field(..., description="Pricing category")
    room_types: list[str] = Field(..., description="Canonical room codes")
    chart_years: list[int] = Field(
        default_factory=list,
        description="Chart years loaded for the resort",
        examples=[[2025, 2026, 2027]],
    )


class ResortListResponse(BaseModel):
    """All resorts with chart data."""

    model_config = ConfigDict(strict=True)

    resorts: list[ResortSummary]
    total: int = Field(..., ge=0)


class ResortDetailResponse(BaseModel):
    """Full resort metadata with its loaded chart years."""

    model_config = ConfigDict(strict=True)

    resort: ResortMeta
    chart_years: list[int]
