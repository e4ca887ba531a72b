"""API models for payout endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dvc_pricing.models import PayoutStage


class PayoutStageResponse(BaseModel):
    """Payout stage released by a milestone."""

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "milestone_code": "check_out",
                    "label": "Check-out",
                    "stage": 30,
                }
            ]
        },
    )

    milestone_code: str = Field(..., description="Milestone code as sent by the caller")
    label: str
    stage: Optional[PayoutStage] = Field(
        default=None,
        description="Percentage released (70 or 30); null when nothing is released",
    )


class PayoutAmountResponse(BaseModel):
    """Amount released for a payout stage, in USD cents."""

    model_config = ConfigDict(strict=True)

    stage: PayoutStage
    total_cents: int = Field(..., description="Rental amount in USD cents", examples=[10000])
    amount_cents: int = Field(..., ge=0, description="Released amount in USD cents", examples=[7000])
    amount_display: str = Field(..., description="Released amount formatted as dollars", examples=["$70.00"])
