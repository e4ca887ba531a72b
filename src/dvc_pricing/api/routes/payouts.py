"""Owner payout endpoints.

Owners are paid 70% of the rental amount when the Disney confirmation is
uploaded and 30% after check-out.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from dvc_pricing.api.dependencies import get_payout_service
from dvc_pricing.api.models import PayoutAmountResponse, PayoutStageResponse
from dvc_pricing.services.payouts import PayoutScheduleService
from dvc_pricing.utils.money import format_dollars_from_cents

router = APIRouter(tags=["payouts"])


@router.get(
    "/payouts/stage/{milestone_code}",
    summary="Payout stage for a milestone",
    description="""
Get the payout stage released when a milestone is completed.

Returns `stage: 70` for `disney_confirmation_uploaded`, `stage: 30` for
`check_out`, and `stage: null` for every other code, including codes that
are not milestones.
""",
    response_description="Payout stage or null",
    response_model=PayoutStageResponse,
)
async def get_payout_stage(
    milestone_code: str,
    service: PayoutScheduleService = Depends(get_payout_service),
) -> PayoutStageResponse:
    """Get the payout stage for a milestone."""
    return PayoutStageResponse(
        milestone_code=milestone_code,
        label=service.get_milestone_label(milestone_code),
        stage=service.get_payout_stage_for_milestone(milestone_code),
    )


@router.get(
    "/payouts/amount",
    summary="Payout amount for a stage",
    description="""
Calculate the amount released for a payout stage.

**Notes:**
- Amounts are in USD cents
- The amount is rounded half up to the cent; the two stages are rounded
  independently
- A missing or non-positive total releases nothing
""",
    response_description="Released amount",
    response_model=PayoutAmountResponse,
    responses={
        200: {
            "description": "Amount calculated",
            "content": {
                "application/json": {
                    "example": {
                        "stage": 70,
                        "total_cents": 10000,
                        "amount_cents": 7000,
                        "amount_display": "$70.00",
                    }
                }
            },
        },
        400: {"description": "Stage is not 70 or 30"},
    },
)
async def get_payout_amount(
    stage: int = Query(..., description="Payout stage (70 or 30)", examples=[70]),
    total_cents: Optional[int] = Query(None, description="Rental amount in USD cents"),
    service: PayoutScheduleService = Depends(get_payout_service),
) -> PayoutAmountResponse:
    """Calculate a payout amount."""
    payout = service.get_payout_amount(total_cents, stage)
    return PayoutAmountResponse(
        stage=payout.stage,
        total_cents=payout.total_cents,
        amount_cents=payout.amount_cents,
        amount_display=format_dollars_from_cents(payout.amount_cents, whole=False),
    )
