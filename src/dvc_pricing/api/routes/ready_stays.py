"""Ready-stay pricing endpoints.

Provides REST endpoints for:
- The seasonal pricing band of a date
- Per-night guest caps and owner ceilings for a stay
- Maximum and suggested owner payouts for a listing

Cap amounts are in USD cents per point; owner payout options are whole
dollars per point.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from dvc_pricing.api.dependencies import get_cap_service
from dvc_pricing.models import CapSummary, OwnerPayoutOptions, PricingBand
from dvc_pricing.services.pricing_caps import PricingCapService
from dvc_pricing.services.seasons import get_ready_stay_pricing_band

router = APIRouter(tags=["ready-stays"])


@router.get(
    "/ready-stays/pricing-band",
    summary="Get pricing band for a date",
    description="""
Get the season and owner/guest price band for a check-in date.

Seasons are matched by month and day: Christmas (Dec 15 - Jan 5) is checked
before Marathon (Jan 1 - Jan 15), then Halloween, Spring Break and High
season. Any other date is normal season.
""",
    response_description="Pricing band for the date's season",
    response_model=PricingBand,
    responses={
        200: {
            "description": "Band found",
            "content": {
                "application/json": {
                    "example": {
                        "season_type": "christmas",
                        "min_owner_cents": 2800,
                        "suggested_owner_cents": 3000,
                        "max_owner_cents": 3100,
                        "guest_cap_cents": 3800,
                        "fee_cents": 700,
                    }
                }
            },
        },
        400: {"description": "Invalid check-in date"},
    },
)
async def get_pricing_band(
    check_in: str = Query(..., description="Check-in date (YYYY-MM-DD)", examples=["2026-12-20"]),
    service: PricingCapService = Depends(get_cap_service),
) -> PricingBand:
    """Get the pricing band for a date."""
    return get_ready_stay_pricing_band(check_in, table=service.table)


@router.get(
    "/ready-stays/caps",
    summary="Guest caps for a stay",
    description="""
Compute the guest price cap for every night of a stay and the owner payout
ceilings derived from them.

Each night's cap is its season's guest cap plus the resort modifier,
floored at zero. The stay is governed by its strictest (lowest) night.

**Notes:**
- Amounts are in USD cents per point
- Owner ceilings are the cap minus the platform fee per point
- A missing, invalid or non-forward check-out is treated as one night
""",
    response_description="Per-night caps with strictest and average",
    response_model=CapSummary,
    responses={400: {"description": "Invalid check-in date"}},
)
async def get_caps_for_stay(
    check_in: str = Query(..., description="Check-in date (YYYY-MM-DD)", examples=["2026-12-30"]),
    check_out: Optional[str] = Query(
        None, description="Check-out date (YYYY-MM-DD)", examples=["2027-01-10"]
    ),
    resort_code: Optional[str] = Query(None, description="Resort calculator code", examples=["VGF"]),
    service: PricingCapService = Depends(get_cap_service),
) -> CapSummary:
    """Compute caps for a stay."""
    return service.compute_caps_for_stay(check_in, check_out, resort_code)


@router.get(
    "/ready-stays/owner-payouts",
    summary="Owner payout options for a stay",
    description="""
Get the maximum owner payout per point for a stay and up to three whole
dollar suggestions at and just below it.

The maximum is the strictest seasonal guest cap minus the platform fee.
Resort modifiers are not applied.
""",
    response_description="Maximum payout and suggestions in dollars per point",
    response_model=OwnerPayoutOptions,
    responses={
        200: {
            "description": "Options computed",
            "content": {
                "application/json": {
                    "example": {
                        "max_owner_payout_dollars": "28",
                        "suggested_payouts_dollars": [26, 27, 28],
                        "season_type": "marathon",
                    }
                }
            },
        },
        400: {"description": "Invalid check-in date"},
    },
)
async def get_owner_payouts(
    check_in: str = Query(..., description="Check-in date (YYYY-MM-DD)"),
    check_out: Optional[str] = Query(None, description="Check-out date (YYYY-MM-DD)"),
    service: PricingCapService = Depends(get_cap_service),
) -> OwnerPayoutOptions:
    """Get owner payout options."""
    return service.get_owner_payout_options(check_in, check_out)
