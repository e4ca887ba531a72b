"""API-specific response models.

Engine models (PointsQuote, CapSummary, PricingBand, ...) live in
dvc_pricing.models and are returned directly where they fit.

Modules:
- resorts: Resort listing and detail responses
- payouts: Payout stage and amount responses
"""

from .payouts import PayoutAmountResponse, PayoutStageResponse
from .resorts import ResortDetailResponse, ResortListResponse, ResortSummary

__all__ = [
    "PayoutAmountResponse",
    "PayoutStageResponse",
    "ResortDetailResponse",
    "ResortListResponse",
    "ResortSummary",
]
