"""API routes package.

Routers are organized by domain:

- resorts: Resort metadata and loaded chart years
- points: Points quotes and dollar pricing
- ready_stays: Seasonal pricing bands, guest caps and owner payout ceilings
- payouts: Payout stages released by rental milestones

All routers are registered in main.py with /api prefix.
"""

from dvc_pricing.api.routes.payouts import router as payouts_router
from dvc_pricing.api.routes.points import router as points_router
from dvc_pricing.api.routes.ready_stays import router as ready_stays_router
from dvc_pricing.api.routes.resorts import router as resorts_router

__all__ = [
    "payouts_router",
    "points_router",
    "ready_stays_router",
    "resorts_router",
]
