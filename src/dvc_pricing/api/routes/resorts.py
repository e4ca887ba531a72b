"""Resort endpoints.

Resort metadata and chart years are loaded from the bundled data assets on
first use and served from memory.
"""

from fastapi import APIRouter, Depends

from dvc_pricing.api.dependencies import get_registry
from dvc_pricing.api.models import ResortDetailResponse, ResortListResponse, ResortSummary
from dvc_pricing.services.chart_registry import ChartRegistry

router = APIRouter(tags=["resorts"])


@router.get(
    "/resorts",
    summary="List resorts",
    description="""
List every resort that can be quoted.

**Notes:**
- `chart_years` lists the chart years loaded for each resort; quotes for
  other years fall back to the nearest earlier loaded year
""",
    response_description="All resorts with chart data",
    response_model=ResortListResponse,
)
async def list_resorts(
    registry: ChartRegistry = Depends(get_registry),
) -> ResortListResponse:
    """List all resorts in display order."""
    resorts = [
        ResortSummary(
            code=resort.code,
            name=resort.name,
            category=resort.category,
            room_types=list(resort.room_types),
            chart_years=registry.available_years(resort.code),
        )
        for resort in registry.resorts
    ]
    return ResortListResponse(resorts=resorts, total=len(resorts))


@router.get(
    "/resorts/{code}",
    summary="Get resort details",
    description="""
Get a resort's room types, views per room and maximum occupancy.

The first view listed for a room is the default view used when a quote
does not specify one.
""",
    response_description="Resort metadata",
    response_model=ResortDetailResponse,
    responses={
        404: {
            "description": "Resort has no chart entry",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error_code": "ERR_PRICING_001",
                        "message": "Points charts missing for selected resort",
                        "recovery": "Choose one of the resorts returned by /resorts",
                        "details": {"resort_code": "XYZ"},
                    }
                }
            },
        },
    },
)
async def get_resort(
    code: str,
    registry: ChartRegistry = Depends(get_registry),
) -> ResortDetailResponse:
    """Get one resort by calculator code (case-insensitive)."""
    resort = registry.get_resort(code)
    return ResortDetailResponse(
        resort=resort,
        chart_years=registry.available_years(resort.code),
    )
