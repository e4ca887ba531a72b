"""FastAPI exception handlers for converting PricingError to HTTP responses.

The ErrorCode-to-HTTP status mapping:
- 400 Bad Request: Invalid or incomplete input
- 404 Not Found: Resort or room type has no chart entry
- 500 Internal Server Error: Resort is known but its chart data is missing

Usage:
    from dvc_pricing.api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from dvc_pricing.models.errors import ErrorCode, PricingError
from dvc_pricing.utils.logging import get_logger

logger = get_logger(__name__)

# Map ErrorCode to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Unknown resort or room -> 404 Not Found
    ErrorCode.RESORT_NOT_SUPPORTED: HTTP_404_NOT_FOUND,
    ErrorCode.ROOM_NOT_SUPPORTED: HTTP_404_NOT_FOUND,
    # Input errors -> 400 Bad Request
    ErrorCode.INVALID_STAY_DATES: HTTP_400_BAD_REQUEST,
    ErrorCode.STAY_DETAILS_REQUIRED: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAYOUT_STAGE: HTTP_400_BAD_REQUEST,
    # Deployed without chart data -> 500
    ErrorCode.CHART_DATA_MISSING: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode.

    Args:
        code: The ErrorCode to map

    Returns:
        HTTP status code, defaults to 400 if not explicitly mapped.
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
    """Handle PricingError exceptions and convert to JSON response.

    Args:
        request: The incoming request
        exc: The PricingError exception

    Returns:
        JSONResponse with the ErrorResponse body and mapped status code.
    """
    status_code = get_http_status_for_error(exc.code)
    log = logger.error if status_code >= HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
    log(
        f"{request.method} {request.url.path} failed: {exc}",
        extra={"error_code": exc.code.value, "status_code": status_code},
    )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_error_response().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(PricingError, pricing_error_handler)  # type: ignore[arg-type]
