"""Standard error codes for the points and pricing engine.

Configuration errors (unknown resort, unknown room, missing chart data) and
invalid input are raised as PricingError subclasses. Data gaps inside a chart
are never errors; they surface as quote warnings instead.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes for pricing operations."""

    RESORT_NOT_SUPPORTED = "ERR_PRICING_001"
    ROOM_NOT_SUPPORTED = "ERR_PRICING_002"
    CHART_DATA_MISSING = "ERR_PRICING_003"
    INVALID_STAY_DATES = "ERR_PRICING_004"
    STAY_DETAILS_REQUIRED = "ERR_PRICING_005"
    INVALID_PAYOUT_STAGE = "ERR_PRICING_006"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.RESORT_NOT_SUPPORTED: "Points charts missing for selected resort",
    ErrorCode.ROOM_NOT_SUPPORTED: "Points charts missing for selected room type",
    ErrorCode.CHART_DATA_MISSING: "No points chart is available for this resort",
    ErrorCode.INVALID_STAY_DATES: "Invalid stay dates",
    ErrorCode.STAY_DETAILS_REQUIRED: "Stay details are incomplete",
    ErrorCode.INVALID_PAYOUT_STAGE: "Payout stage must be 70 or 30",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.RESORT_NOT_SUPPORTED: "Choose one of the resorts returned by /resorts",
    ErrorCode.ROOM_NOT_SUPPORTED: "Choose a room type offered at the selected resort",
    ErrorCode.CHART_DATA_MISSING: "Add the resort's chart data and redeploy",
    ErrorCode.INVALID_STAY_DATES: "Send dates as YYYY-MM-DD for a stay of at most 60 nights",
    ErrorCode.STAY_DETAILS_REQUIRED: "Provide resort, room type and check-in date",
    ErrorCode.INVALID_PAYOUT_STAGE: "Use the stage returned for the completed milestone",
}


class ErrorResponse(BaseModel):
    """Standard error response body for failed pricing operations."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ErrorResponse":
        """Create an ErrorResponse from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            An ErrorResponse with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class PricingError(Exception):
    """Exception raised by points quoting and pricing operations.

    Subclasses fix the error code; the base class can be raised with any code.
    """

    code: ErrorCode = ErrorCode.STAY_DETAILS_REQUIRED

    def __init__(
        self,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, str]] = None,
    ):
        if code is not None:
            self.code = code
        self.message = ERROR_MESSAGES[self.code]
        self.recovery = ERROR_RECOVERY[self.code]
        self.details = details
        super().__init__(self._describe())

    def _describe(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({context})"

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse."""
        return ErrorResponse.from_code(self.code, self.details)


class UnsupportedResortError(PricingError):
    """The resort code has no chart entry at all."""

    code = ErrorCode.RESORT_NOT_SUPPORTED


class UnsupportedRoomError(PricingError):
    """None of the room label's candidate codes exist at the resort."""

    code = ErrorCode.ROOM_NOT_SUPPORTED


class ChartDataMissingError(PricingError):
    """The resort is known but no chart year is loaded for it."""

    code = ErrorCode.CHART_DATA_MISSING


class InvalidStayDatesError(PricingError):
    """A stay date could not be parsed or the stay is out of range."""

    code = ErrorCode.INVALID_STAY_DATES


class StayDetailsRequiredError(PricingError):
    """A required stay field was blank."""

    code = ErrorCode.STAY_DETAILS_REQUIRED


class InvalidPayoutStageError(PricingError):
    """A payout amount was requested for a stage other than 70 or 30."""

    code = ErrorCode.INVALID_PAYOUT_STAGE
