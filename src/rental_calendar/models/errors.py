"""Standard error codes for the rental calendar engine.

Advisory outcomes (unavailable dates, rejected extensions, missing
coordinates) are returned as values. The codes below are reserved for
faults that fail a single call.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes for calendar operations."""

    # Booking error codes (ERR_001-ERR_006)
    DATES_UNAVAILABLE = "ERR_001"
    RESERVATION_NOT_FOUND = "ERR_002"
    RESERVATION_OVERLAP = "ERR_003"
    INVALID_STATUS_TRANSITION = "ERR_004"
    EXTENSION_REJECTED = "ERR_005"
    RESERVATION_NOT_EXTENDABLE = "ERR_006"

    # Input error codes (ERR_INPUT_001-ERR_INPUT_003)
    INVALID_DATE = "ERR_INPUT_001"
    INVALID_DATE_RANGE = "ERR_INPUT_002"
    INVALID_PRICE = "ERR_INPUT_003"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    # Booking errors
    ErrorCode.DATES_UNAVAILABLE: "The requested dates are not available",
    ErrorCode.RESERVATION_NOT_FOUND: "Reservation not found",
    ErrorCode.RESERVATION_OVERLAP: "Reservation overlaps an existing booking",
    ErrorCode.INVALID_STATUS_TRANSITION: "Reservation status cannot change that way",
    ErrorCode.EXTENSION_REJECTED: "The extension request was rejected",
    ErrorCode.RESERVATION_NOT_EXTENDABLE: "Only accepted reservations can be extended",
    # Input errors
    ErrorCode.INVALID_DATE: "Date value could not be parsed",
    ErrorCode.INVALID_DATE_RANGE: "Start date must not be after end date",
    ErrorCode.INVALID_PRICE: "Daily price must be a non-negative amount in cents",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "Pick dates outside the listing's occupied calendar days",
    ErrorCode.RESERVATION_NOT_FOUND: "Verify the listing and reservation IDs",
    ErrorCode.RESERVATION_OVERLAP: "Reload the calendar and choose a free range",
    ErrorCode.INVALID_STATUS_TRANSITION: "Check the reservation's current status",
    ErrorCode.EXTENSION_REJECTED: "Choose extension dates that satisfy the stated reason",
    ErrorCode.RESERVATION_NOT_EXTENDABLE: "Wait for the booking to be accepted",
    ErrorCode.INVALID_DATE: "Use YYYY-MM-DD dates",
    ErrorCode.INVALID_DATE_RANGE: "Swap the dates or pick a later end date",
    ErrorCode.INVALID_PRICE: "Send the daily price as a whole number of cents",
}


class ToolError(BaseModel):
    """JSON body returned for a failed call."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(cls, code: ErrorCode, details: Optional[dict[str, str]] = None) -> "ToolError":
        """Build the body for a code, filling in its message and recovery hint."""
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """A calendar or booking operation failed.

    Carries an ErrorCode plus string details; the API turns it into a
    ToolError body via to_tool_error().
    """

    def __init__(self, code: ErrorCode, details: Optional[dict[str, str]] = None):
        super().__init__(ERROR_MESSAGES[code])
        self.code = code
        self.details = details

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.code]

    @property
    def recovery(self) -> str:
        return ERROR_RECOVERY[self.code]

    def to_tool_error(self) -> ToolError:
        return ToolError.from_code(self.code, self.details)


class InvalidDateError(BookingError, ValueError):
    """Raised when a value cannot be normalized to a calendar date.

    Subclasses ValueError so pydantic validators report it as a
    validation error.
    """

    def __init__(self, value: object):
        super().__init__(ErrorCode.INVALID_DATE, {"value": repr(value)})
