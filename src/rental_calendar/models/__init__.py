"""Pydantic models for rental calendar data entities."""

from .availability import AvailabilityBounds, AvailabilityResult
from .enums import BLOCKING_STATUSES, STATUS_TRANSITIONS, ReservationStatus
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    BookingError,
    ErrorCode,
    InvalidDateError,
    ToolError,
)
from .extension import ExtensionRejection, ExtensionValidation
from .geo import Coordinates
from .reservation import (
    DateRange,
    ReservationPeriod,
    format_date_for_api,
    inclusive_day_count,
    iter_days,
    to_day,
)

__all__ = [
    # Enums
    "BLOCKING_STATUSES",
    "STATUS_TRANSITIONS",
    "ReservationStatus",
    # Intervals
    "DateRange",
    "ReservationPeriod",
    "format_date_for_api",
    "inclusive_day_count",
    "iter_days",
    "to_day",
    # Availability
    "AvailabilityBounds",
    "AvailabilityResult",
    # Extensions
    "ExtensionRejection",
    "ExtensionValidation",
    # Geo
    "Coordinates",
    # Errors
    "BookingError",
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "InvalidDateError",
    "ToolError",
]
