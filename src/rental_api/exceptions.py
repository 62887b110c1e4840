"""FastAPI exception handlers for converting BookingError to HTTP responses.

The response body always has the ToolError shape. ErrorCode-to-status
mapping:
- 400 Bad Request: rejected ranges, extensions and malformed values
- 404 Not Found: unknown reservation
- 409 Conflict: state conflicts (overlap, status transition, not extendable)

Usage:
    from rental_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from rental_calendar.models.errors import BookingError, ErrorCode

logger = logging.getLogger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Business rule rejections -> 400
    ErrorCode.DATES_UNAVAILABLE: HTTP_400_BAD_REQUEST,
    ErrorCode.EXTENSION_REJECTED: HTTP_400_BAD_REQUEST,
    # Bad values -> 400
    ErrorCode.INVALID_DATE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE_RANGE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PRICE: HTTP_400_BAD_REQUEST,
    # Not found -> 404
    ErrorCode.RESERVATION_NOT_FOUND: HTTP_404_NOT_FOUND,
    # State conflicts -> 409
    ErrorCode.RESERVATION_OVERLAP: HTTP_409_CONFLICT,
    ErrorCode.INVALID_STATUS_TRANSITION: HTTP_409_CONFLICT,
    ErrorCode.RESERVATION_NOT_EXTENDABLE: HTTP_409_CONFLICT,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode (400 if not mapped)."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    """Convert a BookingError to a ToolError JSON response."""
    return JSONResponse(
        status_code=get_http_status_for_error(exc.code),
        content=exc.to_tool_error().model_dump(mode="json"),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for uncaught exceptions; hides internal details."""
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error_code": "ERR_INTERNAL",
            "message": "An unexpected error occurred",
            "recovery": "Please try again later or contact support",
            "details": None,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(BookingError, booking_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
