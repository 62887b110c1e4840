"""Structured logging with request correlation IDs.

Usage:
    from rental_calendar.utils.logging import get_logger, log_booking_operation

    logger = get_logger(__name__)
    log_booking_operation(logger, "book", resource_id="listing-1", result="accepted")
"""

import datetime as dt
import logging
import uuid
from contextvars import ContextVar
from typing import Any

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

NO_CORRELATION_ID = "no-correlation-id"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind a correlation ID to the current context and return it.

    A caller-supplied ID is kept as is; otherwise a UUID4 is minted.
    """
    cid = correlation_id or str(uuid.uuid4())
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context, if any."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that stamps records with the correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter prefixing every line with its correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return f"[{record.correlation_id}] {super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """logging.getLogger plus a CorrelationIdFilter (added once per logger)."""
    named = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIdFilter) for f in named.filters):
        named.addFilter(CorrelationIdFilter())
    return named


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install a StructuredFormatter handler on the root logger.

    Safe to call more than once; an existing structured handler is reused.
    """
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler.formatter, StructuredFormatter):
            return
    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter(LOG_FORMAT))
    root.addHandler(handler)


def _render(value: Any) -> Any:
    if isinstance(value, dt.date):
        return value.isoformat()
    return value


def log_booking_operation(
    logger: logging.Logger,
    operation: str,
    *,
    resource_id: str | None = None,
    reservation_id: str | None = None,
    start_date: dt.date | None = None,
    end_date: dt.date | None = None,
    result: str | None = None,
    reason: str | None = None,
    **extra: Any,
) -> None:
    """Log a calendar operation with structured context.

    Rejections (a reason is given) are logged as warnings; everything
    else at info level.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "book", "request_extension")
        resource_id: Listing the operation applies to
        reservation_id: Reservation involved, if any
        start_date: First day of the range involved
        end_date: Last day of the range involved
        result: Outcome (e.g., "accepted", "rejected")
        reason: Why the operation was rejected
        **extra: Additional context fields
    """
    fields: dict[str, Any] = {
        "resource_id": resource_id,
        "reservation_id": reservation_id,
        "start_date": start_date,
        "end_date": end_date,
        "result": result,
        "reason": reason,
        **extra,
    }
    context: dict[str, Any] = {"operation": operation}
    context.update({k: _render(v) for k, v in fields.items() if v not in (None, "")})

    message = " | ".join(
        [f"Calendar operation: {operation}"]
        + [f"{k}={v}" for k, v in context.items() if k != "operation"]
    )
    level = logging.WARNING if reason else logging.INFO
    logger.log(level, message, extra=context)
