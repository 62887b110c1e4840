"""Correlation ID middleware for request tracing.

Reuses the caller's X-Correlation-ID header or generates one, exposes it
to log records for the duration of the request and echoes it back.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from rental_calendar.utils.logging import clear_correlation_id, get_logger, set_correlation_id

CORRELATION_ID_HEADER = "X-Correlation-ID"

logger = get_logger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tags each request, its log lines and its response with one ID."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        cid = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        try:
            response = await call_next(request)
            logger.debug("%s %s -> %d", request.method, request.url.path, response.status_code)
            response.headers[CORRELATION_ID_HEADER] = cid
            return response
        finally:
            clear_correlation_id()
