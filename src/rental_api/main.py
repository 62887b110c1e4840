"""FastAPI application for the rental calendar REST API.

Endpoints:
- Health check
- Listing calendars and availability checks
- Booking, status changes and extension requests
- Extension pricing
- Listing distance
"""

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from rental_api.exceptions import register_exception_handlers
from rental_api.middleware.correlation import CorrelationIdMiddleware
from rental_api.routes import (
    calendar_router,
    distance_router,
    extensions_router,
    health_router,
    reservations_router,
)
from rental_calendar import __version__
from rental_calendar.utils.logging import configure_logging

configure_logging(os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

app = FastAPI(
    title="Rental Calendar API",
    description="Availability, booking and extension rules for rental listings",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=sorted({FRONTEND_URL, "http://localhost:3000", "http://127.0.0.1:3000"}),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)

app.include_router(health_router, prefix="/api")
app.include_router(calendar_router, prefix="/api")
app.include_router(reservations_router, prefix="/api")
app.include_router(extensions_router, prefix="/api")
app.include_router(distance_router, prefix="/api")

# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = False) -> None:
    """Run the API with uvicorn.

    Args:
        host: Host to bind to
        port: Port to listen on
        reload: Enable hot reload for development
    """
    import uvicorn

    logger.info("Starting rental calendar API on %s:%d", host, port)
    if reload:
        # Reload mode needs an import string
        uvicorn.run("rental_api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
