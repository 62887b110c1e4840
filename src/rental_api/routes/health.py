"""Health check endpoint."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from rental_calendar import __version__

router = APIRouter(tags=["health"])


@router.get("/ping")
async def ping() -> dict[str, Any]:
    """Liveness probe."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "rental-calendar-api",
        "version": __version__,
    }
