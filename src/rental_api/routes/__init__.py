"""API routes package.

Routers are organized by domain:

- health: Liveness probe
- calendar: Occupied days and availability checks
- reservations: Booking, status changes and extensions
- extensions: Extension pricing
- distance: Listing proximity

All routers are registered in main.py with the /api prefix.
"""

from rental_api.routes.calendar import router as calendar_router
from rental_api.routes.distance import router as distance_router
from rental_api.routes.extensions import router as extensions_router
from rental_api.routes.health import router as health_router
from rental_api.routes.reservations import router as reservations_router

__all__ = [
    "calendar_router",
    "distance_router",
    "extensions_router",
    "health_router",
    "reservations_router",
]
