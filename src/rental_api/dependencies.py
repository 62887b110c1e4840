"""FastAPI dependency injection providers for calendar services.

Services are cached with @lru_cache so every request shares one
repository and one BookingService (and with it the per-listing locks).

Usage in routes:
    from rental_api.dependencies import get_booking_service

    @router.post("/listings/{listing_id}/reservations")
    async def create_reservation(
        service: BookingService = Depends(get_booking_service),
    ):
        ...

Service Dependency Graph:
    ReservationRepository (memory or DynamoDB, via RESERVATION_STORE)
        ├── AvailabilityService
        └── BookingService

Testing:
    Use reset_services() to clear cached instances between tests, or
    app.dependency_overrides to inject services with a fixed clock.
"""

import os
from functools import lru_cache

from rental_calendar.services.availability import AvailabilityService
from rental_calendar.services.booking import BookingService
from rental_calendar.services.dynamodb import (
    DynamoDBReservationRepository,
    get_dynamodb_service,
    reset_dynamodb_service,
)
from rental_calendar.services.repository import (
    InMemoryReservationRepository,
    ReservationRepository,
)


@lru_cache
def get_reservation_repository() -> ReservationRepository:
    """Get cached reservation repository.

    RESERVATION_STORE selects the backend: "memory" (default) or "dynamodb".

    Returns:
        ReservationRepository instance
    """
    store = os.getenv("RESERVATION_STORE", "memory").lower()
    if store == "dynamodb":
        return DynamoDBReservationRepository(db=get_dynamodb_service())
    if store == "memory":
        return InMemoryReservationRepository()
    raise ValueError(f"Unknown RESERVATION_STORE: {store!r} (expected 'memory' or 'dynamodb')")


@lru_cache
def get_availability_service() -> AvailabilityService:
    """Get cached AvailabilityService instance."""
    return AvailabilityService(repository=get_reservation_repository())


@lru_cache
def get_booking_service() -> BookingService:
    """Get cached BookingService instance."""
    return BookingService(repository=get_reservation_repository())


def reset_services() -> None:
    """Clear all cached service instances.

    Also resets the underlying DynamoDB singleton.
    """
    get_reservation_repository.cache_clear()
    get_availability_service.cache_clear()
    get_booking_service.cache_clear()
    reset_dynamodb_service()
