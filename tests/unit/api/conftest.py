"""Fixtures for API route tests.

Routes get services over a seeded in-memory store and a fixed clock
through app.dependency_overrides.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from rental_api.dependencies import get_availability_service, get_booking_service
from rental_api.main import app
from rental_calendar.models import ReservationPeriod
from rental_calendar.services.availability import AvailabilityService
from rental_calendar.services.booking import BookingService
from rental_calendar.services.repository import InMemoryReservationRepository
from rental_calendar.utils.clock import Clock


@pytest.fixture
def api_repository(
    listing_one_periods: list[ReservationPeriod],
    listing_two_periods: list[ReservationPeriod],
) -> InMemoryReservationRepository:
    """Store seeded with listing "1" and listing "2"."""
    return InMemoryReservationRepository({"1": listing_one_periods, "2": listing_two_periods})


@pytest.fixture
def client(api_repository: InMemoryReservationRepository, clock: Clock) -> Generator[TestClient, None, None]:
    """Test client whose services share the seeded store and fixed clock."""
    booking_service = BookingService(api_repository, clock=clock)
    availability_service = AvailabilityService(api_repository, clock=clock)

    app.dependency_overrides[get_booking_service] = lambda: booking_service
    app.dependency_overrides[get_availability_service] = lambda: availability_service
    yield TestClient(app)
    app.dependency_overrides.clear()
