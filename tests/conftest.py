"""Pytest configuration and fixtures for rental calendar tests.

This module provides reusable fixtures for testing:
- A fixed clock for lead-time and past-date rules
- Sample reservation data modelled on real listing calendars
- In-memory and DynamoDB (moto) reservation stores
"""

import datetime as dt
import os
from typing import Any, Generator

import boto3
import pytest
from moto import mock_aws

# === Environment Setup ===

os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("DYNAMODB_TABLE_PREFIX", "test-booking")

if not os.environ.get("AWS_PROFILE") and not os.environ.get("AWS_ACCESS_KEY_ID"):
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

from rental_calendar.models import ReservationPeriod, ReservationStatus  # noqa: E402
from rental_calendar.services.booking import BookingService  # noqa: E402
from rental_calendar.services.repository import InMemoryReservationRepository  # noqa: E402
from rental_calendar.utils.clock import Clock, fixed_clock  # noqa: E402

# Noon UTC on a fixed day; every time-dependent test runs against it
FROZEN_NOW = dt.datetime(2025, 6, 15, 12, 0, 0, tzinfo=dt.UTC)


# === Service Singletons ===


@pytest.fixture(autouse=True)
def reset_service_singletons() -> Generator[None, None, None]:
    """Reset cached API services and the DynamoDB singleton around each test."""
    from rental_api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === Clock Fixtures ===


@pytest.fixture
def freeze_time() -> dt.datetime:
    """The fixed "now" used by clock-dependent tests."""
    return FROZEN_NOW


@pytest.fixture
def clock(freeze_time: dt.datetime) -> Clock:
    """Clock pinned to freeze_time."""
    return fixed_clock(freeze_time)


# === Sample Data Fixtures ===


@pytest.fixture
def listing_one_periods() -> list[ReservationPeriod]:
    """A busy listing calendar, including two overlapping December bookings."""
    return [
        ReservationPeriod(id="res-001", start_date="2025-10-15", end_date="2025-10-17", status=ReservationStatus.ACCEPTED),
        ReservationPeriod(id="res-002", start_date="2025-09-22", end_date="2025-09-28", status=ReservationStatus.ACCEPTED),
        ReservationPeriod(id="res-003", start_date="2025-11-05", end_date="2025-11-08", status=ReservationStatus.PENDING),
        ReservationPeriod(id="res-004", start_date="2025-12-14", end_date="2025-12-23", status=ReservationStatus.ACCEPTED),
        ReservationPeriod(id="res-005", start_date="2025-12-20", end_date="2025-12-24", status=ReservationStatus.ACCEPTED),
        ReservationPeriod(id="res-006", start_date="2025-12-01", end_date="2025-12-03", status=ReservationStatus.PENDING),
    ]


@pytest.fixture
def listing_two_periods() -> list[ReservationPeriod]:
    """A listing with one accepted and one completed reservation."""
    return [
        ReservationPeriod(id="res-101", start_date="2025-06-18", end_date="2025-06-20", status=ReservationStatus.ACCEPTED),
        ReservationPeriod(id="res-102", start_date="2025-07-10", end_date="2025-07-12", status=ReservationStatus.COMPLETED),
    ]


# === Store Fixtures ===


@pytest.fixture
def repository() -> InMemoryReservationRepository:
    """Empty in-memory reservation store."""
    return InMemoryReservationRepository()


@pytest.fixture
def booking_service(repository: InMemoryReservationRepository, clock: Clock) -> BookingService:
    """BookingService over the in-memory store with a fixed clock."""
    return BookingService(repository, clock=clock)


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS credentials for moto."""
    if not os.environ.get("AWS_PROFILE"):
        os.environ["AWS_ACCESS_KEY_ID"] = "testing"
        os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
        os.environ["AWS_SECURITY_TOKEN"] = "testing"
        os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"


@pytest.fixture
def dynamodb_client(aws_credentials: None) -> Generator[Any, None, None]:
    """Create a mocked DynamoDB client."""
    with mock_aws():
        yield boto3.client("dynamodb", region_name="eu-west-1")


@pytest.fixture
def create_tables(dynamodb_client: Any) -> None:
    """Create the reservations table inside the moto context."""
    dynamodb_client.create_table(
        TableName="test-booking-reservations",
        KeySchema=[
            {"AttributeName": "listing_id", "KeyType": "HASH"},
            {"AttributeName": "reservation_id", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "listing_id", "AttributeType": "S"},
            {"AttributeName": "reservation_id", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
