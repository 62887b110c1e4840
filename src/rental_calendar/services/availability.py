"""Availability checking against a listing's occupied days."""

import datetime as dt
from collections.abc import Collection
from typing import TYPE_CHECKING

from rental_calendar.models import (
    AvailabilityBounds,
    AvailabilityResult,
    DateRange,
    ReservationStatus,
)
from rental_calendar.utils.clock import Clock, utc_now

from .calendar import occupied_dates

if TYPE_CHECKING:
    from .repository import ReservationRepository


def _day_is_free(
    day: dt.date,
    occupied: Collection[dt.date],
    bounds: AvailabilityBounds | None,
) -> bool:
    if bounds is not None and not bounds.contains(day):
        return False
    return day not in occupied


def is_range_available(
    date_range: DateRange,
    occupied: Collection[dt.date],
    bounds: AvailabilityBounds | None = None,
) -> bool:
    """Check whether every day of a range can be newly booked.

    Stops at the first conflicting day; use unavailable_dates() to list
    every conflict.

    Args:
        date_range: Candidate range (end inclusive)
        occupied: Occupied days from occupied_dates()
        bounds: Optional min/max bookable days. Omit for a pure conflict check.

    Returns:
        False if any day is out of bounds or occupied, or if the range
        is reversed; True otherwise
    """
    if not date_range.is_ordered:
        return False
    return all(_day_is_free(day, occupied, bounds) for day in date_range.days())


def unavailable_dates(
    date_range: DateRange,
    occupied: Collection[dt.date],
    bounds: AvailabilityBounds | None = None,
) -> list[dt.date]:
    """List every day of a range that is out of bounds or occupied."""
    return [day for day in date_range.days() if not _day_is_free(day, occupied, bounds)]


class AvailabilityService:
    """Availability queries for listings backed by a reservation store."""

    def __init__(
        self,
        repository: "ReservationRepository",
        clock: Clock = utc_now,
    ) -> None:
        """Initialize availability service.

        Args:
            repository: Reservation store
            clock: Source of "now" for past-date blocking
        """
        self.repository = repository
        self.clock = clock

    def get_occupied_dates(
        self,
        resource_id: str,
        statuses: Collection[ReservationStatus] | None = None,
    ) -> set[dt.date]:
        """Get the occupied days of a listing.

        Args:
            resource_id: Listing ID
            statuses: Status filter (default: pending and accepted)

        Returns:
            Set of occupied days
        """
        return occupied_dates(self.repository.get_reservations(resource_id), statuses)

    def check_availability(
        self,
        resource_id: str,
        date_range: DateRange,
        enforce_min_date: bool = True,
    ) -> AvailabilityResult:
        """Check a range against a listing's calendar.

        Args:
            resource_id: Listing ID
            date_range: Candidate range (end inclusive)
            enforce_min_date: Treat days before today as unavailable

        Returns:
            AvailabilityResult listing every conflicting day
        """
        occupied = self.get_occupied_dates(resource_id)
        bounds = AvailabilityBounds.from_today(self.clock) if enforce_min_date else None

        conflicts = unavailable_dates(date_range, occupied, bounds)
        is_available = is_range_available(date_range, occupied, bounds)

        return AvailabilityResult(
            listing_id=resource_id,
            start_date=date_range.start,
            end_date=date_range.end,
            is_available=is_available,
            unavailable_dates=conflicts,
            total_days=date_range.day_count if date_range.is_ordered else 0,
        )
