"""Calendar index: occupied days derived from a listing's reservations."""

import datetime as dt
from collections.abc import Collection, Iterable

from rental_calendar.models import (
    BLOCKING_STATUSES,
    DateRange,
    ReservationPeriod,
    ReservationStatus,
)

StatusFilter = Collection[ReservationStatus]


def _qualifying(
    periods: Iterable[ReservationPeriod],
    status_filter: StatusFilter | None,
) -> Iterable[ReservationPeriod]:
    statuses = BLOCKING_STATUSES if status_filter is None else frozenset(status_filter)
    return (p for p in periods if p.status in statuses)


def occupied_dates(
    periods: Iterable[ReservationPeriod],
    status_filter: StatusFilter | None = None,
) -> set[dt.date]:
    """Expand reservation periods into the set of occupied calendar days.

    Args:
        periods: Reservation periods of a single listing
        status_filter: Statuses to include. Defaults to pending and accepted;
            completed periods only count when named explicitly.

    Returns:
        Set of every day from start_date through end_date (inclusive) of each
        qualifying period. Overlapping periods collapse.
    """
    occupied: set[dt.date] = set()
    for period in _qualifying(periods, status_filter):
        occupied.update(period.as_range().days())
    return occupied


def reservation_on(
    day: dt.date,
    periods: Iterable[ReservationPeriod],
    status_filter: StatusFilter | None = None,
) -> ReservationPeriod | None:
    """Find the first qualifying reservation covering a day.

    Args:
        day: Calendar day to look up
        periods: Reservation periods of a single listing
        status_filter: Statuses to include (default: pending and accepted)

    Returns:
        The covering ReservationPeriod or None
    """
    for period in _qualifying(periods, status_filter):
        if period.start_date <= day <= period.end_date:
            return period
    return None


def blocking_ranges(
    periods: Iterable[ReservationPeriod],
    status_filter: StatusFilter | None = None,
) -> list[DateRange]:
    """List qualifying periods as date ranges ordered by start day."""
    ranges = [p.as_range() for p in _qualifying(periods, status_filter)]
    return sorted(ranges, key=lambda r: (r.start, r.end))
