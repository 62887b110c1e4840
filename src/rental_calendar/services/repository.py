"""Reservation storage interface and in-memory implementation.

Reservation sets are partitioned by listing ID. Repositories only store
and return periods; overlap checks belong to BookingService.
"""

import threading
from typing import Protocol

from rental_calendar.models import BookingError, ErrorCode, ReservationPeriod


class ReservationRepository(Protocol):
    """Storage for a marketplace's reservation periods."""

    def get_reservations(self, resource_id: str) -> list[ReservationPeriod]:
        """Return all periods of a listing (any status)."""
        ...

    def append_reservation(self, resource_id: str, period: ReservationPeriod) -> None:
        """Store a new period for a listing."""
        ...

    def replace_reservation(self, resource_id: str, period: ReservationPeriod) -> None:
        """Replace a stored period (matched by ID) with a new version.

        Raises:
            BookingError: RESERVATION_NOT_FOUND if no period has that ID
        """
        ...


class InMemoryReservationRepository:
    """Process-local reservation store.

    Each instance owns its data; nothing is shared at module level.
    """

    def __init__(
        self,
        initial: dict[str, list[ReservationPeriod]] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            initial: Optional seed data keyed by listing ID
        """
        self._lock = threading.Lock()
        self._periods: dict[str, list[ReservationPeriod]] = {
            resource_id: list(periods) for resource_id, periods in (initial or {}).items()
        }

    def get_reservations(self, resource_id: str) -> list[ReservationPeriod]:
        with self._lock:
            return list(self._periods.get(resource_id, []))

    def append_reservation(self, resource_id: str, period: ReservationPeriod) -> None:
        with self._lock:
            self._periods.setdefault(resource_id, []).append(period)

    def replace_reservation(self, resource_id: str, period: ReservationPeriod) -> None:
        with self._lock:
            periods = self._periods.get(resource_id, [])
            for index, existing in enumerate(periods):
                if existing.id == period.id:
                    periods[index] = period
                    return
        raise BookingError(
            ErrorCode.RESERVATION_NOT_FOUND,
            {"resource_id": resource_id, "reservation_id": period.id},
        )
