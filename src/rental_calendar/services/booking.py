"""Booking service: writes reservations without double-booking.

Every "read calendar, check, write" sequence for a listing runs under
that listing's lock, so two requests in the same process cannot both
pass an availability check against the same stale snapshot.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from rental_calendar.models import (
    STATUS_TRANSITIONS,
    AvailabilityBounds,
    BookingError,
    DateRange,
    ErrorCode,
    ExtensionValidation,
    ReservationPeriod,
    ReservationStatus,
)
from rental_calendar.utils.clock import Clock, utc_now
from rental_calendar.utils.logging import get_logger, log_booking_operation

from .availability import is_range_available, unavailable_dates
from .calendar import blocking_ranges, occupied_dates
from .extensions import validate_extension
from .repository import ReservationRepository

logger = get_logger(__name__)

# Listings hash onto a fixed pool of locks; unrelated listings may share one
LOCK_STRIPES = 64


class BookingService:
    """Service for creating, extending and re-statusing reservations."""

    def __init__(
        self,
        repository: ReservationRepository,
        clock: Clock = utc_now,
    ) -> None:
        """Initialize booking service.

        Args:
            repository: Reservation store
            clock: Source of "now" for past-date and lead-time rules
        """
        self.repository = repository
        self.clock = clock
        self._locks = tuple(threading.Lock() for _ in range(LOCK_STRIPES))

    def _lock_for(self, resource_id: str) -> threading.Lock:
        return self._locks[hash(resource_id) % len(self._locks)]

    @contextmanager
    def _listing_lock(self, resource_id: str) -> Iterator[None]:
        with self._lock_for(resource_id):
            yield

    def list_reservations(self, resource_id: str) -> list[ReservationPeriod]:
        """Get all reservations of a listing, ordered by start day."""
        periods = self.repository.get_reservations(resource_id)
        return sorted(periods, key=lambda p: (p.start_date, p.id))

    def get_reservation(self, resource_id: str, reservation_id: str) -> ReservationPeriod:
        """Get a single reservation.

        Raises:
            BookingError: RESERVATION_NOT_FOUND if the listing has no such reservation
        """
        return self._find(self.repository.get_reservations(resource_id), resource_id, reservation_id)

    def book(
        self,
        resource_id: str,
        date_range: DateRange,
        renter_name: str | None = None,
        status: ReservationStatus = ReservationStatus.PENDING,
        enforce_min_date: bool = True,
    ) -> ReservationPeriod:
        """Reserve a range of days on a listing.

        Args:
            resource_id: Listing ID
            date_range: Requested days (end inclusive)
            renter_name: Optional display label
            status: Initial status (pending unless the caller already accepted it)
            enforce_min_date: Reject ranges that include past days

        Returns:
            The stored ReservationPeriod

        Raises:
            BookingError: INVALID_DATE_RANGE for a reversed range,
                DATES_UNAVAILABLE if any day is taken or in the past
        """
        if not date_range.is_ordered:
            raise BookingError(
                ErrorCode.INVALID_DATE_RANGE,
                {"start_date": date_range.start.isoformat(), "end_date": date_range.end.isoformat()},
            )

        with self._listing_lock(resource_id):
            periods = self.repository.get_reservations(resource_id)
            occupied = occupied_dates(periods)
            bounds = AvailabilityBounds.from_today(self.clock) if enforce_min_date else None

            if not is_range_available(date_range, occupied, bounds):
                conflicts = unavailable_dates(date_range, occupied, bounds)
                log_booking_operation(
                    logger,
                    "book",
                    resource_id=resource_id,
                    start_date=date_range.start,
                    end_date=date_range.end,
                    result="rejected",
                    reason="dates_unavailable",
                    conflict_count=len(conflicts),
                )
                raise BookingError(
                    ErrorCode.DATES_UNAVAILABLE,
                    {"unavailable_dates": ",".join(d.isoformat() for d in conflicts)},
                )

            period = ReservationPeriod(
                start_date=date_range.start,
                end_date=date_range.end,
                status=status,
                renter_name=renter_name,
            )
            self._append(resource_id, periods, period)

        log_booking_operation(
            logger,
            "book",
            resource_id=resource_id,
            reservation_id=period.id,
            start_date=period.start_date,
            end_date=period.end_date,
            result="created",
            status=period.status.value,
        )
        return period

    def transition_status(
        self,
        resource_id: str,
        reservation_id: str,
        status: ReservationStatus,
    ) -> ReservationPeriod:
        """Move a reservation to a new status.

        Allowed: pending -> accepted, pending/accepted -> completed.

        Raises:
            BookingError: RESERVATION_NOT_FOUND or INVALID_STATUS_TRANSITION
        """
        with self._listing_lock(resource_id):
            current = self._find(
                self.repository.get_reservations(resource_id), resource_id, reservation_id
            )
            if status not in STATUS_TRANSITIONS[current.status]:
                raise BookingError(
                    ErrorCode.INVALID_STATUS_TRANSITION,
                    {"from": current.status.value, "to": status.value},
                )
            updated = current.with_status(status)
            self.repository.replace_reservation(resource_id, updated)

        log_booking_operation(
            logger,
            "transition_status",
            resource_id=resource_id,
            reservation_id=reservation_id,
            result=status.value,
            previous_status=current.status.value,
        )
        return updated

    def check_extension(
        self,
        resource_id: str,
        reservation_id: str,
        proposed: DateRange,
    ) -> ExtensionValidation:
        """Validate an extension of an accepted reservation without writing.

        Raises:
            BookingError: RESERVATION_NOT_FOUND, or RESERVATION_NOT_EXTENDABLE
                if the reservation is not accepted
        """
        periods = self.repository.get_reservations(resource_id)
        return self._validate_extension(periods, resource_id, reservation_id, proposed)

    def request_extension(
        self,
        resource_id: str,
        reservation_id: str,
        proposed: DateRange,
    ) -> ReservationPeriod:
        """Validate and store an extension as a new pending reservation.

        Returns:
            The stored extension period

        Raises:
            BookingError: EXTENSION_REJECTED (details carry the reason),
                RESERVATION_NOT_FOUND or RESERVATION_NOT_EXTENDABLE
        """
        with self._listing_lock(resource_id):
            periods = self.repository.get_reservations(resource_id)
            original = self._find(periods, resource_id, reservation_id)
            validation = self._validate_extension(periods, resource_id, reservation_id, proposed)

            if not validation.valid:
                log_booking_operation(
                    logger,
                    "request_extension",
                    resource_id=resource_id,
                    reservation_id=reservation_id,
                    start_date=proposed.start,
                    end_date=proposed.end,
                    result="rejected",
                    reason=validation.reason,
                )
                raise BookingError(
                    ErrorCode.EXTENSION_REJECTED,
                    {"reason": validation.reason or ""},
                )

            extension = ReservationPeriod(
                start_date=proposed.start,
                end_date=proposed.end,
                status=ReservationStatus.PENDING,
                renter_name=original.renter_name,
            )
            self._append(resource_id, periods, extension)

        log_booking_operation(
            logger,
            "request_extension",
            resource_id=resource_id,
            reservation_id=extension.id,
            start_date=extension.start_date,
            end_date=extension.end_date,
            result="created",
            extends=reservation_id,
        )
        return extension

    def _validate_extension(
        self,
        periods: list[ReservationPeriod],
        resource_id: str,
        reservation_id: str,
        proposed: DateRange,
    ) -> ExtensionValidation:
        original = self._find(periods, resource_id, reservation_id)
        if original.status != ReservationStatus.ACCEPTED:
            raise BookingError(
                ErrorCode.RESERVATION_NOT_EXTENDABLE,
                {"reservation_id": reservation_id, "status": original.status.value},
            )
        others = [p for p in periods if p.id != original.id]
        return validate_extension(
            proposed,
            original.end_date,
            blocking_ranges(others),
            clock=self.clock,
        )

    def _append(
        self,
        resource_id: str,
        periods: list[ReservationPeriod],
        period: ReservationPeriod,
    ) -> None:
        """Store a period after checking it against blocking periods."""
        if period.is_blocking:
            candidate = period.as_range()
            for existing in periods:
                if existing.is_blocking and existing.as_range().overlaps(candidate):
                    raise BookingError(
                        ErrorCode.RESERVATION_OVERLAP,
                        {"reservation_id": existing.id},
                    )
        self.repository.append_reservation(resource_id, period)

    @staticmethod
    def _find(
        periods: list[ReservationPeriod],
        resource_id: str,
        reservation_id: str,
    ) -> ReservationPeriod:
        for period in periods:
            if period.id == reservation_id:
                return period
        raise BookingError(
            ErrorCode.RESERVATION_NOT_FOUND,
            {"resource_id": resource_id, "reservation_id": reservation_id},
        )
