"""Enumeration types for rental calendar data models."""

from enum import Enum


class ReservationStatus(str, Enum):
    """Status of a reservation period."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    COMPLETED = "completed"  # Past stay, not blocking by default


# Statuses that occupy calendar days
BLOCKING_STATUSES: frozenset[ReservationStatus] = frozenset(
    {ReservationStatus.PENDING, ReservationStatus.ACCEPTED}
)

# Allowed status transitions (current -> next)
STATUS_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.ACCEPTED, ReservationStatus.COMPLETED}
    ),
    ReservationStatus.ACCEPTED: frozenset({ReservationStatus.COMPLETED}),
    ReservationStatus.COMPLETED: frozenset(),
}
