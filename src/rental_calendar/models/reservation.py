"""Reservation interval models.

All boundaries are whole calendar days. Inputs may arrive as dates,
datetimes or ISO-8601 strings; time-of-day is stripped so day-by-day
comparisons are exact.
"""

import datetime as dt
import math
import uuid
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import BLOCKING_STATUSES, ReservationStatus
from .errors import BookingError, ErrorCode, InvalidDateError

ONE_DAY = dt.timedelta(days=1)


def to_day(value: Any) -> dt.date:
    """Normalize a date-like value to a calendar date.

    Args:
        value: date, datetime or ISO-8601 string

    Returns:
        The calendar date with time-of-day stripped

    Raises:
        InvalidDateError: If the value is not a recognizable date
    """
    # datetime is a date subclass, check it first
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(text).date()
        except ValueError as e:
            raise InvalidDateError(value) from e
    raise InvalidDateError(value)


def iter_days(start: dt.date, end: dt.date) -> Iterator[dt.date]:
    """Yield every day from start through end (inclusive)."""
    # Stop one day past end so the last day is always included
    stop = end + ONE_DAY
    current = start
    while current < stop:
        yield current
        current += ONE_DAY


def inclusive_day_count(start: dt.date, end: dt.date) -> int:
    """Count days in a range where both ends are included."""
    return math.ceil((end - start) / ONE_DAY) + 1


def format_date_for_api(day: dt.date) -> str:
    """Format a date as YYYY-MM-DD."""
    return to_day(day).isoformat()


def _new_reservation_id() -> str:
    return f"res-{uuid.uuid4().hex[:12]}"


class DateRange(BaseModel):
    """A {start, end} pair with an inclusive end.

    Used both as an availability query and as the shape of a proposed
    reservation. A reversed range is representable; operations answer
    it with "unavailable"/"invalid" instead of raising.
    """

    model_config = ConfigDict(frozen=True)

    start: dt.date
    end: dt.date

    @field_validator("start", "end", mode="before")
    @classmethod
    def normalize_day(cls, v: Any) -> dt.date:
        """Strip time-of-day from boundaries."""
        return to_day(v)

    @property
    def is_ordered(self) -> bool:
        """Whether start is on or before end."""
        return self.start <= self.end

    @property
    def day_count(self) -> int:
        """Number of days in the range, both ends included."""
        return inclusive_day_count(self.start, self.end)

    def days(self) -> Iterator[dt.date]:
        """Iterate the days of the range."""
        return iter_days(self.start, self.end)

    def overlaps(self, other: "DateRange") -> bool:
        """Whether the two inclusive ranges share at least one day."""
        return self.start <= other.end and self.end >= other.start


class ReservationPeriod(BaseModel):
    """A reservation of a listing for a span of whole days."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_reservation_id)
    start_date: dt.date
    end_date: dt.date
    status: ReservationStatus = ReservationStatus.PENDING
    renter_name: str | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def normalize_day(cls, v: Any) -> dt.date:
        """Strip time-of-day from boundaries."""
        return to_day(v)

    @model_validator(mode="after")
    def check_order(self) -> "ReservationPeriod":
        """Reject periods that end before they start."""
        if self.start_date > self.end_date:
            raise BookingError(
                ErrorCode.INVALID_DATE_RANGE,
                {
                    "start_date": self.start_date.isoformat(),
                    "end_date": self.end_date.isoformat(),
                },
            )
        return self

    @property
    def is_blocking(self) -> bool:
        """Whether this period occupies calendar days."""
        return self.status in BLOCKING_STATUSES

    def as_range(self) -> DateRange:
        """Return the period's span as a DateRange."""
        return DateRange(start=self.start_date, end=self.end_date)

    def with_status(self, status: ReservationStatus) -> "ReservationPeriod":
        """Return a copy of this period with a new status."""
        return self.model_copy(update={"status": status})
