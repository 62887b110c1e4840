"""Availability query and result models."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rental_calendar.utils.clock import Clock, utc_now

from .reservation import to_day


class AvailabilityBounds(BaseModel):
    """Optional earliest/latest bookable days (both inclusive)."""

    model_config = ConfigDict(frozen=True)

    min_date: dt.date | None = None
    max_date: dt.date | None = None

    @field_validator("min_date", "max_date", mode="before")
    @classmethod
    def normalize_day(cls, v: Any) -> dt.date | None:
        """Strip time-of-day from bounds."""
        return None if v is None else to_day(v)

    @classmethod
    def from_today(
        cls,
        clock: Clock = utc_now,
        max_date: dt.date | None = None,
    ) -> "AvailabilityBounds":
        """Bounds that block days before the clock's current day.

        Args:
            clock: Source of "now"
            max_date: Optional last bookable day

        Returns:
            AvailabilityBounds with min_date set to today
        """
        return cls(min_date=clock().date(), max_date=max_date)

    def contains(self, day: dt.date) -> bool:
        """Whether the day lies within the bounds."""
        if self.min_date is not None and day < self.min_date:
            return False
        if self.max_date is not None and day > self.max_date:
            return False
        return True


class AvailabilityResult(BaseModel):
    """Outcome of checking a range against a listing's calendar."""

    model_config = ConfigDict(strict=True)

    listing_id: str
    start_date: dt.date
    end_date: dt.date
    is_available: bool
    unavailable_dates: list[dt.date] = Field(default_factory=list)
    total_days: int = Field(ge=0)
