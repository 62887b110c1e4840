"""API models for reservation and extension endpoints.

All dates are YYYY-MM-DD; ranges are inclusive of both ends.
Amounts are in cents.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from rental_calendar.models.enums import ReservationStatus
from rental_calendar.models.reservation import DateRange


class DateRangeRequest(BaseModel):
    """Request body carrying an inclusive date range."""

    start_date: dt.date = Field(..., examples=["2025-07-15"])
    end_date: dt.date = Field(..., examples=["2025-07-18"])

    def to_range(self) -> DateRange:
        """Convert to the domain DateRange."""
        return DateRange(start=self.start_date, end=self.end_date)


class ReservationCreateRequest(DateRangeRequest):
    """Request to book a listing."""

    renter_name: str | None = Field(default=None, max_length=200)


class StatusUpdateRequest(BaseModel):
    """Request to move a reservation to a new status."""

    status: ReservationStatus = Field(..., examples=["accepted"])


class ExtensionValidationResponse(BaseModel):
    """Outcome of validating a proposed extension."""

    model_config = ConfigDict(strict=True)

    valid: bool
    reason: str | None = None
    earliest_start_date: dt.date = Field(
        ...,
        description="First day an extension of this reservation may start",
    )


class ExtensionQuoteResponse(BaseModel):
    """Price of an extension."""

    model_config = ConfigDict(strict=True)

    daily_price_cents: int = Field(..., ge=0)
    start_date: dt.date
    end_date: dt.date
    total_days: int = Field(..., ge=1)
    total_cents: int = Field(..., ge=0)
