"""API models for calendar and availability endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from rental_calendar.models.reservation import DateRange


class CalendarResponse(BaseModel):
    """Occupied days of a listing.

    Returned to date pickers, which disable every listed day.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "listing_id": "1",
                    "occupied_dates": ["2025-10-15", "2025-10-16", "2025-10-17"],
                    "blocked_ranges": [{"start": "2025-10-15", "end": "2025-10-17"}],
                    "occupied_count": 3,
                }
            ]
        },
    )

    listing_id: str
    occupied_dates: list[dt.date] = Field(
        ...,
        description="Occupied days in ascending order",
    )
    blocked_ranges: list[DateRange] = Field(
        ...,
        description="Blocking reservations as inclusive ranges, ordered by start",
    )
    occupied_count: int = Field(..., ge=0)
