"""Calendar endpoints for listing availability.

Provides REST endpoints for:
- The occupied days of a listing (for date pickers)
- Checking whether a date range can be booked

All dates are in YYYY-MM-DD format. Ranges include both end days.
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query

from rental_api.dependencies import get_availability_service
from rental_api.models.calendar import CalendarResponse
from rental_calendar.models.availability import AvailabilityResult
from rental_calendar.models.enums import ReservationStatus
from rental_calendar.models.reservation import DateRange
from rental_calendar.services.availability import AvailabilityService
from rental_calendar.services.calendar import blocking_ranges

router = APIRouter(tags=["calendar"])


@router.get(
    "/listings/{listing_id}/calendar",
    summary="Get occupied days",
    description="""
Get every day blocked by a reservation on a listing.

**Notes:**
- Pending and accepted reservations block days by default
- Pass `status` (repeatable) to choose which statuses count
- Completed reservations never block unless requested explicitly
""",
    response_model=CalendarResponse,
)
async def get_calendar(
    listing_id: str,
    status: list[ReservationStatus] | None = Query(
        default=None,
        description="Reservation statuses to include",
    ),
    service: AvailabilityService = Depends(get_availability_service),
) -> CalendarResponse:
    """Get the occupied days and blocking ranges of a listing."""
    occupied = service.get_occupied_dates(listing_id, status)
    periods = service.repository.get_reservations(listing_id)

    return CalendarResponse(
        listing_id=listing_id,
        occupied_dates=sorted(occupied),
        blocked_ranges=blocking_ranges(periods, status),
        occupied_count=len(occupied),
    )


@router.get(
    "/listings/{listing_id}/availability",
    summary="Check date availability",
    description="""
Check whether a date range can be booked on a listing.

**Notes:**
- end_date is inclusive
- Days before today are unavailable unless enforce_min_date=false
- A reversed range is reported as unavailable, not as an error
""",
    response_model=AvailabilityResult,
)
async def check_availability(
    listing_id: str,
    start_date: dt.date = Query(..., description="First day (YYYY-MM-DD)", examples=["2025-07-15"]),
    end_date: dt.date = Query(..., description="Last day (YYYY-MM-DD)", examples=["2025-07-18"]),
    enforce_min_date: bool = Query(True, description="Block days before today"),
    service: AvailabilityService = Depends(get_availability_service),
) -> AvailabilityResult:
    """Check a range against the listing's occupied days."""
    return service.check_availability(
        listing_id,
        DateRange(start=start_date, end=end_date),
        enforce_min_date=enforce_min_date,
    )
