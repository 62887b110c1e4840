"""Extension pricing endpoint. Amounts are in cents."""

import datetime as dt

from fastapi import APIRouter, Query

from rental_api.models.reservations import ExtensionQuoteResponse
from rental_calendar.models.reservation import DateRange
from rental_calendar.services.extensions import extension_total

router = APIRouter(tags=["extensions"])


@router.get(
    "/extensions/quote",
    summary="Price an extension",
    description="""
Total = daily price × number of days, counting both start and end day.
""",
    response_model=ExtensionQuoteResponse,
)
async def quote_extension(
    daily_price_cents: int = Query(..., ge=0, description="Price per day in cents", examples=[1000]),
    start_date: dt.date = Query(..., examples=["2025-01-01"]),
    end_date: dt.date = Query(..., examples=["2025-01-03"]),
) -> ExtensionQuoteResponse:
    """Calculate the total price of an extension."""
    date_range = DateRange(start=start_date, end=end_date)
    total = extension_total(daily_price_cents, date_range)

    return ExtensionQuoteResponse(
        daily_price_cents=daily_price_cents,
        start_date=date_range.start,
        end_date=date_range.end,
        total_days=date_range.day_count,
        total_cents=total,
    )
