"""Extension rules for already-accepted bookings.

An extension is a follow-on reservation that starts after the original
booking ends. Rules are evaluated in a fixed order and the first failure
is reported:

1. Lead time: the extension starts at least 24 hours from now
2. Sequencing: it starts on or after the day after the original ends
3. Range order: its start is not after its end
4. Conflicts: it does not touch any other booking on the listing

Amounts are in cents.
"""

import datetime as dt
from collections.abc import Iterable

from rental_calendar.models import (
    BookingError,
    DateRange,
    ErrorCode,
    ExtensionRejection,
    ExtensionValidation,
)
from rental_calendar.models.reservation import ONE_DAY, to_day
from rental_calendar.utils.clock import Clock, utc_now

LEAD_TIME = dt.timedelta(hours=24)


def _start_of_day(day: dt.date, now: dt.datetime) -> dt.datetime:
    # Midnight in the clock's timezone (naive when the clock is naive)
    return dt.datetime.combine(day, dt.time.min, tzinfo=now.tzinfo)


def earliest_extension_date(order_end_date: dt.date | str, clock: Clock = utc_now) -> dt.date:
    """Get the first day an extension of this order could start.

    Args:
        order_end_date: Last day of the original booking; datetimes are cut to
            their calendar day
        clock: Source of "now"

    Returns:
        The later of the day after the order ends and the first midnight
        at least LEAD_TIME from now
    """
    order_end_date = to_day(order_end_date)
    now = clock()
    lead_limit = now + LEAD_TIME
    first_lead_day = lead_limit.date()
    if _start_of_day(first_lead_day, now) < lead_limit:
        first_lead_day += ONE_DAY
    return max(order_end_date + ONE_DAY, first_lead_day)


def _overlaps_conflict(proposed: DateRange, conflict: DateRange) -> bool:
    # The conflict's end is pushed one day out, so an extension may not
    # start on the day right after another booking ends either
    conflict_end = conflict.end + ONE_DAY
    return proposed.start <= conflict_end and proposed.end >= conflict.start


def validate_extension(
    proposed: DateRange,
    order_end_date: dt.date | str,
    conflicts: Iterable[DateRange] = (),
    clock: Clock = utc_now,
) -> ExtensionValidation:
    """Decide whether a proposed extension is permissible.

    Args:
        proposed: Requested extension range (end inclusive)
        order_end_date: Last day of the booking being extended
        conflicts: Other bookings on the same listing
        clock: Source of "now" for the lead-time rule

    Returns:
        ExtensionValidation with the first failing rule's reason, if any
    """
    order_end_date = to_day(order_end_date)
    now = clock()

    if _start_of_day(proposed.start, now) < now + LEAD_TIME:
        return ExtensionValidation.rejected(ExtensionRejection.LEAD_TIME)

    if proposed.start < order_end_date + ONE_DAY:
        return ExtensionValidation.rejected(ExtensionRejection.SEQUENCING)

    if proposed.start > proposed.end:
        return ExtensionValidation.rejected(ExtensionRejection.RANGE_ORDER)

    for conflict in conflicts:
        if _overlaps_conflict(proposed, conflict):
            return ExtensionValidation.rejected(ExtensionRejection.CONFLICT)

    return ExtensionValidation.accepted()


def extension_total(daily_price_cents: int, date_range: DateRange) -> int:
    """Calculate the price of an extension.

    Uses the same inclusive day count as the overlap rules, so a range
    from the 1st to the 3rd costs three days.

    Args:
        daily_price_cents: Price per day in cents
        date_range: Extension range (end inclusive)

    Returns:
        Total price in cents

    Raises:
        BookingError: INVALID_PRICE for a negative or non-integer price,
            INVALID_DATE_RANGE for a reversed range
    """
    if isinstance(daily_price_cents, bool) or not isinstance(daily_price_cents, int):
        raise BookingError(ErrorCode.INVALID_PRICE, {"daily_price_cents": repr(daily_price_cents)})
    if daily_price_cents < 0:
        raise BookingError(ErrorCode.INVALID_PRICE, {"daily_price_cents": str(daily_price_cents)})
    if not date_range.is_ordered:
        raise BookingError(
            ErrorCode.INVALID_DATE_RANGE,
            {"start_date": date_range.start.isoformat(), "end_date": date_range.end.isoformat()},
        )
    return daily_price_cents * date_range.day_count
