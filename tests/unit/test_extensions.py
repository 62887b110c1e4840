"""Unit tests for extension validation and pricing.

The clock is pinned to 2025-06-15 12:00 UTC, so the earliest start day
that satisfies the 24-hour lead time is 2025-06-17.
"""

import datetime as dt

import pytest

from rental_calendar.models import (
    BookingError,
    DateRange,
    ErrorCode,
    ExtensionRejection,
)
from rental_calendar.services.extensions import (
    earliest_extension_date,
    extension_total,
    validate_extension,
)
from rental_calendar.utils.clock import Clock, fixed_clock


class TestLeadTime:
    """Tests for the 24-hour lead-time rule."""

    def test_start_within_24_hours_is_rejected(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-16", end="2025-06-18"),
            order_end_date=dt.date(2025, 6, 10),
            clock=clock,
        )

        assert not result.valid
        assert result.reason == ExtensionRejection.LEAD_TIME.value

    def test_start_after_24_hours_is_accepted(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-17", end="2025-06-18"),
            order_end_date=dt.date(2025, 6, 10),
            clock=clock,
        )

        assert result.valid
        assert result.reason is None

    def test_exactly_24_hours_from_midnight_is_accepted(self) -> None:
        clock = fixed_clock(dt.datetime(2025, 6, 15, 0, 0, tzinfo=dt.UTC))

        result = validate_extension(
            DateRange(start="2025-06-16", end="2025-06-16"),
            order_end_date=dt.date(2025, 6, 10),
            clock=clock,
        )

        assert result.valid

    def test_lead_time_is_checked_first(self, clock: Clock) -> None:
        """A range failing several rules reports the lead-time reason."""
        result = validate_extension(
            DateRange(start="2025-06-15", end="2025-06-22"),
            order_end_date=dt.date(2025, 6, 20),
            clock=clock,
        )

        assert result.reason == ExtensionRejection.LEAD_TIME.value


class TestSequencing:
    """Tests for the "starts after the original ends" rule."""

    def test_start_on_original_end_day_is_rejected(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-20", end="2025-06-22"),
            order_end_date=dt.date(2025, 6, 20),
            clock=clock,
        )

        assert result.reason == ExtensionRejection.SEQUENCING.value

    def test_start_day_after_original_end_is_accepted(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-22"),
            order_end_date=dt.date(2025, 6, 20),
            clock=clock,
        )

        assert result.valid

    def test_order_end_with_time_of_day_is_accepted(self, clock: Clock) -> None:
        """An order end carrying a time counts as its calendar day."""
        result = validate_extension(
            DateRange(start="2025-06-20", end="2025-06-22"),
            order_end_date=dt.datetime(2025, 6, 18, 15, 0),
            clock=clock,
        )

        assert result.valid

    def test_order_end_with_time_of_day_still_sequences(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-20", end="2025-06-22"),
            order_end_date=dt.datetime(2025, 6, 20, 15, 0),
            clock=clock,
        )

        assert result.reason == ExtensionRejection.SEQUENCING.value

    def test_order_end_as_iso_string(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-22"),
            order_end_date="2025-06-20",
            clock=clock,
        )

        assert result.valid


class TestRangeOrder:
    """Tests for the start-not-after-end rule."""

    def test_reversed_range_is_rejected(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-25", end="2025-06-23"),
            order_end_date=dt.date(2025, 6, 20),
            clock=clock,
        )

        assert result.reason == ExtensionRejection.RANGE_ORDER.value

    def test_range_order_checked_after_sequencing(self) -> None:
        clock = fixed_clock(dt.datetime(2025, 6, 1, 12, 0, tzinfo=dt.UTC))

        result = validate_extension(
            DateRange(start="2025-06-11", end="2025-06-09"),
            order_end_date=dt.date(2025, 6, 10),
            clock=clock,
        )

        assert result.reason == ExtensionRejection.RANGE_ORDER.value

    def test_single_day_extension_is_accepted(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-21"),
            order_end_date=dt.date(2025, 6, 20),
            clock=clock,
        )

        assert result.valid


class TestConflicts:
    """Tests for the overlap rule against other bookings."""

    def test_overlapping_booking_is_rejected(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-25"),
            order_end_date=dt.date(2025, 6, 20),
            conflicts=[DateRange(start="2025-06-24", end="2025-06-28")],
            clock=clock,
        )

        assert result.reason == ExtensionRejection.CONFLICT.value

    def test_booking_ending_the_day_before_is_rejected(self, clock: Clock) -> None:
        """Another booking ending the day before the extension still conflicts."""
        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-23"),
            order_end_date=dt.date(2025, 6, 10),
            conflicts=[DateRange(start="2025-06-10", end="2025-06-20")],
            clock=clock,
        )

        assert result.reason == ExtensionRejection.CONFLICT.value

    def test_booking_starting_the_day_after_is_accepted(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-23"),
            order_end_date=dt.date(2025, 6, 20),
            conflicts=[DateRange(start="2025-06-24", end="2025-06-30")],
            clock=clock,
        )

        assert result.valid

    def test_earlier_booking_is_ignored(self, clock: Clock) -> None:
        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-23"),
            order_end_date=dt.date(2025, 6, 20),
            conflicts=[DateRange(start="2025-06-01", end="2025-06-05")],
            clock=clock,
        )

        assert result.valid

    def test_conflicts_accept_any_iterable(self, clock: Clock) -> None:
        conflicts = (r for r in [DateRange(start="2025-06-22", end="2025-06-22")])

        result = validate_extension(
            DateRange(start="2025-06-21", end="2025-06-23"),
            order_end_date=dt.date(2025, 6, 20),
            conflicts=conflicts,
            clock=clock,
        )

        assert not result.valid


class TestEarliestExtensionDate:
    """Tests for earliest_extension_date."""

    def test_lead_time_dominates(self, clock: Clock) -> None:
        assert earliest_extension_date(dt.date(2025, 6, 10), clock) == dt.date(2025, 6, 17)

    def test_order_end_dominates(self, clock: Clock) -> None:
        assert earliest_extension_date(dt.date(2025, 6, 20), clock) == dt.date(2025, 6, 21)

    def test_midnight_clock(self) -> None:
        clock = fixed_clock(dt.datetime(2025, 6, 15, 0, 0, tzinfo=dt.UTC))
        assert earliest_extension_date(dt.date(2025, 6, 1), clock) == dt.date(2025, 6, 16)

    def test_order_end_with_time_of_day(self, clock: Clock) -> None:
        assert earliest_extension_date(dt.datetime(2025, 6, 18, 15, 0), clock) == dt.date(2025, 6, 19)

    def test_earliest_date_passes_validation(self, clock: Clock) -> None:
        order_end = dt.date(2025, 6, 10)
        start = earliest_extension_date(order_end, clock)

        assert validate_extension(DateRange(start=start, end=start), order_end, clock=clock).valid
        day_before = start - dt.timedelta(days=1)
        assert not validate_extension(DateRange(start=day_before, end=start), order_end, clock=clock).valid


class TestExtensionTotal:
    """Tests for extension pricing."""

    def test_both_ends_are_charged(self) -> None:
        assert extension_total(1000, DateRange(start="2025-01-01", end="2025-01-03")) == 3000

    def test_single_day(self) -> None:
        assert extension_total(12500, DateRange(start="2025-01-01", end="2025-01-01")) == 12500

    def test_zero_price(self) -> None:
        assert extension_total(0, DateRange(start="2025-01-01", end="2025-01-31")) == 0

    def test_crosses_month_boundary(self) -> None:
        assert extension_total(100, DateRange(start="2025-01-30", end="2025-02-02")) == 400

    def test_negative_price_is_rejected(self) -> None:
        with pytest.raises(BookingError) as exc_info:
            extension_total(-1, DateRange(start="2025-01-01", end="2025-01-03"))

        assert exc_info.value.code == ErrorCode.INVALID_PRICE

    @pytest.mark.parametrize("price", [10.5, "1000", True, None])
    def test_non_integer_price_is_rejected(self, price: object) -> None:
        with pytest.raises(BookingError) as exc_info:
            extension_total(price, DateRange(start="2025-01-01", end="2025-01-03"))  # type: ignore[arg-type]

        assert exc_info.value.code == ErrorCode.INVALID_PRICE

    def test_reversed_range_is_rejected(self) -> None:
        with pytest.raises(BookingError) as exc_info:
            extension_total(1000, DateRange(start="2025-01-03", end="2025-01-01"))

        assert exc_info.value.code == ErrorCode.INVALID_DATE_RANGE
        assert exc_info.value.details == {"start_date": "2025-01-03", "end_date": "2025-01-01"}
