"""Calendar, availability, extension and distance services."""

from .availability import AvailabilityService, is_range_available, unavailable_dates
from .booking import BookingService
from .calendar import blocking_ranges, occupied_dates, reservation_on
from .extensions import (
    LEAD_TIME,
    earliest_extension_date,
    extension_total,
    validate_extension,
)
from .geo import (
    DISTANCE_UNAVAILABLE,
    EARTH_RADIUS_MILES,
    distance_between_records,
    distance_label,
    distance_miles,
    extract_coordinates,
    normalize_coordinate,
)
from .repository import InMemoryReservationRepository, ReservationRepository

__all__ = [
    # Calendar index
    "blocking_ranges",
    "occupied_dates",
    "reservation_on",
    # Availability
    "AvailabilityService",
    "is_range_available",
    "unavailable_dates",
    # Extensions
    "LEAD_TIME",
    "earliest_extension_date",
    "extension_total",
    "validate_extension",
    # Geo
    "DISTANCE_UNAVAILABLE",
    "EARTH_RADIUS_MILES",
    "distance_between_records",
    "distance_label",
    "distance_miles",
    "extract_coordinates",
    "normalize_coordinate",
    # Storage and booking
    "BookingService",
    "InMemoryReservationRepository",
    "ReservationRepository",
]
