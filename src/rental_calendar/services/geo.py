"""Great-circle distance between listings and users.

Listing and user records reach us in several shapes (camelCase,
snake_case, nested ``location``/``coords`` objects, numbers or numeric
strings). extract_coordinates() is the single place that probes them and
produces the canonical Coordinates model; everything downstream works on
Coordinates only.
"""

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from rental_calendar.models import Coordinates

EARTH_RADIUS_MILES = 3958.8
DISTANCE_UNAVAILABLE = "Distance unavailable"

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Probe order matters: the first candidate that parses wins
_LATITUDE_PATHS: tuple[tuple[str, ...], ...] = (
    ("locationLatitude",),
    ("location_latitude",),
    ("latitude",),
    ("lat",),
    ("location", "latitude"),
    ("coords", "latitude"),
)
_LONGITUDE_PATHS: tuple[tuple[str, ...], ...] = (
    ("locationLongitude",),
    ("location_longitude",),
    ("longitude",),
    ("lng",),
    ("location", "longitude"),
    ("coords", "longitude"),
)


def normalize_coordinate(value: Any) -> float | None:
    """Parse a loosely-typed coordinate value.

    Args:
        value: int, float, Decimal or numeric string

    Returns:
        Finite float, or None if the value cannot be read as one
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        raw = value
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if not match:
            return None
        raw = match.group()
    else:
        return None
    try:
        number = float(raw)
    except (OverflowError, ValueError):
        # Integers beyond float range and signaling NaN decimals
        return None
    return number if math.isfinite(number) else None


def _lookup(record: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    current: Any = record
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _first_coordinate(record: Mapping[str, Any], paths: tuple[tuple[str, ...], ...]) -> float | None:
    for path in paths:
        value = normalize_coordinate(_lookup(record, path))
        if value is not None:
            return value
    return None


def extract_coordinates(record: Any) -> Coordinates | None:
    """Pull coordinates out of a raw listing or user record.

    Args:
        record: Mapping of unspecified shape

    Returns:
        Coordinates, or None when either value is missing or out of range
    """
    if not isinstance(record, Mapping):
        return None

    latitude = _first_coordinate(record, _LATITUDE_PATHS)
    longitude = _first_coordinate(record, _LONGITUDE_PATHS)

    if latitude is None or longitude is None:
        return None
    if not (-90 <= latitude <= 90) or not (-180 <= longitude <= 180):
        return None

    return Coordinates(latitude=latitude, longitude=longitude)


def distance_miles(
    origin: Coordinates | None,
    destination: Coordinates | None,
) -> float | None:
    """Haversine distance in miles, rounded to one decimal.

    Args:
        origin: First point, or None
        destination: Second point, or None

    Returns:
        Distance in miles, or None if a point is missing or the result
        is not finite
    """
    if origin is None or destination is None:
        return None

    lat1 = math.radians(origin.latitude)
    lon1 = math.radians(origin.longitude)
    lat2 = math.radians(destination.latitude)
    lon2 = math.radians(destination.longitude)

    d_lat = lat2 - lat1
    d_lon = lon2 - lon1

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # Antipodal points can push the sum a hair above 1
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    distance = EARTH_RADIUS_MILES * c

    if not math.isfinite(distance):
        return None
    # Half-up rounding; round() would round half to even
    return math.floor(distance * 10 + 0.5) / 10


def distance_label(miles: float | None) -> str:
    """Render a distance for display."""
    return f"{miles:.1f} miles" if miles is not None else DISTANCE_UNAVAILABLE


def distance_between_records(origin: Any, destination: Any) -> float | None:
    """Distance in miles between two raw records, if both carry coordinates."""
    return distance_miles(extract_coordinates(origin), extract_coordinates(destination))
