"""Wall-clock source for time-dependent rules.

Services accept a ``Clock`` so tests can pin "now".
"""

import datetime as dt
from collections.abc import Callable

Clock = Callable[[], dt.datetime]


def utc_now() -> dt.datetime:
    """Return the current time as an aware UTC datetime."""
    return dt.datetime.now(dt.UTC)


def fixed_clock(moment: dt.datetime) -> Clock:
    """Build a clock that always returns the given moment."""

    def _now() -> dt.datetime:
        return moment

    return _now
