"""Inclusive day counting over trips and reference windows."""

from datetime import date

from core.clock import resolve_reference_date
from core.errors import InvalidIntervalError
from core.models import Trip


def effective_end(trip: Trip, reference_date: date) -> date:
    """Last day of ``trip``, treating an ongoing trip as ending on ``reference_date``."""
    return trip.exit_date or reference_date


def trip_days(entry_date: date, exit_date: date | None, *, reference_date: date | None = None) -> int:
    """Days spent between entry and exit, counting both endpoints.

    A missing exit date means the traveler is still there, so the
    reference date (today by default) stands in for it.
    """
    end = exit_date or resolve_reference_date(reference_date)
    if end < entry_date:
        raise InvalidIntervalError(f"Interval ends {end.isoformat()} before it starts {entry_date.isoformat()}")
    return (end - entry_date).days + 1


def overlap_days(trip_start: date, trip_end: date, window_start: date, window_end: date) -> int:
    """Inclusive length of the intersection of a trip and a window; 0 when disjoint."""
    start = max(trip_start, window_start)
    end = min(trip_end, window_end)
    if end < start:
        return 0
    return trip_days(start, end)
