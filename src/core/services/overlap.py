"""Trip overlap detection, run before a trip is created or updated."""

import logging
from collections.abc import Iterable
from datetime import date

from core.clock import resolve_reference_date
from core.errors import InvalidIntervalError, TripOverlapError
from core.models import OverlapValidation, Trip
from core.services.day_count import effective_end

logger = logging.getLogger(__name__)


def intervals_overlap(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """Closed intervals overlap when each starts no later than the other ends.

    Touching endpoints count: a traveler cannot be in two countries on
    the same day.
    """
    return a_start <= b_end and b_start <= a_end


def _occupied_until(trip: Trip, reference_date: date) -> date:
    # An ongoing trip that has not started yet still occupies its entry day
    return max(effective_end(trip, reference_date), trip.entry_date)


def trips_overlap(first: Trip, second: Trip, *, reference_date: date | None = None) -> bool:
    today = resolve_reference_date(reference_date)
    return intervals_overlap(
        first.entry_date,
        _occupied_until(first, today),
        second.entry_date,
        _occupied_until(second, today),
    )


def validate_no_overlap(
    candidate: Trip,
    existing_trips: Iterable[Trip],
    exclude_trip_id: int | str | None = None,
    *,
    reference_date: date | None = None,
) -> OverlapValidation:
    """Check ``candidate`` against a user's trips and report the first conflict.

    Pass the candidate's own id as ``exclude_trip_id`` when revalidating
    an edit so the stored version of the same trip is ignored. Ids are
    compared as strings, so ``5`` and ``"5"`` name the same trip.

    An ongoing candidate must not start after the reference date; such a
    candidate raises InvalidIntervalError.
    """
    today = resolve_reference_date(reference_date)
    if candidate.exit_date is None and candidate.entry_date > today:
        raise InvalidIntervalError(
            f"Ongoing trip to {candidate.country} starts {candidate.entry_date.isoformat()}, after {today.isoformat()}"
        )

    excluded = str(exclude_trip_id) if exclude_trip_id is not None else None
    for trip in existing_trips:
        if excluded is not None and str(trip.id) == excluded:
            continue
        if trips_overlap(candidate, trip, reference_date=today):
            logger.debug("Candidate trip to %s conflicts with trip %s", candidate.country, trip.id)
            return OverlapValidation(
                valid=False,
                message=f"Trip overlaps with existing trip to {trip.country} starting {trip.entry_date.isoformat()}",
                conflicting_trip_id=trip.id,
            )

    return OverlapValidation(valid=True)


def ensure_no_overlap(
    candidate: Trip,
    existing_trips: Iterable[Trip],
    exclude_trip_id: int | str | None = None,
    *,
    reference_date: date | None = None,
) -> None:
    """Raise TripOverlapError instead of returning an invalid result."""
    result = validate_no_overlap(candidate, existing_trips, exclude_trip_id, reference_date=reference_date)
    if not result.valid:
        raise TripOverlapError(result.message or "Trip overlaps with an existing trip")
