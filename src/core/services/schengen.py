"""Schengen 90/180 rolling-window calculator."""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from core.clock import resolve_reference_date
from core.models import AlertLevel, SchengenStatus, Trip
from core.rules import (
    SCHENGEN_COUNTRIES,
    SCHENGEN_CRITICAL_REMAINING_DAYS,
    SCHENGEN_MAX_STAY_DAYS,
    SCHENGEN_WARNING_REMAINING_DAYS,
    SCHENGEN_WINDOW_DAYS,
)
from core.services.day_count import effective_end, overlap_days

logger = logging.getLogger(__name__)


def is_schengen_country(country: str) -> bool:
    return country in SCHENGEN_COUNTRIES


def schengen_window(reference_date: date) -> tuple[date, date]:
    return reference_date - timedelta(days=SCHENGEN_WINDOW_DAYS), reference_date


def calculate_schengen_90_180(trips: Iterable[Trip], *, reference_date: date | None = None) -> SchengenStatus:
    """Schengen days used in the 180 days ending on the reference date.

    Only the window ending today is checked. This answers "where do I
    stand now", not whether the traveler was compliant on a past date.
    """
    today = resolve_reference_date(reference_date)
    window_start, window_end = schengen_window(today)

    days_used = 0
    for trip in trips:
        if not is_schengen_country(trip.country):
            continue
        if trip.exit_date is not None and trip.exit_date < window_start:
            continue
        if trip.entry_date > today:
            continue
        days_used += overlap_days(trip.entry_date, effective_end(trip, today), window_start, window_end)

    days_remaining = max(0, SCHENGEN_MAX_STAY_DAYS - days_used)
    logger.debug("Schengen window %s..%s: %d used, %d remaining", window_start, window_end, days_used, days_remaining)

    if days_remaining < SCHENGEN_CRITICAL_REMAINING_DAYS:
        alert_level = AlertLevel.RED
        message = f"Critical: Only {days_remaining} Schengen days remaining!"
    elif days_remaining < SCHENGEN_WARNING_REMAINING_DAYS:
        alert_level = AlertLevel.YELLOW
        message = f"Warning: Only {days_remaining} Schengen days remaining"
    else:
        alert_level = AlertLevel.NONE
        message = f"{days_used}/{SCHENGEN_MAX_STAY_DAYS} days used in last {SCHENGEN_WINDOW_DAYS} days"

    return SchengenStatus(
        days_used=days_used,
        days_remaining=days_remaining,
        alert_level=alert_level,
        message=message,
    )
