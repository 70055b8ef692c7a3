"""183-day tax residency aggregation per calendar year."""

import logging
from collections.abc import Iterable
from datetime import date

from core.clock import resolve_reference_date
from core.models import AlertLevel, CountryDays, Trip
from core.rules import TAX_RESIDENCY_CRITICAL_DAYS, TAX_RESIDENCY_THRESHOLD_DAYS, TAX_RESIDENCY_WARNING_DAYS
from core.services.day_count import effective_end, overlap_days

logger = logging.getLogger(__name__)


def classify_tax_residency(country: str, days: int, year: int) -> CountryDays:
    if days > TAX_RESIDENCY_CRITICAL_DAYS:
        alert_level = AlertLevel.RED
        message = f"Tax residency risk! {days} days exceeds {TAX_RESIDENCY_THRESHOLD_DAYS}-day threshold in {year}"
    elif days > TAX_RESIDENCY_WARNING_DAYS:
        alert_level = AlertLevel.YELLOW
        message = f"Approaching tax residency threshold: {days}/{TAX_RESIDENCY_THRESHOLD_DAYS} days in {year}"
    else:
        alert_level = AlertLevel.NONE
        message = f"{days} days in {year}"

    return CountryDays(country=country, days=days, alert_level=alert_level, message=message)


def calculate_183_day_rule(
    trips: Iterable[Trip],
    year: int | None = None,
    *,
    reference_date: date | None = None,
) -> list[CountryDays]:
    """Days per country within ``year``, highest first, with residency alerts.

    Trips crossing a year boundary only contribute the days that fall
    inside the requested year. Ongoing trips run up to the reference date.
    """
    today = resolve_reference_date(reference_date)
    if year is None:
        year = today.year

    window_start = date(year, 1, 1)
    window_end = date(year, 12, 31)

    country_days: dict[str, int] = {}
    for trip in trips:
        end = effective_end(trip, today)
        if end < window_start or trip.entry_date > window_end:
            continue
        days = overlap_days(trip.entry_date, end, window_start, window_end)
        # An ongoing trip starting after the reference date has no days yet
        if not days:
            continue
        country_days[trip.country] = country_days.get(trip.country, 0) + days

    logger.debug("Tax residency %d: %d countries with presence", year, len(country_days))

    results = [classify_tax_residency(country, days, year) for country, days in country_days.items()]
    return sorted(results, key=lambda result: result.days, reverse=True)
