from collections.abc import Iterable
from datetime import date

from core.clock import resolve_reference_date
from core.models import CountrySummary, TravelSummary, Trip
from core.services.day_count import trip_days


def calculate_travel_summary(trips: Iterable[Trip], *, reference_date: date | None = None) -> TravelSummary:
    """Lifetime days, visit count and longest stay per country, most days first."""
    today = resolve_reference_date(reference_date)

    stats: dict[str, dict[str, int]] = {}
    for trip in trips:
        days = trip_days(trip.entry_date, trip.exit_date, reference_date=today)
        current = stats.setdefault(trip.country, {"total_days": 0, "visits": 0, "longest_stay": 0})
        current["total_days"] += days
        current["visits"] += 1
        current["longest_stay"] = max(current["longest_stay"], days)

    summaries = sorted(
        (CountrySummary(country=country, **values) for country, values in stats.items()),
        key=lambda summary: summary.total_days,
        reverse=True,
    )
    return TravelSummary(total_countries=len(stats), country_summaries=summaries)
