"""Travel compliance calculations: pure functions over a user's trips."""

from core.services.day_count import effective_end, overlap_days, trip_days
from core.services.overlap import ensure_no_overlap, intervals_overlap, trips_overlap, validate_no_overlap
from core.services.schengen import calculate_schengen_90_180, is_schengen_country
from core.services.summary import calculate_travel_summary
from core.services.tax_residency import calculate_183_day_rule

__all__ = [
    "calculate_183_day_rule",
    "calculate_schengen_90_180",
    "calculate_travel_summary",
    "effective_end",
    "ensure_no_overlap",
    "intervals_overlap",
    "is_schengen_country",
    "overlap_days",
    "trip_days",
    "trips_overlap",
    "validate_no_overlap",
]
