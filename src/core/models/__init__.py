"""
Pydantic models for NomadSuite travel compliance.
"""

from core.models.reports import (
    AlertLevel,
    CountryDays,
    CountrySummary,
    OverlapValidation,
    SchengenStatus,
    TravelSummary,
)
from core.models.requests import TaxResidencyRequest, TripsRequest, ValidateTripRequest
from core.models.trip import Trip

__all__ = [
    "AlertLevel",
    "CountryDays",
    "CountrySummary",
    "OverlapValidation",
    "SchengenStatus",
    "TaxResidencyRequest",
    "TravelSummary",
    "Trip",
    "TripsRequest",
    "ValidateTripRequest",
]
