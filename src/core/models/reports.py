from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AlertLevel(str, Enum):
    NONE = "none"
    YELLOW = "yellow"
    RED = "red"


class Report(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CountryDays(Report):
    country: str
    days: int
    alert_level: AlertLevel
    message: str


class SchengenStatus(Report):
    days_used: int
    days_remaining: int
    alert_level: AlertLevel
    message: str


class CountrySummary(Report):
    country: str
    total_days: int
    visits: int
    longest_stay: int


class TravelSummary(Report):
    total_countries: int
    country_summaries: list[CountrySummary] = []


class OverlapValidation(Report):
    valid: bool
    message: str | None = None
    conflicting_trip_id: int | str | None = None
