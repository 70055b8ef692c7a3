"""Request bodies accepted by the HTTP handlers."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.trip import Trip


class TripsRequest(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    trips: list[Trip] = []
    reference_date: date | None = None


class TaxResidencyRequest(TripsRequest):
    year: int | None = Field(default=None, ge=1, le=9999)


class ValidateTripRequest(TripsRequest):
    candidate: Trip
    exclude_trip_id: int | str | None = None
