from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Trip(BaseModel):
    """A stay in one country. ``exit_date`` of None means still there."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: int | str | None = None
    country: str = Field(..., min_length=1)
    entry_date: date
    exit_date: date | None = None
    notes: str | None = None

    @field_validator("country", mode="before")
    @classmethod
    def strip_country(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("entry_date", "exit_date", mode="before")
    @classmethod
    def truncate_timestamps(cls, value: object) -> object:
        # Trips are stored as timestamps upstream; only the calendar day matters here
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return datetime.fromisoformat(value).date()
        return value

    @model_validator(mode="after")
    def exit_not_before_entry(self) -> "Trip":
        if self.exit_date is not None and self.exit_date < self.entry_date:
            raise ValueError("exit_date must be on or after entry_date")
        return self

    @property
    def is_ongoing(self) -> bool:
        return self.exit_date is None
