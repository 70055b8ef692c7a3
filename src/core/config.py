import logging
from os import environ

from pydantic import BaseModel, ConfigDict, field_validator


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment: str
    log_level: str = "INFO"
    timezone: str = "UTC"

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config, for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        environment=environ.get("ENVIRONMENT", "local"),
        log_level=environ.get("LOG_LEVEL", "INFO"),
        timezone=environ.get("TRAVEL_TIMEZONE", "UTC"),
    )
    return _cached_config
