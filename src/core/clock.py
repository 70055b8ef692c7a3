"""Reference clock: the single place the calculators read "now"."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from core.config import get_config


def today(tz: str | None = None) -> date:
    """Current calendar date in ``tz``, or the configured timezone."""
    zone = ZoneInfo(tz or get_config().timezone)
    return datetime.now(zone).date()


def resolve_reference_date(reference_date: date | None) -> date:
    if reference_date is not None:
        return reference_date
    return today()
