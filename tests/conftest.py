"""Shared test fixtures for NomadSuite travel compliance."""

import sys
from datetime import date
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_config_cache():
    from core.config import _reset_config

    _reset_config()
    yield
    _reset_config()


@pytest.fixture
def reference_date() -> date:
    """Fixed "today" so window calculations are deterministic."""
    return date(2024, 6, 30)


@pytest.fixture
def make_trip():
    """Build a Trip from ISO date strings."""
    from core.models import Trip

    def _make(country: str, entry: str, exit: str | None = None, trip_id: int | None = None) -> Trip:
        return Trip(
            id=trip_id,
            country=country,
            entry_date=date.fromisoformat(entry),
            exit_date=date.fromisoformat(exit) if exit else None,
        )

    return _make
