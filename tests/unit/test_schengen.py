from datetime import date, timedelta

import pytest

from core.models import AlertLevel, Trip
from core.rules import SCHENGEN_COUNTRIES
from core.services.schengen import calculate_schengen_90_180, is_schengen_country, schengen_window

TODAY = date(2024, 6, 30)


def _stay_ending_today(country: str, days: int) -> Trip:
    return Trip(country=country, entry_date=TODAY - timedelta(days=days - 1), exit_date=TODAY)


def test_membership():
    assert is_schengen_country("Germany")
    assert is_schengen_country("Switzerland")
    assert not is_schengen_country("United Kingdom")
    assert not is_schengen_country("Thailand")
    assert len(SCHENGEN_COUNTRIES) == 27


def test_window_is_anchored_to_reference_date():
    assert schengen_window(TODAY) == (date(2024, 1, 2), TODAY)


def test_empty_trips():
    status = calculate_schengen_90_180([], reference_date=TODAY)
    assert (status.days_used, status.days_remaining, status.alert_level) == (0, 90, AlertLevel.NONE)
    assert status.message == "0/90 days used in last 180 days"


def test_open_trip_for_thirty_days():
    trip = Trip(country="France", entry_date=TODAY - timedelta(days=29))

    status = calculate_schengen_90_180([trip], reference_date=TODAY)

    assert status.days_used == 30
    assert status.days_remaining == 60
    assert status.alert_level == AlertLevel.NONE
    assert status.message == "30/90 days used in last 180 days"


def test_non_member_is_excluded(make_trip):
    trips = [make_trip("Thailand", "2023-12-15", "2024-06-30")]
    assert calculate_schengen_90_180(trips, reference_date=TODAY).days_used == 0


def test_trip_before_window_is_excluded(make_trip):
    trips = [make_trip("Italy", "2023-01-01", "2023-03-01")]
    assert calculate_schengen_90_180(trips, reference_date=TODAY).days_used == 0


def test_trip_straddling_window_start_is_clipped(make_trip):
    trips = [make_trip("France", "2023-12-20", "2024-01-10")]
    assert calculate_schengen_90_180(trips, reference_date=TODAY).days_used == 9


def test_future_trip_is_excluded(make_trip):
    trips = [make_trip("Spain", "2024-07-05", "2024-07-10")]
    assert calculate_schengen_90_180(trips, reference_date=TODAY).days_used == 0


def test_multiple_members_sum(make_trip):
    trips = [
        make_trip("Germany", "2024-02-01", "2024-02-10"),
        make_trip("United Kingdom", "2024-02-11", "2024-02-20"),
        make_trip("Netherlands", "2024-02-21", "2024-02-25"),
    ]
    assert calculate_schengen_90_180(trips, reference_date=TODAY).days_used == 15


def test_remaining_never_negative():
    status = calculate_schengen_90_180([_stay_ending_today("Germany", 120)], reference_date=TODAY)

    assert status.days_used == 120
    assert status.days_remaining == 0
    assert status.alert_level == AlertLevel.RED
    assert status.message == "Critical: Only 0 Schengen days remaining!"


@pytest.mark.parametrize(
    "days_used, alert_level",
    [(70, AlertLevel.NONE), (71, AlertLevel.YELLOW), (80, AlertLevel.YELLOW), (81, AlertLevel.RED)],
)
def test_alert_thresholds(days_used, alert_level):
    status = calculate_schengen_90_180([_stay_ending_today("Austria", days_used)], reference_date=TODAY)
    assert status.days_used == days_used
    assert status.alert_level == alert_level


def test_warning_message():
    status = calculate_schengen_90_180([_stay_ending_today("Austria", 75)], reference_date=TODAY)
    assert status.message == "Warning: Only 15 Schengen days remaining"
