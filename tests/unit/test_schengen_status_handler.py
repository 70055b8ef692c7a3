"""Unit tests for the Schengen status handler."""

import json
from datetime import date
from unittest.mock import patch

from handlers.schengen_status import handler


def test_schengen_status_handler():
    body = {
        "trips": [
            {"country": "France", "entryDate": "2024-06-01", "exitDate": None},
            {"country": "Thailand", "entryDate": "2024-01-01", "exitDate": "2024-05-31"},
        ],
        "referenceDate": "2024-06-30",
    }

    result = handler({"body": json.dumps(body)}, None)

    assert result["statusCode"] == 200
    assert json.loads(result["body"]) == {
        "daysUsed": 30,
        "daysRemaining": 60,
        "alertLevel": "none",
        "message": "30/90 days used in last 180 days",
    }


def test_schengen_status_handler_uses_today_when_not_pinned():
    body = {"trips": [{"country": "Italy", "entryDate": "2025-03-01"}]}

    with patch("core.clock.today", return_value=date(2025, 3, 10)):
        result = handler({"body": json.dumps(body)}, None)

    assert json.loads(result["body"])["daysUsed"] == 10


def test_schengen_status_handler_empty_body():
    result = handler({"body": None}, None)

    assert result["statusCode"] == 200
    assert json.loads(result["body"])["daysRemaining"] == 90
