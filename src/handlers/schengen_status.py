"""Schengen status handler: 90/180 allowance as of today."""

import logging
from typing import Any

from core.clock import resolve_reference_date
from core.models import TripsRequest
from core.services import calculate_schengen_90_180
from handlers.common import dump, handle_request, json_response

logger = logging.getLogger(__name__)


def _status(request: TripsRequest) -> dict[str, Any]:
    today = resolve_reference_date(request.reference_date)
    status = calculate_schengen_90_180(request.trips, reference_date=today)
    logger.info("Schengen status as of %s: %d used, %s", today, status.days_used, status.alert_level.value)
    return json_response(200, dump(status))


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return handle_request(event, TripsRequest, _status)
