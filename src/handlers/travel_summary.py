"""Lifetime travel summary handler."""

import logging
from typing import Any

from core.models import TripsRequest
from core.services import calculate_travel_summary
from handlers.common import dump, handle_request, json_response

logger = logging.getLogger(__name__)


def _summary(request: TripsRequest) -> dict[str, Any]:
    summary = calculate_travel_summary(request.trips, reference_date=request.reference_date)
    logger.info("Travel summary: %d trips across %d countries", len(request.trips), summary.total_countries)
    return json_response(200, dump(summary))


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return handle_request(event, TripsRequest, _summary)
