"""Tax residency report handler: 183-day rule per country for one year."""

import logging
from typing import Any

from core.clock import resolve_reference_date
from core.models import TaxResidencyRequest
from core.services import calculate_183_day_rule
from handlers.common import dump, handle_request, json_response

logger = logging.getLogger(__name__)


def _report(request: TaxResidencyRequest) -> dict[str, Any]:
    today = resolve_reference_date(request.reference_date)
    results = calculate_183_day_rule(request.trips, request.year, reference_date=today)
    logger.info("Tax residency report: %d trips, %d countries", len(request.trips), len(results))
    return json_response(200, [dump(result) for result in results])


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return handle_request(event, TaxResidencyRequest, _report)
