"""Trip validation handler: run before a trip is inserted or updated.

Returns 200 with ``{"valid": true}`` when the candidate fits, and 400
with the first conflict otherwise. The caller stores the trip only on a
200; concurrent writers for the same user must re-check under a lock.
"""

import logging
from typing import Any

from core.models import ValidateTripRequest
from core.services import validate_no_overlap
from handlers.common import dump, handle_request, json_response

logger = logging.getLogger(__name__)


def _validate(request: ValidateTripRequest) -> dict[str, Any]:
    result = validate_no_overlap(
        request.candidate,
        request.trips,
        request.exclude_trip_id,
        reference_date=request.reference_date,
    )
    if not result.valid:
        logger.warning("Trip to %s rejected: %s", request.candidate.country, result.message)
        return json_response(400, dump(result))
    return json_response(200, dump(result))


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return handle_request(event, ValidateTripRequest, _validate)
