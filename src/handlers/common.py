"""Shared request parsing and response building for API Gateway proxy handlers."""

import base64
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import pydantic

from core.config import get_config
from core.errors import USER_MESSAGES, ErrorCode, NomadSuiteError

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=pydantic.BaseModel)

JSON_HEADERS = {"Content-Type": "application/json"}


def parse_body(event: dict[str, Any]) -> Any:
    body = event.get("body")
    if body is None:
        return {}
    if isinstance(body, (dict, list)):
        return body
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return json.loads(body) if body else {}


def json_response(status_code: int, payload: Any) -> dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(JSON_HEADERS), "body": json.dumps(payload)}


def error_response(status_code: int, code: ErrorCode) -> dict[str, Any]:
    return json_response(status_code, {"error": {"code": code.value, "message": USER_MESSAGES[code]}})


def dump(model: pydantic.BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def handle_request(
    event: dict[str, Any],
    request_model: type[RequestT],
    compute: Callable[[RequestT], dict[str, Any]],
) -> dict[str, Any]:
    """Validate the event body into ``request_model`` and run ``compute``.

    Client mistakes become 400s with a client-safe message; anything
    unexpected is logged and returned as a 500.
    """
    logging.getLogger().setLevel(get_config().log_level)

    try:
        payload = parse_body(event)
    except ValueError as exc:
        logger.warning("Rejected malformed request body: %s", exc)
        return error_response(400, ErrorCode.INVALID_REQUEST)

    try:
        request = request_model.model_validate(payload)
        return compute(request)
    except pydantic.ValidationError as exc:
        logger.warning("Rejected request: %d validation errors", exc.error_count())
        return error_response(400, ErrorCode.VALIDATION_ERROR)
    except NomadSuiteError as exc:
        logger.warning("Rejected request (%s): %s", exc.code.value, exc.message)
        return error_response(400, exc.code)
    except Exception:
        logger.exception("Unhandled error while processing request")
        return error_response(500, ErrorCode.INTERNAL_ERROR)
