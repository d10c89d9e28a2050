"""Response rendering shared by the resource and tool handlers."""

import json
import logging
from collections.abc import Callable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel

from tripinsights.errors import ErrorCode, TripInsightsError

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.ENTITY_NOT_FOUND: 404,
    ErrorCode.TRIP_NOT_FOUND: 404,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.UNKNOWN_TOOL: 400,
    ErrorCode.UNSUPPORTED_RESOURCE: 400,
    ErrorCode.STORAGE_UNAVAILABLE: 503,
    ErrorCode.INTERNAL_ERROR: 500,
}


def to_payload(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [to_payload(item) for item in result]
    return result


def ok_response(result: Any) -> dict[str, Any]:
    return {"statusCode": 200, "body": json.dumps(to_payload(result))}


def error_response(error: TripInsightsError) -> dict[str, Any]:
    return {
        "statusCode": STATUS_BY_CODE.get(error.code, 500),
        "body": json.dumps({"error": error.code.value, "message": error.user_message}),
    }


def run_and_respond(action: Callable[[], Any], label: str) -> dict[str, Any]:
    """Run a handler action and map its outcome onto a status code.

    Missing entities and bad arguments are expected outcomes (4xx); storage
    failures are infrastructure problems (503) and are logged with traceback.
    """
    try:
        result = action()
    except TripInsightsError as e:
        logger.info("%s rejected: %s (%s)", label, e.message, e.code.value)
        return error_response(e)
    except (ClientError, BotoCoreError):
        logger.exception("Storage failure during %s", label)
        return error_response(TripInsightsError("storage failure", code=ErrorCode.STORAGE_UNAVAILABLE))
    except Exception:
        logger.exception("Unexpected error during %s", label)
        return error_response(TripInsightsError("unexpected error"))

    logger.info("%s completed", label)
    return ok_response(result)
