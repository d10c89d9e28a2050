"""Resource read handler: returns raw entities addressed by URI.

Supported URIs:
    trips://list?userId=<id>
    trip://detail/<tripId>
    stops://list/<tripId>
    expenses://list/<tripId>
    days://list/<tripId>
"""

import asyncio
import logging
from typing import Any
from urllib.parse import parse_qs, urlsplit

from handlers.responses import run_and_respond
from tripinsights.clients import get_accessor
from tripinsights.config import get_config
from tripinsights.errors import EntityNotFoundError, ErrorCode, InvalidRequestError
from tripinsights.models.enums import Collection
from tripinsights.services.accessor import EntityAccessor


def parse_uri(uri: str) -> tuple[str, str, str]:
    """Split a resource URI into (scheme, action, argument)."""
    parts = urlsplit(uri)
    if not parts.scheme or not parts.netloc:
        raise InvalidRequestError(f"malformed resource URI {uri!r}", code=ErrorCode.UNSUPPORTED_RESOURCE)

    argument = parts.path.strip("/")
    if parts.scheme == "trips":
        argument = parse_qs(parts.query).get("userId", [""])[0]
    if not argument:
        raise InvalidRequestError(f"resource URI {uri!r} is missing its identifier")
    return parts.scheme, parts.netloc, argument


async def read_resource(uri: str, accessor: EntityAccessor) -> Any:
    scheme, action, argument = parse_uri(uri)

    if (scheme, action) == ("trips", "list"):
        return await accessor.list_trips(argument)
    if (scheme, action) == ("trip", "detail"):
        trip = await accessor.get_trip(argument)
        if trip is None:
            raise EntityNotFoundError(Collection.TRIPS.value, argument)
        return trip
    if (scheme, action) == ("stops", "list"):
        return await accessor.list_stops(argument)
    if (scheme, action) == ("expenses", "list"):
        return await accessor.list_expenses(argument)
    if (scheme, action) == ("days", "list"):
        return await accessor.list_trip_days(argument)
    raise InvalidRequestError(f"unsupported resource {scheme}://{action}", code=ErrorCode.UNSUPPORTED_RESOURCE)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    logging.getLogger().setLevel(config.log_level)
    uri = event.get("uri", "")

    def run() -> Any:
        return asyncio.run(read_resource(uri, get_accessor()))

    return run_and_respond(run, f"resource {uri}")
