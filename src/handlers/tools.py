"""Tool invocation handler: runs one named analytics or lookup tool.

Event shape: {"tool": "<name>", "arguments": {...}}
"""

import asyncio
import logging
from enum import Enum
from typing import Any, TypeVar

from handlers.responses import run_and_respond
from tripinsights.clients import get_accessor
from tripinsights.config import Config, get_config
from tripinsights.errors import EntityNotFoundError, ErrorCode, InvalidRequestError
from tripinsights.models.entities import Trip
from tripinsights.models.enums import (
    EXPENSE_CATEGORY_LABELS,
    STOP_KIND_LABELS,
    TRIP_STATUS_LABELS,
    Collection,
    ExpenseCategory,
    StopKind,
    TripStatus,
)
from tripinsights.services import (
    EntityAccessor,
    analyze_spending_patterns,
    build_cost_report,
    build_route_advisory,
    build_trip_statistics,
)

EnumT = TypeVar("EnumT", bound=Enum)


def _id_schema(name: str, description: str) -> dict[str, Any]:
    return {"type": "object", "properties": {name: {"type": "string", "description": description}}, "required": [name]}


def _enum_property(labels: dict[Any, str], description: str) -> dict[str, Any]:
    return {
        "type": "string",
        "description": f"{description}: " + ", ".join(f"{member.value} ({label})" for member, label in labels.items()),
        "enum": [member.value for member in labels],
    }


def _filtered_schema(id_name: str, id_description: str, field: str, labels: dict[Any, str], description: str) -> dict[str, Any]:
    schema = _id_schema(id_name, id_description)
    schema["properties"][field] = _enum_property(labels, description)
    schema["required"].append(field)
    return schema


TOOL_CATALOG: list[dict[str, Any]] = [
    {
        "name": "list_trips",
        "description": "List every trip of a traveler, newest start date first",
        "inputSchema": _id_schema("userId", "Traveler ID"),
    },
    {
        "name": "get_trip",
        "description": "Get the details of one trip",
        "inputSchema": _id_schema("tripId", "Trip ID"),
    },
    {
        "name": "cost_report",
        "description": "Planned versus real cost report for a trip, broken down by category",
        "inputSchema": _id_schema("tripId", "Trip ID"),
    },
    {
        "name": "trip_statistics",
        "description": "Duration, distance, stop counts and cost ratios for a trip",
        "inputSchema": _id_schema("tripId", "Trip ID"),
    },
    {
        "name": "route_advisory",
        "description": "Flag consecutive stops that are unusually far apart",
        "inputSchema": _id_schema("tripId", "Trip ID"),
    },
    {
        "name": "spending_patterns",
        "description": "Spending across all trips of a traveler, grouped by category",
        "inputSchema": _id_schema("userId", "Traveler ID"),
    },
    {
        "name": "trips_by_status",
        "description": "List a traveler's trips with a given status",
        "inputSchema": _filtered_schema("userId", "Traveler ID", "status", TRIP_STATUS_LABELS, "Trip status"),
    },
    {
        "name": "list_stops",
        "description": "List the stops of a trip in arrival order",
        "inputSchema": _id_schema("tripId", "Trip ID"),
    },
    {
        "name": "stops_by_kind",
        "description": "List the stops of a trip with a given kind",
        "inputSchema": _filtered_schema("tripId", "Trip ID", "kind", STOP_KIND_LABELS, "Stop kind"),
    },
    {
        "name": "expenses_by_category",
        "description": "List the expenses of a trip in one category, newest first",
        "inputSchema": _filtered_schema("tripId", "Trip ID", "category", EXPENSE_CATEGORY_LABELS, "Expense category"),
    },
]


def _require(arguments: dict[str, Any], name: str) -> str:
    value = arguments.get(name)
    if not isinstance(value, str) or not value:
        raise InvalidRequestError(f"argument '{name}' is required")
    return value


def _require_enum(arguments: dict[str, Any], name: str, enum_type: type[EnumT]) -> EnumT:
    value = _require(arguments, name)
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidRequestError(f"argument '{name}' has unsupported value {value!r}") from None


async def _get_trip_or_raise(trip_id: str, accessor: EntityAccessor) -> Trip:
    trip = await accessor.get_trip(trip_id)
    if trip is None:
        raise EntityNotFoundError(Collection.TRIPS.value, trip_id)
    return trip


async def dispatch(tool: str, arguments: dict[str, Any], accessor: EntityAccessor, config: Config) -> Any:
    if tool == "list_trips":
        return await accessor.list_trips(_require(arguments, "userId"))
    if tool == "get_trip":
        return await _get_trip_or_raise(_require(arguments, "tripId"), accessor)
    if tool == "cost_report":
        return await build_cost_report(_require(arguments, "tripId"), accessor)
    if tool == "trip_statistics":
        return await build_trip_statistics(_require(arguments, "tripId"), accessor)
    if tool == "route_advisory":
        return await build_route_advisory(
            _require(arguments, "tripId"), accessor, threshold_km=config.route_distance_threshold_km
        )
    if tool == "spending_patterns":
        return await analyze_spending_patterns(_require(arguments, "userId"), accessor)
    if tool == "trips_by_status":
        return await accessor.find_trips_by_status(
            _require(arguments, "userId"), _require_enum(arguments, "status", TripStatus)
        )
    if tool == "list_stops":
        return await accessor.list_stops(_require(arguments, "tripId"))
    if tool == "stops_by_kind":
        return await accessor.find_stops_by_kind(_require(arguments, "tripId"), _require_enum(arguments, "kind", StopKind))
    if tool == "expenses_by_category":
        return await accessor.find_expenses_by_category(
            _require(arguments, "tripId"), _require_enum(arguments, "category", ExpenseCategory)
        )
    raise InvalidRequestError(f"unknown tool {tool!r}", code=ErrorCode.UNKNOWN_TOOL)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    logging.getLogger().setLevel(config.log_level)

    tool = event.get("tool", "")
    if tool == "list_tools":
        return run_and_respond(lambda: TOOL_CATALOG, "list_tools")

    def run() -> Any:
        arguments = event.get("arguments")
        if not isinstance(arguments, dict):
            raise InvalidRequestError("arguments not provided")
        return asyncio.run(dispatch(tool, arguments, get_accessor(), config))

    return run_and_respond(run, f"tool {tool}")
