"""Flat per-trip statistics: duration, distance, stop counts and cost ratios."""

import asyncio
import logging
import math
from datetime import datetime, timezone

from tripinsights.errors import TripNotFoundError
from tripinsights.models.enums import ExpenseKind, StopKind
from tripinsights.models.reports import TripStatistics
from tripinsights.services.accessor import EntityAccessor

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO date or datetime; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def trip_duration_days(start_date: str, end_date: str) -> int:
    elapsed = parse_timestamp(end_date) - parse_timestamp(start_date)
    return math.ceil(elapsed.total_seconds() / SECONDS_PER_DAY)


async def build_trip_statistics(trip_id: str, accessor: EntityAccessor) -> TripStatistics:
    trip = await accessor.get_trip(trip_id)
    if trip is None:
        raise TripNotFoundError(trip_id)

    stops, expenses = await asyncio.gather(accessor.list_stops(trip_id), accessor.list_expenses(trip_id))

    stop_count = len(stops)
    fuel_stop_count = sum(1 for stop in stops if stop.kind == StopKind.FUEL)
    real_total = sum(expense.amount for expense in expenses if expense.kind == ExpenseKind.REAL)
    duration = trip_duration_days(trip.start_date, trip.end_date)

    logger.debug("Trip %s: %d stops, %d expenses, %d days", trip_id, stop_count, len(expenses), duration)

    return TripStatistics(
        trip_id=trip_id,
        trip_name=trip.name,
        status=trip.status,
        origin=trip.origin,
        destination=trip.destination,
        start_date=trip.start_date,
        end_date=trip.end_date,
        duration_days=duration,
        total_distance=trip.total_distance or 0.0,
        stop_count=stop_count,
        fuel_stop_count=fuel_stop_count,
        real_total_cost=real_total,
        average_cost_per_day=real_total / duration if duration > 0 else 0.0,
        average_cost_per_stop=real_total / stop_count if stop_count > 0 else 0.0,
    )
