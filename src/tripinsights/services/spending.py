"""Cross-trip spending patterns for one traveler."""

import asyncio
import logging

from tripinsights.models.entities import Trip
from tripinsights.models.enums import ExpenseCategory, ExpenseKind
from tripinsights.models.reports import NoTrips, SpendingAnalysis, SpendingPatternResult, TripSpending
from tripinsights.services.accessor import EntityAccessor

logger = logging.getLogger(__name__)


async def summarize_trip_spending(trip: Trip, accessor: EntityAccessor) -> TripSpending:
    expenses = await accessor.list_expenses(trip.id)
    real = [expense for expense in expenses if expense.kind == ExpenseKind.REAL]

    by_category: dict[ExpenseCategory, float] = {}
    for expense in real:
        by_category[expense.category] = by_category.get(expense.category, 0.0) + expense.amount

    total = sum(expense.amount for expense in real)
    day_count = max(1, trip.day_count or 0)
    return TripSpending(
        trip_id=trip.id,
        trip_name=trip.name,
        total_spent=total,
        day_count=day_count,
        spent_per_day=total / day_count,
        spent_by_category=by_category,
    )


async def analyze_spending_patterns(user_id: str, accessor: EntityAccessor) -> SpendingPatternResult:
    trips = await accessor.list_trips(user_id)
    if not trips:
        return NoTrips()

    # gather() returns results in argument order, so summaries line up with trips
    summaries = await asyncio.gather(*(summarize_trip_spending(trip, accessor) for trip in trips))

    total = sum(summary.total_spent for summary in summaries)
    logger.info("Spending patterns for user %s: %d trips, total %.2f", user_id, len(trips), total)

    return SpendingAnalysis(
        user_id=user_id,
        trip_count=len(trips),
        total_spent=total,
        average_per_trip=total / len(trips),
        trips=list(summaries),
    )
