"""Planned-vs-real cost report for a single trip."""

import logging
from datetime import datetime, timezone

from tripinsights.errors import TripNotFoundError
from tripinsights.models.entities import Expense
from tripinsights.models.enums import ExpenseCategory, ExpenseKind
from tripinsights.models.reports import CategorySummary, CostReport
from tripinsights.services.accessor import EntityAccessor

logger = logging.getLogger(__name__)


def summarize_by_category(expenses: list[Expense], total: float) -> list[CategorySummary]:
    """Group expenses by category, in order of first appearance."""
    groups: dict[ExpenseCategory, list[Expense]] = {}
    for expense in expenses:
        groups.setdefault(expense.category, []).append(expense)

    summaries = []
    for category, entries in groups.items():
        subtotal = sum(entry.amount for entry in entries)
        summaries.append(
            CategorySummary(
                category=category,
                total=subtotal,
                count=len(entries),
                percentage=(subtotal / total) * 100 if total > 0 else 0.0,
                average=subtotal / len(entries),
            )
        )
    return summaries


async def build_cost_report(trip_id: str, accessor: EntityAccessor) -> CostReport:
    trip = await accessor.get_trip(trip_id)
    if trip is None:
        raise TripNotFoundError(trip_id)

    expenses = await accessor.list_expenses(trip_id)
    real = [expense for expense in expenses if expense.kind == ExpenseKind.REAL]
    planned = [expense for expense in expenses if expense.kind == ExpenseKind.PLANNED]

    total_real = sum(expense.amount for expense in real)
    total_planned = sum(expense.amount for expense in planned)
    difference = total_real - total_planned
    # No budget: variance is 0, not undefined.
    variance_percentage = (difference / total_planned) * 100 if total_planned > 0 else 0.0

    report = CostReport(
        trip_id=trip_id,
        total_planned=total_planned,
        total_real=total_real,
        difference=difference,
        variance_percentage=variance_percentage,
        category_summaries=summarize_by_category(real, total_real),
        average_cost_per_day=total_real / max(1, trip.day_count or 0),
        generated_at=datetime.now(timezone.utc).isoformat(),
    )
    logger.info(
        "Cost report for trip %s: planned=%.2f real=%.2f across %d expenses",
        trip_id,
        total_planned,
        total_real,
        len(expenses),
    )
    return report
