"""
Pydantic models for Trip Insights.
"""

from tripinsights.models.entities import Expense, Stop, Trip, TripDay, TripStatisticsSnapshot
from tripinsights.models.enums import Collection, ExpenseCategory, ExpenseKind, StopKind, TripStatus
from tripinsights.models.reports import (
    AdvisoryStop,
    CategorySummary,
    CostReport,
    InsufficientGeoTaggedStops,
    InsufficientStops,
    NoTrips,
    RouteAdvisory,
    RouteAdvisoryResult,
    SpendingAnalysis,
    SpendingPatternResult,
    TripSpending,
    TripStatistics,
)

__all__ = [
    "AdvisoryStop",
    "CategorySummary",
    "Collection",
    "CostReport",
    "Expense",
    "ExpenseCategory",
    "ExpenseKind",
    "InsufficientGeoTaggedStops",
    "InsufficientStops",
    "NoTrips",
    "RouteAdvisory",
    "RouteAdvisoryResult",
    "SpendingAnalysis",
    "SpendingPatternResult",
    "Stop",
    "StopKind",
    "Trip",
    "TripDay",
    "TripSpending",
    "TripStatistics",
    "TripStatisticsSnapshot",
    "TripStatus",
]
