"""
Read accessors and analytics builders for Trip Insights.

- accessor.py: typed reads against the document store
- cost_report.py: planned-vs-real variance per trip
- trip_stats.py: flat per-trip statistics
- route_advisory.py: haversine distance heuristic between stops
- spending.py: per-traveler spending patterns across trips
"""

from tripinsights.services.accessor import EntityAccessor
from tripinsights.services.cost_report import build_cost_report
from tripinsights.services.route_advisory import build_route_advisory, haversine_km
from tripinsights.services.spending import analyze_spending_patterns
from tripinsights.services.trip_stats import build_trip_statistics

__all__ = [
    "EntityAccessor",
    "analyze_spending_patterns",
    "build_cost_report",
    "build_route_advisory",
    "build_trip_statistics",
    "haversine_km",
]
