"""
Core package for Trip Insights.

Read accessors over the trip datastore and the analytics built on them live
here. Lambda handlers in src/handlers/ are thin wrappers that call into
tripinsights/.
"""

__all__: list[str] = []
