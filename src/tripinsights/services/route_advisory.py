"""Distance heuristic over consecutive geo-tagged stops.

Flags consecutive stops that are unusually far apart. This never reorders
stops or proposes coordinates; it only produces advisory strings.
"""

import logging
import math

from tripinsights.models.reports import (
    ROUTE_OPTIMIZED_MESSAGE,
    AdvisoryStop,
    InsufficientGeoTaggedStops,
    InsufficientStops,
    RouteAdvisory,
    RouteAdvisoryResult,
)
from tripinsights.services.accessor import EntityAccessor

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
DEFAULT_THRESHOLD_KM = 500.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in km between two (lat, lon) points given in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_advisory(from_name: str, to_name: str, distance_km: float) -> str:
    return (
        f'Large distance ({distance_km:.0f} km) between "{from_name}" and "{to_name}". '
        "Consider adding an intermediate stop."
    )


async def build_route_advisory(
    trip_id: str,
    accessor: EntityAccessor,
    threshold_km: float = DEFAULT_THRESHOLD_KM,
) -> RouteAdvisoryResult:
    stops = await accessor.list_stops(trip_id)
    if len(stops) < 2:
        return InsufficientStops(stop_count=len(stops))

    geotagged = [stop for stop in stops if stop.is_geotagged]
    if len(geotagged) < 2:
        return InsufficientGeoTaggedStops(geotagged_count=len(geotagged), stop_count=len(stops))

    suggestions = []
    for current, following in zip(geotagged, geotagged[1:]):
        distance = haversine_km(*current.coordinates, *following.coordinates)
        if distance > threshold_km:
            suggestions.append(distance_advisory(current.name, following.name, distance))

    logger.info(
        "Route advisory for trip %s: %d of %d legs over %.0f km",
        trip_id,
        len(suggestions),
        len(geotagged) - 1,
        threshold_km,
    )

    return RouteAdvisory(
        trip_id=trip_id,
        stop_count=len(stops),
        geotagged_count=len(geotagged),
        suggestions=suggestions or [ROUTE_OPTIMIZED_MESSAGE],
        stops=[
            AdvisoryStop(id=stop.id, name=stop.name, kind=stop.kind, coordinates=stop.coordinates)
            for stop in geotagged
        ],
    )
