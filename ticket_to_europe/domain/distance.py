"""
Distance calculation using the Haversine formula.

Assumption
----------
Cities are treated as points on a sphere of radius 6371 km.  This is the
distance used to rank neighbours; it is not a travel distance.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .entities import City, Coordinate

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def route_distance_km(route: Sequence[City]) -> float:
    """Sum of leg distances along *route*.  O(n)."""
    total = 0.0
    for here, there in zip(route, route[1:]):
        total += distance_km(here.coordinate, there.coordinate)
    return total
