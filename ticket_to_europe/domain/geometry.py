"""
Route crossing test.

Approximation
-------------
Coordinates are treated as planar ``(lat, lng)`` points and segments as
straight lines in that plane, not as great-circle arcs.  At the spacing of
the city catalog the two rarely disagree, and the test only has to decide
whether a new leg visibly cuts across the drawn route.

Complexity: O(1) per segment pair, O(e) per ``would_cross`` call where
e = committed edges.
"""

from __future__ import annotations

from typing import Iterable

from .entities import City, Edge

Point = tuple[float, float]


def orientation(p: Point, q: Point, r: Point) -> float:
    """Cross product of (q - p) x (r - p); the sign gives the turn direction."""
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def _in_bounding_box(p: Point, q: Point, r: Point) -> bool:
    """True if *r* lies inside the axis-aligned box spanned by *p* and *q*."""
    return (
        min(p[0], q[0]) <= r[0] <= max(p[0], q[0])
        and min(p[1], q[1]) <= r[1] <= max(p[1], q[1])
    )


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    d1 = orientation(p1, p2, p3)
    d2 = orientation(p1, p2, p4)
    d3 = orientation(p3, p4, p1)
    d4 = orientation(p3, p4, p2)

    if ((d1 > 0 and d2 < 0) or (d1 < 0 and d2 > 0)) and (
        (d3 > 0 and d4 < 0) or (d3 < 0 and d4 > 0)
    ):
        return True

    # Collinear cases
    if d1 == 0 and _in_bounding_box(p1, p2, p3):
        return True
    if d2 == 0 and _in_bounding_box(p1, p2, p4):
        return True
    if d3 == 0 and _in_bounding_box(p3, p4, p1):
        return True
    if d4 == 0 and _in_bounding_box(p3, p4, p2):
        return True
    return False


def _point(city: City) -> Point:
    return (city.lat, city.lng)


def would_cross(new_from: City, new_to: City, edges: Iterable[Edge]) -> bool:
    """
    Check whether the leg *new_from* -> *new_to* cuts any committed edge.

    Edges that share an endpoint with the new leg are connections, not
    crossings, and are never tested.
    """
    candidate = Edge(new_from, new_to)
    for edge in edges:
        if candidate.shares_endpoint(edge):
            continue
        if segments_intersect(
            _point(new_from),
            _point(new_to),
            _point(edge.from_city),
            _point(edge.to_city),
        ):
            return True
    return False
