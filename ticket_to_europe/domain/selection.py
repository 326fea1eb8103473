"""
City selection: the starting city and the nearest-neighbour candidates.

Randomness is always passed in as an explicit ``random.Random`` so a game
can be replayed from its seed.  ``city_of_the_day`` derives that seed from
the calendar day, which gives every player the same start on the same day.

Complexity
----------
* ``pick_starting_city``: O(n) to materialise the catalog, O(1) draw.
* ``k_nearest``:          O(n log n) -- one distance per city, then a sort.
"""

from __future__ import annotations

import random
from datetime import date
from typing import Iterable, Optional

from .distance import distance_km
from .entities import City


def pick_starting_city(
    catalog: Iterable[City], rng: Optional[random.Random] = None
) -> City:
    """Return one city drawn uniformly at random from *catalog*."""
    cities = tuple(catalog)
    if not cities:
        raise ValueError("Cannot pick a starting city from an empty catalog")
    rng = rng or random.Random()
    return cities[rng.randrange(len(cities))]


def city_of_the_day(catalog: Iterable[City], day: Optional[date] = None) -> City:
    day = day or date.today()
    return pick_starting_city(catalog, random.Random(day.toordinal()))


def k_nearest(
    reference: City,
    exclude: Iterable[City],
    k: int,
    catalog: Iterable[City],
) -> tuple[City, ...]:
    """
    Return up to *k* catalog cities closest to *reference*, nearest first.

    The reference itself and every city in *exclude* are skipped (matched
    by name).  Fewer than *k* cities come back when the catalog runs out.
    Equal distances keep catalog order since ``sorted`` is stable.
    """
    if k <= 0:
        return ()
    excluded = {c.name for c in exclude}
    excluded.add(reference.name)

    ranked = sorted(
        (c for c in catalog if c.name not in excluded),
        key=lambda c: distance_km(reference.coordinate, c.coordinate),
    )
    return tuple(ranked[:k])
