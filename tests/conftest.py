"""
Shared test fixtures.

The small catalog sits near the equator, where degree offsets rank the
same way as great-circle distances, so the expected neighbours can be
read straight off the coordinates:

    C (2,2)          E (10,10), F (12,12) far north-east
    |
    A (0,0) -- B (0,2)
   /
  D (-1,1)           G (-10,-10) far south-west

A -> B -> C forms an "L"; the leg C -> D cuts across A -> B.
"""

import pytest

from ticket_to_europe.catalog.loader import CityCatalog
from ticket_to_europe.domain.engine import GameEngine

SMALL_CATALOG = [
    {"name": "A", "lat": 0.0, "lng": 0.0},
    {"name": "B", "lat": 0.0, "lng": 2.0},
    {"name": "C", "lat": 2.0, "lng": 2.0},
    {"name": "D", "lat": -1.0, "lng": 1.0},
    {"name": "E", "lat": 10.0, "lng": 10.0},
    {"name": "F", "lat": 12.0, "lng": 12.0},
    {"name": "G", "lat": -10.0, "lng": -10.0},
]


@pytest.fixture
def catalog() -> CityCatalog:
    return CityCatalog.from_records(SMALL_CATALOG)


@pytest.fixture
def engine(catalog: CityCatalog) -> GameEngine:
    return GameEngine(catalog, branching_factor=3)


@pytest.fixture
def rich_engine(catalog: CityCatalog) -> GameEngine:
    """Enough starting cash to survive several wrong guesses."""
    return GameEngine(catalog, branching_factor=3, starting_cash=100)
