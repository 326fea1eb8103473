"""
Domain entities.

Patterns used
-------------
- **Value Objects**: ``Coordinate``, ``City`` and ``Edge`` are frozen; a city
  is identified by its exact name.
- **Immutable state**: ``GameState`` is never modified in place.  The engine
  returns a new ``GameState`` from every transition, so route, candidates,
  rejects and cash always advance together.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .distance import route_distance_km
from .enums import (
    OUTCOME_CATEGORIES,
    CityAnnotation,
    GameStatus,
    GuessOutcome,
    OutcomeCategory,
)


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class City:
    name: str
    coordinate: Coordinate

    @property
    def lat(self) -> float:
        return self.coordinate.latitude

    @property
    def lng(self) -> float:
        return self.coordinate.longitude


@dataclass(frozen=True)
class Edge:
    """One committed leg of the route, ``from_city`` -> ``to_city``."""

    from_city: City
    to_city: City

    def shares_endpoint(self, other: Edge) -> bool:
        mine = {self.from_city.name, self.to_city.name}
        return other.from_city.name in mine or other.to_city.name in mine


# ── Game state ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GameState:
    route: tuple[City, ...]
    candidates: tuple[City, ...]
    rejected: tuple[City, ...]
    cash: int
    # Names rejected since the frontier last moved; cleared on acceptance
    rejected_here: tuple[str, ...] = ()

    @property
    def frontier(self) -> City:
        return self.route[-1]

    @property
    def terminal(self) -> bool:
        return self.cash < 0

    @property
    def status(self) -> GameStatus:
        return GameStatus.TERMINAL if self.terminal else GameStatus.IN_PROGRESS

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(Edge(a, b) for a, b in zip(self.route, self.route[1:]))

    @property
    def total_distance_km(self) -> float:
        return route_distance_km(self.route)

    def in_route(self, name: str) -> bool:
        return any(c.name == name for c in self.route)

    def is_rejected(self, name: str) -> bool:
        return any(c.name == name for c in self.rejected)

    def is_rejected_here(self, name: str) -> bool:
        return name in self.rejected_here

    def is_candidate(self, name: str) -> bool:
        return any(c.name == name for c in self.candidates)

    def annotate(self, name: str) -> CityAnnotation:
        """Classify *name* for display; earlier checks win."""
        if self.frontier.name == name:
            return CityAnnotation.FRONTIER
        if self.in_route(name):
            return CityAnnotation.ROUTE
        if self.is_rejected(name):
            return CityAnnotation.REJECTED
        if self.is_candidate(name):
            return CityAnnotation.CANDIDATE
        return CityAnnotation.OTHER


@dataclass(frozen=True)
class GuessResult:
    state: GameState
    outcome: GuessOutcome
    cash_delta: int = 0
    # Transient: the edge that would have crossed the route, for display only
    rejected_edge: Optional[Edge] = None

    @property
    def category(self) -> OutcomeCategory:
        return OUTCOME_CATEGORIES[self.outcome]
