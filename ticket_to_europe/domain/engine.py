"""
Game Engine  (State Machine)
============================

States
------
* **IN_PROGRESS** -- cash >= 0.
* **TERMINAL**    -- cash < 0.  Reached only through a penalised guess.

Transition
----------
``apply_guess(state, name)`` classifies the guess, checked in this order:

1. GAME_OVER          -- state already terminal (only with ``stop_on_terminal``)
2. ALREADY_ROUTED     -- name is in the route                 -> no change
3. ALREADY_REJECTED   -- name was rejected from this frontier  -> no change
4. NOT_FOUND          -- name is not in the catalog            -> no change
5. NOT_A_CANDIDATE    -- name is not among the candidates      -> cash - penalty
6. WOULD_CROSS_ROUTE  -- new leg crosses a committed edge      -> cash - penalty
7. ACCEPTED           -- route extended                        -> cash + reward

On acceptance the candidates are recomputed around the new frontier and
every previously rejected city that is neither routed nor already nearest
is appended, so a wrong guess is not lost from view.  Once the frontier
has moved such a city is judged afresh and can be accepted; ``rejected``
itself stays cumulative for display.

Every transition returns a new ``GameState``; no-op outcomes hand back the
very same instance.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from datetime import date
from typing import TYPE_CHECKING, Optional

from .entities import City, Edge, GameState, GuessResult
from .enums import GuessOutcome
from .geometry import would_cross
from .selection import city_of_the_day, k_nearest, pick_starting_city

if TYPE_CHECKING:
    from ticket_to_europe.catalog.loader import CityCatalog
    from ticket_to_europe.config import Settings

logger = logging.getLogger(__name__)


class GameEngine:
    """High-level API used by the session registry and presentation layer."""

    def __init__(
        self,
        catalog: CityCatalog,
        branching_factor: int = 3,
        starting_cash: int = 5,
        reward: int = 5,
        penalty: int = 25,
        stop_on_terminal: bool = True,
    ):
        if branching_factor <= 0:
            raise ValueError(
                f"branching_factor must be positive, got {branching_factor}"
            )
        self.catalog = catalog
        self.branching_factor = branching_factor
        self.starting_cash = starting_cash
        self.reward = reward
        self.penalty = penalty
        self.stop_on_terminal = stop_on_terminal

    @classmethod
    def from_settings(cls, catalog: CityCatalog, settings: Settings) -> GameEngine:
        return cls(
            catalog,
            branching_factor=settings.branching_factor,
            starting_cash=settings.starting_cash,
            reward=settings.accept_reward,
            penalty=settings.reject_penalty,
            stop_on_terminal=settings.stop_on_terminal,
        )

    # ── Game start ────────────────────────────────────────────────────

    def new_game(self, start_city: City) -> GameState:
        candidates = k_nearest(
            start_city, (start_city,), self.branching_factor, self.catalog
        )
        logger.info("New game from %s", start_city.name)
        return GameState(
            route=(start_city,),
            candidates=candidates,
            rejected=(),
            cash=self.starting_cash,
        )

    def new_random_game(self, rng: Optional[random.Random] = None) -> GameState:
        return self.new_game(pick_starting_city(self.catalog, rng))

    def new_daily_game(self, day: Optional[date] = None) -> GameState:
        return self.new_game(city_of_the_day(self.catalog, day))

    # ── Transition ────────────────────────────────────────────────────

    def apply_guess(self, state: GameState, city_name: str) -> GuessResult:
        if self.stop_on_terminal and state.terminal:
            return GuessResult(state, GuessOutcome.GAME_OVER)
        if state.in_route(city_name):
            return GuessResult(state, GuessOutcome.ALREADY_ROUTED)
        if state.is_rejected_here(city_name):
            return GuessResult(state, GuessOutcome.ALREADY_REJECTED)

        city = self.catalog.get(city_name)
        if city is None:
            logger.warning("Guess %r does not match any catalog city", city_name)
            return GuessResult(state, GuessOutcome.NOT_FOUND)

        if not state.is_candidate(city_name):
            return self._reject(state, city, GuessOutcome.NOT_A_CANDIDATE)

        if would_cross(state.frontier, city, state.edges):
            return self._reject(
                state,
                city,
                GuessOutcome.WOULD_CROSS_ROUTE,
                rejected_edge=Edge(state.frontier, city),
            )

        return self._accept(state, city)

    # ── Internals ─────────────────────────────────────────────────────

    def _reject(
        self,
        state: GameState,
        city: City,
        outcome: GuessOutcome,
        rejected_edge: Optional[Edge] = None,
    ) -> GuessResult:
        rejected = state.rejected
        if not state.is_rejected(city.name):
            rejected += (city,)
        new_state = replace(
            state,
            rejected=rejected,
            rejected_here=state.rejected_here + (city.name,),
            cash=state.cash - self.penalty,
        )
        logger.debug(
            "Rejected %s from %s: %s (cash %d -> %d)",
            city.name,
            state.frontier.name,
            outcome.value,
            state.cash,
            new_state.cash,
        )
        if new_state.terminal and not state.terminal:
            logger.info(
                "Game over after %d cities, cash %d",
                len(new_state.route),
                new_state.cash,
            )
        return GuessResult(
            new_state, outcome, cash_delta=-self.penalty, rejected_edge=rejected_edge
        )

    def _accept(self, state: GameState, city: City) -> GuessResult:
        route = state.route + (city,)
        nearest = k_nearest(city, route, self.branching_factor, self.catalog)

        # Previously rejected cities stay on offer
        offered = {c.name for c in route} | {c.name for c in nearest}
        carried = tuple(c for c in state.rejected if c.name not in offered)

        new_state = replace(
            state,
            route=route,
            candidates=nearest + carried,
            rejected_here=(),
            cash=state.cash + self.reward,
        )
        logger.debug(
            "Accepted %s -> %s (cash %d -> %d)",
            state.frontier.name,
            city.name,
            state.cash,
            new_state.cash,
        )
        return GuessResult(new_state, GuessOutcome.ACCEPTED, cash_delta=self.reward)
