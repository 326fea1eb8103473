"""
In-memory game session registry.

Each session owns one ``GameState`` that nothing else shares.  A guess
replaces the stored state with the one the engine returns, so sessions can
never see each other's route, rejects or cash.  Nothing is persisted and
nothing expires: a session stays in memory until ``end`` is called, so the
host application is responsible for ending sessions it no longer needs.
"""

from __future__ import annotations

import logging
import random
import uuid
from typing import Optional

from ticket_to_europe.catalog.loader import load_default_catalog
from ticket_to_europe.config import settings
from ticket_to_europe.domain.engine import GameEngine
from ticket_to_europe.domain.entities import City, GameState, GuessResult

logger = logging.getLogger(__name__)


class SessionNotFound(KeyError):
    """Raised when a session id is unknown or has already ended."""


class GameSessionRegistry:
    def __init__(self, engine: GameEngine):
        self.engine = engine
        self._states: dict[str, GameState] = {}

    @classmethod
    def default(cls) -> GameSessionRegistry:
        """Registry over the bundled catalog with rules from ``settings``."""
        return cls(GameEngine.from_settings(load_default_catalog(), settings))

    def start(
        self,
        start_city: Optional[City] = None,
        rng: Optional[random.Random] = None,
    ) -> tuple[str, GameState]:
        """Open a session from *start_city*, or a random city when omitted."""
        if start_city is not None:
            state = self.engine.new_game(start_city)
        else:
            state = self.engine.new_random_game(rng)
        session_id = str(uuid.uuid4())
        self._states[session_id] = state
        logger.info("Session %s started at %s", session_id, state.frontier.name)
        return session_id, state

    def get(self, session_id: str) -> GameState:
        try:
            return self._states[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def guess(self, session_id: str, city_name: str) -> GuessResult:
        result = self.engine.apply_guess(self.get(session_id), city_name)
        self._states[session_id] = result.state
        logger.debug(
            "Session %s guessed %r: %s", session_id, city_name, result.outcome.value
        )
        return result

    def end(self, session_id: str) -> GameState:
        state = self.get(session_id)
        del self._states[session_id]
        logger.info(
            "Session %s ended: %d cities, cash %d",
            session_id,
            len(state.route),
            state.cash,
        )
        return state

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._states
