"""
Session registry tests.

Demonstrates:
1. Each session owns an isolated game state.
2. Guesses advance only the session they are made in.
3. Unknown or ended sessions raise ``SessionNotFound``.
"""

import random

import pytest

from ticket_to_europe.domain.enums import GuessOutcome
from ticket_to_europe.infrastructure.sessions import GameSessionRegistry, SessionNotFound


@pytest.fixture
def registry(engine):
    return GameSessionRegistry(engine)


class TestGameSessionRegistry:
    def test_start_with_city(self, registry, catalog):
        session_id, state = registry.start(catalog.get("A"))
        assert registry.get(session_id) is state
        assert session_id in registry
        assert len(registry) == 1

    def test_start_random_is_seeded(self, registry):
        _, s1 = registry.start(rng=random.Random(9))
        _, s2 = registry.start(rng=random.Random(9))
        assert s1 == s2

    def test_guess_updates_stored_state(self, registry, catalog):
        session_id, _ = registry.start(catalog.get("A"))
        result = registry.guess(session_id, "B")

        assert result.outcome == GuessOutcome.ACCEPTED
        assert registry.get(session_id) is result.state

    def test_sessions_are_isolated(self, registry, catalog):
        first, _ = registry.start(catalog.get("A"))
        second, _ = registry.start(catalog.get("A"))

        registry.guess(first, "B")
        registry.guess(second, "E")

        assert [c.name for c in registry.get(first).route] == ["A", "B"]
        assert registry.get(first).cash == 10
        assert [c.name for c in registry.get(second).route] == ["A"]
        assert registry.get(second).cash == -20

    def test_end_removes_session(self, registry, catalog):
        session_id, _ = registry.start(catalog.get("A"))
        final = registry.end(session_id)

        assert final.frontier.name == "A"
        assert session_id not in registry
        with pytest.raises(SessionNotFound):
            registry.get(session_id)

    def test_unknown_session(self, registry):
        with pytest.raises(KeyError):
            registry.guess("no-such-session", "A")

    def test_default_registry_uses_bundled_catalog(self):
        registry = GameSessionRegistry.default()
        session_id, state = registry.start(rng=random.Random(1))

        assert len(registry.engine.catalog) == 103
        assert len(state.candidates) == registry.engine.branching_factor
        # Nothing to cross yet, so the nearest candidate is always accepted
        result = registry.guess(session_id, state.candidates[0].name)
        assert result.outcome == GuessOutcome.ACCEPTED
