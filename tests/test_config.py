"""Unit tests for settings loading."""

from ticket_to_europe.config import Settings
from ticket_to_europe.domain.engine import GameEngine


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.branching_factor == 3
        assert s.starting_cash == 5
        assert s.accept_reward == 5
        assert s.reject_penalty == 25
        assert s.stop_on_terminal is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BRANCHING_FACTOR", "10")
        monkeypatch.setenv("REJECT_PENALTY", "30")
        s = Settings(_env_file=None)
        assert s.branching_factor == 10
        assert s.reject_penalty == 30

    def test_engine_from_settings(self, catalog):
        s = Settings(_env_file=None, branching_factor=2, accept_reward=7)
        engine = GameEngine.from_settings(catalog, s)

        state = engine.new_game(catalog.get("A"))
        assert [c.name for c in state.candidates] == ["D", "B"]
        assert engine.apply_guess(state, "B").state.cash == 12
