"""Unit tests for the presentation snapshot models."""

from ticket_to_europe.schemas import GameSnapshot, GuessResponse


class TestGameSnapshot:
    def test_from_new_game(self, engine, catalog):
        snapshot = GameSnapshot.from_state(engine.new_game(catalog.get("A")))

        assert [c.name for c in snapshot.route] == ["A"]
        assert [c.name for c in snapshot.candidates] == ["D", "B", "C"]
        assert snapshot.frontier.name == "A"
        assert snapshot.cash == 5
        assert snapshot.terminal is False
        assert snapshot.status == "IN_PROGRESS"
        assert snapshot.total_distance_km == 0.0

    def test_serialises_to_json(self, engine, catalog):
        snapshot = GameSnapshot.from_state(engine.new_game(catalog.get("A")))
        data = snapshot.model_dump()
        assert data["frontier"] == {"name": "A", "lat": 0.0, "lng": 0.0}


class TestGuessResponse:
    def test_accepted(self, engine, catalog):
        result = engine.apply_guess(engine.new_game(catalog.get("A")), "B")
        response = GuessResponse.from_result(result)

        assert response.outcome == "ACCEPTED"
        assert response.category == "VALID"
        assert response.cash_delta == 5
        assert response.rejected_edge is None
        assert response.snapshot.total_distance_km > 0

    def test_crossing_carries_rejected_edge(self, engine, catalog):
        state = engine.new_game(catalog.get("A"))
        for name in ("B", "C"):
            state = engine.apply_guess(state, name).state
        response = GuessResponse.from_result(engine.apply_guess(state, "D"))

        assert response.outcome == "WOULD_CROSS_ROUTE"
        assert response.category == "INVALID_GUESS"
        assert response.rejected_edge.from_city.name == "C"
        assert response.rejected_edge.to_city.name == "D"
        assert response.snapshot.terminal is True
        assert [c.name for c in response.snapshot.rejected] == ["D"]
