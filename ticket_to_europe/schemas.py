"""Pydantic snapshot models handed to the presentation layer."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from ticket_to_europe.domain.entities import Edge, GameState, GuessResult


class CityResponse(BaseModel):
    name: str
    lat: float
    lng: float

    model_config = {"from_attributes": True}


class EdgeResponse(BaseModel):
    from_city: CityResponse
    to_city: CityResponse

    model_config = {"from_attributes": True}


class GameSnapshot(BaseModel):
    route: list[CityResponse]
    candidates: list[CityResponse]
    rejected: list[CityResponse]
    frontier: CityResponse
    cash: int
    terminal: bool
    status: str
    total_distance_km: float

    @classmethod
    def from_state(cls, state: GameState) -> GameSnapshot:
        return cls(
            route=[CityResponse.model_validate(c) for c in state.route],
            candidates=[CityResponse.model_validate(c) for c in state.candidates],
            rejected=[CityResponse.model_validate(c) for c in state.rejected],
            frontier=CityResponse.model_validate(state.frontier),
            cash=state.cash,
            terminal=state.terminal,
            status=state.status.value,
            total_distance_km=round(state.total_distance_km, 1),
        )


class GuessResponse(BaseModel):
    outcome: str
    category: str
    cash_delta: int
    rejected_edge: Optional[EdgeResponse] = None
    snapshot: GameSnapshot

    @classmethod
    def from_result(cls, result: GuessResult) -> GuessResponse:
        edge: Optional[Edge] = result.rejected_edge
        return cls(
            outcome=result.outcome.value,
            category=result.category.value,
            cash_delta=result.cash_delta,
            rejected_edge=EdgeResponse.model_validate(edge) if edge else None,
            snapshot=GameSnapshot.from_state(result.state),
        )
