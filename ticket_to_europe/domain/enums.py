"""Domain enumerations and outcome classification rules."""

import enum


class GameStatus(str, enum.Enum):
    IN_PROGRESS = "IN_PROGRESS"
    TERMINAL = "TERMINAL"


class GuessOutcome(str, enum.Enum):
    ACCEPTED = "ACCEPTED"
    NOT_A_CANDIDATE = "NOT_A_CANDIDATE"
    WOULD_CROSS_ROUTE = "WOULD_CROSS_ROUTE"
    ALREADY_ROUTED = "ALREADY_ROUTED"
    ALREADY_REJECTED = "ALREADY_REJECTED"
    NOT_FOUND = "NOT_FOUND"
    GAME_OVER = "GAME_OVER"


class OutcomeCategory(str, enum.Enum):
    VALID = "VALID"
    INVALID_GUESS = "INVALID_GUESS"  # penalised
    ALREADY_HANDLED = "ALREADY_HANDLED"  # idempotent no-op
    NOT_FOUND = "NOT_FOUND"
    GAME_OVER = "GAME_OVER"


OUTCOME_CATEGORIES: dict[GuessOutcome, OutcomeCategory] = {
    GuessOutcome.ACCEPTED: OutcomeCategory.VALID,
    GuessOutcome.NOT_A_CANDIDATE: OutcomeCategory.INVALID_GUESS,
    GuessOutcome.WOULD_CROSS_ROUTE: OutcomeCategory.INVALID_GUESS,
    GuessOutcome.ALREADY_ROUTED: OutcomeCategory.ALREADY_HANDLED,
    GuessOutcome.ALREADY_REJECTED: OutcomeCategory.ALREADY_HANDLED,
    GuessOutcome.NOT_FOUND: OutcomeCategory.NOT_FOUND,
    GuessOutcome.GAME_OVER: OutcomeCategory.GAME_OVER,
}


class CityAnnotation(str, enum.Enum):
    """How a single catalog city relates to the current game state."""

    FRONTIER = "FRONTIER"
    ROUTE = "ROUTE"
    REJECTED = "REJECTED"
    CANDIDATE = "CANDIDATE"
    OTHER = "OTHER"
