"""Centralised game settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Candidate search
    branching_factor: int = 3  # K nearest cities offered per turn

    # Scoring
    starting_cash: int = 5
    accept_reward: int = 5
    reject_penalty: int = 25

    # Refuse guesses once cash has gone negative
    stop_on_terminal: bool = True

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
