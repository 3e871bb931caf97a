import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

DEFAULT_HIGH_SCORE_PATH = Path.home() / ".solo_snake" / "highscore.json"

# Environment variable -> GameConfig field
_ENV_FIELDS = {
    "SNAKE_BOARD_SIZE": "board_size",
    "SNAKE_INITIAL_SPEED_MS": "initial_speed_ms",
    "SNAKE_MIN_SPEED_MS": "min_speed_ms",
    "SNAKE_SPEED_STEP_MS": "speed_step_ms",
    "SNAKE_FOOD_SCORE": "food_score",
    "SNAKE_CELL_SIZE": "cell_size",
    "SNAKE_TICK_RATE": "tick_rate",
    "SNAKE_HIGH_SCORE_PATH": "high_score_path",
}


class GameConfig(BaseModel):
    board_size: int = Field(default=20, ge=2)
    initial_speed_ms: int = Field(default=150, gt=0)
    min_speed_ms: int = Field(default=80, gt=0)
    speed_step_ms: int = Field(default=2, ge=0)
    food_score: int = Field(default=10, ge=0)
    cell_size: int = Field(default=24, gt=0)
    tick_rate: int = Field(default=60, gt=0)
    high_score_path: Path = DEFAULT_HIGH_SCORE_PATH

    @model_validator(mode="after")
    def _check_speed_bounds(self):
        if self.min_speed_ms > self.initial_speed_ms:
            raise ValueError(
                f"min_speed_ms ({self.min_speed_ms}) cannot be greater than "
                f"initial_speed_ms ({self.initial_speed_ms})"
            )
        return self


def load_config(**overrides) -> GameConfig:
    """
    Build the game configuration from SNAKE_* environment variables
    (a .env file is honoured) and explicit keyword overrides.
    """
    load_dotenv()

    values = {}
    for env_name, field_name in _ENV_FIELDS.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[field_name] = env_value
    values.update(overrides)

    return GameConfig.model_validate(values)
