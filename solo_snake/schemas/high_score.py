from pydantic import BaseModel, ConfigDict, Field

# Stable across sessions, do not rename
HIGH_SCORE_KEY = "snakeHighScore"


class HighScoreRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    high_score: int = Field(default=0, ge=0, alias=HIGH_SCORE_KEY)
