"""
Durable high score storage.

The score lives in a small JSON file, ``{"snakeHighScore": 120}``. Every
failure is logged and swallowed: losing the stored high score must never
stop a game.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from solo_snake.schemas.high_score import HighScoreRecord

logger = logging.getLogger(__name__)


class ScoreStore:
    """Where the engine keeps the high score between sessions."""

    def load_high_score(self) -> int:
        raise NotImplementedError(f"Child store MUST implement {self.load_high_score.__name__}")

    def save_high_score(self, score: int) -> bool:
        raise NotImplementedError(f"Child store MUST implement {self.save_high_score.__name__}")


class HighScoreStore(ScoreStore):
    def __init__(self, path: Path):
        self.path = Path(path)

    def load_high_score(self) -> int:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                parsed_data = json.load(f)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read high score from {self.path}: {e}")
            return 0

        try:
            return HighScoreRecord.model_validate(parsed_data).high_score
        except ValidationError as e:
            logger.warning(f"Ignoring invalid high score file {self.path}: {e}")
            return 0

    def save_high_score(self, score: int) -> bool:
        record = HighScoreRecord(high_score=score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(record.model_dump_json(by_alias=True))
        except OSError as e:
            logger.warning(f"Could not save high score to {self.path}: {e}")
            return False
        return True


class MemoryHighScoreStore(ScoreStore):
    """Store that keeps the high score for the process lifetime only."""

    def __init__(self, high_score: int = 0):
        self._high_score = high_score

    def load_high_score(self) -> int:
        return self._high_score

    def save_high_score(self, score: int) -> bool:
        self._high_score = score
        return True
