from .game import GameSnapshot
from .high_score import HIGH_SCORE_KEY, HighScoreRecord
