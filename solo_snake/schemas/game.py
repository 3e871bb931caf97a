from typing import Optional

from pydantic import BaseModel, ConfigDict

from solo_snake.constants.game_phase import GamePhase


class GameSnapshot(BaseModel):
    """
    Immutable view of the game pushed to the renderer after every change
    """

    model_config = ConfigDict(frozen=True)

    snake: tuple[tuple[int, int], ...]
    food: Optional[tuple[int, int]]
    board_size: int
    score: int
    high_score: int
    speed_interval_ms: int
    phase: GamePhase

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Text version of the board, mostly for logs:
        . = empty cell
        F = food
        H = snake head
        S = snake body
        """
        board = [["." for _ in range(self.board_size)] for _ in range(self.board_size)]

        if self.food is not None:
            food_x, food_y = self.food
            board[food_y][food_x] = "F"

        for index, (x, y) in enumerate(self.snake):
            board[y][x] = "H" if index == 0 else "S"

        return "\n".join(" ".join(row) for row in board)
