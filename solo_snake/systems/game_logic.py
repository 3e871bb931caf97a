import random
from typing import Optional

import numpy as np

from solo_snake.components.body.component import BodyComponent
from solo_snake.components.body.snake import SnakeBody
from solo_snake.systems.system import System

WALL = "wall"
SELF = "self"

# Above this share of occupied cells, rejection sampling gets slow
DENSE_BOARD_RATIO = 0.9


class GameLogicSystem(System):
    def __init__(self, board_size: int, rng: Optional[random.Random] = None) -> None:
        if board_size < 2:
            raise ValueError(f"Board size must be at least 2, got {board_size}")
        self._board_size = board_size
        self._rng = rng if rng is not None else random.Random()

    @property
    def board_size(self):
        return self._board_size

    def setup(self):
        pass

    def run(self, snake_body: SnakeBody, new_head: tuple[int, int]) -> Optional[str]:
        """
        Return the collision the head would have at ``new_head``, if any:
        ``"wall"``, ``"self"`` or ``None``.
        """
        if self._has_wall_collision(new_head):
            return WALL
        if self._has_self_collision(snake_body, new_head):
            return SELF
        return None

    def spawn_valid_food(self, snake_body: SnakeBody, food: BodyComponent) -> bool:
        """
        Move ``food`` to a random cell the snake does not occupy.
        Returns False when the snake fills the whole board.
        """
        occupied = set(snake_body.segments)
        free_cells = self._board_size * self._board_size - len(occupied)
        if free_cells <= 0:
            return False

        if len(occupied) > DENSE_BOARD_RATIO * self._board_size * self._board_size:
            food.position = self._pick_free_cell(occupied)
            return True

        invalid_position = True
        while invalid_position:
            food_position = (
                self._rng.randint(0, self._board_size - 1),
                self._rng.randint(0, self._board_size - 1),
            )
            invalid_position = food_position in occupied

        food.position = food_position
        return True

    def center(self) -> tuple[int, int]:
        return (self._board_size // 2, self._board_size // 2)

    def _pick_free_cell(self, occupied: set) -> tuple[int, int]:
        grid = np.zeros((self._board_size, self._board_size), dtype=bool)
        for x, y in occupied:
            grid[y, x] = True

        # argwhere gives (row, column) = (y, x)
        free_cells = np.argwhere(~grid)
        y, x = free_cells[self._rng.randrange(len(free_cells))]
        return (int(x), int(y))

    def _has_wall_collision(self, position: tuple[int, int]) -> bool:
        x, y = position
        return not (0 <= x < self._board_size and 0 <= y < self._board_size)

    def _has_self_collision(self, snake_body: SnakeBody, position: tuple[int, int]) -> bool:
        # The tail cell is vacated during this same tick
        return tuple(position) in snake_body.body_without_tail
