import logging

import numpy as np

from solo_snake.components.body.snake import SnakeBody
from solo_snake.components.movement.component import MovementComponent
from solo_snake.constants.directions import CARDINAL_DIRECTIONS, STILL

logger = logging.getLogger(__name__)


class SnakeMovement(MovementComponent):
    """
    Direction bookkeeping for the snake.

    Requested directions are buffered in ``pending_direction`` and only
    become the real ``direction`` when ``move`` is called, so several key
    presses between two ticks cannot turn the snake back onto itself.
    """

    def __init__(self, snake_body: SnakeBody, direction=STILL):
        super().__init__()
        self.snake_body = snake_body
        self.direction = direction
        self.pending_direction = direction

    def request_direction(self, direction) -> bool:
        new_direction = self._as_cardinal(direction)
        if new_direction is None:
            logger.debug(f"Ignoring malformed direction {direction!r}")
            return False

        if self._is_opposite_direction(self.direction, new_direction):
            logger.debug(f"Ignoring reverse direction {new_direction} while moving {self.direction}")
            return False

        self.pending_direction = new_direction
        return True

    def move(self) -> tuple[int, int]:
        """
        Apply the pending direction and return where the head goes next.
        The body itself is left untouched, collisions are resolved first.
        """
        self.direction = self.pending_direction

        np_offset = np.array(self.direction).astype(int)
        np_offset = np.multiply(np_offset, np.array([self.speed, self.speed]).astype(int))

        np_head = np.array(self.snake_body.head).astype(int)
        new_head = np.add(np_offset, np_head)

        return (int(new_head[0]), int(new_head[1]))

    def reset(self, direction=STILL):
        self.direction = direction
        self.pending_direction = direction

    def _is_opposite_direction(self, current_direction, new_direction) -> bool:
        return np.array_equal(np.negative(current_direction), new_direction)

    def _as_cardinal(self, direction):
        try:
            candidate = tuple(direction)
            if len(candidate) != 2 or candidate not in CARDINAL_DIRECTIONS:
                return None
        except TypeError:
            return None
        return (int(candidate[0]), int(candidate[1]))
