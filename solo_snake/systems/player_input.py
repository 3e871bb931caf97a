import logging

import pygame

from solo_snake.constants.directions import DOWN, LEFT, RIGHT, UP
from solo_snake.constants.game_phase import GamePhase
from solo_snake.game_logic.engine import GameEngine
from solo_snake.systems.system import System

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


class InputSystem(System):
    """
    Turns pygame key events into engine commands.

    ``handle_event`` returns True when the event was consumed by the game,
    in which case the host must not act on it again.
    """

    def __init__(self, engine: GameEngine):
        self.engine = engine
        self.quit_requested = False

    def setup(self):
        self.quit_requested = False

    def run(self, events) -> bool:
        for event in events:
            self.handle_event(event)
        return self.quit_requested

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return True

        if event.type != pygame.KEYDOWN:
            return False

        if event.key in KEY_DIRECTIONS:
            if self.engine.phase != GamePhase.RUNNING:
                return False
            self.engine.set_direction(KEY_DIRECTIONS[event.key])
            return True

        if event.key == pygame.K_SPACE:
            if self.engine.phase == GamePhase.RUNNING:
                self.engine.pause()
            else:
                self.engine.start()
            return True

        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.engine.start()
            return True

        if event.key == pygame.K_r:
            self.engine.restart()
            return True

        if event.key == pygame.K_ESCAPE:
            logger.info("Escape pressed, leaving the game")
            self.quit_requested = True
            return True

        return False
