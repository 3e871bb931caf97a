"""
Game engine: the only owner of the game state.

The engine does not know how time passes or how things are drawn. A tick
driver calls ``tick`` periodically and a renderer receives immutable
snapshots after every change, which lets tests drive a whole game
synchronously.
"""

import logging
import random
from typing import Optional

from solo_snake.components.body.component import BodyComponent
from solo_snake.components.body.snake import SnakeBody
from solo_snake.components.movement.snake import SnakeMovement
from solo_snake.config import GameConfig
from solo_snake.constants.directions import RIGHT, STILL
from solo_snake.constants.game_phase import GamePhase
from solo_snake.schemas.game import GameSnapshot
from solo_snake.storage.high_score import MemoryHighScoreStore, ScoreStore
from solo_snake.systems.game_logic import GameLogicSystem
from solo_snake.systems.render import Renderer
from solo_snake.utils.tick_driver import TickDriver

logger = logging.getLogger(__name__)


class GameEngine:
    def __init__(
        self,
        config: GameConfig,
        renderer: Renderer,
        driver: TickDriver,
        store: Optional[ScoreStore] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self._renderer = renderer
        self._driver = driver
        self._store = store if store is not None else MemoryHighScoreStore()

        self.game_logic_system = GameLogicSystem(config.board_size, rng)
        self.game_logic_system.setup()

        self.snake_body = SnakeBody(self.game_logic_system.center())
        self.snake_movement = SnakeMovement(self.snake_body)
        self.food = BodyComponent()

        self.score = 0
        self.high_score = self._load_high_score()
        self.speed_interval_ms = config.initial_speed_ms
        self.phase = GamePhase.IDLE
        self.death_reason: Optional[str] = None

        self._reset_state()

        self._renderer.show_high_score(self.high_score)
        self._renderer.show_controls(self.phase)
        self._renderer.draw(self.snapshot())

    @property
    def direction(self):
        return self.snake_movement.direction

    @property
    def pending_direction(self):
        return self.snake_movement.pending_direction

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=self.snake_body.segments,
            food=self._visible_food(),
            board_size=self.config.board_size,
            score=self.score,
            high_score=self.high_score,
            speed_interval_ms=self.speed_interval_ms,
            phase=self.phase,
        )

    def start(self):
        if self.phase == GamePhase.RUNNING:
            return

        if self.phase == GamePhase.PAUSED:
            logger.info("Resuming game")
        else:
            self._reset_state()
            self.snake_movement.reset(RIGHT)
            logger.info("Starting new game")

        self._set_phase(GamePhase.RUNNING)
        self._driver.schedule(self.speed_interval_ms, self.tick)
        self._renderer.draw(self.snapshot())

    def pause(self):
        if self.phase != GamePhase.RUNNING:
            return

        self._driver.cancel()
        self._set_phase(GamePhase.PAUSED)
        logger.info(f"Game paused at score {self.score}")

    def restart(self):
        self._driver.cancel()
        self._reset_state()
        self._set_phase(GamePhase.IDLE)
        logger.info("Game restarted")
        self._renderer.draw(self.snapshot())

    def set_direction(self, direction) -> bool:
        if self.phase != GamePhase.RUNNING:
            return False
        return self.snake_movement.request_direction(direction)

    def tick(self):
        if self.phase != GamePhase.RUNNING:
            return

        new_head = self.snake_movement.move()

        collision = self.game_logic_system.run(self.snake_body, new_head)
        if collision is not None:
            self.death_reason = collision
            self._game_over()
            return

        ate_food = new_head == self.food.position
        self.snake_body.advance(new_head, grow=ate_food)

        if ate_food:
            self.score += self.config.food_score
            if not self.game_logic_system.spawn_valid_food(self.snake_body, self.food):
                logger.info("Snake fills the whole board")
                self.death_reason = None
                self._game_over()
                return
            self._speed_up()

        self._renderer.draw(self.snapshot())

    def _speed_up(self):
        if self.speed_interval_ms <= self.config.min_speed_ms:
            return

        self.speed_interval_ms = max(
            self.config.min_speed_ms,
            self.speed_interval_ms - self.config.speed_step_ms,
        )
        self._driver.schedule(self.speed_interval_ms, self.tick)

    def _game_over(self):
        self._driver.cancel()
        self._set_phase(GamePhase.GAME_OVER)
        logger.info(f"Game over ({self.death_reason or 'board full'}), final score {self.score}")

        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()
            self._renderer.show_high_score(self.high_score)

        snapshot = self.snapshot()
        logger.debug(f"Final board:\n{snapshot.print_board()}")
        self._renderer.draw(snapshot)
        self._renderer.show_game_over(self.score)

    def _reset_state(self):
        self.score = 0
        self.speed_interval_ms = self.config.initial_speed_ms
        self.death_reason = None
        self.snake_body.reset(self.game_logic_system.center())
        self.snake_movement.reset(STILL)
        self.game_logic_system.spawn_valid_food(self.snake_body, self.food)

    def _visible_food(self):
        # Only a full board leaves the food under the snake
        if self.snake_body.occupies(self.food.position):
            return None
        return self.food.position

    def _set_phase(self, phase: GamePhase):
        self.phase = phase
        self._renderer.show_controls(phase)

    def _load_high_score(self) -> int:
        try:
            return int(self._store.load_high_score())
        except Exception as e:
            logger.warning(f"High score unavailable, keeping it in memory only: {e}")
            return 0

    def _save_high_score(self):
        try:
            self._store.save_high_score(self.high_score)
        except Exception as e:
            logger.warning(f"High score not persisted, keeping it in memory only: {e}")
