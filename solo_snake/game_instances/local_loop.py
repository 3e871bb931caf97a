import logging
import os
import random

from solo_snake.config import GameConfig
from solo_snake.game_logic.engine import GameEngine
from solo_snake.storage.high_score import HighScoreStore
from solo_snake.systems.player_input import InputSystem
from solo_snake.systems.render import RenderSystem
from solo_snake.utils.tick_driver import PygameTickDriver

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"
import pygame  # noqa: E402

logger = logging.getLogger(__name__)


class LocalLoop:
    def __init__(self, config: GameConfig, rng: random.Random = None):
        self.config = config
        self.rng = rng

        self.rendering_system = RenderSystem(config.board_size, config.cell_size)
        self.tick_driver = PygameTickDriver()
        self.high_score_store = HighScoreStore(config.high_score_path)

        self.engine = None
        self.input_system = None

        self._clock = None
        self._running = False

    def setup(self):
        pygame.init()

        self.rendering_system.setup()

        self.engine = GameEngine(
            self.config,
            renderer=self.rendering_system,
            driver=self.tick_driver,
            store=self.high_score_store,
            rng=self.rng,
        )
        self.input_system = InputSystem(self.engine)
        self.input_system.setup()

        self._clock = pygame.time.Clock()
        self._running = True
        logger.info(
            f"Board {self.config.board_size}x{self.config.board_size}, "
            f"high score {self.engine.high_score}"
        )

    def close(self):
        self.tick_driver.cancel()
        pygame.quit()

    def run(self):
        self.setup()
        try:
            while self._running:
                self.process_events(pygame.event.get())
                self._clock.tick(self.config.tick_rate)
        except KeyboardInterrupt:
            pass
        finally:
            self.close()

    def process_events(self, events):
        for event in events:
            if self.tick_driver.dispatch(event):
                continue
            self.input_system.handle_event(event)

        if self.input_system.quit_requested:
            self._running = False
