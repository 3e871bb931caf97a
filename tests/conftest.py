import os
import random
from unittest.mock import Mock

import pytest

# Headless SDL for everything that touches pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

import pygame  # noqa: E402

from solo_snake.config import GameConfig  # noqa: E402
from solo_snake.game_logic.engine import GameEngine  # noqa: E402
from solo_snake.storage.high_score import MemoryHighScoreStore  # noqa: E402
from solo_snake.systems.render import Renderer  # noqa: E402
from solo_snake.utils.tick_driver import ManualTickDriver  # noqa: E402


@pytest.fixture
def config(tmp_path):
    return GameConfig(high_score_path=tmp_path / "highscore.json")


@pytest.fixture
def renderer():
    return Mock(spec=Renderer)


@pytest.fixture
def driver():
    return ManualTickDriver()


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def engine(config, renderer, driver, store):
    return GameEngine(config, renderer=renderer, driver=driver, store=store, rng=random.Random(1234))


@pytest.fixture
def pygame_session():
    pygame.init()
    yield
    pygame.quit()
