import logging
import os

from solo_snake.config import load_config
from solo_snake.game_instances.local_loop import LocalLoop


def main():
    # Loads .env too, so SNAKE_LOG_LEVEL can live there
    config = load_config()
    logging.basicConfig(
        level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    LocalLoop(config).run()


if "__main__" == __name__:
    main()
