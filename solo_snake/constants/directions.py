STILL = (0, 0)
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

DIRECTIONS = {
    "UP": UP,
    "LEFT": LEFT,
    "DOWN": DOWN,
    "RIGHT": RIGHT,
}

CARDINAL_DIRECTIONS = frozenset(DIRECTIONS.values())
