BACKGROUND = (255, 255, 255)
GRID_LINE = (230, 230, 230)
HUD_BACKGROUND = (40, 40, 40)
HUD_TEXT = (240, 240, 240)

SNAKE_HEAD = (0, 160, 0)
SNAKE_BODY = (0, 255, 0)
FOOD = (255, 0, 0)

GAME_OVER_TEXT = (200, 0, 0)
