from typing import Optional

import pygame

from solo_snake.constants import colors
from solo_snake.constants.game_phase import GamePhase
from solo_snake.schemas.game import GameSnapshot
from solo_snake.systems.system import System

HUD_HEIGHT = 48

CONTROL_HINTS = {
    GamePhase.IDLE: "SPACE / ENTER: start",
    GamePhase.RUNNING: "Arrows / WASD: move   SPACE: pause   R: restart",
    GamePhase.PAUSED: "SPACE / ENTER: resume   R: restart",
    GamePhase.GAME_OVER: "ENTER: play again   R: restart",
}


class Renderer:
    """What the game engine expects from whoever draws the game."""

    def draw(self, snapshot: GameSnapshot):
        raise NotImplementedError(f"Child renderer MUST implement {self.draw.__name__}")

    def show_game_over(self, final_score: int):
        raise NotImplementedError(f"Child renderer MUST implement {self.show_game_over.__name__}")

    def show_high_score(self, value: int):
        raise NotImplementedError(f"Child renderer MUST implement {self.show_high_score.__name__}")

    def show_controls(self, phase: GamePhase):
        raise NotImplementedError(f"Child renderer MUST implement {self.show_controls.__name__}")


class RenderSystem(System, Renderer):
    def __init__(self, board_size: int, cell_size: int):
        self.board_size = board_size
        self.cell_size = cell_size

        self.window: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None

        # Display state only, the game state stays in the engine
        self._snapshot: Optional[GameSnapshot] = None
        self._high_score = 0
        self._phase = GamePhase.IDLE
        self._final_score: Optional[int] = None

    def setup(self):
        # Set the screen size
        screen_width = self.cell_size * self.board_size
        screen_height = self.cell_size * self.board_size + HUD_HEIGHT
        self.window = pygame.display.set_mode((screen_width, screen_height))
        pygame.display.set_caption("Snake Game")
        self._font = pygame.font.Font(None, 24)

        self.window.fill(colors.BACKGROUND)
        pygame.display.flip()

    def run(self, snapshot: GameSnapshot):
        self.draw(snapshot)

    def draw(self, snapshot: GameSnapshot):
        self._snapshot = snapshot
        self._high_score = max(self._high_score, snapshot.high_score)
        self._redraw()

    def show_game_over(self, final_score: int):
        self._final_score = final_score
        self._redraw()

    def show_high_score(self, value: int):
        self._high_score = value
        self._redraw()

    def show_controls(self, phase: GamePhase):
        self._phase = phase
        if phase != GamePhase.GAME_OVER:
            self._final_score = None
        self._redraw()

    def cell_rect(self, position: tuple[int, int]) -> pygame.Rect:
        x, y = position
        return pygame.Rect(
            x * self.cell_size,
            HUD_HEIGHT + y * self.cell_size,
            self.cell_size,
            self.cell_size,
        )

    def _redraw(self):
        if self.window is None:
            return

        self.window.fill(colors.BACKGROUND)
        self._draw_grid()

        if self._snapshot is not None:
            if self._snapshot.food is not None:
                pygame.draw.rect(self.window, colors.FOOD, self.cell_rect(self._snapshot.food))

            for index, segment in enumerate(self._snapshot.snake):
                color = colors.SNAKE_HEAD if index == 0 else colors.SNAKE_BODY
                pygame.draw.rect(self.window, color, self.cell_rect(segment))

        self._draw_hud()

        if self._final_score is not None:
            self._draw_game_over()

        pygame.display.flip()

    def _draw_grid(self):
        board_pixels = self.board_size * self.cell_size
        for line in range(self.board_size + 1):
            offset = line * self.cell_size
            pygame.draw.line(
                self.window, colors.GRID_LINE, (offset, HUD_HEIGHT), (offset, HUD_HEIGHT + board_pixels)
            )
            pygame.draw.line(
                self.window, colors.GRID_LINE, (0, HUD_HEIGHT + offset), (board_pixels, HUD_HEIGHT + offset)
            )

    def _draw_hud(self):
        pygame.draw.rect(self.window, colors.HUD_BACKGROUND, (0, 0, self.window.get_width(), HUD_HEIGHT))

        score = self._snapshot.score if self._snapshot is not None else 0
        scores_text = self._font.render(f"Score: {score}   High score: {self._high_score}", True, colors.HUD_TEXT)
        self.window.blit(scores_text, (8, 4))

        controls_text = self._font.render(CONTROL_HINTS[self._phase], True, colors.HUD_TEXT)
        self.window.blit(controls_text, (8, 4 + scores_text.get_height()))

    def _draw_game_over(self):
        board_center = (
            self.window.get_width() // 2,
            HUD_HEIGHT + (self.board_size * self.cell_size) // 2,
        )
        text = self._font.render(f"Game over! Final score: {self._final_score}", True, colors.GAME_OVER_TEXT)
        self.window.blit(text, text.get_rect(center=board_center))
