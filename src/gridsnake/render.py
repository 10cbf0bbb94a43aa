# render.py
from typing import Optional, Sequence, Tuple

import pygame  # type: ignore

from .config import (
    BOARD_BG, WINDOW_BG, SNAKE_BODY, SNAKE_HEAD, SNAKE_EDGE, FOOD,
    TEXT, SCORE_TEXT, NEW_BEST, BUTTON, BUTTON_TXT, HUD_HEIGHT,
)
from .geometry import Cell, GridGeometry

RESET_LABEL = "Reset"


class PygameRenderer:
    """Draws the board centred under a score bar, on any pygame surface."""

    def __init__(self, screen: pygame.Surface, font: Optional[pygame.font.Font] = None):
        self.screen = screen
        self.font = font or pygame.font.SysFont(None, 24)
        self.title_font = pygame.font.SysFont(None, 50)
        self.score_font = pygame.font.SysFont(None, 30)
        self.geometry = GridGeometry(cell_size=1, width=0, height=0)
        self.reset_button = pygame.Rect(0, 0, 0, 0)

    # ---------- Layout ----------
    def set_geometry(self, geometry: GridGeometry) -> None:
        self.geometry = geometry

    @property
    def board_origin(self) -> Tuple[int, int]:
        board_w, _ = self.geometry.pixel_size
        return max((self.screen.get_width() - board_w) // 2, 0), HUD_HEIGHT

    @property
    def board_rect(self) -> pygame.Rect:
        ox, oy = self.board_origin
        w, h = self.geometry.pixel_size
        return pygame.Rect(ox, oy, w, h)

    def cell_rect(self, cell: Cell) -> pygame.Rect:
        ox, oy = self.board_origin
        px, py = self.geometry.to_pixels(cell)
        size = self.geometry.cell_size
        return pygame.Rect(ox + px, oy + py, size, size)

    # ---------- Renderer interface ----------
    def clear(self) -> None:
        self.screen.fill(WINDOW_BG)
        pygame.draw.rect(self.screen, BOARD_BG, self.board_rect)

    def draw_food(self, cell: Cell) -> None:
        if not self.geometry.contains(cell):
            return
        rect = self.cell_rect(cell)
        pygame.draw.circle(self.screen, FOOD, rect.center, self.geometry.cell_size // 2)

    def draw_snake(self, segments: Sequence[Cell], head_index: int = 0) -> None:
        for i, cell in enumerate(segments):
            # a paused snake may hang off a board that just shrank
            if not self.geometry.contains(cell):
                continue
            rect = self.cell_rect(cell)
            pygame.draw.rect(self.screen, SNAKE_HEAD if i == head_index else SNAKE_BODY, rect)
            pygame.draw.rect(self.screen, SNAKE_EDGE, rect, 1)

    def draw_overlay_message(self, text: str, final_score: int, best_score: int, is_new_best: bool) -> None:
        board = self.board_rect
        # Dim with translucent overlay
        overlay = pygame.Surface(board.size, pygame.SRCALPHA)
        overlay.fill((255, 255, 255, 160))  # RGBA
        self.screen.blit(overlay, board.topleft)

        cx, cy = board.center
        title = self.title_font.render(text, True, TEXT)
        score = self.score_font.render(f"Final Score: {final_score}", True, SCORE_TEXT)
        if is_new_best:
            best = self.font.render("NEW HIGH SCORE!", True, NEW_BEST)
        else:
            best = self.font.render(f"High Score: {best_score}", True, TEXT)

        self.screen.blit(title, title.get_rect(center=(cx, cy - 50)))
        self.screen.blit(score, score.get_rect(center=(cx, cy)))
        self.screen.blit(best, best.get_rect(center=(cx, cy + 50)))

    def draw_scoreboard(self, score: int, best: int) -> None:
        txt = self.score_font.render(f"Score: {score}   Best: {best}", True, SCORE_TEXT)
        self.screen.blit(txt, txt.get_rect(midleft=(12, HUD_HEIGHT // 2)))

        label = self.font.render(RESET_LABEL, True, BUTTON_TXT)
        self.reset_button = label.get_rect(midright=(self.screen.get_width() - 12, HUD_HEIGHT // 2)).inflate(24, 12)
        pygame.draw.rect(self.screen, BUTTON, self.reset_button, border_radius=6)
        self.screen.blit(label, label.get_rect(center=self.reset_button.center))

    def draw_message(self, text: str) -> None:
        """Plain centred message, for when there is no board to draw on."""
        self.screen.fill(WINDOW_BG)
        msg = self.font.render(text, True, TEXT)
        self.screen.blit(msg, msg.get_rect(center=self.screen.get_rect().center))

    def present(self) -> None:
        pygame.display.flip()
