"""Headless drawing tests for PygameRenderer (SDL dummy video driver)."""

import os

import pygame  # type: ignore
import pytest

from gridsnake.config import HUD_HEIGHT, SNAKE_HEAD, SNAKE_BODY, WINDOW_BG, BOARD_BG
from gridsnake.geometry import GridGeometry
from gridsnake.render import PygameRenderer

WIDTH, HEIGHT = 560, 600


@pytest.fixture(scope="module", autouse=True)
def headless_pygame():
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def renderer():
    r = PygameRenderer(pygame.Surface((WIDTH, HEIGHT)))
    r.set_geometry(GridGeometry(cell_size=25, width=20, height=20))
    return r


def color_at(surface, point):
    return tuple(surface.get_at(point))[:3]


class TestLayout:

    def test_board_is_centred_under_hud(self, renderer):
        assert renderer.board_origin == ((WIDTH - 500) // 2, HUD_HEIGHT)
        assert renderer.board_rect.size == (500, 500)

    def test_cell_rect(self, renderer):
        assert renderer.cell_rect((2, 3)) == pygame.Rect(30 + 50, HUD_HEIGHT + 75, 25, 25)


class TestDrawing:

    def test_full_frame(self, renderer):
        screen = renderer.screen
        renderer.clear()
        assert color_at(screen, (5, 5)) == WINDOW_BG
        assert color_at(screen, renderer.board_rect.center) == BOARD_BG

        renderer.draw_food((10, 10))
        renderer.draw_snake([(2, 2), (1, 2), (0, 2), (40, 40)], head_index=0)
        assert color_at(screen, renderer.cell_rect((2, 2)).center) == SNAKE_HEAD
        assert color_at(screen, renderer.cell_rect((1, 2)).center) == SNAKE_BODY

        renderer.draw_overlay_message("Game Over!", 3, 7, False)
        renderer.draw_overlay_message("Game Over!", 8, 8, True)
        renderer.draw_scoreboard(3, 7)

        button = renderer.reset_button
        assert button.width > 0 and button.height > 0
        assert button.top >= 0 and button.bottom <= HUD_HEIGHT
        assert button.right <= WIDTH

    def test_cells_off_a_shrunk_board_are_skipped(self, renderer):
        renderer.set_geometry(GridGeometry(cell_size=25, width=4, height=4))
        renderer.clear()
        off_board = renderer.cell_rect((5, 5))
        assert renderer.screen.get_rect().contains(off_board)

        renderer.draw_snake([(1, 1), (5, 5)])
        renderer.draw_food((6, 6))
        assert color_at(renderer.screen, off_board.center) == WINDOW_BG
        assert color_at(renderer.screen, renderer.cell_rect((1, 1)).center) == SNAKE_HEAD

    def test_degenerate_board_draws_nothing_on_it(self, renderer):
        renderer.set_geometry(GridGeometry(cell_size=25, width=0, height=0))
        renderer.clear()
        renderer.draw_snake([(0, 0)])
        renderer.draw_message("too small")
        renderer.draw_scoreboard(0, 0)
