"""Tests for CLI parsing and pygame event routing (no window is opened)."""

from types import SimpleNamespace
from unittest.mock import Mock

import pygame  # type: ignore
import pytest

from gridsnake.errors import DegenerateGridError
from gridsnake.main import App, TOO_SMALL_MESSAGE, parse_args
from gridsnake.snake import Direction


def make_app():
    app = App.__new__(App)
    app.loop = Mock()
    app.renderer = Mock()
    app.scheduler = Mock(event_type=pygame.USEREVENT + 1)
    app.screen = Mock()
    return app


def key(k):
    return SimpleNamespace(type=pygame.KEYDOWN, key=k)


class TestParseArgs:

    def test_defaults(self):
        cfg = parse_args([])
        assert cfg.tick_ms == 150
        assert cfg.seed is None

    def test_overrides(self):
        cfg = parse_args(["--seed", "3", "--tick-ms", "90", "--width", "400", "--high-score-file", "x.json"])
        assert (cfg.seed, cfg.tick_ms, cfg.window_width, cfg.high_score_file) == (3, 90, 400, "x.json")


class TestHandleEvent:

    @pytest.mark.parametrize("k,direction", [
        (pygame.K_UP, Direction.UP),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_d, Direction.RIGHT),
    ])
    def test_keys_turn_the_snake(self, k, direction):
        app = make_app()
        assert app.handle_event(key(k)) is True
        app.loop.change_direction.assert_called_once_with(direction)

    def test_r_resets(self):
        app = make_app()
        app.handle_event(key(pygame.K_r))
        app.loop.reset.assert_called_once_with()

    def test_reset_button_click(self):
        app = make_app()
        app.renderer.reset_button = pygame.Rect(10, 10, 50, 20)
        app.handle_event(SimpleNamespace(type=pygame.MOUSEBUTTONDOWN, button=1, pos=(20, 15)))
        app.loop.reset.assert_called_once_with()

    def test_click_outside_button_does_nothing(self):
        app = make_app()
        app.renderer.reset_button = pygame.Rect(10, 10, 50, 20)
        app.handle_event(SimpleNamespace(type=pygame.MOUSEBUTTONDOWN, button=1, pos=(200, 150)))
        app.loop.reset.assert_not_called()

    def test_timer_event_is_dispatched(self):
        app = make_app()
        event = SimpleNamespace(type=app.scheduler.event_type, token=1)
        app.handle_event(event)
        app.scheduler.dispatch.assert_called_once_with(event)

    def test_quit(self):
        app = make_app()
        assert app.handle_event(SimpleNamespace(type=pygame.QUIT)) is False
        assert app.handle_event(key(pygame.K_ESCAPE)) is False

    def test_too_small_window_shows_message(self):
        app = make_app()
        app.loop.reset.side_effect = DegenerateGridError(1, 1)
        app.start(reset=True)
        app.renderer.draw_message.assert_called_once_with(TOO_SMALL_MESSAGE)
