# main.py
import argparse
import logging
from typing import Optional

import pygame  # type: ignore

from .config import CFG, HUD_HEIGHT, Config
from .errors import DegenerateGridError
from .food import FoodPlacer
from .game import GameLoop
from .geometry import compute_grid
from .render import PygameRenderer
from .scheduler import PygameScheduler
from .score import ScoreTracker
from .snake import Direction
from .storage import JsonFileStore

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}
RESET_KEYS = (pygame.K_r, pygame.K_SPACE)
QUIT_KEYS = (pygame.K_ESCAPE,)
TOO_SMALL_MESSAGE = "Window too small, widen it and press R"


def window_height(width: int) -> int:
    _, board_h = compute_grid(width).pixel_size
    return HUD_HEIGHT + board_h + 16


class App:
    """Wires the pygame window, event pump and timers to a GameLoop."""

    def __init__(self, cfg: Config = CFG):
        self.cfg = cfg
        width = cfg.window_width
        self.screen = pygame.display.set_mode((width, window_height(width)), pygame.RESIZABLE)
        pygame.display.set_caption("Snake")

        self.scheduler = PygameScheduler()
        self.renderer = PygameRenderer(self.screen)
        self.tracker = ScoreTracker(JsonFileStore(cfg.high_score_file))
        self.loop = GameLoop(
            renderer=self.renderer,
            tracker=self.tracker,
            scheduler=self.scheduler,
            placer=FoodPlacer(seed=cfg.seed),
            container_width=width,
            config=cfg,
        )

    def start(self, reset: bool = False) -> None:
        try:
            if reset:
                self.loop.reset()
            else:
                self.loop.start()
        except DegenerateGridError as e:
            logger.warning("Cannot start game: %s", e)
            self.renderer.draw_message(TOO_SMALL_MESSAGE)
            self.renderer.present()

    def handle_event(self, event) -> bool:
        """Route one pygame event. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == self.scheduler.event_type:
            self.scheduler.dispatch(event)
        elif event.type == pygame.KEYDOWN:
            if event.key in QUIT_KEYS:
                return False
            if event.key in RESET_KEYS:
                self.start(reset=True)
            elif event.key in KEY_DIRECTIONS:
                self.loop.change_direction(KEY_DIRECTIONS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.renderer.reset_button.collidepoint(event.pos):
                self.start(reset=True)
        elif event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            self.renderer.screen = self.screen
            self.loop.on_resize(event.w)
        return True

    def run(self) -> None:
        self.start()
        running = True
        while running:
            event = pygame.event.wait()
            running = self.handle_event(event)
            for event in pygame.event.get():
                if not running:
                    break
                running = self.handle_event(event)
        self.loop.stop()


def parse_args(argv: Optional[list] = None) -> Config:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms, help="delay between ticks")
    parser.add_argument("--width", type=int, default=CFG.window_width, help="initial window width (px)")
    parser.add_argument(
        "--high-score-file",
        type=str,
        default=CFG.high_score_file,
        help="JSON file the best score is kept in",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    return Config(
        seed=args.seed,
        tick_ms=args.tick_ms,
        window_width=args.width,
        high_score_file=args.high_score_file,
    )


def main(argv: Optional[list] = None):
    cfg = parse_args(argv)
    pygame.init()
    try:
        App(cfg).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
