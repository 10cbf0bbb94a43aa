# game.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence

from .collision import collision_reason
from .config import CFG, START_SNAKE, Config
from .errors import DegenerateGridError
from .food import FoodPlacer
from .geometry import Cell, GridGeometry, compute_grid
from .scheduler import Scheduler, TaskHandle
from .score import ScoreTracker
from .snake import Direction, Snake, StepResult

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game Over!"
PAUSED_MESSAGE = "Paused (Resizing)"


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Renderer(Protocol):
    def clear(self) -> None: ...
    def draw_food(self, cell: Cell) -> None: ...
    def draw_snake(self, segments: Sequence[Cell], head_index: int = 0) -> None: ...
    def draw_overlay_message(self, text: str, final_score: int, best_score: int, is_new_best: bool) -> None: ...
    def draw_scoreboard(self, score: int, best: int) -> None: ...
    def set_geometry(self, geometry: GridGeometry) -> None: ...
    def present(self) -> None: ...


# ---------- State ----------
@dataclass
class GameSession:
    snake: Snake
    food: Cell
    geometry: GridGeometry
    score: int = 0
    ticks: int = 0
    death_reason: Optional[str] = None


def new_session(geometry: GridGeometry, placer: FoodPlacer) -> GameSession:
    """Fresh 3-segment snake near the origin heading right, with its first food."""
    if geometry.is_degenerate or not all(geometry.contains(c) for c in START_SNAKE):
        raise DegenerateGridError(geometry.width, geometry.height)
    snake = Snake(START_SNAKE, Direction.RIGHT)
    food = placer.place(geometry, snake.positions)
    return GameSession(snake=snake, food=food, geometry=geometry)


def advance(session: GameSession, placer: FoodPlacer) -> StepResult:
    """
    One tick of game rules: move, eat, then judge the new head.
    Sets session.death_reason on a collision; the caller decides what dying means.
    """
    snake = session.snake
    result = snake.step(session.food)
    if result.grew:
        session.score += 1
        session.food = placer.place(session.geometry, snake.positions)

    session.ticks += 1
    session.death_reason = collision_reason(result.new_head, session.geometry, snake.body)
    return result


# ---------- Loop ----------
class GameLoop:
    """
    Owns the run state and drives ticks through a Scheduler.

    At most one tick is ever scheduled: every path that stops the loop goes
    through _cancel_tick(), and _schedule_tick() cancels any live handle first.
    """

    def __init__(
        self,
        renderer: Renderer,
        tracker: ScoreTracker,
        scheduler: Scheduler,
        placer: Optional[FoodPlacer] = None,
        container_width: Optional[int] = None,
        config: Config = CFG,
    ):
        self.renderer = renderer
        self.tracker = tracker
        self.scheduler = scheduler
        self.config = config
        self.placer = placer if placer is not None else FoodPlacer(seed=config.seed)

        self.container_width = container_width if container_width is not None else config.window_width
        self.geometry = compute_grid(self.container_width)
        self.renderer.set_geometry(self.geometry)

        self.state = RunState.NOT_STARTED
        self.session: Optional[GameSession] = None
        self.last_new_best = False
        self._tick_handle: Optional[TaskHandle] = None

    # ---- transitions ----
    def start(self) -> GameSession:
        """NOT_STARTED/any -> RUNNING with a fresh session."""
        self._cancel_tick()
        self.tracker.load()
        self.session = new_session(self.geometry, self.placer)
        self.last_new_best = False
        self.state = RunState.RUNNING
        logger.info(
            "Game started on %dx%d grid (best=%d)",
            self.geometry.width, self.geometry.height, self.tracker.best,
        )
        self._draw_frame()
        self._schedule_tick()
        return self.session

    def reset(self) -> GameSession:
        """Recompute the grid for the current container, then start over."""
        self._cancel_tick()
        if self.state is RunState.PAUSED and self.session is not None:
            # a paused game is abandoned here; keep its score if it was a record
            self.tracker.record_if_high_score(self.session.score)
        self._apply_geometry(compute_grid(self.container_width))
        return self.start()

    def pause(self, message: str = PAUSED_MESSAGE) -> bool:
        """RUNNING -> PAUSED. Only the schedule is touched."""
        if self.state is not RunState.RUNNING:
            return False
        self._cancel_tick()
        self.state = RunState.PAUSED
        logger.info("Game paused at score %d", self.session.score)
        self._draw_frame(overlay=message)
        return True

    def stop(self) -> None:
        """Stop ticking for good (process teardown)."""
        self._cancel_tick()

    # ---- external events ----
    def change_direction(self, direction: Direction) -> bool:
        if self.state is not RunState.RUNNING:
            return False
        return self.session.snake.set_direction(direction)

    def on_resize(self, container_width: int) -> None:
        if self.state is RunState.RUNNING:
            self.pause()
        self.container_width = container_width
        self._apply_geometry(compute_grid(container_width))
        overlay = {
            RunState.PAUSED: PAUSED_MESSAGE,
            RunState.GAME_OVER: GAME_OVER_MESSAGE,
        }.get(self.state)
        self._draw_frame(overlay=overlay)

    # ---- ticking ----
    def tick(self) -> None:
        self._tick_handle = None
        if self.state is not RunState.RUNNING:
            return

        session = self.session
        result = advance(session, self.placer)
        if result.grew:
            logger.debug("Ate food at %s, score=%d", result.new_head, session.score)

        if session.death_reason is not None:
            self._game_over()
            return

        self._draw_frame()
        self._schedule_tick()

    def _game_over(self) -> None:
        session = self.session
        self.state = RunState.GAME_OVER
        self.last_new_best = self.tracker.record_if_high_score(session.score)
        logger.info(
            "Game over (%s) after %d ticks, score=%d best=%d",
            session.death_reason, session.ticks, session.score, self.tracker.best,
        )
        self._draw_frame(overlay=GAME_OVER_MESSAGE)

    def _schedule_tick(self) -> None:
        self._cancel_tick()
        self._tick_handle = self.scheduler.call_later(self.config.tick_ms, self.tick)

    def _cancel_tick(self) -> None:
        handle, self._tick_handle = self._tick_handle, None
        if handle is not None:
            handle.cancel()

    @property
    def tick_scheduled(self) -> bool:
        return self._tick_handle is not None and self._tick_handle.active

    # ---- drawing ----
    def _apply_geometry(self, geometry: GridGeometry) -> None:
        self.geometry = geometry
        self.renderer.set_geometry(geometry)
        if self.session is not None and self.state is not RunState.RUNNING:
            self.session.geometry = geometry

    def _draw_frame(self, overlay: Optional[str] = None) -> None:
        r = self.renderer
        r.clear()
        score = self.session.score if self.session is not None else 0
        if self.session is not None:
            r.draw_food(self.session.food)
            r.draw_snake(list(self.session.snake.positions), head_index=0)
        if overlay is not None:
            is_new_best = self.last_new_best if self.state is RunState.GAME_OVER else False
            r.draw_overlay_message(overlay, score, self.tracker.best, is_new_best)
        r.draw_scoreboard(score, self.tracker.best)
        r.present()
