"""Single-player grid snake built on pygame."""

from .errors import (
    GridSnakeError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
    DegenerateGridError,
    FoodPlacementExhausted,
)
from .geometry import GridGeometry, compute_grid
from .snake import Direction, Snake, StepResult
from .collision import check_collision, collision_reason
from .food import FoodPlacer
from .score import ScoreTracker
from .game import GameLoop, GameSession, RunState

__all__ = [
    "GridSnakeError", "PersistenceError", "PersistenceReadError",
    "PersistenceWriteError", "DegenerateGridError", "FoodPlacementExhausted",
    "GridGeometry", "compute_grid",
    "Direction", "Snake", "StepResult",
    "check_collision", "collision_reason",
    "FoodPlacer", "ScoreTracker",
    "GameLoop", "GameSession", "RunState",
]
