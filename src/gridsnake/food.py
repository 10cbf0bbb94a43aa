# food.py
import logging
import warnings
from typing import Collection, Optional

import numpy as np  # type: ignore

from .errors import FoodPlacementExhausted
from .geometry import Cell, GridGeometry

logger = logging.getLogger(__name__)


class FoodPlacer:
    """
    Picks a free cell for the next piece of food.

    Sampling is uniform over the whole grid and retried while the candidate
    lands on the snake. After 2 * width * height attempts the last candidate
    is returned even if occupied, so a nearly full board can't hang the tick.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.exhausted = False

    def place(self, bounds: GridGeometry, occupied: Collection[Cell]) -> Cell:
        if bounds.is_degenerate:
            raise ValueError("Cannot place food on an empty grid")

        occupied = set(occupied)
        max_attempts = 2 * bounds.width * bounds.height
        self.exhausted = False

        for _ in range(max_attempts):
            cell = (
                int(self.rng.integers(bounds.width)),
                int(self.rng.integers(bounds.height)),
            )
            if cell not in occupied:
                return cell

        self.exhausted = True
        logger.warning(
            "Could not find a free cell for food after %d attempts; using %s",
            max_attempts, cell,
        )
        warnings.warn(
            f"food placed on occupied cell {cell} after {max_attempts} attempts",
            FoodPlacementExhausted,
            stacklevel=2,
        )
        return cell
