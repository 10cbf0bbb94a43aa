# geometry.py
from dataclasses import dataclass
from typing import Tuple

from .config import CELL_SIZE, MAX_BOARD_PX, CONTAINER_PADDING

Cell = Tuple[int, int]


@dataclass(frozen=True)
class GridGeometry:
    cell_size: int   # pixels per cell
    width: int       # cells
    height: int      # cells

    @property
    def pixel_size(self) -> Tuple[int, int]:
        return self.width * self.cell_size, self.height * self.cell_size

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def to_pixels(self, cell: Cell) -> Tuple[int, int]:
        """Top-left pixel of a cell, relative to the board origin."""
        return cell[0] * self.cell_size, cell[1] * self.cell_size


def compute_grid(
    container_width: int,
    cell_size: int = CELL_SIZE,
    max_size: int = MAX_BOARD_PX,
    padding: int = CONTAINER_PADDING,
) -> GridGeometry:
    """
    Fit a square board into a container of the given width.

    The cell size never changes; the board shrinks by whole cells so its
    pixel size is always an exact multiple of cell_size. A container that
    can't fit a single cell yields a 0x0 grid (see GridGeometry.is_degenerate).
    """
    size = min(container_width - padding, max_size)
    units = max(size // cell_size, 0)
    return GridGeometry(cell_size=cell_size, width=units, height=units)
