# snake.py
from collections import deque
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional

from .geometry import Cell


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_opposite(self, other: "Direction") -> bool:
        return self.dx == -other.dx and self.dy == -other.dy


class StepResult(NamedTuple):
    new_head: Cell
    grew: bool


class Snake:
    """
    Ordered body of the snake, head at index 0.

    Direction requests are buffered in `pending` and only committed at the
    start of step(), so at most one turn happens per tick.
    """

    def __init__(self, positions: Iterable[Cell], direction: Direction = Direction.RIGHT):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment")
        self.direction = direction
        self.pending = direction

    @property
    def head(self) -> Cell:
        return self.positions[0]

    @property
    def body(self) -> List[Cell]:
        """Every segment except the head."""
        return list(self.positions)[1:]

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.positions

    def set_direction(self, requested: Direction) -> bool:
        """Buffer a turn for the next step. 180° turns are ignored; returns False then."""
        if requested.is_opposite(self.direction) or requested.is_opposite(self.pending):
            return False
        self.pending = requested
        return True

    def step(self, food: Optional[Cell] = None) -> StepResult:
        """
        Move one cell in the buffered direction.
        Grows by one (tail kept) when the new head lands on `food`.
        Collisions are not judged here.
        """
        self.direction = self.pending

        hx, hy = self.head
        new_head = (hx + self.direction.dx, hy + self.direction.dy)
        self.positions.appendleft(new_head)

        grew = new_head == food
        if not grew:
            self.positions.pop()
        return StepResult(new_head=new_head, grew=grew)
