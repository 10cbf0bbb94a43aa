# collision.py
from typing import Iterable, Optional

from .geometry import Cell, GridGeometry

WALL = "wall"
SELF = "self"


def collision_reason(head: Cell, bounds: GridGeometry, body: Iterable[Cell]) -> Optional[str]:
    """
    Why the head is dead, or None if it isn't.

    `body` is the post-step body without the new head, so a tail cell that
    was vacated this tick never counts.
    """
    if not bounds.contains(head):
        return WALL
    if head in set(body):
        return SELF
    return None


def check_collision(head: Cell, bounds: GridGeometry, body: Iterable[Cell]) -> bool:
    return collision_reason(head, bounds, body) is not None
