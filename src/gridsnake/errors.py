"""Exceptions and warnings raised by the game core."""


class GridSnakeError(Exception):
    """Base class for gridsnake errors."""


class PersistenceError(GridSnakeError):
    """The high score store could not be used."""


class PersistenceReadError(PersistenceError):
    pass


class PersistenceWriteError(PersistenceError):
    pass


class DegenerateGridError(GridSnakeError):
    """The drawing surface is too small to hold a playable board."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Grid of {width}x{height} cells cannot hold a game")
        self.width = width
        self.height = height


class FoodPlacementExhausted(RuntimeWarning):
    """Food was placed on an occupied cell after running out of retries."""
