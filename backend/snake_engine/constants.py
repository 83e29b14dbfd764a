"""
Game constants for snake3.

Directions follow grid coordinates: UP increases y, DOWN decreases it,
LEFT decreases x and RIGHT increases it.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Every tick the snake moves one cell towards its current direction."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit (dx, dy) step for this direction."""
        return _OFFSETS[self]

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return _OPPOSITES[self] is other


_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GameState(Enum):
    """Lifecycle of a SnakeGame."""

    # A new game that has not started yet.
    NEW = "new"
    # The game is in progress and the driver should be ticking.
    PLAYING = "playing"
    # The game is paused; the driver should not tick.
    PAUSED = "paused"
    # Player failure or a full board. Terminal: start a new game instead.
    ENDED = "ended"


def is_opposite(a: Direction, b: Direction) -> bool:
    """True iff a and b form one of the two opposite pairs."""
    return a.is_opposite(b)


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game settings
DEFAULT_DIRECTION = RIGHT
