"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, NamedTuple, Tuple

from .constants import Direction


class BodyPoint(NamedTuple):
    """Point of the snake on the game grid."""

    x: int
    y: int

    def moved(self, offset: Tuple[int, int]) -> "BodyPoint":
        return BodyPoint(self.x + offset[0], self.y + offset[1])


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of BodyPoint from head at index 0 to tail at the end.
            Never empty.
    """

    def __init__(self, position: Tuple[int, int], direction: Direction):
        x, y = position
        self.positions = deque([BodyPoint(x, y)])
        self._direction = Direction(direction)

    @property
    def head(self) -> BodyPoint:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> BodyPoint:
        return self.positions[-1]

    @property
    def body(self) -> List[BodyPoint]:
        """Copy of the body segments, head first."""
        return list(self.positions)

    @property
    def direction(self) -> Direction:
        return self._direction

    def __len__(self) -> int:
        return len(self.positions)

    def get_direction(self) -> Direction:
        return self._direction

    def set_direction(self, new_direction: Direction) -> None:
        # Turning back into the neck is ignored rather than reported.
        new_direction = Direction(new_direction)
        if not self._direction.is_opposite(new_direction):
            self._direction = new_direction

    def occupies(self, x: int, y: int) -> bool:
        return (x, y) in self.positions

    def advance(self) -> None:
        """
        Moves one cell towards the current direction: a new head is
        added in front and the last body point is dropped.
        """
        self.positions.appendleft(self.head.moved(self._direction.offset))
        self.positions.pop()

    def grow(self) -> None:
        """
        Adds a new body point behind the tail.

        A single-segment snake grows away from where it is heading; a
        longer one extends the line drawn by its last two segments.
        """
        if len(self.positions) < 2:
            new_tail = self.tail.moved(self._direction.opposite().offset)
        else:
            last = self.positions[-1]
            before_last = self.positions[-2]
            new_tail = last.moved((last.x - before_last.x, last.y - before_last.y))
        self.positions.append(new_tail)

    def __repr__(self):
        return f"<Snake head={tuple(self.head)}, length={len(self)}, direction={self._direction.name}>"
