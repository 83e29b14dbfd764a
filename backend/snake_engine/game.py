"""
SnakeGame - board, lifecycle and collision rules.

The game never ticks by itself. A driver calls, once per tick:
snake.advance(), check_collisions(), check_entity_collision() and, when
no entity is left, generate_entity().
"""

import logging
from typing import List, Optional, Set, Tuple

from .constants import DEFAULT_DIRECTION, Direction, GameState
from .entities import Entity, EntityFactory
from .errors import InvalidStartPositionError, InvalidStateTransitionError
from .random_source import PythonRandomSource, RandomSource
from .snake import Snake
from .snapshot import GameSnapshot

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (columns, rows)
      - The snake
      - Entities on the board
      - Score
      - Lifecycle state
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        direction: Optional[Direction] = None,
        start: Optional[Tuple[int, int]] = None,
        random_source: Optional[RandomSource] = None,
    ):
        if start is None:
            start = (columns // 2, rows // 2)
        x, y = start
        if x < 0 or y < 0 or x > columns or y > rows:
            raise InvalidStartPositionError(start, columns, rows)

        self.columns = columns
        self.rows = rows
        self.score = 0
        self._state = GameState.NEW
        self.snake = Snake((x, y), direction or DEFAULT_DIRECTION)
        self.entities: List[Entity] = []
        self.random_source = random_source or PythonRandomSource()
        self._board = self._build_board(columns, rows)

    @staticmethod
    def _build_board(columns: int, rows: int) -> Tuple[Tuple[int, int], ...]:
        return tuple((x, y) for x in range(columns) for y in range(rows))

    @property
    def board(self) -> Tuple[Tuple[int, int], ...]:
        """Every cell of the grid, x-major."""
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    def dimensions(self) -> Tuple[int, int]:
        return (self.columns, self.rows)

    def get_state(self) -> GameState:
        return self._state

    def set_state(self, state: GameState) -> None:
        """
        Move the game to a new lifecycle state.

        Raises:
            InvalidStateTransitionError: when asked for NEW, when the game
                has already ENDED, or when state is the current one.
        """
        if state is GameState.NEW:
            raise InvalidStateTransitionError(self._state, state, "a game can't go back to NEW")
        if self._state is GameState.ENDED:
            raise InvalidStateTransitionError(self._state, state, "the game has already ENDED")
        if self._state is state:
            raise InvalidStateTransitionError(self._state, state, "the game is already in that state")

        logger.info(f"Game state {self._state.name} -> {state.name} (score: {self.score})")
        self._state = state

    def check_collisions(self) -> bool:
        """Check if the snake is hitting a wall or itself."""
        head = self.snake.head
        # One cell past columns/rows still counts as inside the board.
        if head.x > self.columns or head.y > self.rows or head.x < 0 or head.y < 0:
            return True
        return any(point == head for point in list(self.snake.positions)[1:])

    def empty_spots(self) -> List[Tuple[int, int]]:
        """Cells not covered by the snake, in board order."""
        occupied: Set[Tuple[int, int]] = set(self.snake.positions)
        return [cell for cell in self._board if cell not in occupied]

    def generate_entity(self, make_entity: EntityFactory) -> bool:
        """
        Place a new entity built by make_entity(x, y) on a random empty spot.

        Returns:
            False when the snake fills the whole board, True otherwise.
        """
        empty_spots = self.empty_spots()
        if not empty_spots:
            logger.warning("No empty spot left to place an entity")
            return False

        x, y = empty_spots[self.random_source.random_range(0, len(empty_spots))]
        entity = make_entity(x, y)
        self.entities.append(entity)
        logger.debug(f"Placed {entity.kind} at {(x, y)}")
        return True

    def check_entity_collision(self) -> Optional[Entity]:
        """
        If the head is on an entity, remove it from the board and return it
        so the driver can decide what it does. The first one placed wins
        when several share the cell.
        """
        head = self.snake.head
        for i, entity in enumerate(self.entities):
            if entity.x == head.x and entity.y == head.y:
                return self.entities.pop(i)
        return None

    def get_current_state(self) -> GameSnapshot:
        """
        Return a snapshot of the current board as a GameSnapshot.
        """
        return GameSnapshot(
            state=self._state,
            score=self.score,
            columns=self.columns,
            rows=self.rows,
            direction=self.snake.direction,
            snake_positions=[tuple(point) for point in self.snake.positions],
            entities=[(entity.kind, entity.x, entity.y) for entity in self.entities],
        )

    def __repr__(self):
        return (
            f"<SnakeGame {self.columns}x{self.rows} state={self._state.name}, "
            f"score={self.score}, entities={len(self.entities)}>"
        )
