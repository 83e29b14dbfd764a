"""
GameSnapshot - a picture of the game at a point in time.
"""

from typing import List, Tuple

from .constants import Direction, GameState


class GameSnapshot:
    """
    A read-only copy of a SnakeGame taken between ticks.

    Attributes:
        state: lifecycle state
        score: points scored so far
        columns, rows: board dimensions
        direction: where the snake is heading
        snake_positions: list of (x, y), head first
        entities: list of (kind, x, y) in placement order
    """

    def __init__(
        self,
        state: GameState,
        score: int,
        columns: int,
        rows: int,
        direction: Direction,
        snake_positions: List[Tuple[int, int]],
        entities: List[Tuple[str, int, int]],
    ):
        self.state = state
        self.score = score
        self.columns = columns
        self.rows = rows
        self.direction = direction
        self.snake_positions = snake_positions
        self.entities = entities

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        ? = any other entity
        H = snake head
        T = snake body
        (0,0) is at the bottom left and the x-axis labels at the bottom.
        Cells on the extra boundary column/row are not drawn.
        """
        board = [['.' for _ in range(self.columns)] for _ in range(self.rows)]

        def place(x: int, y: int, mark: str) -> None:
            if 0 <= x < self.columns and 0 <= y < self.rows:
                board[y][x] = mark

        for kind, ex, ey in self.entities:
            place(ex, ey, 'A' if kind == "apple" else '?')

        # Tail first so the head wins when segments overlap
        for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[pos_idx]
            place(x, y, 'H' if pos_idx == 0 else 'T')

        result = []
        for y in range(self.rows - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.columns)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameSnapshot state={self.state.name}, score={self.score}, "
            f"head={self.snake_positions[0]}, entities={len(self.entities)}>"
        )
