"""
Tick orchestration and key handling, independent of curses.

Screen rows grow downwards while the engine's y axis grows upwards, so
the up arrow asks for Direction.DOWN and the down arrow for Direction.UP.
"""

import curses
import logging
from enum import Enum
from typing import Optional

from snake_engine import Apple, Direction, GameState, RandomSource, SnakeGame

from .config import Settings

logger = logging.getLogger(__name__)

CTRL_C = 3

KEY_DIRECTIONS = {
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    curses.KEY_UP: Direction.DOWN,
    curses.KEY_DOWN: Direction.UP,
}


class InputAction(Enum):
    CONTINUE = "continue"
    RESTART = "restart"
    QUIT = "quit"


def new_game(columns: int, rows: int, random_source: Optional[RandomSource] = None) -> SnakeGame:
    """Create a game with one apple on the board, already PLAYING."""
    game = SnakeGame(columns, rows, random_source=random_source)
    game.generate_entity(Apple)
    game.set_state(GameState.PLAYING)
    logger.info(f"New {columns}x{rows} game, snake at {tuple(game.snake.head)}")
    return game


def handle_key(game: SnakeGame, key: int) -> InputAction:
    """Apply one key press to the game. key is a curses key code, -1 for none."""
    if key in (ord('q'), CTRL_C):
        return InputAction.QUIT

    if key in KEY_DIRECTIONS:
        game.snake.set_direction(KEY_DIRECTIONS[key])
    elif key == ord('p'):
        if game.get_state() is GameState.PLAYING:
            game.set_state(GameState.PAUSED)
        elif game.get_state() is GameState.PAUSED:
            game.set_state(GameState.PLAYING)
    elif key == ord('y') and game.get_state() is GameState.ENDED:
        return InputAction.RESTART

    return InputAction.CONTINUE


def run_tick(game: SnakeGame, interval_ms: int, settings: Settings) -> int:
    """
    Run one logical step of a PLAYING game.

    Returns:
        The interval to wait before the next tick; it shrinks by
        settings.tick_step_ms per apple until settings.min_tick_ms.
    """
    if game.get_state() is not GameState.PLAYING:
        return interval_ms

    game.snake.advance()
    if game.check_collisions():
        logger.info(f"Collision at {tuple(game.snake.head)}, final score {game.score}")
        game.set_state(GameState.ENDED)
        return interval_ms

    hit = game.check_entity_collision()
    if hit is not None and hit.is_a(Apple):
        game.snake.grow()
        game.score += 1
        if interval_ms > settings.min_tick_ms:
            interval_ms -= settings.tick_step_ms

    if not game.entities and not game.generate_entity(Apple):
        logger.info(f"Board is full, final score {game.score}")
        game.set_state(GameState.ENDED)

    return interval_ms
