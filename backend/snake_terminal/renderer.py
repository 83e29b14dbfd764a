"""
Draws a SnakeGame on a curses window.

Grid cell (x, y) is drawn at screen column x, line y.
"""

import curses
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from snake_engine import Apple, Direction, Entity, GameState, SnakeGame

logger = logging.getLogger(__name__)

HEAD_GLYPHS = {
    Direction.UP: 'v',
    Direction.DOWN: '^',
    Direction.LEFT: '<',
    Direction.RIGHT: '>',
}

ENTITY_GLYPHS = {
    Apple: 'o',
}

INFO_TEXT = "Move with keyboard arrows, press <q> or <Ctrl+C> to exit, press <p> to pause and resume."
PAUSED_TEXT = "Game is paused"
RESUME_TEXT = "press <p> to resume"
RESTART_TEXT = "Press <y> to play a new game, to close press <q>"


@dataclass
class Palette:
    """curses attributes per screen element; 0 means the terminal default."""

    snake: int = 0
    entity: int = 0
    alert: int = 0
    score: int = 0
    muted: int = 0


def init_palette() -> Palette:
    """Register color pairs. Must run after curses.initscr()."""
    if not curses.has_colors():
        return Palette()

    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(1, curses.COLOR_GREEN, -1)
    curses.init_pair(2, curses.COLOR_RED, -1)
    curses.init_pair(3, curses.COLOR_CYAN, -1)
    curses.init_pair(4, curses.COLOR_WHITE, -1)
    return Palette(
        snake=curses.color_pair(1),
        entity=curses.color_pair(2),
        alert=curses.color_pair(2),
        score=curses.color_pair(3),
        muted=curses.color_pair(4) | curses.A_DIM,
    )


def head_glyph(direction: Direction) -> str:
    return HEAD_GLYPHS[direction]


def body_glyph(current: Tuple[int, int], previous: Tuple[int, int]) -> str:
    if current[0] == previous[0]:
        return '|'
    if current[1] == previous[1]:
        return '-'
    return 's'


def entity_glyph(entity: Entity) -> str:
    for entity_type, glyph in ENTITY_GLYPHS.items():
        if entity.is_a(entity_type):
            return glyph
    return '?'


def put(window, x: int, y: int, text: str, attr: int = 0) -> None:
    """addstr clipped to the window; off-screen writes are dropped."""
    height, width = window.getmaxyx()
    if x < 0 or y < 0 or x >= width or y >= height:
        return
    text = text[: width - x]
    try:
        window.addstr(y, x, text, attr)
    except curses.error:
        # curses reports an error after writing the bottom-right cell
        logger.debug(f"Partial write at {(x, y)}")


def draw_frame(window, game: SnakeGame, palette: Optional[Palette] = None) -> None:
    palette = palette or Palette()
    state = game.get_state()
    window.erase()

    if state is not GameState.ENDED:
        body = game.snake.body
        for i, point in enumerate(body):
            glyph = head_glyph(game.snake.direction) if i == 0 else body_glyph(point, body[i - 1])
            put(window, point.x, point.y, glyph, palette.snake)
        for entity in game.entities:
            put(window, entity.x, entity.y, entity_glyph(entity), palette.entity)

    if state is GameState.PAUSED:
        third_col = game.columns // 3
        third_row = game.rows // 3
        stars = "*" * third_col
        put(window, third_col, third_row - 1, stars, palette.alert)
        put(window, third_col + 2, third_row + 1, PAUSED_TEXT, palette.alert)
        put(window, third_col + 2, third_row + 2, RESUME_TEXT, palette.alert)
        put(window, third_col, third_row + 4, stars, palette.alert)

    if state is GameState.ENDED:
        put(window, 0, 0, f"Your game ended with a score of {game.score} points", palette.alert)
        put(window, 0, 1, RESTART_TEXT, palette.alert)

    put(window, 0, game.rows + 1, "-" * game.columns, palette.muted)
    put(window, 0, game.rows + 2, f"Score: {game.score}", palette.score)
    put(window, 0, game.rows + 3, INFO_TEXT, palette.muted)
    window.refresh()
