"""
Tests for snake_terminal.renderer.

The curses window is replaced by a MagicMock so no terminal is needed.
"""

import sys
import os
import curses
from unittest.mock import MagicMock, call

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_engine import Apple, BodyPoint, Direction, Entity, GameState, SnakeGame
from snake_terminal.renderer import (
    INFO_TEXT,
    PAUSED_TEXT,
    RESTART_TEXT,
    Palette,
    body_glyph,
    draw_frame,
    entity_glyph,
    head_glyph,
    put,
)


def make_window(lines=30, cols=90):
    window = MagicMock()
    window.getmaxyx.return_value = (lines, cols)
    return window


def written(window):
    """Map (x, y) -> text for every addstr call."""
    return {(c.args[1], c.args[0]): c.args[2] for c in window.addstr.call_args_list}


class TestGlyphs:
    """Tests for glyph selection."""

    def test_head_glyphs(self):
        assert head_glyph(Direction.UP) == 'v'
        assert head_glyph(Direction.DOWN) == '^'
        assert head_glyph(Direction.LEFT) == '<'
        assert head_glyph(Direction.RIGHT) == '>'

    def test_body_glyphs(self):
        assert body_glyph((3, 4), (3, 5)) == '|'
        assert body_glyph((3, 4), (2, 4)) == '-'
        assert body_glyph((3, 4), (2, 5)) == 's'

    def test_entity_glyphs(self):
        class Bomb(Entity):
            kind = "bomb"

        assert entity_glyph(Apple(0, 0)) == 'o'
        assert entity_glyph(Bomb(0, 0)) == '?'


class TestPut:
    """Tests for clipped writes."""

    def test_put_writes_at_column_and_line(self):
        window = make_window()
        put(window, 3, 7, "hi", 5)
        window.addstr.assert_called_once_with(7, 3, "hi", 5)

    def test_put_clips_to_width(self):
        window = make_window(lines=10, cols=5)
        put(window, 3, 0, "hello")
        window.addstr.assert_called_once_with(0, 3, "he", 0)

    def test_put_drops_off_screen(self):
        window = make_window(lines=10, cols=5)
        put(window, 5, 0, "x")
        put(window, 0, 10, "x")
        put(window, -1, 0, "x")
        window.addstr.assert_not_called()

    def test_put_tolerates_curses_error(self):
        window = make_window(lines=10, cols=5)
        window.addstr.side_effect = curses.error
        put(window, 4, 9, "x")


class TestDrawFrame:
    """Tests for draw_frame."""

    def test_playing_frame(self):
        game = SnakeGame(20, 10, Direction.RIGHT, (5, 5))
        game.set_state(GameState.PLAYING)
        game.snake.positions.extend([BodyPoint(4, 5), BodyPoint(4, 4)])
        game.entities.append(Apple(8, 2))
        game.score = 4
        window = make_window()

        draw_frame(window, game)

        cells = written(window)
        assert cells[(5, 5)] == '>'
        assert cells[(4, 5)] == '-'
        assert cells[(4, 4)] == '|'
        assert cells[(8, 2)] == 'o'
        assert cells[(0, 11)] == "-" * 20
        assert cells[(0, 12)] == "Score: 4"
        assert cells[(0, 13)] == INFO_TEXT
        window.erase.assert_called_once()
        window.refresh.assert_called_once()

    def test_paused_frame(self):
        game = SnakeGame(30, 12, Direction.RIGHT, (1, 1))
        game.set_state(GameState.PLAYING)
        game.set_state(GameState.PAUSED)
        window = make_window()

        draw_frame(window, game)

        cells = written(window)
        assert cells[(12, 5)] == PAUSED_TEXT
        assert cells[(10, 3)] == "*" * 10
        assert cells[(10, 8)] == "*" * 10
        assert cells[(1, 1)] == '>'

    def test_ended_frame_hides_board(self):
        game = SnakeGame(20, 10, Direction.RIGHT, (5, 5))
        game.entities.append(Apple(8, 2))
        game.score = 7
        game.set_state(GameState.ENDED)
        window = make_window()

        draw_frame(window, game)

        cells = written(window)
        assert cells[(0, 0)] == "Your game ended with a score of 7 points"
        assert cells[(0, 1)] == RESTART_TEXT
        assert (5, 5) not in cells
        assert (8, 2) not in cells

    def test_palette_attributes_are_used(self):
        game = SnakeGame(20, 10, Direction.UP, (5, 5))
        game.entities.append(Apple(8, 2))
        window = make_window()

        draw_frame(window, game, Palette(snake=11, entity=22, score=33))

        assert call(5, 5, 'v', 11) in window.addstr.call_args_list
        assert call(2, 8, 'o', 22) in window.addstr.call_args_list
        assert call(12, 0, "Score: 0", 33) in window.addstr.call_args_list
