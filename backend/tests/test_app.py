"""
Tests for snake_terminal.app - the curses session loop.
"""

import pytest
import sys
import os
from unittest.mock import MagicMock, patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snake_engine import TerminalTooSmallError
from snake_terminal import game_loop
from snake_terminal.app import board_size, play, run
from snake_terminal.config import Settings
from snake_terminal.renderer import Palette


class SequenceRandom:
    def __init__(self, picks):
        self.picks = list(picks)

    def random_range(self, low, high):
        return self.picks.pop(0)


def make_window(lines=30, cols=90, keys=()):
    window = MagicMock()
    window.getmaxyx.return_value = (lines, cols)
    window.getch.side_effect = list(keys)
    return window


class TestBoardSize:
    """Tests for board_size."""

    def test_board_fits_terminal(self):
        window = make_window(lines=30, cols=90)
        assert board_size(window, Settings()) == (89, 26)

    def test_minimum_terminal(self):
        window = make_window(lines=24, cols=84)
        assert board_size(window, Settings()) == (83, 20)

    @pytest.mark.parametrize("lines, cols", [(23, 100), (40, 83)])
    def test_too_small_raises(self, lines, cols):
        window = make_window(lines=lines, cols=cols)
        with pytest.raises(TerminalTooSmallError) as exc_info:
            board_size(window, Settings())
        assert exc_info.value.columns == cols
        assert exc_info.value.rows == lines


@patch('snake_terminal.app.init_palette', return_value=Palette())
@patch('snake_terminal.app.curses')
class TestPlay:
    """Tests for the play loop."""

    def test_quit_immediately(self, mock_curses, mock_palette):
        window = make_window(keys=[ord('q')])
        settings = Settings(tick_ms=250)

        play(window, settings, size=(10, 10), random_source=SequenceRandom([0]))

        mock_curses.curs_set.assert_called_once_with(0)
        window.keypad.assert_called_once_with(True)
        window.timeout.assert_called_once_with(250)
        assert window.getch.call_count == 1
        window.refresh.assert_called()

    def test_restart_after_crash(self, mock_curses, mock_palette):
        # 2x1 board: the snake starts at (1, 0) heading right and hits the
        # wall on the second tick.
        window = make_window(keys=[-1, -1, ord('y'), ord('q')])

        play(window, Settings(), size=(2, 1), random_source=SequenceRandom([0, 0]))

        assert window.getch.call_count == 4
        ended_text = "Your game ended with a score of 0 points"
        drawn = [c.args[2] for c in window.addstr.call_args_list]
        assert ended_text in drawn

    def test_uses_terminal_size_by_default(self, mock_curses, mock_palette):
        window = make_window(lines=24, cols=84, keys=[ord('q')])
        with patch('snake_terminal.app.new_game', wraps=game_loop.new_game) as mock_new_game:
            play(window, Settings(), random_source=SequenceRandom([0]))
        assert mock_new_game.call_args.args[:2] == (83, 20)

    def test_too_small_terminal_propagates(self, mock_curses, mock_palette):
        window = make_window(lines=10, cols=10, keys=[ord('q')])
        with pytest.raises(TerminalTooSmallError):
            play(window, Settings())


class TestRun:
    """Tests for run."""

    @patch('snake_terminal.app.curses.wrapper')
    def test_run_uses_wrapper(self, mock_wrapper):
        settings = Settings()
        source = SequenceRandom([])

        run(settings, size=(5, 5), random_source=source)

        mock_wrapper.assert_called_once_with(play, settings, (5, 5), source)
