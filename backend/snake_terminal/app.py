"""
curses session for playing snake3 in a terminal.
"""

import curses
import logging
from typing import Optional, Tuple

from snake_engine import RandomSource, TerminalTooSmallError

from .config import Settings
from .game_loop import InputAction, handle_key, new_game, run_tick
from .renderer import draw_frame, init_palette

logger = logging.getLogger(__name__)

# Lines below the board: divider, score and help text.
STATUS_LINES = 3


def board_size(window, settings: Settings) -> Tuple[int, int]:
    """
    Board (columns, rows) that fits the window, keeping the extra
    boundary column/row and the status lines on screen.

    Raises:
        TerminalTooSmallError: if the window is below the configured minimum.
    """
    lines, cols = window.getmaxyx()
    if cols < settings.min_columns or lines < settings.min_rows:
        raise TerminalTooSmallError(cols, lines, settings.min_columns, settings.min_rows)
    return cols - 1, lines - STATUS_LINES - 1


def play(
    window,
    settings: Settings,
    size: Optional[Tuple[int, int]] = None,
    random_source: Optional[RandomSource] = None,
) -> None:
    """Run games until the player quits. Meant to be called through curses.wrapper."""
    curses.curs_set(0)
    window.keypad(True)
    palette = init_palette()

    columns, rows = size or board_size(window, settings)
    logger.info(f"Board size {columns}x{rows}, tick {settings.tick_ms}ms")

    while True:
        game = new_game(columns, rows, random_source=random_source)
        interval_ms = settings.tick_ms

        while True:
            draw_frame(window, game, palette)
            window.timeout(interval_ms)
            action = handle_key(game, window.getch())
            if action is InputAction.QUIT:
                logger.info(f"Player quit with score {game.score}")
                return
            if action is InputAction.RESTART:
                break
            interval_ms = run_tick(game, interval_ms, settings)


def run(
    settings: Settings,
    size: Optional[Tuple[int, int]] = None,
    random_source: Optional[RandomSource] = None,
) -> None:
    """Play inside curses.wrapper so the terminal is restored on exit."""
    curses.wrapper(play, settings, size, random_source)
