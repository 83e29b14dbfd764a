"""
Terminal front-end for snake3.
"""

from .config import Settings, load_settings
from .game_loop import InputAction, handle_key, new_game, run_tick

__all__ = [
    'Settings',
    'load_settings',
    'InputAction',
    'handle_key',
    'new_game',
    'run_tick',
]
