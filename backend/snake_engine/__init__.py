"""
Rules engine for snake3.

This package holds the game rules only: movement, collisions, entity
placement and the game lifecycle. Drawing, input and pacing belong to
the caller.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, Direction, GameState, is_opposite
from .entities import Apple, Entity, EntityFactory
from .errors import (
    InvalidStartPositionError,
    InvalidStateTransitionError,
    SnakeGameError,
    TerminalTooSmallError,
)
from .game import SnakeGame
from .random_source import PythonRandomSource, RandomSource
from .snake import BodyPoint, Snake
from .snapshot import GameSnapshot

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Direction', 'GameState', 'is_opposite',
    'Entity', 'Apple', 'EntityFactory',
    'SnakeGameError', 'InvalidStartPositionError', 'InvalidStateTransitionError',
    'TerminalTooSmallError',
    'SnakeGame',
    'RandomSource', 'PythonRandomSource',
    'BodyPoint', 'Snake',
    'GameSnapshot',
]
