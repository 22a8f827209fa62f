"""
Domain entities for the snake simulation core.

This module contains the core game entities that are independent of
presentation concerns (windowing, input devices, frame pacing, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    Direction, Phase,
    INITIAL_PENDING_GROWTH, FOOD_POINTS, FOOD_SEGMENTS, DRAIN_RATE,
)
from .position import Position
from .grid import Grid
from .snake import Snake
from .food import Food
from .snapshot import BoardSnapshot
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'Direction', 'Phase',
    'INITIAL_PENDING_GROWTH', 'FOOD_POINTS', 'FOOD_SEGMENTS', 'DRAIN_RATE',
    'Position',
    'Grid',
    'Snake',
    'Food',
    'BoardSnapshot',
    'GameState',
]
