"""
Game constants for the snake core.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement intent. NONE marks a stopped snake (start of play, after a reset)."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    NONE = "NONE"

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]


class Phase(str, Enum):
    ACTIVE = "ACTIVE"
    GAME_OVER = "GAME_OVER"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
}

# Game settings
INITIAL_PENDING_GROWTH = 5
FOOD_POINTS = 5
FOOD_SEGMENTS = 3
DRAIN_RATE = 1

DEFAULT_WIDTH = 12
DEFAULT_HEIGHT = 10
