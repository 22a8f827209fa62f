"""
Grid entity - the toroidal board the snake moves on.
"""

from typing import List

from .constants import Direction
from .position import Position


class Grid:
    """
    Fixed-size wrap-around board.

    Moving past the last column or row lands on the first one and vice versa.
    ``UP`` decreases ``y`` and ``DOWN`` increases it, so (0, 0) is the top-left cell.

    Attributes:
        width, height: board dimensions, both at least 1
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")
        self._width = width
        self._height = height
        # Row-major: y outer, x inner
        self._positions = tuple(
            Position(x, y) for y in range(height) for x in range(width)
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self._width and 0 <= position.y < self._height

    def all_positions(self) -> List[Position]:
        """Return every cell exactly once, row by row."""
        return list(self._positions)

    def next_position(self, position: Position, direction: Direction) -> Position:
        """Return the neighbouring cell in ``direction``, wrapping at the edges."""
        x, y = position.x, position.y
        if direction == Direction.UP:
            y = y - 1 if y > 0 else self._height - 1
        elif direction == Direction.DOWN:
            y = y + 1 if y < self._height - 1 else 0
        elif direction == Direction.LEFT:
            x = x - 1 if x > 0 else self._width - 1
        elif direction == Direction.RIGHT:
            x = x + 1 if x < self._width - 1 else 0
        return Position(x, y)

    def __repr__(self):
        return f"<Grid {self._width}x{self._height}>"
