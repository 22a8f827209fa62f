"""
BoardSnapshot - a read-only view of the game after a tick.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import Direction, Phase
from .position import Position


@dataclass(frozen=True)
class BoardSnapshot:
    """
    What a presentation layer needs to draw one frame.

    Attributes:
        tick: number of ticks run so far
        phase: ACTIVE or GAME_OVER
        score: current score
        width, height: board dimensions
        body: occupied cells ordered tail to head (head is the last element)
        direction: current snake heading
        food: food cell, or None when the board has no free cell
        food_points: points the food is worth (0 without food)
    """

    tick: int
    phase: Phase
    score: int
    width: int
    height: int
    body: Tuple[Position, ...]
    direction: Direction
    food: Optional[Position]
    food_points: int

    @property
    def head(self) -> Position:
        return self.body[-1]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        Row 0 is printed first since UP decreases y.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            board[self.food.y][self.food.x] = 'A'

        for p in self.body[:-1]:
            board[p.y][p.x] = 'T'
        board[self.head.y][self.head.x] = 'H'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        # x-axis labels use the last digit so columns stay aligned
        result.append("   " + " ".join(str(x % 10) for x in range(self.width)))
        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick": self.tick,
            "phase": self.phase.value,
            "score": self.score,
            "width": self.width,
            "height": self.height,
            "body": [p.as_tuple() for p in self.body],
            "direction": self.direction.value,
            "food": self.food.as_tuple() if self.food is not None else None,
            "food_points": self.food_points,
        }

    def __repr__(self):
        return (
            f"<BoardSnapshot tick={self.tick}, phase={self.phase.value}, "
            f"score={self.score}, length={len(self.body)}, food={self.food}>"
        )
