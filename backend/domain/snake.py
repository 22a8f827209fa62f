"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List

from .constants import Direction, INITIAL_PENDING_GROWTH
from .grid import Grid
from .position import Position


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Position from tail at index 0 to head at the end
        pending_growth: number of upcoming moves that keep the tail in place
        direction: current heading, Direction.NONE while stopped
    """

    def __init__(
        self,
        positions: Iterable[Position],
        direction: Direction = Direction.NONE,
        pending_growth: int = INITIAL_PENDING_GROWTH,
    ):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("Snake needs at least one segment.")
        if len(set(self.positions)) != len(self.positions):
            raise ValueError(f"Snake segments must be distinct: {list(self.positions)}")
        for p in self.positions:
            if p.x < 0 or p.y < 0:
                raise ValueError(f"Snake segment has a negative coordinate: {p}")
        if pending_growth < 0:
            raise ValueError(f"pending_growth must be non-negative, got {pending_growth}")
        self._direction = direction
        self.pending_growth = pending_growth

    @property
    def head(self) -> Position:
        """Return the head position (last element)."""
        return self.positions[-1]

    @property
    def tail(self) -> Position:
        return self.positions[0]

    def __len__(self):
        return len(self.positions)

    def body(self) -> List[Position]:
        """Segments ordered tail to head."""
        return list(self.positions)

    def direction(self) -> Direction:
        return self._direction

    def set_direction(self, direction: Direction) -> None:
        # Reversal checks belong to the caller
        self._direction = direction

    def occupies(self, position: Position) -> bool:
        return position in self.positions

    def advance(self, grid: Grid) -> bool:
        """
        Move one cell in the current direction.

        Collision is checked against the body as it is before the move, so
        stepping onto the cell the tail is about to leave is still fatal.

        Returns:
            False if the next head lands on the body (the body is left untouched),
            True otherwise. A stopped snake stays where it is and returns True.
        """
        if self._direction == Direction.NONE:
            return True

        next_head = grid.next_position(self.head, self._direction)
        if self.occupies(next_head):
            return False

        self.positions.append(next_head)
        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self.positions.popleft()
        return True

    def grow(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Growth amount must be non-negative, got {amount}")
        self.pending_growth += amount

    def shrink_one(self) -> bool:
        """Drop the tail segment. Returns False once only the head is left."""
        if len(self.positions) <= 1:
            return False
        self.positions.popleft()
        return True

    def __repr__(self):
        return (
            f"<Snake head={self.head}, length={len(self.positions)}, "
            f"direction={self._direction.value}, pending={self.pending_growth}>"
        )
