"""
Base player interface for the game engine.
"""

from domain.constants import Direction
from domain.snapshot import BoardSnapshot


class Player:
    """
    Base class/interface for intent sources.

    A player looks at the board after a tick and returns the direction it
    wants the snake to take on the next one.
    """

    name = "base"

    def get_move(self, snapshot: BoardSnapshot) -> Direction:
        """
        Return a move direction given the current board.

        Args:
            snapshot: Read-only view of the game

        Returns:
            One of: Direction.UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
