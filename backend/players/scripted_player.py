"""
Scripted player - replays a fixed list of moves.
"""

from typing import Iterable

from domain.constants import VALID_MOVES, Direction
from domain.snapshot import BoardSnapshot
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the given moves in order, then keeps repeating the last one.
    """

    name = "scripted"

    def __init__(self, moves: Iterable[Direction]):
        self.moves = [Direction(m) for m in moves]
        if not self.moves:
            raise ValueError("ScriptedPlayer needs at least one move.")
        invalid = [m.value for m in self.moves if m not in VALID_MOVES]
        if invalid:
            raise ValueError(f"ScriptedPlayer moves must be UP/DOWN/LEFT/RIGHT, got {invalid}")
        self._index = 0

    def get_move(self, snapshot: BoardSnapshot) -> Direction:
        move = self.moves[min(self._index, len(self.moves) - 1)]
        self._index += 1
        return move
