"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES, Direction
from domain.grid import Grid
from domain.snapshot import BoardSnapshot
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that neither reverses nor runs into the body.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: BoardSnapshot) -> Direction:
        grid = Grid(snapshot.width, snapshot.height)
        body = set(snapshot.body)
        # Sorted so a seeded rng always sees the same candidate order
        candidates = sorted(
            (d for d in VALID_MOVES if d != snapshot.direction.opposite),
            key=lambda d: d.value,
        )

        # The board wraps, so only the body can kill us
        safe_moves: List[Direction] = [
            d for d in candidates
            if grid.next_position(snapshot.head, d) not in body
        ]

        # If no safe moves, pick any legal one (we'll die anyway)
        if not safe_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(safe_moves)
