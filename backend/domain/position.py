"""
Position value type - a cell coordinate on the grid.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __repr__(self):
        return f"({self.x}, {self.y})"
