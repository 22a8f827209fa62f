"""
Food entity - the single collectible on the board.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .constants import FOOD_POINTS, FOOD_SEGMENTS
from .grid import Grid
from .position import Position
from .snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    """
    Attributes:
        position: cell holding the food
        points: score awarded when eaten
        segments: growth granted to the snake when eaten
    """

    position: Position
    points: int = FOOD_POINTS
    segments: int = FOOD_SEGMENTS

    @classmethod
    def generate(
        cls,
        grid: Grid,
        snake: Snake,
        rng: Optional[random.Random] = None,
    ) -> Optional["Food"]:
        """
        Place food on a cell picked uniformly among those the snake does not cover.

        Returns:
            The new Food, or None when the snake covers the whole grid.
        """
        free_cells = [p for p in grid.all_positions() if not snake.occupies(p)]
        if not free_cells:
            logger.info("No free cell left on %r for food", grid)
            return None

        position = (rng or random).choice(free_cells)
        logger.debug("Placed food at %s (%d free cells)", position, len(free_cells))
        return cls(position=position)
