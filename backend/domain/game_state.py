"""
GameState - the tick-driven state machine that runs a session.

Per tick while ACTIVE the buffered intent is applied, the snake moves, and food
is eaten. Per tick while GAME_OVER one drain step runs instead: the score and the
body shrink together until both reach their floor, then play resumes in place.
"""

import logging
import random
from typing import List, Optional

from .constants import (
    DRAIN_RATE,
    INITIAL_PENDING_GROWTH,
    VALID_MOVES,
    Direction,
    Phase,
)
from .food import Food
from .grid import Grid
from .position import Position
from .snake import Snake
from .snapshot import BoardSnapshot

logger = logging.getLogger(__name__)


class GameState:
    """
    Owns the grid, snake, food, and score of one session.

    The presentation layer talks to it through ``set_pending_direction`` and
    ``tick`` and reads it back through the properties or ``snapshot()``.
    """

    def __init__(
        self,
        grid: Grid,
        start: Optional[Position] = None,
        snake: Optional[Snake] = None,
        score: int = 0,
        rng: Optional[random.Random] = None,
        initial_growth: int = INITIAL_PENDING_GROWTH,
        drain_rate: int = DRAIN_RATE,
    ):
        if drain_rate < 1:
            raise ValueError(f"drain_rate must be at least 1, got {drain_rate}")
        if score < 0:
            raise ValueError(f"score must be non-negative, got {score}")

        if snake is None:
            if start is None:
                start = Position(grid.width // 2, grid.height // 2)
            snake = Snake([start], pending_growth=initial_growth)
        for p in snake.positions:
            if not grid.contains(p):
                raise ValueError(f"Snake segment {p} is outside {grid!r}.")

        self.grid = grid
        self.snake = snake
        self.rng = rng
        self.initial_growth = initial_growth
        self.drain_rate = drain_rate
        self._score = score
        self._phase = Phase.ACTIVE
        self._pending_direction: Optional[Direction] = None
        self.tick_count = 0
        self.deaths = 0
        self.food: Optional[Food] = Food.generate(grid, snake, rng)

    @property
    def score(self) -> int:
        return self._score

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def game_over(self) -> bool:
        return self._phase == Phase.GAME_OVER

    @property
    def pending_direction(self) -> Optional[Direction]:
        return self._pending_direction

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def body(self) -> List[Position]:
        """Occupied cells ordered tail to head."""
        return self.snake.body()

    def set_pending_direction(self, direction: Direction) -> None:
        """Buffer one intent for the next tick, replacing any unconsumed one."""
        self._pending_direction = direction

    def set_food(self, position: Position, **kwargs) -> Food:
        """Put the food on a chosen free cell (points/segments may be overridden)."""
        if not self.grid.contains(position):
            raise ValueError(f"Food out of bounds at {position}.")
        if self.snake.occupies(position):
            raise ValueError(f"Food cannot be placed on the snake at {position}.")
        self.food = Food(position=position, **kwargs)
        return self.food

    def tick(self) -> Phase:
        """Advance the session by exactly one step and return the resulting phase."""
        self.tick_count += 1
        if self._phase == Phase.GAME_OVER:
            self._drain_step()
        else:
            self._active_step()
        return self._phase

    def _apply_pending_direction(self) -> None:
        intent = self._pending_direction
        self._pending_direction = None
        if intent is None:
            return
        current = self.snake.direction()
        if intent not in VALID_MOVES:
            logger.debug("Ignoring non-movement intent %s", intent.value)
        elif intent == current.opposite:
            logger.debug("Ignoring reversal %s while heading %s", intent.value, current.value)
        else:
            self.snake.set_direction(intent)

    def _active_step(self) -> None:
        self._apply_pending_direction()

        snake = self.snake
        food = self.food
        # The move onto the food keeps the tail, so growth is granted before moving
        eating = (
            food is not None
            and snake.direction() != Direction.NONE
            and self.grid.next_position(snake.head, snake.direction()) == food.position
        )
        if eating:
            snake.grow(food.segments)

        if not snake.advance(self.grid):
            self._phase = Phase.GAME_OVER
            self.deaths += 1
            logger.info(
                "Game over at tick %d: collision at %s, score %d, length %d",
                self.tick_count,
                self.grid.next_position(snake.head, snake.direction()),
                self._score,
                len(snake),
            )
            return

        if eating:
            self._score += food.points
            logger.debug("Ate food at %s, score %d", food.position, self._score)
            self.food = Food.generate(self.grid, snake, self.rng)

    def _drain_step(self) -> None:
        # Intents typed during the animation are dropped
        self._pending_direction = None

        # Both floors were reached on an earlier tick
        if self._score == 0 and len(self.snake) == 1:
            self.snake.set_direction(Direction.NONE)
            self.snake.pending_growth = self.initial_growth
            self._phase = Phase.ACTIVE
            logger.info("Reset at tick %d from %s", self.tick_count, self.snake.head)
            return

        if self._score > 0:
            self._score -= min(self.drain_rate, self._score)
        if self.snake.shrink_one() and self.food is None:
            self.food = Food.generate(self.grid, self.snake, self.rng)

    def snapshot(self) -> BoardSnapshot:
        """
        Return a read-only view of the current board.
        """
        food = self.food
        return BoardSnapshot(
            tick=self.tick_count,
            phase=self._phase,
            score=self._score,
            width=self.grid.width,
            height=self.grid.height,
            body=tuple(self.snake.positions),
            direction=self.snake.direction(),
            food=food.position if food is not None else None,
            food_points=food.points if food is not None else 0,
        )

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, phase={self._phase.value}, "
            f"score={self._score}, snake={self.snake!r}, food={self.food}>"
        )
