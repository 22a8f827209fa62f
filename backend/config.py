"""
Session configuration for the headless tools.

Reads SNAKE_* environment variables (a local .env file is honoured) and falls
back to the defaults in domain.constants. The domain package never reads the
environment itself; only entry points call load_config().
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT

logger = logging.getLogger(__name__)

DEFAULT_TICKS = 200


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    start_x: Optional[int] = None
    start_y: Optional[int] = None
    ticks: int = DEFAULT_TICKS
    seed: Optional[int] = None


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config() -> GameConfig:
    """
    Build a GameConfig from the environment.

    Raises:
        ValueError: If a SNAKE_* variable is not an integer or the grid size is not positive
    """
    load_dotenv()

    config = GameConfig(
        width=_get_int("SNAKE_GRID_WIDTH", DEFAULT_WIDTH),
        height=_get_int("SNAKE_GRID_HEIGHT", DEFAULT_HEIGHT),
        start_x=_get_int("SNAKE_START_X", None),
        start_y=_get_int("SNAKE_START_Y", None),
        ticks=_get_int("SNAKE_TICKS", DEFAULT_TICKS),
        seed=_get_int("SNAKE_SEED", None),
    )
    if config.width < 1 or config.height < 1:
        raise ValueError(
            f"SNAKE_GRID_WIDTH and SNAKE_GRID_HEIGHT must be positive, "
            f"got {config.width}x{config.height}"
        )
    logger.debug("Loaded config: %s", config)
    return config
