#!/usr/bin/env python3
"""
Run a headless snake session and print a summary.

A player supplies one intent per tick, exactly as a presentation layer would.

Usage:
    python simulate.py
    python simulate.py --width 20 --height 15 --ticks 500 --seed 7
    python simulate.py --player scripted --moves RIGHT RIGHT DOWN --show-board

Defaults come from SNAKE_* environment variables (see config.py).
"""

import os
import sys
import json
import random
import argparse
import logging
from typing import Any, Dict, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig, load_config
from domain import GameState, Grid, Phase, Position
from players import AVAILABLE_PLAYERS, Player, get_player_class

logger = logging.getLogger(__name__)


def build_game(config: GameConfig, rng: Optional[random.Random] = None) -> GameState:
    """Create a session from config; raises ValueError on a bad grid or start cell."""
    grid = Grid(config.width, config.height)
    start = None
    if config.start_x is not None or config.start_y is not None:
        start = Position(
            config.start_x if config.start_x is not None else config.width // 2,
            config.start_y if config.start_y is not None else config.height // 2,
        )
        if not grid.contains(start):
            raise ValueError(f"Start position {start} is outside {grid!r}.")
    return GameState(grid, start=start, rng=rng)


def run_simulation(
    config: GameConfig,
    player: Player,
    rng: Optional[random.Random] = None,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Drive a session for config.ticks ticks.

    Returns:
        A dictionary summarizing the run (ticks, final_score, best_score,
        deaths, phase, final_state).
    """
    game = build_game(config, rng=rng)
    best_score = game.score
    logger.info("Starting %d ticks on %dx%d", config.ticks, game.width, game.height)

    for _ in range(config.ticks):
        snapshot = game.snapshot()
        if snapshot.phase == Phase.ACTIVE:
            game.set_pending_direction(player.get_move(snapshot))
        game.tick()
        best_score = max(best_score, game.score)

        if show_board:
            snapshot = game.snapshot()
            logger.info(
                "tick %d  phase=%s  score=%d\n%s",
                snapshot.tick,
                snapshot.phase.value,
                snapshot.score,
                snapshot.print_board(),
            )

    final = game.snapshot()
    return {
        "ticks": game.tick_count,
        "final_score": game.score,
        "best_score": best_score,
        "deaths": game.deaths,
        "phase": game.phase.value,
        "final_state": final.to_dict(),
    }


def main(argv=None) -> None:
    try:
        defaults = load_config()
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    parser = argparse.ArgumentParser(
        description="Run a headless snake session.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--width", type=int, default=defaults.width,
                        help=f"Grid width (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help=f"Grid height (default: {defaults.height})")
    parser.add_argument("--ticks", type=int, default=defaults.ticks,
                        help=f"Number of ticks to run (default: {defaults.ticks})")
    parser.add_argument("--seed", type=int, default=defaults.seed,
                        help="Random seed for food placement and the random player")
    parser.add_argument("--player", choices=AVAILABLE_PLAYERS, default="random",
                        help="Which player supplies intents (default: random)")
    parser.add_argument("--moves", nargs="+", default=["RIGHT"],
                        help="Moves for the scripted player (default: RIGHT)")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the board after every tick")
    parser.add_argument("--json", action="store_true",
                        help="Print the summary as JSON")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = GameConfig(
        width=args.width,
        height=args.height,
        start_x=defaults.start_x,
        start_y=defaults.start_y,
        ticks=max(0, args.ticks),
        seed=args.seed,
    )
    rng = random.Random(config.seed)

    player_class = get_player_class(args.player)
    if args.player == "scripted":
        try:
            player = player_class([m.upper() for m in args.moves])
        except ValueError as e:
            parser.error(str(e))
    else:
        player = player_class(rng=random.Random(config.seed))

    try:
        result = run_simulation(config, player, rng=rng, show_board=args.show_board)
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        logger.info(
            "Finished %d ticks: score=%d best=%d deaths=%d phase=%s",
            result["ticks"],
            result["final_score"],
            result["best_score"],
            result["deaths"],
            result["phase"],
        )


if __name__ == "__main__":
    main()
