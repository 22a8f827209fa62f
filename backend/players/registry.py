"""
Registry for player implementations.

Maps player names (e.g., 'random', 'scripted') to player classes so entry
points can pick one from a command line flag.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


# Registry: maps player name -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "scripted": _get_scripted_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(name: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given name.

    Args:
        name: One of AVAILABLE_PLAYERS. If None or empty, returns 'random'.

    Raises:
        ValueError: If name is not recognized.
    """
    if not name or name.strip() == "":
        name = "random"

    name = name.strip()

    if name not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player '{name}'. Available players: {available}")

    return PLAYER_LOADERS[name]()


def list_players() -> List[dict]:
    """
    Return metadata about all available players.
    """
    return [
        {"key": "random", "description": "Random safe moves, never reverses"},
        {"key": "scripted", "description": "Replays a fixed move list, then repeats the last move"},
    ]
