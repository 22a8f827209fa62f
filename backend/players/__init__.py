"""
Player implementations.

Players stand in for a presentation layer: they read the board after each
tick and supply the next directional intent.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
