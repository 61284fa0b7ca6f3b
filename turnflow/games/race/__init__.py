"""
Race - a minimal example game for the engine.

Each player has a score; the current player advances it on their turn.
The first player to reach the target wins.
"""

from .game import create_race_game, RACE_MOVES

__all__ = [
    "create_race_game",
    "RACE_MOVES",
]
