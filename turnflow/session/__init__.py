"""
Session Module - Hosts running games in memory.

A store represents one game instance:
- Seeded once from a GameReducer
- Receives actions one at a time
- Publishes each new state to subscribers

Stores are EPHEMERAL: nothing is written to disk.
"""

from .store import GameStore

__all__ = [
    "GameStore",
]
