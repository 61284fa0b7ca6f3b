"""
Turnflow - Turn-based Game State Engine

A deterministic, pure state-transition core for turn-based multiplayer
games. Games plug in their own setup, moves and victory check; the
engine provides:
- Immutable game state with an append-only action log
- Round-robin turn flow and winner tracking
- Replay of historical states from the log
- Dispatchers for calling moves by name
"""

__version__ = "0.1.0"
