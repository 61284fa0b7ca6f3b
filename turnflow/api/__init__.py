"""
API Module - Transport shapes for hosts and clients.

Hosts that ship state over the wire:
1. Serialize the current GameState with state_to_wire()
2. Send it to clients, which echo back their _id with each action
3. Rebuild states received from peers with state_from_wire()

No transport is implied: the schemas only fix the JSON shape.
"""

from .schemas import (
    MoveModel,
    ActionModel,
    CtxModel,
    GameStateModel,
    state_to_wire,
    state_from_wire,
)

__all__ = [
    "MoveModel",
    "ActionModel",
    "CtxModel",
    "GameStateModel",
    "state_to_wire",
    "state_from_wire",
]
