"""
Engine Core - Immutable game state and the transition engine.

The engine is the runtime that:
1. Builds the initial GameState from a game definition
2. Applies actions via the reducer, one at a time
3. Advances turns and records the winner through the turn flow
4. Keeps an append-only log for replay
5. Builds dispatchers that turn move calls into actions
"""

from .state import Ctx, GameState
from .action import (
    Action,
    ActionType,
    MakeMove,
    EndTurn,
    Restore,
    UnknownAction,
    make_move,
    end_turn,
    restore,
    parse_action,
)
from .game import GameDefinition, noop_game
from .flow import make_game_flow, next_player
from .reducer import (
    GameReducer,
    create_game_reducer,
    initialize,
    prepare_game,
    replay,
    transition,
)
from .dispatch import create_dispatchers
from .snapshot import structural_clone
from .errors import TurnflowError, SnapshotError, ActionFormatError, StaleStateError

__all__ = [
    "Ctx",
    "GameState",
    "Action",
    "ActionType",
    "MakeMove",
    "EndTurn",
    "Restore",
    "UnknownAction",
    "make_move",
    "end_turn",
    "restore",
    "parse_action",
    "GameDefinition",
    "noop_game",
    "make_game_flow",
    "next_player",
    "GameReducer",
    "create_game_reducer",
    "initialize",
    "prepare_game",
    "replay",
    "transition",
    "create_dispatchers",
    "structural_clone",
    "TurnflowError",
    "SnapshotError",
    "ActionFormatError",
    "StaleStateError",
]
