"""
Reducer - Applies actions to game state.

The reducer is the single point of state change.
All state changes must go through transition().

Design principles:
- Pure function: (state, action) -> new_state
- Never validates moves: the game's reducer owns legality
- Unknown actions are no-ops, not errors
- Faults raised by game callbacks propagate to the caller
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Any

from ..config import DEFAULT_SETTINGS, EngineSettings
from .action import EndTurn, MakeMove, Restore
from .flow import make_game_flow
from .game import GameDefinition, noop_game
from .state import Ctx, GameState


logger = logging.getLogger(__name__)


def prepare_game(
    game: Any | None = None,
    settings: EngineSettings | None = None,
) -> GameDefinition:
    """
    Return a copy of the game definition with a turn flow installed.

    The definition passed in is never modified.
    """
    settings = settings or DEFAULT_SETTINGS
    definition = noop_game() if game is None else GameDefinition.from_object(game)
    if definition.flow is None:
        definition = definition.with_flow(
            make_game_flow(definition.victory, allow_unwin=settings.allow_unwin)
        )
    return definition


def initialize(
    game: Any | None = None,
    num_players: int | None = None,
    settings: EngineSettings | None = None,
) -> GameState:
    """
    Build the initial state for a game.

    A falsy num_players falls back to the configured default (2).
    """
    settings = settings or DEFAULT_SETTINGS
    definition = noop_game() if game is None else GameDefinition.from_object(game)
    if not num_players:
        num_players = settings.default_num_players

    state = GameState(
        G=definition.setup(num_players),
        ctx=Ctx(turn=0, current_player="0", num_players=num_players, winner=None),
        log=(),
        _id=0,
    )
    logger.info("Initialized %s for %d players", definition.name, num_players)
    return state._copy_with(_initial=state.snapshot())


def transition(game: GameDefinition | None, state: GameState, action: Any) -> GameState:
    """
    Apply one action and return the next state.

    A game without a flow (or None) is run through prepare_game()
    first, so EndTurn always has the default turn flow to fall back on.
    """
    if game is None or getattr(game, "flow", None) is None:
        game = prepare_game(game)

    if isinstance(action, MakeMove):
        G = game.reducer(state.G, action, state.ctx)
        logger.debug("Move %s%r applied at _id=%d", action.name, action.args, state._id)
        return state._copy_with(G=G, _id=state._id + 1, log=state.log + (action,))

    if isinstance(action, EndTurn):
        ctx = game.flow(state.ctx, action, state.G)
        logger.debug(
            "Turn %d ended, next player %s", state.ctx.turn, ctx.current_player
        )
        return state._copy_with(ctx=ctx, _id=state._id + 1, log=state.log + (action,))

    if isinstance(action, Restore):
        logger.debug("State restored to _id=%s", getattr(action.state, "_id", None))
        return action.state

    return state


def replay(game: GameDefinition, state: GameState, upto: int | None = None) -> GameState:
    """
    Reconstruct a historical state by re-applying state.log over _initial.

    upto is the number of log entries to apply (default: all of them).
    """
    if state._initial is None:
        raise ValueError("State has no initial snapshot to replay from")
    if upto is None:
        upto = len(state.log)
    if not 0 <= upto <= len(state.log):
        raise ValueError(f"upto must be in [0, {len(state.log)}], got {upto}")

    initial = state._initial.snapshot()
    current = initial._copy_with(_initial=initial.snapshot())
    for action in state.log[:upto]:
        current = transition(game, current, action)
    return current


@dataclass
class GameReducer:
    """
    A game definition bound to its initial state.

    Callable as reducer(state, action); a None state means the
    initial state, so it can be registered directly with a store.
    """
    game: GameDefinition
    initial: GameState = field(repr=False)

    @classmethod
    def create(
        cls,
        game: Any | None = None,
        num_players: int | None = None,
        settings: EngineSettings | None = None,
    ) -> GameReducer:
        definition = prepare_game(game, settings=settings)
        return cls(game=definition, initial=initialize(definition, num_players, settings=settings))

    def __call__(self, state: GameState | None, action: Any) -> GameState:
        if state is None:
            state = self.initial
        return transition(self.game, state, action)

    def replay(self, state: GameState, upto: int | None = None) -> GameState:
        return replay(self.game, state, upto)


def create_game_reducer(
    game: Any | None = None,
    num_players: int | None = None,
    settings: EngineSettings | None = None,
) -> GameReducer:
    """Convenience function: prepare the game and build its reducer."""
    return GameReducer.create(game, num_players, settings=settings)
