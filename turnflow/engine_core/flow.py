"""
Turn flow - the ctx-only sub-reducer run on EndTurn.

Turn order is a fixed round-robin over [0, num_players). The winner is
recomputed from the game's victory function on every end of turn.
"""

from __future__ import annotations
from dataclasses import replace
import logging
from typing import Any

from .action import EndTurn
from .game import FlowFn, VictoryFn
from .state import Ctx


logger = logging.getLogger(__name__)


def next_player(ctx: Ctx) -> str:
    """Index string of the player after ctx.current_player."""
    return str((int(ctx.current_player) + 1) % ctx.num_players)


def make_game_flow(victory: VictoryFn, allow_unwin: bool = False) -> FlowFn:
    """
    Build the default turn-flow reducer around a victory function.

    With allow_unwin=False a None from victory keeps any winner already
    recorded; a non-null result always replaces it. With allow_unwin=True
    the winner is exactly what victory returns.
    """

    def game_flow(ctx: Ctx, action: Any, G: Any) -> Ctx:
        if not isinstance(action, EndTurn):
            return ctx

        winner = victory(G, ctx)
        if winner is None and not allow_unwin:
            winner = ctx.winner
        elif winner is not None and winner != ctx.winner:
            logger.info("Winner decided at turn %d: player %s", ctx.turn, winner)

        return replace(
            ctx,
            current_player=next_player(ctx),
            turn=ctx.turn + 1,
            winner=winner,
        )

    return game_flow
