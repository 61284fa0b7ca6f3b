"""
Race Game Definition - setup, moves and victory.

G shape:
    {"scores": [int, ...], "target": int}

Moves (always applied for ctx.current_player):
- advance(steps=1): add steps to the score, negative steps are ignored
- reset(): set the score back to 0
"""

from __future__ import annotations
from typing import Any

from ...engine_core.action import MakeMove
from ...engine_core.game import GameDefinition
from ...engine_core.state import Ctx


RACE_MOVES = ("advance", "reset")


def create_race_game(target: int = 10) -> GameDefinition:
    """Create a race game won by the first score to reach `target`."""
    if target <= 0:
        raise ValueError("target must be positive")

    def setup(num_players: int) -> dict[str, Any]:
        return {"scores": [0] * num_players, "target": target}

    return GameDefinition(
        setup=setup,
        reducer=apply_race_move,
        victory=race_victory,
        moves=RACE_MOVES,
        name="race",
    )


def apply_race_move(G: dict[str, Any], move: MakeMove, ctx: Ctx) -> dict[str, Any]:
    """Apply a race move. Unknown or invalid moves leave G unchanged."""
    player = ctx.current_player_idx
    scores = list(G["scores"])

    if move.name == "advance":
        steps = move.args[0] if move.args else 1
        if not isinstance(steps, int) or steps < 0:
            return G
        scores[player] += steps
    elif move.name == "reset":
        scores[player] = 0
    else:
        return G

    return {**G, "scores": scores}


def race_victory(G: dict[str, Any], ctx: Ctx) -> str | None:
    """The lowest-indexed player at or past the target, if any."""
    for idx, score in enumerate(G["scores"]):
        if score >= G["target"]:
            return str(idx)
    return None
