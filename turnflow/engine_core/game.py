"""
Game definitions - the pluggable bundle an integrator supplies.

A definition provides:
- setup(num_players) -> G
- reducer(G, move, ctx) -> G       applies a MakeMove, owns legality
- victory(G, ctx) -> winner | None
- flow(ctx, action, G) -> ctx      optional turn-flow override
- moves                            declared move names, used for dispatchers
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .state import Ctx


SetupFn = Callable[[int], Any]
MoveReducerFn = Callable[[Any, Any, Ctx], Any]
VictoryFn = Callable[[Any, Ctx], "str | None"]
FlowFn = Callable[[Ctx, Any, Any], Ctx]


@dataclass(frozen=True)
class GameDefinition:
    setup: SetupFn
    reducer: MoveReducerFn
    victory: VictoryFn
    flow: FlowFn | None = None
    moves: tuple[str, ...] = ()
    name: str = "game"

    @classmethod
    def from_object(cls, game: Any) -> GameDefinition:
        """Adopt any object exposing setup/reducer/victory (and optionally flow/moves)."""
        if isinstance(game, GameDefinition):
            return game
        return cls(
            setup=game.setup,
            reducer=game.reducer,
            victory=game.victory,
            flow=getattr(game, "flow", None),
            moves=tuple(getattr(game, "moves", ()) or ()),
            name=getattr(game, "name", cls.name),
        )

    def with_flow(self, flow: FlowFn) -> GameDefinition:
        return GameDefinition(
            setup=self.setup,
            reducer=self.reducer,
            victory=self.victory,
            flow=flow,
            moves=self.moves,
            name=self.name,
        )


def noop_game(moves: Sequence[str] = ()) -> GameDefinition:
    """Definition used when none is supplied: empty G, identity moves, no winner."""
    return GameDefinition(
        setup=lambda num_players: {},
        reducer=lambda G, move, ctx: G,
        victory=lambda G, ctx: None,
        moves=tuple(moves),
        name="noop",
    )
