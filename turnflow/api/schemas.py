"""
Pydantic Schemas for transport - JSON shapes of states and actions.

These models define the wire contract between a host and its clients.
Field aliases keep the established wire names (currentPlayer, _id, ...)
while the Python side stays snake_case.

Wire shape of a state:
    {
        "G": {...},
        "ctx": {"turn": 0, "currentPlayer": "0", "numPlayers": 2, "winner": null},
        "log": [{"type": "MAKE_MOVE", "move": {"type": "advance", "args": [1]}}, ...],
        "_id": 1,
        "_initial": {...}
    }
"""

from __future__ import annotations
from typing import Optional, Any
from pydantic import BaseModel, ConfigDict, Field

from ..engine_core.action import Action, ActionType, parse_action
from ..engine_core.state import Ctx, GameState


# =============================================================================
# Actions
# =============================================================================

class MoveModel(BaseModel):
    """A named move with positional args."""
    type: str
    args: list[Any] = Field(default_factory=list)


class ActionModel(BaseModel):
    """
    A tagged action. Unknown tags keep their extra fields.
    """
    type: str
    move: Optional[MoveModel] = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_action(cls, action: Action) -> ActionModel:
        return cls.model_validate(action.to_dict())

    def to_action(self) -> Action:
        raw = self.model_dump(exclude_none=True)
        wire_state = (self.model_extra or {}).get("state")
        if self.type == ActionType.RESTORE.value and isinstance(wire_state, dict):
            raw["state"] = GameStateModel.model_validate(wire_state).to_state()
        return parse_action(raw)


# =============================================================================
# State
# =============================================================================

class CtxModel(BaseModel):
    """Framework-owned turn context."""
    turn: int = Field(ge=0)
    current_player: str = Field(alias="currentPlayer", pattern=r"^\d+$")
    num_players: int = Field(alias="numPlayers", gt=0)
    winner: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_ctx(cls, ctx: Ctx) -> CtxModel:
        return cls(
            turn=ctx.turn,
            current_player=ctx.current_player,
            num_players=ctx.num_players,
            winner=ctx.winner,
        )

    def to_ctx(self) -> Ctx:
        return Ctx(
            turn=self.turn,
            current_player=self.current_player,
            num_players=self.num_players,
            winner=self.winner,
        )


class GameStateModel(BaseModel):
    """A full game state, including its replay base."""
    G: Any = None
    ctx: CtxModel
    log: list[ActionModel] = Field(default_factory=list)
    id: int = Field(default=0, alias="_id", ge=0)
    initial: Optional[GameStateModel] = Field(default=None, alias="_initial")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_state(cls, state: GameState) -> GameStateModel:
        return cls(
            G=state.G,
            ctx=CtxModel.from_ctx(state.ctx),
            log=[ActionModel.from_action(a) for a in state.log],
            id=state._id,
            initial=cls.from_state(state._initial) if state._initial is not None else None,
        )

    def to_state(self) -> GameState:
        return GameState(
            G=self.G,
            ctx=self.ctx.to_ctx(),
            log=tuple(a.to_action() for a in self.log),
            _id=self.id,
            _initial=self.initial.to_state() if self.initial is not None else None,
        )

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible dict using wire names."""
        return self.model_dump(mode="json", by_alias=True)


def state_to_wire(state: GameState) -> dict[str, Any]:
    """Serialize a GameState to its JSON-compatible wire form."""
    return GameStateModel.from_state(state).to_wire()


def state_from_wire(data: dict[str, Any]) -> GameState:
    """Validate wire data and rebuild the GameState."""
    return GameStateModel.model_validate(data).to_state()

