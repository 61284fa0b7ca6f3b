"""
Action System - The closed set of actions the transition engine knows.

Actions are:
1. MakeMove - a named domain move with positional args
2. EndTurn - hands the turn to the next player
3. Restore - replaces the whole state (time travel / resync)

Anything else is an UnknownAction and is absorbed as a no-op.
All actions except Restore are appended to the state log for replay.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping, Union

from .errors import ActionFormatError
from .state import GameState


class ActionType(str, Enum):
    """Wire tags of the known action kinds."""
    MAKE_MOVE = "MAKE_MOVE"
    END_TURN = "END_TURN"
    RESTORE = "RESTORE"


@dataclass(frozen=True)
class MakeMove:
    """
    A domain move.

    name selects the move; args are passed through untouched to the
    game's reducer, which owns all validation.
    """
    name: str
    args: tuple[Any, ...] = ()

    action_type: ClassVar[ActionType] = ActionType.MAKE_MOVE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.action_type.value,
            "move": {"type": self.name, "args": list(self.args)},
        }


@dataclass(frozen=True)
class EndTurn:
    """End the current player's turn."""
    action_type: ClassVar[ActionType] = ActionType.END_TURN

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.action_type.value}


@dataclass(frozen=True)
class Restore:
    """Replace the entire state with `state`, verbatim."""
    state: GameState

    action_type: ClassVar[ActionType] = ActionType.RESTORE


@dataclass(frozen=True)
class UnknownAction:
    """An action tag the engine does not recognize."""
    type: str
    payload: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, **self.payload}


Action = Union[MakeMove, EndTurn, Restore, UnknownAction]


def make_move(name: str, *args: Any) -> MakeMove:
    """Factory for a move action."""
    return MakeMove(name=name, args=tuple(args))


def end_turn() -> EndTurn:
    """Factory for an end-of-turn action."""
    return EndTurn()


def restore(state: Any) -> Restore:
    """Factory for a restore action."""
    return Restore(state=state)


def parse_action(raw: Mapping[str, Any]) -> Action:
    """
    Build an action from its tagged-dict form.

    Accepted shapes:
        {"type": "MAKE_MOVE", "move": {"type": name, "args": [...]}}
        {"type": "END_TURN"}
        {"type": "RESTORE", "state": <GameState>}

    Unrecognized tags become UnknownAction. Raises ActionFormatError
    when the tag is missing or a known kind is malformed.
    """
    if not isinstance(raw, Mapping) or "type" not in raw:
        raise ActionFormatError(f"Action has no 'type' tag: {raw!r}")

    tag = raw["type"]
    if tag == ActionType.MAKE_MOVE.value:
        move = raw.get("move")
        if not isinstance(move, Mapping) or not isinstance(move.get("type"), str):
            raise ActionFormatError(f"MAKE_MOVE requires a move with a name: {raw!r}")
        args = move.get("args") or ()
        if not isinstance(args, (list, tuple)):
            raise ActionFormatError(f"Move args must be a sequence, got {type(args).__name__}")
        return MakeMove(name=move["type"], args=tuple(args))

    if tag == ActionType.END_TURN.value:
        return EndTurn()

    if tag == ActionType.RESTORE.value:
        if not isinstance(raw.get("state"), GameState):
            raise ActionFormatError(
                "RESTORE requires a GameState; rebuild wire states with state_from_wire()"
            )
        return Restore(state=raw["state"])

    payload = {k: v for k, v in raw.items() if k != "type"}
    return UnknownAction(type=str(tag), payload=payload)
