"""
Game State - Canonical immutable state for a running game.

Design principles:
- Immutable: every transition returns a new GameState
- Serializable: plain data only, so it can be snapshotted and restored
- Game-agnostic: G is owned by the game definition and never inspected here
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Generic, TypeVar

from .snapshot import structural_clone


GType = TypeVar("GType")


@dataclass(frozen=True)
class Ctx:
    """
    Framework-owned turn context.

    current_player is the string-encoded index of the player to act,
    always in [0, num_players).
    """
    turn: int = 0
    current_player: str = "0"
    num_players: int = 2
    winner: str | None = None

    @property
    def current_player_idx(self) -> int:
        return int(self.current_player)

    @property
    def is_over(self) -> bool:
        return self.winner is not None


@dataclass(frozen=True)
class GameState(Generic[GType]):
    """
    Complete game state at a point in time.

    G is the integrator's domain state. ctx, log and _id are maintained
    by the transition engine. _initial holds a snapshot of the state
    right after initialization, used as the base for replaying the log.
    """
    G: GType
    ctx: Ctx
    log: tuple[Any, ...] = ()
    _id: int = 0
    _initial: GameState[GType] | None = field(default=None, repr=False, compare=False)

    @property
    def is_over(self) -> bool:
        """Advisory: the host should stop dispatching moves once set."""
        return self.ctx.is_over

    def _copy_with(self, **kwargs) -> GameState[GType]:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)

    def snapshot(self) -> GameState[GType]:
        """Structurally independent copy of this state, without _initial."""
        return GameState(
            G=structural_clone(self.G),
            ctx=self.ctx,
            log=structural_clone(self.log),
            _id=self._id,
        )
