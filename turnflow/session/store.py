"""
Game Store - In-memory host for one running game.

The store:
- Holds the current canonical GameState
- Serializes dispatches so transitions never interleave
- Notifies subscribers after every dispatch
- Rejects actions from clients at a stale _id (submit)

State is NOT persisted; RESTORE a serialized snapshot to resume.
"""

from __future__ import annotations
import logging
import threading
from typing import Any, Callable

from ..engine_core.dispatch import Dispatcher, create_dispatchers
from ..engine_core.errors import StaleStateError
from ..engine_core.reducer import GameReducer
from ..engine_core.state import GameState


logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameStore:
    """
    Usage:
        store = GameStore(create_game_reducer(game, num_players=3))

        store.moves["advance"](2)
        store.dispatch(end_turn())

        if store.state.is_over:
            ...
    """

    def __init__(self, reducer: GameReducer, state: GameState | None = None):
        self.reducer = reducer
        self._state = state if state is not None else reducer.initial
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        self._moves: dict[str, Dispatcher] | None = None

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def moves(self) -> dict[str, Dispatcher]:
        """Dispatchers for the moves declared by the game."""
        if self._moves is None:
            self._moves = create_dispatchers(self.reducer.game.moves, self)
        return self._moves

    def dispatch(self, action: Any) -> GameState:
        """Apply one action and return the new state."""
        with self._lock:
            previous = self._state
            self._state = self.reducer(previous, action)
            if self._state is previous:
                return self._state
            listeners = list(self._listeners)
            state = self._state

        for listener in listeners:
            listener(state)
        return state

    def submit(self, action: Any, client_id: int) -> GameState:
        """
        Dispatch an action from a remote client.

        The client's _id must match the store's, otherwise the client
        is working from an outdated state and the action is rejected.
        """
        with self._lock:
            if client_id != self._state._id:
                logger.warning(
                    "Rejected stale action %r: client _id=%d, server _id=%d",
                    action, client_id, self._state._id,
                )
                raise StaleStateError(client_id, self._state._id)
            return self.dispatch(action)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def history(self, upto: int | None = None) -> GameState:
        """State after the first `upto` logged actions."""
        return self.reducer.replay(self._state, upto)
