"""
Tests for the in-memory game store.
"""

import threading

import pytest

from ..engine_core.action import UnknownAction, end_turn, make_move, restore
from ..engine_core.errors import StaleStateError
from ..session import GameStore


@pytest.fixture
def store(race_reducer):
    return GameStore(race_reducer)


class TestDispatch:
    """Tests for dispatch and subscriptions."""

    def test_starts_at_initial(self, store, race_reducer):
        assert store.state is race_reducer.initial

    def test_dispatch_replaces_state(self, store):
        new_state = store.dispatch(end_turn())
        assert store.state is new_state
        assert new_state.ctx.current_player == "1"

    def test_moves_dispatch_through_store(self, store):
        """Declared moves are available as dispatchers."""
        assert set(store.moves) == {"advance", "reset"}
        store.moves["advance"](4)
        assert store.state.G["scores"] == [4, 0, 0]
        assert store.state._id == 1

    def test_subscribers_notified(self, store):
        seen = []
        store.subscribe(lambda state: seen.append(state._id))
        store.dispatch(end_turn())
        store.dispatch(end_turn())
        assert seen == [1, 2]

    def test_unsubscribe(self, store):
        seen = []
        unsubscribe = store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        store.dispatch(end_turn())
        assert seen == []

    def test_noop_not_published(self, store):
        """Identity transitions do not notify subscribers."""
        seen = []
        store.subscribe(seen.append)
        store.dispatch(UnknownAction(type="NOPE"))
        assert seen == []

    def test_restore(self, store, race_reducer):
        store.dispatch(end_turn())
        store.dispatch(restore(race_reducer.initial))
        assert store.state is race_reducer.initial

    def test_concurrent_dispatches_serialized(self, store):
        """Every dispatch from every thread lands exactly once."""
        def worker():
            for _ in range(50):
                store.dispatch(end_turn())

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.state._id == 200
        assert store.state.ctx.turn == 200
        assert len(store.state.log) == 200


class TestSubmit:
    """Tests for the client staleness check."""

    def test_matching_id_accepted(self, store):
        state = store.submit(make_move("advance", 1), client_id=0)
        assert state._id == 1

    def test_stale_id_rejected(self, store):
        store.dispatch(end_turn())
        with pytest.raises(StaleStateError) as exc_info:
            store.submit(make_move("advance", 1), client_id=0)

        assert exc_info.value.client_id == 0
        assert exc_info.value.server_id == 1
        assert store.state._id == 1


def test_history(store):
    """history() rebuilds past states from the log."""
    store.moves["advance"](2)
    store.dispatch(end_turn())
    store.moves["advance"](5)

    past = store.history(upto=1)
    assert past.G["scores"] == [2, 0, 0]
    assert past.ctx.current_player == "0"
