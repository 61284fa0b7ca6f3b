"""
Tests for transport Pydantic schemas.

Validates that:
- States serialize with the wire field names
- Serialized states rebuild into equal GameStates
- Invalid ctx values are rejected
"""

import json

import pytest
from pydantic import ValidationError

from turnflow.api.schemas import (
    ActionModel,
    CtxModel,
    GameStateModel,
    state_from_wire,
    state_to_wire,
)
from turnflow.engine_core.action import Restore, UnknownAction, end_turn, make_move
from turnflow.session import GameStore


@pytest.fixture
def played_state(race_reducer):
    state = race_reducer.initial
    for action in [make_move("advance", 3), end_turn(), make_move("reset"), end_turn()]:
        state = race_reducer(state, action)
    return state


class TestStateSchemas:
    """Tests for GameStateModel."""

    def test_wire_names(self, played_state):
        """Wire output uses camelCase ctx keys and underscored ids."""
        data = state_to_wire(played_state)

        assert data["_id"] == 4
        assert data["ctx"] == {
            "turn": 2,
            "currentPlayer": "2",
            "numPlayers": 3,
            "winner": None,
        }
        assert data["log"][0] == {
            "type": "MAKE_MOVE",
            "move": {"type": "advance", "args": [3]},
        }
        assert data["_initial"]["_id"] == 0
        assert data["_initial"]["_initial"] is None

    def test_wire_is_json(self, played_state):
        json.dumps(state_to_wire(played_state))

    def test_rebuilds_state(self, played_state, race_reducer):
        """A state survives a trip through JSON and still replays."""
        rebuilt = state_from_wire(json.loads(json.dumps(state_to_wire(played_state))))

        assert rebuilt == played_state
        assert rebuilt._initial == played_state._initial
        assert race_reducer.replay(rebuilt, upto=1).G["scores"] == [3, 0, 0]

    def test_rebuilt_state_keeps_transitioning(self, played_state, race_reducer):
        rebuilt = state_from_wire(state_to_wire(played_state))
        after = race_reducer(rebuilt, end_turn())
        assert after.ctx.current_player == "0"
        assert after._id == 5


class TestCtxModel:
    """Tests for CtxModel validation."""

    def test_accepts_wire_names(self):
        ctx = CtxModel.model_validate(
            {"turn": 1, "currentPlayer": "1", "numPlayers": 2, "winner": None}
        )
        assert ctx.current_player == "1"

    @pytest.mark.parametrize("data", [
        {"turn": -1, "currentPlayer": "0", "numPlayers": 2},
        {"turn": 0, "currentPlayer": "x", "numPlayers": 2},
        {"turn": 0, "currentPlayer": "0", "numPlayers": 0},
    ])
    def test_rejects_invalid(self, data):
        with pytest.raises(ValidationError):
            CtxModel.model_validate(data)

    def test_missing_ctx_rejected(self):
        with pytest.raises(ValidationError):
            GameStateModel.model_validate({"G": {}, "log": [], "_id": 0})


class TestActionModel:
    """Tests for ActionModel."""

    def test_unknown_action_keeps_payload(self):
        model = ActionModel.from_action(UnknownAction(type="CHAT", payload={"text": "hi"}))
        assert model.to_action() == UnknownAction(type="CHAT", payload={"text": "hi"})

    def test_end_turn(self):
        assert ActionModel(type="END_TURN").to_action() == end_turn()

    def test_wire_restore_rebuilds_state(self, played_state, race_reducer):
        """A RESTORE from the wire carries a real GameState the store can keep using."""
        wire = {"type": "RESTORE", "state": state_to_wire(played_state)}
        action = ActionModel.model_validate(json.loads(json.dumps(wire))).to_action()

        assert isinstance(action, Restore)
        assert action.state == played_state

        store = GameStore(race_reducer)
        store.dispatch(action)
        after = store.dispatch(end_turn())
        assert after._id == played_state._id + 1
        assert after.ctx.current_player == "0"

    def test_wire_restore_invalid_state(self):
        with pytest.raises(ValidationError):
            ActionModel(type="RESTORE", state={"G": {}}).to_action()
