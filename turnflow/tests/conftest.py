"""
Pytest fixtures for Turnflow tests.
"""

import pytest

from ..engine_core import GameDefinition, GameReducer, create_game_reducer
from ..engine_core.state import GameState
from ..games.race import create_race_game


def _score_setup(num_players):
    return {"score": 0}


def _score_reducer(G, move, ctx):
    if move.name == "add":
        return {**G, "score": G["score"] + move.args[0]}
    return G


def _score_victory(G, ctx):
    return "0" if G["score"] >= 10 else None


@pytest.fixture
def score_game() -> GameDefinition:
    """Game whose victory goes to player "0" once G.score reaches 10."""
    return GameDefinition(
        setup=_score_setup,
        reducer=_score_reducer,
        victory=_score_victory,
        moves=("add",),
        name="score",
    )


@pytest.fixture
def score_reducer(score_game: GameDefinition) -> GameReducer:
    """Two-player reducer for the score game."""
    return create_game_reducer(score_game, num_players=2)


@pytest.fixture
def default_reducer() -> GameReducer:
    """Reducer for the no-op default game."""
    return create_game_reducer()


@pytest.fixture
def race_game() -> GameDefinition:
    """Race to 10."""
    return create_race_game(target=10)


@pytest.fixture
def race_reducer(race_game: GameDefinition) -> GameReducer:
    """Three-player race reducer."""
    return create_game_reducer(race_game, num_players=3)


@pytest.fixture
def initial_state(score_reducer: GameReducer) -> GameState:
    return score_reducer.initial
