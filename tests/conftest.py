"""
Pytest fixtures for Dominion engine tests.
"""

import pytest

from dominion import Game, GameConfig, ScriptedDecisions

KINGDOM = [
    "Cellar",
    "Chapel",
    "Moat",
    "Village",
    "Workshop",
    "Militia",
    "Smithy",
    "Market",
    "Laboratory",
    "Witch",
]


@pytest.fixture
def decisions() -> ScriptedDecisions:
    return ScriptedDecisions()


@pytest.fixture
def make_game(decisions):
    """Factory for games sharing the ``decisions`` fixture."""

    def _make(names=("Alice", "Bob"), kingdom=None, **config) -> Game:
        config.setdefault("seed", 1)
        return Game(
            list(names),
            kingdom=list(kingdom or KINGDOM),
            decisions=decisions,
            config=GameConfig(**config),
        )

    return _make


@pytest.fixture
def game(make_game) -> Game:
    """A fresh two-player game, Alice to act."""
    return make_game()
