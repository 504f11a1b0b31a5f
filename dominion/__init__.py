"""
Dominion Base 2E rules engine.

Turn/phase state machine, card effect resolution and supply management for
a multiplayer match. Player input comes from an injected decision provider.
"""

from .cards import ALL_CARDS, BASE_2E_KINGDOM_CARDS, CARDS, CardDef, CardType, create_card_defs, get_card
from .config import GameConfig
from .decisions import PASS, DecisionProvider, PassDecisions, Prompt, ScriptedDecisions
from .game import Game, PlayerResult, TurnPhase
from .observation import OBSERVATION_SIZE, encode
from .player import PlayerState
from .supply import Pile, Supply, make_kingdom

__version__ = "0.1.0"

__all__ = [
    "ALL_CARDS",
    "BASE_2E_KINGDOM_CARDS",
    "CARDS",
    "CardDef",
    "CardType",
    "DecisionProvider",
    "Game",
    "GameConfig",
    "OBSERVATION_SIZE",
    "PASS",
    "PassDecisions",
    "Pile",
    "PlayerResult",
    "PlayerState",
    "Prompt",
    "ScriptedDecisions",
    "Supply",
    "TurnPhase",
    "create_card_defs",
    "encode",
    "get_card",
    "make_kingdom",
]
