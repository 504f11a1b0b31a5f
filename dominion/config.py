from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# -------------------- Basic supply sizes --------------------

COPPER_PILE = 60
SILVER_PILE = 40
GOLD_PILE = 30

VICTORY_PILE_TWO_PLAYERS = 8
VICTORY_PILE_MANY_PLAYERS = 12

CURSES_PER_OPPONENT = 10

KINGDOM_SIZE = 10


def victory_pile_size(num_players: int) -> int:
    return VICTORY_PILE_TWO_PLAYERS if num_players == 2 else VICTORY_PILE_MANY_PLAYERS


def curse_pile_size(num_players: int) -> int:
    return CURSES_PER_OPPONENT * (num_players - 1)


@dataclass(frozen=True)
class GameConfig:
    hand_size: int = 5
    starting_coppers: int = 7
    starting_estates: int = 3
    kingdom_pile_size: int = 10
    auto_play_treasures: bool = False
    seed: Optional[int] = None
