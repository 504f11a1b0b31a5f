from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import numpy as np

from .cards import ALL_CARDS, CardDef
from .game import Game, TurnPhase

N_CARDS = len(ALL_CARDS)

# deck, hand, discard, in-play, supply
N_ZONES = 5
# actions, buys, coins, phase_flag
N_SCALARS = 4

OBSERVATION_SIZE = N_CARDS * N_ZONES + N_SCALARS

_NAME_TO_INDEX: Dict[str, int] = {n: i for i, n in enumerate(ALL_CARDS)}


def card_counts(cards: Iterable[CardDef], names: Optional[List[str]] = None) -> np.ndarray:
    if names is None:
        names = ALL_CARDS
        name_to_index = _NAME_TO_INDEX
    else:
        name_to_index = {n: i for i, n in enumerate(names)}

    counts = np.zeros(len(names), dtype=np.float32)
    for c in cards:
        idx = name_to_index.get(c.name)
        if idx is not None:
            counts[idx] += 1.0
    return counts


def encode(game: Game, player_idx: Optional[int] = None) -> np.ndarray:
    """
    Flat float32 view of the game from one player's seat.

    Layout: per-card counts for that player's deck, hand, discard and in-play,
    then supply counts (all in ``ALL_CARDS`` order), then the turn player's
    actions, buys, coins and a buy-phase flag.
    """
    if player_idx is None:
        player_idx = game.current_player
    p = game.players[player_idx]

    supply_counts = np.zeros(N_CARDS, dtype=np.float32)
    for pile in game.supply:
        supply_counts[_NAME_TO_INDEX[pile.name]] += float(len(pile))

    turn = game.player
    phase_flag = 1.0 if game.phase == TurnPhase.BUY else 0.0
    scalars = np.array(
        [float(turn.actions), float(turn.buys), float(turn.coins), phase_flag],
        dtype=np.float32,
    )

    vec = np.concatenate(
        [
            card_counts(p.deck),
            card_counts(p.hand),
            card_counts(p.discard),
            card_counts(p.in_play),
            supply_counts,
            scalars,
        ],
        axis=0,
    )
    assert vec.size == OBSERVATION_SIZE
    return vec.astype(np.float32)
