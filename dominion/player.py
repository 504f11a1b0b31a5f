from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .cards import GARDENS_DIVISOR, CardDef

logger = logging.getLogger(__name__)


@dataclass
class PlayerState:
    name: str
    deck: List[CardDef] = field(default_factory=list)
    hand: List[CardDef] = field(default_factory=list)
    discard: List[CardDef] = field(default_factory=list)
    in_play: List[CardDef] = field(default_factory=list)

    # Turn economy
    actions: int = 1
    buys: int = 1
    coins: int = 0

    # -------------------- Zones --------------------

    @staticmethod
    def take(cards: List[CardDef], name: str) -> Optional[CardDef]:
        """Remove and return the first card called ``name`` from ``cards``."""
        for i, c in enumerate(cards):
            if c.name == name:
                return cards.pop(i)
        return None

    def reshuffle(self, rng: random.Random) -> None:
        """Shuffle the discard pile and put it under the (empty) deck."""
        rng.shuffle(self.discard)
        self.deck = self.discard + self.deck
        self.discard = []
        logger.debug("%s reshuffles, deck now %d cards", self.name, len(self.deck))

    def draw(self, rng: random.Random) -> Optional[CardDef]:
        """Pop the top of the deck, reshuffling first if the deck is empty."""
        if not self.deck:
            if not self.discard:
                return None
            self.reshuffle(rng)
        return self.deck.pop()

    def draw_to_hand(self, rng: random.Random, n: int) -> List[CardDef]:
        drawn: List[CardDef] = []
        for _ in range(n):
            c = self.draw(rng)
            if c is None:
                break
            self.hand.append(c)
            drawn.append(c)
        return drawn

    def reset_turn(self) -> None:
        self.actions = 1
        self.buys = 1
        self.coins = 0

    # -------------------- Scoring --------------------

    def all_cards(self) -> List[CardDef]:
        return self.deck + self.hand + self.discard + self.in_play

    def victory_points(self) -> int:
        all_cards = self.all_cards()
        score = sum(c.vp for c in all_cards)
        gardens = sum(1 for c in all_cards if c.name == "Gardens")
        return score + gardens * (len(all_cards) // GARDENS_DIVISOR)
