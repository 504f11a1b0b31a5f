"""
Supply piles.

The supply is an ordered list of piles, one per card kind. Piles keep their
card kind after they run out, so an empty pile still counts towards the
three-pile ending and still renders as ``[Empty stack]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from . import config
from .cards import BASIC_CARDS, CardDef, CardType, get_card

logger = logging.getLogger(__name__)

PROVINCE = "Province"


@dataclass
class Pile:
    card: CardDef
    cards: List[CardDef] = field(default_factory=list)

    @classmethod
    def of(cls, card: CardDef, count: int) -> "Pile":
        return cls(card=card, cards=[card] * count)

    @property
    def name(self) -> str:
        return self.card.name

    @property
    def top(self) -> Optional[CardDef]:
        return self.cards[-1] if self.cards else None

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def pop(self) -> Optional[CardDef]:
        if not self.cards:
            return None
        return self.cards.pop()

    def __len__(self) -> int:
        return len(self.cards)


def make_kingdom(names: List[str], pile_size: int = 10, num_players: int = 2) -> List[Pile]:
    """Build kingdom piles; Victory kingdom cards get the Victory pile size."""
    piles: List[Pile] = []
    for name in names:
        card = get_card(name)
        if card.has_type(CardType.VICTORY):
            piles.append(Pile.of(card, config.victory_pile_size(num_players)))
        else:
            piles.append(Pile.of(card, pile_size))
    return piles


def basic_piles(num_players: int) -> List[Pile]:
    sizes = {
        "Copper": config.COPPER_PILE,
        "Silver": config.SILVER_PILE,
        "Gold": config.GOLD_PILE,
        "Estate": config.victory_pile_size(num_players),
        "Duchy": config.victory_pile_size(num_players),
        "Province": config.victory_pile_size(num_players),
        "Curse": config.curse_pile_size(num_players),
    }
    return [Pile.of(get_card(name), sizes[name]) for name in BASIC_CARDS]


class Supply:
    def __init__(self, kingdom: List[Pile], num_players: int):
        if len(kingdom) != config.KINGDOM_SIZE:
            raise ValueError(
                f"Expected {config.KINGDOM_SIZE} kingdom piles, got {len(kingdom)}"
            )
        for pile in kingdom:
            if pile.is_empty:
                raise ValueError(f"Kingdom pile {pile.name!r} is empty")
            if any(c.name != pile.name for c in pile.cards):
                raise ValueError(f"Kingdom pile {pile.name!r} mixes card kinds")
        names = [pile.name for pile in kingdom]
        if len(set(names)) != len(names):
            raise ValueError(f"Kingdom piles must be distinct cards, got {names}")

        self.piles: List[Pile] = list(kingdom) + basic_piles(num_players)

    def __iter__(self) -> Iterator[Pile]:
        return iter(self.piles)

    def __len__(self) -> int:
        return len(self.piles)

    # -------------------- Queries --------------------

    def available_cards(self) -> List[CardDef]:
        return [pile.top for pile in self.piles if not pile.is_empty]

    def _find(self, card_name: str) -> Optional[Pile]:
        for pile in self.piles:
            if not pile.is_empty and pile.top.name == card_name:
                return pile
        return None

    def peek(self, card_name: str) -> Optional[CardDef]:
        pile = self._find(card_name)
        return pile.top if pile is not None else None

    def count(self, card_name: str) -> int:
        return sum(len(pile) for pile in self.piles if pile.name == card_name)

    def empty_piles(self) -> int:
        return sum(1 for pile in self.piles if pile.is_empty)

    def is_finished(self) -> bool:
        # No non-empty Province pile counts as an empty one.
        if self._find(PROVINCE) is None:
            return True
        return self.empty_piles() >= 3

    def all_cards(self) -> List[CardDef]:
        return [c for pile in self.piles for c in pile.cards]

    # -------------------- Mutation --------------------

    def remove(self, card_name: str) -> Optional[CardDef]:
        pile = self._find(card_name)
        if pile is None:
            return None
        card = pile.pop()
        if pile.is_empty:
            logger.info("Supply pile %s is now empty (%d empty)", card_name, self.empty_piles())
        return card

    # -------------------- Rendering --------------------

    def render(self) -> str:
        parts = []
        for pile in self.piles:
            if pile.is_empty:
                parts.append("[Empty stack]")
            else:
                parts.append(f"{pile.top.name} x{len(pile)}({pile.top.cost})")
        return "   ".join(parts)
