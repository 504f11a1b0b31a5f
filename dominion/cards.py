"""
(2) [action] Cellar: +1 Action. Discard any number of cards, then draw that many.
(2) [action] Chapel: Trash up to 4 cards from your hand.
(2) [action-reaction] Moat: +2 Cards. When another player plays an Attack card, you may first reveal this from your hand, to be unaffected by it.
(3) [action] Harbinger: +1 Card. +1 Action. Look through your discard pile. You may put a card from it onto your deck.
(3) [action] Merchant: +1 Card. +1 Action. The first time you play a Silver this turn, +$1.
(3) [action] Vassal: +$2. Discard the top card of your deck. If it's an Action card, you may play it.
(3) [action] Village: +1 Card. +2 Actions.
(3) [action] Workshop: Gain a card costing up to $4.
(4) [action-attack] Bureaucrat: Gain a Silver onto your deck. Each other player reveals a Victory card from their hand and puts it onto their deck (or reveals a hand with no Victory cards).
(4) [victory] Gardens: Worth 1 VP per 10 cards you have (round down).
(4) [action-attack] Militia: +$2. Each other player discards down to 3 cards in hand.
(4) [action] Moneylender: You may trash a Copper from your hand for +$3.
(4) [action] Poacher: +1 Card. +1 Action. +$1. Discard a card per empty Supply pile.
(4) [action] Remodel: Trash a card from your hand. Gain a card costing up to $2 more than it.
(4) [action] Smithy: +3 Cards.
(4) [action] Throne Room: You may play an Action card from your hand twice.
(5) [action-attack] Bandit: Gain a Gold. Each other player reveals the top 2 cards of their deck, trashes a revealed Treasure other than Copper, and discards the rest.
(5) [action] Council Room: +4 Cards. +1 Buy. Each other player draws a card.
(5) [action] Festival: +2 Actions. +1 Buy. +$2.
(5) [action] Laboratory: +2 Cards. +1 Action.
(5) [action] Library: Draw until you have 7 cards in hand, skipping any Action cards you choose to; set those aside, discarding them afterwards.
(5) [action] Market: +1 Card. +1 Action. +1 Buy. +$1.
(5) [action] Mine: You may trash a Treasure from your hand. Gain a Treasure to your hand costing up to $3 more than it.
(5) [action] Sentry: +1 Card. +1 Action. Look at the top 2 cards of your deck. Trash and/or discard any number of them. Put the rest back on top in any order.
(5) [action-attack] Witch: +2 Cards. Each other player gains a Curse.
(6) [action] Artisan: Gain a card to your hand costing up to $5. Put a card from your hand onto your deck.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from .game import Game


# -------------------- Card model --------------------


class CardType(Enum):
    ACTION = "Action"
    TREASURE = "Treasure"
    VICTORY = "Victory"
    CURSE = "Curse"
    ATTACK = "Attack"
    REACTION = "Reaction"


PlayEffect = Callable[["Game", int, "CardDef"], None]
ReactEffect = Callable[["Game", int, "CardDef"], bool]


@dataclass(frozen=True)
class CardDef:
    name: str
    cost: int
    types: Tuple[CardType, ...]
    plus_cards: int = 0
    plus_actions: int = 0
    plus_buys: int = 0
    plus_coins: int = 0
    vp: int = 0
    on_play: Optional[PlayEffect] = None
    on_react: Optional[ReactEffect] = None

    def has_type(self, t: CardType) -> bool:
        return t in self.types

    def __str__(self) -> str:
        return self.name


def card_names(cards, pred: Optional[Callable[[CardDef], bool]] = None) -> List[str]:
    """Distinct names of ``cards`` in first-seen order, optionally filtered."""
    names: List[str] = []
    for c in cards:
        if pred is not None and not pred(c):
            continue
        if c.name not in names:
            names.append(c.name)
    return names


def is_action(card: CardDef) -> bool:
    return card.has_type(CardType.ACTION)


def is_treasure(card: CardDef) -> bool:
    return card.has_type(CardType.TREASURE)


def is_victory(card: CardDef) -> bool:
    return card.has_type(CardType.VICTORY)


def is_reaction(card: CardDef) -> bool:
    return card.has_type(CardType.REACTION) and card.on_react is not None


# -------------------- Base 2E kingdom list --------------------


BASE_2E_KINGDOM_CARDS: List[str] = [
    "Cellar",
    "Chapel",
    "Moat",
    "Harbinger",
    "Merchant",
    "Vassal",
    "Village",
    "Workshop",
    "Bureaucrat",
    "Gardens",
    "Militia",
    "Moneylender",
    "Poacher",
    "Remodel",
    "Smithy",
    "Throne Room",
    "Bandit",
    "Council Room",
    "Festival",
    "Laboratory",
    "Library",
    "Market",
    "Mine",
    "Sentry",
    "Witch",
    "Artisan",
]

BASIC_CARDS: List[str] = ["Copper", "Silver", "Gold", "Estate", "Duchy", "Province", "Curse"]

GARDENS_DIVISOR = 10
MILITIA_HAND_LIMIT = 3
LIBRARY_HAND_TARGET = 7


# -------------------- Card definitions (Base 2E) --------------------


def create_card_defs() -> Dict[str, CardDef]:
    C = CardType
    cards: Dict[str, CardDef] = {}

    # Basic treasures
    cards["Copper"] = CardDef("Copper", 0, (C.TREASURE,), plus_coins=1)
    cards["Silver"] = CardDef("Silver", 3, (C.TREASURE,), plus_coins=2)
    cards["Gold"] = CardDef("Gold", 6, (C.TREASURE,), plus_coins=3)

    # Basic victory / curse
    cards["Estate"] = CardDef("Estate", 2, (C.VICTORY,), vp=1)
    cards["Duchy"] = CardDef("Duchy", 5, (C.VICTORY,), vp=3)
    cards["Province"] = CardDef("Province", 8, (C.VICTORY,), vp=6)
    cards["Curse"] = CardDef("Curse", 0, (C.CURSE,), vp=-1)

    # ---- Base 2E Kingdom ----

    def cellar_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        discarded = 0
        while p.hand:
            name = game.choose(player, card_names(p.hand), "discard", "Cellar: discard a card (or pass to draw)")
            if name is None:
                break
            game.discard_from_hand(player, name)
            discarded += 1
        game.draw_cards(player, discarded)

    cards["Cellar"] = CardDef("Cellar", 2, (C.ACTION,), plus_actions=1, on_play=cellar_on_play)

    def chapel_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        for _ in range(4):
            if not p.hand:
                break
            name = game.choose(player, card_names(p.hand), "trash", "Chapel: trash a card from your hand")
            if name is None:
                break
            game.trash_from_hand(player, name)

    cards["Chapel"] = CardDef("Chapel", 2, (C.ACTION,), on_play=chapel_on_play)

    def moat_on_react(game: Game, player: int, card: CardDef) -> bool:
        return True

    cards["Moat"] = CardDef(
        "Moat", 2, (C.ACTION, C.REACTION), plus_cards=2, on_react=moat_on_react
    )

    def harbinger_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        if not p.discard:
            return
        name = game.choose(player, card_names(p.discard), "topdeck", "Harbinger: put a card from your discard onto your deck")
        if name is None:
            return
        p.deck.append(p.take(p.discard, name))

    cards["Harbinger"] = CardDef(
        "Harbinger", 3, (C.ACTION,), plus_cards=1, plus_actions=1, on_play=harbinger_on_play
    )

    def merchant_on_play(game: Game, player: int, card: CardDef) -> None:
        game.merchant_bonus += 1

    cards["Merchant"] = CardDef(
        "Merchant", 3, (C.ACTION,), plus_cards=1, plus_actions=1, on_play=merchant_on_play
    )

    def vassal_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        top = game.draw_one(player)
        if top is None:
            return
        if top.has_type(C.ACTION):
            if game.choose(player, [top.name], "play", f"Vassal: play the discarded {top.name}?") is not None:
                p.in_play.append(top)
                game.apply_card_effect(player, top)
                return
        p.discard.append(top)

    cards["Vassal"] = CardDef("Vassal", 3, (C.ACTION,), plus_coins=2, on_play=vassal_on_play)

    cards["Village"] = CardDef("Village", 3, (C.ACTION,), plus_cards=1, plus_actions=2)

    def workshop_on_play(game: Game, player: int, card: CardDef) -> None:
        game.choose_and_gain(player, 4, "Workshop: gain a card costing up to 4")

    cards["Workshop"] = CardDef("Workshop", 3, (C.ACTION,), on_play=workshop_on_play)

    def bureaucrat_on_play(game: Game, player: int, card: CardDef) -> None:
        game.gain(player, "Silver", where="topdeck")
        for v in game.attacked_players(player):
            vp = game.players[v]
            victories = card_names(vp.hand, is_victory)
            if not victories:
                game.log_reveal(v, vp.hand)
                continue
            name = game.choose(v, victories, "topdeck", "Bureaucrat: put a Victory card onto your deck", required=True)
            vp.deck.append(vp.take(vp.hand, name))

    cards["Bureaucrat"] = CardDef(
        "Bureaucrat", 4, (C.ACTION, C.ATTACK), on_play=bureaucrat_on_play
    )

    cards["Gardens"] = CardDef("Gardens", 4, (C.VICTORY,))

    def militia_on_play(game: Game, player: int, card: CardDef) -> None:
        for v in game.attacked_players(player):
            vp = game.players[v]
            while len(vp.hand) > MILITIA_HAND_LIMIT:
                name = game.choose(v, card_names(vp.hand), "discard", "Militia: discard down to 3 cards", required=True)
                game.discard_from_hand(v, name)

    cards["Militia"] = CardDef(
        "Militia", 4, (C.ACTION, C.ATTACK), plus_coins=2, on_play=militia_on_play
    )

    def moneylender_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        if not any(c.name == "Copper" for c in p.hand):
            return
        if game.choose(player, ["Copper"], "trash", "Moneylender: trash a Copper for +3 coins?") is None:
            return
        game.trash_from_hand(player, "Copper")
        p.coins += 3

    cards["Moneylender"] = CardDef("Moneylender", 4, (C.ACTION,), on_play=moneylender_on_play)

    def poacher_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        for _ in range(game.supply.empty_piles()):
            if not p.hand:
                break
            name = game.choose(player, card_names(p.hand), "discard", "Poacher: discard a card per empty pile", required=True)
            game.discard_from_hand(player, name)

    cards["Poacher"] = CardDef(
        "Poacher", 4, (C.ACTION,), plus_cards=1, plus_actions=1, plus_coins=1, on_play=poacher_on_play
    )

    def remodel_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        if not p.hand:
            return
        name = game.choose(player, card_names(p.hand), "trash", "Remodel: trash a card from your hand", required=True)
        trashed = game.trash_from_hand(player, name)
        game.choose_and_gain(player, trashed.cost + 2, f"Remodel: gain a card costing up to {trashed.cost + 2}")

    cards["Remodel"] = CardDef("Remodel", 4, (C.ACTION,), on_play=remodel_on_play)

    cards["Smithy"] = CardDef("Smithy", 4, (C.ACTION,), plus_cards=3)

    def throne_room_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        actions = card_names(p.hand, is_action)
        if not actions:
            return
        name = game.choose(player, actions, "play", "Throne Room: choose an Action to play twice")
        if name is None:
            return
        target = p.take(p.hand, name)
        p.in_play.append(target)
        game.apply_card_effect(player, target)
        game.apply_card_effect(player, target)

    cards["Throne Room"] = CardDef(
        "Throne Room", 4, (C.ACTION,), on_play=throne_room_on_play
    )

    def bandit_on_play(game: Game, player: int, card: CardDef) -> None:
        game.gain(player, "Gold")
        for v in game.attacked_players(player):
            vp = game.players[v]
            revealed: List[CardDef] = []
            for _ in range(2):
                c2 = game.draw_one(v)
                if c2 is not None:
                    revealed.append(c2)
            game.log_reveal(v, revealed)
            candidates = card_names(revealed, lambda c: c.has_type(C.TREASURE) and c.name != "Copper")
            if candidates:
                name = game.choose(v, candidates, "trash", "Bandit: trash a revealed Treasure", required=True)
                game.trash.append(vp.take(revealed, name))
            vp.discard.extend(revealed)

    cards["Bandit"] = CardDef("Bandit", 5, (C.ACTION, C.ATTACK), on_play=bandit_on_play)

    def council_room_on_play(game: Game, player: int, card: CardDef) -> None:
        for v in game.other_players(player):
            game.draw_cards(v, 1)

    cards["Council Room"] = CardDef(
        "Council Room", 5, (C.ACTION,), plus_cards=4, plus_buys=1, on_play=council_room_on_play
    )

    cards["Festival"] = CardDef("Festival", 5, (C.ACTION,), plus_actions=2, plus_buys=1, plus_coins=2)

    cards["Laboratory"] = CardDef("Laboratory", 5, (C.ACTION,), plus_cards=2, plus_actions=1)

    def library_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        set_aside: List[CardDef] = []
        while len(p.hand) < LIBRARY_HAND_TARGET:
            drawn = game.draw_one(player)
            if drawn is None:
                break
            if drawn.has_type(C.ACTION):
                if game.choose(player, [drawn.name], "set_aside", f"Library: set aside {drawn.name}?") is not None:
                    set_aside.append(drawn)
                    continue
            p.hand.append(drawn)
        p.discard.extend(set_aside)

    cards["Library"] = CardDef("Library", 5, (C.ACTION,), on_play=library_on_play)

    cards["Market"] = CardDef(
        "Market", 5, (C.ACTION,), plus_cards=1, plus_actions=1, plus_buys=1, plus_coins=1
    )

    def mine_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        treasures = card_names(p.hand, is_treasure)
        if not treasures:
            return
        name = game.choose(player, treasures, "trash", "Mine: trash a Treasure from your hand")
        if name is None:
            return
        trashed = game.trash_from_hand(player, name)
        game.choose_and_gain(
            player,
            trashed.cost + 3,
            f"Mine: gain a Treasure costing up to {trashed.cost + 3} to your hand",
            pred=is_treasure,
            where="hand",
        )

    cards["Mine"] = CardDef("Mine", 5, (C.ACTION,), on_play=mine_on_play)

    def sentry_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        # Both cards are looked at before any is placed.
        looked = [c for c in (game.draw_one(player), game.draw_one(player)) if c is not None]
        keep: List[CardDef] = []
        for seen in looked:
            if game.choose(player, [seen.name], "trash", f"Sentry: trash {seen.name}?") is not None:
                game.trash.append(seen)
            elif game.choose(player, [seen.name], "discard", f"Sentry: discard {seen.name}?") is not None:
                p.discard.append(seen)
            else:
                keep.append(seen)
        if len(keep) == 2 and keep[0].name != keep[1].name:
            top = game.choose(player, card_names(keep), "topdeck", "Sentry: choose the card to put on top")
            if top == keep[1].name:
                keep.reverse()
        # keep[0] goes back on top
        p.deck.extend(reversed(keep))

    cards["Sentry"] = CardDef(
        "Sentry", 5, (C.ACTION,), plus_cards=1, plus_actions=1, on_play=sentry_on_play
    )

    def witch_on_play(game: Game, player: int, card: CardDef) -> None:
        for v in game.attacked_players(player):
            game.gain(v, "Curse")

    cards["Witch"] = CardDef(
        "Witch", 5, (C.ACTION, C.ATTACK), plus_cards=2, on_play=witch_on_play
    )

    def artisan_on_play(game: Game, player: int, card: CardDef) -> None:
        p = game.players[player]
        game.choose_and_gain(player, 5, "Artisan: gain a card costing up to 5 to your hand", where="hand")
        if not p.hand:
            return
        name = game.choose(player, card_names(p.hand), "topdeck", "Artisan: put a card from your hand onto your deck", required=True)
        p.deck.append(p.take(p.hand, name))

    cards["Artisan"] = CardDef("Artisan", 6, (C.ACTION,), on_play=artisan_on_play)

    return cards


CARDS: Dict[str, CardDef] = create_card_defs()

# Stable card name list for fixed-size encodings
ALL_CARDS: List[str] = sorted(CARDS.keys())


def get_card(name: str) -> CardDef:
    card = CARDS.get(name)
    if card is None:
        raise ValueError(f"Unknown card: {name!r}")
    return card
