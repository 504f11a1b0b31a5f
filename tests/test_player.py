import random

from dominion.cards import get_card
from dominion.player import PlayerState


def _cards(*names):
    return [get_card(n) for n in names]


def test_draw_takes_top_of_deck() -> None:
    p = PlayerState(name="Alice", deck=_cards("Estate", "Gold"))
    card = p.draw(random.Random(0))
    assert card.name == "Gold"
    assert [c.name for c in p.deck] == ["Estate"]


def test_draw_reshuffles_discard_when_deck_empty() -> None:
    p = PlayerState(name="Alice", discard=_cards("Copper", "Silver", "Gold"))
    card = p.draw(random.Random(0))
    assert card is not None
    assert p.discard == []
    assert len(p.deck) == 2
    assert sorted(c.name for c in p.deck + [card]) == ["Copper", "Gold", "Silver"]


def test_draw_from_nothing_is_none() -> None:
    p = PlayerState(name="Alice")
    assert p.draw(random.Random(0)) is None
    assert p.draw_to_hand(random.Random(0), 5) == []


def test_draw_to_hand_stops_when_out_of_cards() -> None:
    p = PlayerState(name="Alice", deck=_cards("Copper", "Copper"), discard=_cards("Estate"))
    drawn = p.draw_to_hand(random.Random(0), 5)
    assert len(drawn) == 3
    assert len(p.hand) == 3
    assert p.deck == [] and p.discard == []


def test_reshuffle_keeps_cards() -> None:
    p = PlayerState(name="Alice", discard=_cards("Copper", "Estate", "Duchy"))
    p.reshuffle(random.Random(3))
    assert p.discard == []
    assert sorted(c.name for c in p.deck) == ["Copper", "Duchy", "Estate"]


def test_take_removes_first_match() -> None:
    cards = _cards("Copper", "Estate", "Copper")
    taken = PlayerState.take(cards, "Copper")
    assert taken.name == "Copper"
    assert [c.name for c in cards] == ["Estate", "Copper"]
    assert PlayerState.take(cards, "Gold") is None


def test_victory_points() -> None:
    p = PlayerState(
        name="Alice",
        deck=_cards("Estate", "Duchy"),
        hand=_cards("Province"),
        discard=_cards("Curse", "Curse"),
        in_play=_cards("Copper"),
    )
    assert p.victory_points() == 1 + 3 + 6 - 2


def test_gardens_counts_owned_cards() -> None:
    p = PlayerState(name="Alice", deck=_cards("Gardens", "Gardens") + _cards("Copper") * 19)
    # 21 cards -> 2 VP per Gardens
    assert p.victory_points() == 4


def test_reset_turn() -> None:
    p = PlayerState(name="Alice", actions=0, buys=3, coins=7)
    p.reset_turn()
    assert (p.actions, p.buys, p.coins) == (1, 1, 0)
