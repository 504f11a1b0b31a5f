import pytest

from dominion.cards import get_card
from dominion.supply import Pile, Supply, make_kingdom

from conftest import KINGDOM


def _supply(num_players: int = 2) -> Supply:
    return Supply(make_kingdom(KINGDOM, 10, num_players), num_players)


def _empty(supply: Supply, name: str) -> None:
    while supply.remove(name) is not None:
        pass


def test_two_player_pile_sizes() -> None:
    supply = _supply(2)
    assert supply.count("Copper") == 60
    assert supply.count("Silver") == 40
    assert supply.count("Gold") == 30
    for name in ("Estate", "Duchy", "Province"):
        assert supply.count(name) == 8
    assert supply.count("Curse") == 10
    for name in KINGDOM:
        assert supply.count(name) == 10


def test_four_player_pile_sizes() -> None:
    supply = _supply(4)
    assert supply.count("Copper") == 60
    assert supply.count("Silver") == 40
    assert supply.count("Gold") == 30
    for name in ("Estate", "Duchy", "Province"):
        assert supply.count(name) == 12
    assert supply.count("Curse") == 30


def test_victory_kingdom_pile_follows_victory_size() -> None:
    assert len(make_kingdom(["Gardens"], 10, 2)[0]) == 8
    assert len(make_kingdom(["Gardens"], 10, 3)[0]) == 12
    assert len(make_kingdom(["Smithy"], 7, 3)[0]) == 7


def test_available_cards_in_pile_order() -> None:
    supply = _supply()
    names = [c.name for c in supply.available_cards()]
    assert names == KINGDOM + ["Copper", "Silver", "Gold", "Estate", "Duchy", "Province", "Curse"]

    _empty(supply, "Village")
    names = [c.name for c in supply.available_cards()]
    assert "Village" not in names
    assert len(names) == len(supply) - 1


def test_peek_and_remove() -> None:
    supply = _supply()
    assert supply.peek("Witch") == get_card("Witch")
    assert supply.peek("Throne Room") is None

    card = supply.remove("Witch")
    assert card is not None and card.name == "Witch"
    assert supply.count("Witch") == 9
    assert supply.remove("Throne Room") is None


def test_remove_from_empty_pile_is_absent_not_error() -> None:
    supply = _supply()
    _empty(supply, "Curse")
    assert supply.count("Curse") == 0
    assert supply.peek("Curse") is None
    assert supply.remove("Curse") is None
    assert supply.count("Curse") == 0
    assert supply.empty_piles() == 1


def test_finished_when_province_empty() -> None:
    supply = _supply()
    assert not supply.is_finished()
    _empty(supply, "Province")
    _empty(supply, "Smithy")
    assert supply.empty_piles() == 2
    assert supply.is_finished()


def test_finished_when_three_piles_empty() -> None:
    supply = _supply()
    _empty(supply, "Cellar")
    _empty(supply, "Chapel")
    assert not supply.is_finished()
    _empty(supply, "Curse")
    assert supply.count("Province") == 8
    assert supply.is_finished()


def test_missing_province_pile_counts_as_empty() -> None:
    supply = _supply()
    supply.piles = [p for p in supply.piles if p.name != "Province"]
    assert supply.empty_piles() == 0
    assert supply.is_finished()


def test_kingdom_must_have_ten_piles() -> None:
    with pytest.raises(ValueError):
        Supply(make_kingdom(KINGDOM[:9]), 2)


def test_kingdom_piles_must_be_homogeneous_and_non_empty() -> None:
    piles = make_kingdom(KINGDOM)
    piles[0] = Pile(card=get_card("Cellar"), cards=[get_card("Cellar"), get_card("Chapel")])
    with pytest.raises(ValueError):
        Supply(piles, 2)

    piles = make_kingdom(KINGDOM)
    piles[0] = Pile(card=get_card("Cellar"))
    with pytest.raises(ValueError):
        Supply(piles, 2)


def test_kingdom_piles_must_be_distinct() -> None:
    with pytest.raises(ValueError):
        Supply(make_kingdom(["Smithy"] * 10), 2)


def test_render_shows_counts_costs_and_empty_stacks() -> None:
    supply = _supply()
    _empty(supply, "Cellar")
    text = supply.render()
    assert text.startswith("[Empty stack]")
    assert "Copper x60(0)" in text
    assert "Province x8(8)" in text
    assert "Witch x10(5)" in text
