from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator, List, Optional, Sequence, Union

from .cards import (
    BASE_2E_KINGDOM_CARDS,
    CardDef,
    card_names,
    is_action,
    is_reaction,
    is_treasure,
    get_card,
)
from .config import GameConfig
from .decisions import DecisionProvider, PassDecisions, Prompt
from .player import PlayerState
from .supply import Pile, Supply, make_kingdom

logger = logging.getLogger(__name__)


# -------------------- Phases --------------------


class TurnPhase(Enum):
    ACTION = auto()
    BUY = auto()
    CLEANUP = auto()


@dataclass(frozen=True)
class PlayerResult:
    name: str
    victory_points: int
    cards: List[CardDef]


# -------------------- Game --------------------


class Game:
    """
    Dominion Base 2E match.

    - Players act in roster order; the roster is cyclic for "next" and
      "other players".
    - Every player decision goes through the injected decision provider.
    - Illegal answers are rejected and asked again without touching state.
    """

    def __init__(
        self,
        player_names: Sequence[str],
        kingdom: Optional[Sequence[Union[str, Pile]]] = None,
        decisions: Optional[DecisionProvider] = None,
        config: Optional[GameConfig] = None,
    ):
        if len(player_names) < 2:
            raise ValueError("Dominion needs at least 2 players")

        self.config = config or GameConfig()
        self.rng = random.Random(self.config.seed)
        self.decisions: DecisionProvider = decisions or PassDecisions()

        self.players: List[PlayerState] = [PlayerState(name=n) for n in player_names]
        self.trash: List[CardDef] = []

        # Choose kingdom
        if kingdom is None:
            kingdom = self.rng.sample(BASE_2E_KINGDOM_CARDS, 10)
        piles = [
            k if isinstance(k, Pile)
            else make_kingdom([k], self.config.kingdom_pile_size, self.num_players)[0]
            for k in kingdom
        ]
        self.supply = Supply(piles, self.num_players)
        self.kingdom: List[str] = [p.name for p in piles]

        # Turn state
        self.current_player: int = 0
        self.turn_number: int = 0
        self.phase: TurnPhase = TurnPhase.ACTION
        self.merchant_bonus: int = 0
        self._silver_played: bool = False

        self._setup_players()

    # -------------------- Setup --------------------

    def _setup_players(self) -> None:
        copper = get_card("Copper")
        estate = get_card("Estate")
        for p in self.players:
            p.deck = [copper] * self.config.starting_coppers + [estate] * self.config.starting_estates
            self.rng.shuffle(p.deck)
            p.draw_to_hand(self.rng, self.config.hand_size)

    # -------------------- Roster --------------------

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def player(self) -> PlayerState:
        return self.players[self.current_player]

    def other_players(self, player_idx: int) -> List[int]:
        return [
            (player_idx + i) % self.num_players
            for i in range(1, self.num_players)
        ]

    # -------------------- Decisions --------------------

    def choose(
        self,
        player_idx: int,
        options: Sequence[str],
        kind: str,
        message: str = "",
        required: bool = False,
        ask_when_empty: bool = False,
    ) -> Optional[str]:
        """Ask a player to pick one of ``options``; ``None`` means pass.

        With no options the player is not asked unless ``ask_when_empty`` is
        set, in which case only a pass is accepted. When ``required`` is set
        and the player passes, the first option is taken.
        """
        if not options and not ask_when_empty:
            return None
        prompt = Prompt(player=self.players[player_idx].name, kind=kind, message=message)
        while True:
            answer = self.decisions.choose_card_name(options, prompt)
            if answer is None:
                if required and options:
                    logger.info("%s must choose; taking %s", prompt.player, options[0])
                    return options[0]
                return None
            if answer in options:
                return answer
            logger.warning(
                "%s chose %r for %s, expected one of %s; asking again",
                prompt.player, answer, kind, list(options),
            )

    # -------------------- Zones --------------------

    def draw_one(self, player_idx: int) -> Optional[CardDef]:
        return self.players[player_idx].draw(self.rng)

    def draw_cards(self, player_idx: int, n: int) -> List[CardDef]:
        drawn = self.players[player_idx].draw_to_hand(self.rng, n)
        logger.debug("%s draws %d card(s)", self.players[player_idx].name, len(drawn))
        return drawn

    def gain(self, player_idx: int, card_name: str, where: str = "discard") -> Optional[CardDef]:
        if where not in ("discard", "hand", "topdeck"):
            raise ValueError(f"Unknown gain location: {where}")
        card = self.supply.remove(card_name)
        if card is None:
            return None
        p = self.players[player_idx]
        if where == "discard":
            p.discard.append(card)
        elif where == "hand":
            p.hand.append(card)
        else:
            p.deck.append(card)
        logger.debug("%s gains %s to %s", p.name, card_name, where)
        return card

    def gainable(self, max_cost: int, pred: Optional[Callable[[CardDef], bool]] = None) -> List[str]:
        return card_names(
            self.supply.available_cards(),
            lambda c: c.cost <= max_cost and (pred is None or pred(c)),
        )

    def choose_and_gain(
        self,
        player_idx: int,
        max_cost: int,
        message: str,
        pred: Optional[Callable[[CardDef], bool]] = None,
        where: str = "discard",
    ) -> Optional[CardDef]:
        name = self.choose(player_idx, self.gainable(max_cost, pred), "gain", message, required=True)
        if name is None:
            return None
        return self.gain(player_idx, name, where=where)

    def trash_from_hand(self, player_idx: int, card_name: str) -> Optional[CardDef]:
        p = self.players[player_idx]
        card = p.take(p.hand, card_name)
        if card is not None:
            self.trash.append(card)
            logger.debug("%s trashes %s", p.name, card_name)
        return card

    def discard_from_hand(self, player_idx: int, card_name: str) -> Optional[CardDef]:
        p = self.players[player_idx]
        card = p.take(p.hand, card_name)
        if card is not None:
            p.discard.append(card)
        return card

    def log_reveal(self, player_idx: int, cards: Sequence[CardDef]) -> None:
        logger.info(
            "%s reveals %s",
            self.players[player_idx].name,
            ", ".join(c.name for c in cards) or "nothing",
        )

    # -------------------- Reactions / attacks --------------------

    def player_react(self, player_idx: int) -> bool:
        """True if the player reveals a Reaction that blocks this attack."""
        p = self.players[player_idx]
        reactions = card_names(p.hand, is_reaction)
        if not reactions:
            return False
        name = self.choose(player_idx, reactions, "react", "Reveal a Reaction to block the attack?")
        if name is None:
            return False
        card = next(c for c in p.hand if c.name == name)
        blocked = card.on_react(self, player_idx, card)
        if blocked:
            logger.info("%s reveals %s and is unaffected", p.name, name)
        return blocked

    def attacked_players(self, attacker: int) -> Iterator[int]:
        """Opponents in turn order that did not block the attack.

        Each opponent reacts just before the attack resolves against them.
        """
        for v in self.other_players(attacker):
            if not self.player_react(v):
                yield v

    # -------------------- Core play --------------------

    def apply_card_effect(self, player_idx: int, card: CardDef) -> None:
        p = self.players[player_idx]
        if card.plus_cards:
            self.draw_cards(player_idx, card.plus_cards)
        if card.plus_actions:
            p.actions += card.plus_actions
        if card.plus_buys:
            p.buys += card.plus_buys
        if card.plus_coins:
            p.coins += card.plus_coins
        if card.on_play:
            card.on_play(self, player_idx, card)

    def play_action(self, card_name: str) -> bool:
        if self.phase != TurnPhase.ACTION:
            return False
        p = self.player
        if p.actions <= 0:
            return False
        card = next((c for c in p.hand if c.name == card_name), None)
        if card is None or not is_action(card):
            return False

        p.actions -= 1
        p.in_play.append(p.take(p.hand, card_name))
        logger.info("%s plays %s", p.name, card_name)
        self.apply_card_effect(self.current_player, card)
        return True

    def end_action_phase(self) -> bool:
        if self.phase != TurnPhase.ACTION:
            return False
        self.phase = TurnPhase.BUY
        return True

    def play_treasure(self, card_name: str) -> bool:
        if self.phase != TurnPhase.BUY:
            return False
        p = self.player
        card = next((c for c in p.hand if c.name == card_name), None)
        if card is None or not is_treasure(card):
            return False

        p.in_play.append(p.take(p.hand, card_name))
        self.apply_card_effect(self.current_player, card)

        if card.name == "Silver" and not self._silver_played:
            self._silver_played = True
            p.coins += self.merchant_bonus
        return True

    def play_all_treasures(self) -> None:
        while True:
            name = next((c.name for c in self.player.hand if is_treasure(c)), None)
            if name is None or not self.play_treasure(name):
                break

    def buy_card(self, card_name: str) -> bool:
        if self.phase != TurnPhase.BUY:
            return False
        p = self.player
        if p.buys <= 0:
            return False
        card = self.supply.peek(card_name)
        if card is None or card.cost > p.coins:
            return False

        p.buys -= 1
        p.coins -= card.cost
        self.gain(self.current_player, card_name)
        logger.info("%s buys %s", p.name, card_name)
        return True

    def end_buy_phase(self) -> bool:
        if self.phase != TurnPhase.BUY:
            return False
        self.phase = TurnPhase.CLEANUP
        return True

    def cleanup(self) -> bool:
        if self.phase != TurnPhase.CLEANUP:
            return False
        p = self.player
        p.discard.extend(p.in_play)
        p.in_play = []
        p.discard.extend(p.hand)
        p.hand = []
        self.draw_cards(self.current_player, self.config.hand_size)
        p.reset_turn()
        return True

    # -------------------- Turn control --------------------

    def start_turn(self, player_idx: int) -> None:
        self.current_player = player_idx
        self.turn_number += 1
        self.phase = TurnPhase.ACTION
        self.merchant_bonus = 0
        self._silver_played = False
        self.player.reset_turn()
        logger.info("Turn %d: %s", self.turn_number, self.player.name)

    def action_phase(self) -> None:
        p = self.player
        while p.actions > 0:
            name = self.choose(
                self.current_player, card_names(p.hand, is_action), "action",
                "Play an Action card", ask_when_empty=True,
            )
            if name is None:
                break
            if not self.play_action(name):
                break
        self.end_action_phase()

    def buy_phase(self) -> None:
        p = self.player
        if self.config.auto_play_treasures:
            self.play_all_treasures()
        else:
            while True:
                name = self.choose(
                    self.current_player, card_names(p.hand, is_treasure), "treasure",
                    "Play a Treasure", ask_when_empty=True,
                )
                if name is None:
                    break
                if not self.play_treasure(name):
                    break
        while p.buys > 0:
            name = self.choose(
                self.current_player, self.gainable(p.coins), "buy",
                f"Buy a card ({p.coins} coins)", ask_when_empty=True,
            )
            if name is None:
                break
            if not self.buy_card(name):
                break
        self.end_buy_phase()

    def play_turn(self) -> None:
        self.start_turn(self.current_player)
        self.action_phase()
        self.buy_phase()
        self.cleanup()

    def advance(self) -> None:
        self.current_player = (self.current_player + 1) % self.num_players

    def is_finished(self) -> bool:
        return self.supply.is_finished()

    def run(self) -> List[PlayerResult]:
        while not self.is_finished():
            self.play_turn()
            self.advance()
        logger.info("Game over after %d turns", self.turn_number)
        return self.final_report()

    # -------------------- Queries --------------------

    def available_supply_cards(self) -> List[CardDef]:
        return self.supply.available_cards()

    def all_cards(self) -> List[CardDef]:
        cards = self.supply.all_cards() + list(self.trash)
        for p in self.players:
            cards += p.all_cards()
        return cards

    # -------------------- Scoring --------------------

    def final_report(self) -> List[PlayerResult]:
        return [
            PlayerResult(name=p.name, victory_points=p.victory_points(), cards=p.all_cards())
            for p in self.players
        ]

    def format_report(self) -> str:
        lines = ["Game over."]
        for r in self.final_report():
            lines.append(f"{r.name}: {r.victory_points} Points.")
            lines.append(", ".join(c.name for c in r.cards))
        return "\n".join(lines)

    def render(self) -> str:
        return f"     -- {self.player.name}'s Turn --\n{self.supply.render()}\n"

    def __str__(self) -> str:
        return self.render()
