from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Sequence

from .decisions import PASS, Prompt

if TYPE_CHECKING:
    from .game import Game

PASS_WORDS = ("", "pass", "done", "n", "no")


class ConsoleDecisions:
    """Reads decisions from a terminal. Answers are not validated here."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.game: Optional[Game] = None

    def attach(self, game: Game) -> None:
        self.game = game

    def render(self, prompt: Prompt) -> None:
        game = self.game
        if game is None or prompt.kind not in ("action", "buy"):
            return
        p = game.player
        self.output_fn(str(game))
        self.output_fn(f"Actions/Buys/Coins: {p.actions}/{p.buys}/{p.coins}")
        self.output_fn("Hand: " + (", ".join(c.name for c in p.hand) or "(empty)"))

    def choose_card_name(self, options: Sequence[str], prompt: Prompt) -> Optional[str]:
        self.render(prompt)
        self.output_fn(f"[{prompt.player}] {prompt.message}")
        self.output_fn("Options: " + (", ".join(options) or "(none)") + "  (enter to pass)")
        line = self.input_fn("> ").strip()
        if line.lower() in PASS_WORDS:
            return PASS
        # Case-insensitive match on the offered names.
        for name in options:
            if name.lower() == line.lower():
                return name
        return line
