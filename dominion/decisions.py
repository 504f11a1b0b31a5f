"""
Player decision providers.

The engine never reads input itself. Every choice (play a card, buy a card,
reveal a reaction, pick a card to discard...) is a call to
``DecisionProvider.choose_card_name`` with the legal options; ``None`` means
pass.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

PASS = None


@dataclass(frozen=True)
class Prompt:
    player: str
    kind: str
    message: str = ""


class DecisionProvider(Protocol):
    def choose_card_name(self, options: Sequence[str], prompt: Prompt) -> Optional[str]: ...


class PassDecisions:
    """Always passes."""

    def choose_card_name(self, options: Sequence[str], prompt: Prompt) -> Optional[str]:
        return PASS


class ScriptedDecisions:
    """Replays fixed answers per player name; passes once a script runs out.

    Every prompt is recorded in ``history`` as ``(prompt, options, answer)``.
    """

    def __init__(self, scripts: Optional[Dict[str, Iterable[Optional[str]]]] = None):
        self.scripts: Dict[str, Deque[Optional[str]]] = {
            name: deque(answers) for name, answers in (scripts or {}).items()
        }
        self.history: List[Tuple[Prompt, Tuple[str, ...], Optional[str]]] = []

    def add(self, player: str, *answers: Optional[str]) -> None:
        self.scripts.setdefault(player, deque()).extend(answers)

    def choose_card_name(self, options: Sequence[str], prompt: Prompt) -> Optional[str]:
        queue = self.scripts.get(prompt.player)
        answer = queue.popleft() if queue else PASS
        self.history.append((prompt, tuple(options), answer))
        return answer

    def prompts(self, kind: Optional[str] = None) -> List[Prompt]:
        return [p for p, _, _ in self.history if kind is None or p.kind == kind]
