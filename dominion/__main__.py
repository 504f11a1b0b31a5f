"""
Play a hot-seat Dominion match in the terminal.

Usage:
    python -m dominion Alice Bob
    python -m dominion Alice Bob Carol --kingdom Village Smithy ... --seed 7
"""

import argparse
import logging
import sys

from .cards import BASE_2E_KINGDOM_CARDS
from .config import GameConfig
from .console import ConsoleDecisions
from .game import Game


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Dominion Base 2E rules engine",
        prog="dominion",
    )
    parser.add_argument("players", nargs="+", help="Player names in turn order")
    parser.add_argument(
        "--kingdom",
        nargs=10,
        metavar="CARD",
        help="Ten kingdom cards (default: random). Choices: " + ", ".join(BASE_2E_KINGDOM_CARDS),
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--manual-treasures",
        action="store_true",
        help="Ask before each Treasure instead of playing them all",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    decisions = ConsoleDecisions()
    try:
        game = Game(
            args.players,
            kingdom=args.kingdom,
            decisions=decisions,
            config=GameConfig(seed=args.seed, auto_play_treasures=not args.manual_treasures),
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    decisions.attach(game)

    game.run()
    print(game.format_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
