"""Terminal front-end: renders the board and feeds clicks to a session."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, TextIO

from .core.constants import ClickOutcome, GenerationOrder
from .data.word_bank import WORD_CATALOG, WordBank
from .engine.generator import GeneratorConfig
from .engine.session import GameSession, SessionConfig
from .utils.logger import configure_logging
from .utils.pretty import format_snapshot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play a word hunt puzzle in the terminal",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Replace the built-in word catalog",
    )
    parser.add_argument(
        "--legacy-order",
        action="store_true",
        help="Fill symbols before seeding brackets (no bracket pairs appear)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def parse_click(line: str) -> Optional[List[int]]:
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return [int(part) for part in parts]
    except ValueError:
        return None


def build_session(args: argparse.Namespace) -> GameSession:
    order = GenerationOrder.FILL_THEN_SEED if args.legacy_order else GenerationOrder.SEED_THEN_FILL
    config = SessionConfig(seed=args.seed, generator=GeneratorConfig(order=order))
    rng = random.Random(args.seed)
    bank = WordBank(args.words or WORD_CATALOG, max_length=config.generator.width, rng=rng)
    return GameSession(config, word_bank=bank, rng=rng)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    configure_logging(getattr(logging, args.log_level.upper(), logging.WARNING))

    session = build_session(args)
    session.on_solved(lambda word: print(f"Congratulations! You found the correct word: {word}", file=stdout))
    session.initialize()

    print(format_snapshot(session.snapshot()), file=stdout)
    print("Enter 'row col' to click a cell, 'q' to quit.", file=stdout)

    for line in stdin:
        line = line.strip()
        if not line:
            continue
        if line.lower() in {"q", "quit", "exit"}:
            break
        coords = parse_click(line)
        if coords is None:
            print(f"Could not read coordinates from {line!r}", file=stdout)
            continue
        row, col = coords
        grid = session.board
        if not grid.bounds.contains(row, col):
            print(f"({row},{col}) is outside the {grid.height}x{grid.width} board", file=stdout)
            continue
        result = session.click(row, col)
        if result.outcome == ClickOutcome.BRACKET_MATCH:
            print(f"Removed {result.word}", file=stdout)
        print(format_snapshot(session.snapshot()), file=stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
