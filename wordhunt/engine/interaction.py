"""Click resolution against a live board."""

from __future__ import annotations

import random
from typing import Optional

from ..core.constants import BRACKET_PAIRS, CellKind, ClickOutcome
from ..core.models import ClickResult
from ..utils.logger import get_logger
from .grid import WordHuntGrid


LOGGER = get_logger(__name__)


class InteractionEngine:
    """Resolves a click into a win, a bracket match or nothing.

    The engine only mutates the grid when a bracket match erases an interior
    word. A win is reported back to the caller, which owns regeneration.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def handle_click(self, grid: WordHuntGrid, correct_word: str, row: int, col: int) -> ClickResult:
        try:
            return self._resolve(grid, correct_word, row, col)
        except Exception:
            LOGGER.exception("Error while handling click at (%s,%s)", row, col)
            return ClickResult(outcome=ClickOutcome.NOOP, row=row, col=col)

    def _resolve(self, grid: WordHuntGrid, correct_word: str, row: int, col: int) -> ClickResult:
        kind = grid.kind(row, col)

        if kind == CellKind.LETTER:
            _, word = grid.word_at(row, col)
            if word == correct_word:
                LOGGER.info("Correct word %s found at (%s,%s)", word, row, col)
                return ClickResult(outcome=ClickOutcome.WIN, row=row, col=col, word=word)
            return ClickResult(outcome=ClickOutcome.NOOP, row=row, col=col, word=word)

        if kind == CellKind.OPEN_BRACKET:
            end = grid.find_closing(row, col, BRACKET_PAIRS[grid.cell(row, col)])
            if end is not None:
                return self._remove_interior_word(grid, row, col, end)

        return ClickResult(outcome=ClickOutcome.NOOP, row=row, col=col)

    def _remove_interior_word(self, grid: WordHuntGrid, row: int, start: int, end: int) -> ClickResult:
        runs = grid.letter_runs(row, start, end)
        if not runs:
            return ClickResult(outcome=ClickOutcome.NOOP, row=row, col=start)
        run = self.rng.choice(runs)
        _, removed = grid.word_at(row, run.start)
        cleared = grid.clear(row, run.start, run.length)
        LOGGER.debug("Brackets (%s,%s)-(%s,%s) erased %s", row, start, row, end, removed)
        return ClickResult(
            outcome=ClickOutcome.BRACKET_MATCH,
            row=row,
            col=start,
            word=removed,
            cleared=cleared,
        )
