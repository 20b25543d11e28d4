"""Seeding of matching bracket pairs two columns apart."""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..core.constants import BRACKET_PAIRS, MAX_BRACKET_ATTEMPTS, MAX_BRACKET_PAIRS, PLACEHOLDER
from ..utils.logger import get_logger
from .grid import WordHuntGrid


LOGGER = get_logger(__name__)


class BracketSeeder:
    """Places up to ``max_pairs`` bracket pairs on still-unassigned cells.

    A pair occupies columns ``c`` and ``c + 2`` of one row; the middle cell is
    left to whatever the other phases put there. Only placeholder cells are
    eligible, so running this after :class:`SymbolFiller` places nothing.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_pairs: int = MAX_BRACKET_PAIRS,
        max_attempts: int = MAX_BRACKET_ATTEMPTS,
    ) -> None:
        self.rng = rng or random.Random()
        self.max_pairs = max_pairs
        self.max_attempts = max_attempts
        self._pairs: List[Tuple[str, str]] = list(BRACKET_PAIRS.items())

    def seed(self, grid: WordHuntGrid) -> int:
        if grid.width < 3:
            return 0
        placed = 0
        attempts = 0
        while placed < self.max_pairs and attempts < self.max_attempts:
            opening, closing = self.rng.choice(self._pairs)
            row = self.rng.randrange(grid.height)
            col = self.rng.randint(0, grid.width - 3)
            if grid.cells[row][col] == PLACEHOLDER and grid.cells[row][col + 2] == PLACEHOLDER:
                grid.cells[row][col] = opening
                grid.cells[row][col + 2] = closing
                placed += 1
                LOGGER.debug("Bracket pair %s%s at row %s cols %s-%s", opening, closing, row, col, col + 2)
            attempts += 1
        return placed
