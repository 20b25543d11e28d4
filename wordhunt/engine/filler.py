"""Decorative noise for unassigned cells."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from ..core.constants import PLACEHOLDER, SYMBOLS
from .grid import WordHuntGrid


class SymbolFiller:
    """Replaces every placeholder cell with a random punctuation symbol."""

    def __init__(self, rng: Optional[random.Random] = None, symbols: Sequence[str] = SYMBOLS) -> None:
        if not symbols:
            raise ValueError("Symbol alphabet must not be empty")
        self.rng = rng or random.Random()
        self.symbols = tuple(symbols)

    def fill(self, grid: WordHuntGrid) -> int:
        filled = 0
        for r in range(grid.height):
            for c in range(grid.width):
                if grid.cells[r][c] == PLACEHOLDER:
                    grid.cells[r][c] = self.rng.choice(self.symbols)
                    filled += 1
        return filled
