"""Word hunt board generation.

Two stages, each bounded:
  1. Placement: every word gets up to ``max_placement_attempts`` random
     horizontal positions; a word that never fits is skipped.
  2. Decoration: bracket pairs are seeded and remaining cells are filled with
     noise symbols, in the order chosen by ``GeneratorConfig.order``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_BRACKET_ATTEMPTS,
    MAX_BRACKET_PAIRS,
    MAX_PLACEMENT_ATTEMPTS,
    GenerationOrder,
)
from ..core.models import GenerationResult, PlacedWord
from ..utils.logger import get_logger
from .brackets import BracketSeeder
from .filler import SymbolFiller
from .grid import GridConfig, WordHuntGrid


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    height: int = GRID_HEIGHT
    width: int = GRID_WIDTH
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    max_bracket_attempts: int = MAX_BRACKET_ATTEMPTS
    max_bracket_pairs: int = MAX_BRACKET_PAIRS
    order: GenerationOrder = GenerationOrder.SEED_THEN_FILL
    seed: Optional[int] = None

    def to_grid_config(self) -> GridConfig:
        return GridConfig(height=self.height, width=self.width)


class GridGenerator:
    """Builds a fully populated board from an ordered word list."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
        filler: Optional[SymbolFiller] = None,
        seeder: Optional[BracketSeeder] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.filler = filler or SymbolFiller(self.rng)
        self.seeder = seeder or BracketSeeder(
            self.rng,
            max_pairs=self.config.max_bracket_pairs,
            max_attempts=self.config.max_bracket_attempts,
        )

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str]) -> WordHuntGrid:
        return self.build(words).grid

    def build(self, words: Sequence[str]) -> GenerationResult:
        grid = WordHuntGrid(self.config.to_grid_config())
        result = GenerationResult(grid=grid)

        for word in words:
            placed = self._place_word(grid, word)
            if placed is None:
                LOGGER.debug("Failed to place word: %s", word)
                result.skipped_words.append(word)
            else:
                result.placed_words.append(placed)

        if self.config.order == GenerationOrder.FILL_THEN_SEED:
            self.filler.fill(grid)
            result.bracket_pairs = self.seeder.seed(grid)
        else:
            result.bracket_pairs = self.seeder.seed(grid)
            self.filler.fill(grid)

        LOGGER.debug(
            "Generated %sx%s grid: %s words placed, %s skipped, %s bracket pairs",
            grid.height,
            grid.width,
            len(result.placed_words),
            len(result.skipped_words),
            result.bracket_pairs,
        )
        return result

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place_word(self, grid: WordHuntGrid, word: str) -> Optional[PlacedWord]:
        if not word or len(word) > grid.width:
            return None
        attempts = 0
        while attempts < self.config.max_placement_attempts:
            row = self.rng.randrange(grid.height)
            col = self.rng.randint(0, grid.width - len(word))
            if grid.can_place_word(row, col, word):
                return grid.place_word(row, col, word)
            attempts += 1
        return None
