"""Game session state and round orchestration."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Set, Tuple

from ..core.constants import DEFAULT_SELECTION_SIZE, FALLBACK_WORD, ClickOutcome
from ..core.exceptions import GenerationError
from ..core.models import ClickResult, GenerationResult, PlacedWord
from ..data.word_bank import WordBank
from ..utils.logger import get_logger
from .filler import SymbolFiller
from .generator import GeneratorConfig, GridGenerator
from .grid import WordHuntGrid
from .interaction import InteractionEngine


LOGGER = get_logger(__name__)

SolvedListener = Callable[[str], None]


@dataclass
class SessionConfig:
    selection_size: int = DEFAULT_SELECTION_SIZE
    retry_limit: int = 3
    seed: Optional[int] = None
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)


class GameSession:
    """Owns the current puzzle and replaces it wholesale on every win."""

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        word_bank: Optional[WordBank] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or SessionConfig()
        self.rng = rng or random.Random(self.config.seed)
        if word_bank is None:
            word_bank = WordBank(max_length=self.config.generator.width, rng=self.rng)
        self.word_bank = word_bank
        self.generator = GridGenerator(self.config.generator, rng=self.rng)
        self.engine = InteractionEngine(self.rng)
        self.grid: Optional[WordHuntGrid] = None
        self.correct_word: str = ""
        self.words: List[str] = []
        self.placed_words: List[PlacedWord] = []
        # Reserved for UI highlighting; no rule reads it.
        self.selected_positions: Set[Tuple[int, int]] = set()
        self.is_fallback = False
        self.round = 0
        self._listeners: List[SolvedListener] = []

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> WordHuntGrid:
        """Start a new round, falling back to a minimal board on any failure."""

        self.round += 1
        self.selected_positions = set()
        try:
            grid = self._generate_with_retries()
            self.is_fallback = False
        except Exception:
            LOGGER.exception("Puzzle generation failed; using fallback grid")
            grid = self._build_fallback()
            self.is_fallback = True
        return grid

    @property
    def board(self) -> WordHuntGrid:
        """The current grid, starting a first round if none exists yet."""

        if self.grid is None:
            return self.initialize()
        return self.grid

    def _generate_with_retries(self) -> WordHuntGrid:
        for attempt in range(1, self.config.retry_limit + 1):
            try:
                return self._build_round()
            except GenerationError as exc:
                LOGGER.warning("Generation attempt %s/%s failed: %s", attempt, self.config.retry_limit, exc)
        raise GenerationError("Unable to generate a playable puzzle after retries")

    def _build_round(self) -> WordHuntGrid:
        LOGGER.debug("Available words: %s", ", ".join(self.word_bank.available_words()))
        selected = self.word_bank.select_random_subset(self.config.selection_size)
        if not selected:
            raise GenerationError("No words available to build a puzzle")
        LOGGER.debug("Selected words: %s", ", ".join(selected))

        result = self.generator.build(selected)
        candidates = self._clickable_words(result)
        if not candidates:
            raise GenerationError("No placed word can be clicked on its own")
        correct = self.rng.choice(candidates).text

        self.words = selected
        self.correct_word = correct
        self.placed_words = result.placed_words
        self.grid = result.grid
        LOGGER.info(
            "Round %s ready: %s/%s words placed, correct word %s",
            self.round,
            len(result.placed_words),
            len(selected),
            correct,
        )
        return result.grid

    @staticmethod
    def _clickable_words(result: GenerationResult) -> List[PlacedWord]:
        # A word fused with a neighbour on its row reads back as a longer run.
        return [
            placed
            for placed in result.placed_words
            if result.grid.word_at(placed.row, placed.col) == (placed.col, placed.text)
        ]

    def _build_fallback(self) -> WordHuntGrid:
        grid = WordHuntGrid(self.config.generator.to_grid_config())
        word = self.word_bank.first_word() or FALLBACK_WORD
        word = word[: grid.width]
        placed = grid.place_word(0, 0, word)
        SymbolFiller(self.rng).fill(grid)
        self.words = [word]
        self.correct_word = word
        self.placed_words = [placed]
        self.grid = grid
        return grid

    def load(self, grid: WordHuntGrid, correct_word: str, words: Optional[Sequence[str]] = None) -> None:
        """Install a prepared board as the current round."""

        self.round += 1
        self.grid = grid
        self.correct_word = correct_word
        self.words = list(words) if words is not None else [correct_word]
        self.placed_words = []
        self.selected_positions = set()
        self.is_fallback = False

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------
    def on_solved(self, listener: SolvedListener) -> None:
        self._listeners.append(listener)

    def click(self, row: int, col: int) -> ClickResult:
        result = self.engine.handle_click(self.board, self.correct_word, row, col)
        if result.outcome == ClickOutcome.WIN:
            self.initialize()
            self._notify_solved(result.word or "")
        return result

    def _notify_solved(self, word: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(word)
            except Exception:
                LOGGER.exception("Solved listener failed")

    def snapshot(self) -> Tuple[Tuple[str, ...], ...]:
        return self.board.snapshot()
