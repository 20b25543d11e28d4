"""Data models supporting the word hunt engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from .constants import ClickOutcome

if TYPE_CHECKING:
    from ..engine.grid import WordHuntGrid


@dataclass
class PlacedWord:
    """A word written horizontally into the grid."""

    text: str
    row: int
    col: int

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        return [(self.row, self.col + i) for i in range(self.length)]


@dataclass
class InteriorRun:
    """A run of letters found between a matched bracket pair."""

    start: int
    length: int


@dataclass
class ClickResult:
    """Describes the effect of one click on the board."""

    outcome: ClickOutcome
    row: int
    col: int
    word: Optional[str] = None
    cleared: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def is_win(self) -> bool:
        return self.outcome == ClickOutcome.WIN


@dataclass
class GenerationResult:
    grid: WordHuntGrid
    placed_words: List[PlacedWord] = field(default_factory=list)
    skipped_words: List[str] = field(default_factory=list)
    bracket_pairs: int = 0

    @property
    def placed_texts(self) -> List[str]:
        return [placed.text for placed in self.placed_words]
