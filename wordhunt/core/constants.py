"""Shared constants and enumerations for the word hunt engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


GRID_HEIGHT = 17
GRID_WIDTH = 12

# Marks a cell that has not been assigned content, or whose word was erased.
PLACEHOLDER = "."

SYMBOLS: Tuple[str, ...] = (
    "<", ">", "{", "}", "(", ")", ",", "=", "$", "'", ";", '"',
    "!", "[", "]", "%", "?", "+", "*", "^", "@", "\\", "/", "#",
)

BRACKET_PAIRS: Dict[str, str] = {"(": ")", "[": "]", "{": "}", "<": ">"}
CLOSING_BRACKETS = frozenset(BRACKET_PAIRS.values())

MAX_PLACEMENT_ATTEMPTS = 50
MAX_BRACKET_ATTEMPTS = 50
MAX_BRACKET_PAIRS = 3
DEFAULT_SELECTION_SIZE = 15
FALLBACK_WORD = "TEST"


class CellKind(str, Enum):
    """Content categories a grid cell can hold."""

    PLACEHOLDER = "PLACEHOLDER"
    LETTER = "LETTER"
    SYMBOL = "SYMBOL"
    OPEN_BRACKET = "OPEN_BRACKET"
    CLOSE_BRACKET = "CLOSE_BRACKET"


class ClickOutcome(str, Enum):
    """What a single click resolved to."""

    WIN = "WIN"
    BRACKET_MATCH = "BRACKET_MATCH"
    NOOP = "NOOP"


class GenerationOrder(str, Enum):
    """Order of the two decoration phases that follow word placement."""

    SEED_THEN_FILL = "SEED_THEN_FILL"
    FILL_THEN_SEED = "FILL_THEN_SEED"


def is_letter(char: str) -> bool:
    return len(char) == 1 and "A" <= char <= "Z"


def classify(char: str) -> CellKind:
    if char == PLACEHOLDER:
        return CellKind.PLACEHOLDER
    if is_letter(char):
        return CellKind.LETTER
    if char in BRACKET_PAIRS:
        return CellKind.OPEN_BRACKET
    if char in CLOSING_BRACKETS:
        return CellKind.CLOSE_BRACKET
    return CellKind.SYMBOL


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
