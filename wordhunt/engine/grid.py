"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from ..core.constants import GRID_HEIGHT, GRID_WIDTH, PLACEHOLDER, Bounds, CellKind, classify, is_letter
from ..core.exceptions import CoordinateError, PlacementError
from ..core.models import InteriorRun, PlacedWord


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    height: int = GRID_HEIGHT
    width: int = GRID_WIDTH

    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)


class WordHuntGrid:
    """Fixed-size board of single-character cells, row-major and 0-indexed."""

    def __init__(self, config: GridConfig | None = None) -> None:
        self.config = config or GridConfig()
        self.bounds = self.config.bounds()
        if self.bounds.rows <= 0 or self.bounds.cols <= 0:
            raise ValueError(f"Grid dimensions must be positive: {self.bounds}")
        self.cells: List[List[str]] = [
            [PLACEHOLDER for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]

    @property
    def height(self) -> int:
        return self.bounds.rows

    @property
    def width(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _check(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise CoordinateError(f"Cell outside grid: {(row, col)}")

    def cell(self, row: int, col: int) -> str:
        self._check(row, col)
        return self.cells[row][col]

    def kind(self, row: int, col: int) -> CellKind:
        return classify(self.cell(row, col))

    def placeholder_cells(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r in range(self.bounds.rows)
            for c in range(self.bounds.cols)
            if self.cells[r][c] == PLACEHOLDER
        ]

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def can_place_word(self, row: int, col: int, word: str) -> bool:
        if not word or col < 0 or col + len(word) > self.bounds.cols:
            return False
        if not 0 <= row < self.bounds.rows:
            return False
        return all(self.cells[row][col + i] == PLACEHOLDER for i in range(len(word)))

    def place_word(self, row: int, col: int, word: str) -> PlacedWord:
        if col + len(word) > self.bounds.cols or not self.bounds.contains(row, col):
            raise PlacementError(f"Word {word!r} extends outside grid at {(row, col)}")
        if not self.can_place_word(row, col, word):
            raise PlacementError(f"Word {word!r} overlaps existing content at {(row, col)}")
        for index, letter in enumerate(word):
            self.cells[row][col + index] = letter
        return PlacedWord(text=word, row=row, col=col)

    def clear(self, row: int, col: int, length: int) -> List[Tuple[int, int]]:
        """Reset ``length`` cells starting at ``(row, col)`` to the placeholder."""

        self._check(row, col)
        self._check(row, col + length - 1)
        for offset in range(length):
            self.cells[row][col + offset] = PLACEHOLDER
        return [(row, col + offset) for offset in range(length)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def word_at(self, row: int, col: int) -> Tuple[int, str]:
        """Return ``(start_col, text)`` of the letter run covering a cell."""

        self._check(row, col)
        line = self.cells[row]
        if not is_letter(line[col]):
            return col, ""
        start = col
        while start > 0 and is_letter(line[start - 1]):
            start -= 1
        end = col
        while end < self.bounds.cols and is_letter(line[end]):
            end += 1
        return start, "".join(line[start:end])

    def letter_runs(self, row: int, start: int, end: int) -> List[InteriorRun]:
        """Maximal letter runs strictly between columns ``start`` and ``end``."""

        self._check(row, start)
        self._check(row, end)
        runs: List[InteriorRun] = []
        current: InteriorRun | None = None
        for col in range(start + 1, end):
            if is_letter(self.cells[row][col]):
                if current is None:
                    current = InteriorRun(start=col, length=0)
                current.length += 1
            elif current is not None:
                runs.append(current)
                current = None
        if current is not None:
            runs.append(current)
        return runs

    def find_closing(self, row: int, col: int, closing: str) -> int | None:
        for candidate in range(col + 1, self.bounds.cols):
            if self.cells[row][candidate] == closing:
                return candidate
        return None

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def snapshot(self) -> Tuple[Tuple[str, ...], ...]:
        """Read-only copy of the board for rendering."""

        return tuple(tuple(row) for row in self.cells)

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells]

    @classmethod
    def from_rows(cls, rows: List[str]) -> "WordHuntGrid":
        """Build a grid from equal-length text rows."""

        if not rows:
            raise ValueError("At least one row is required")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same width")
        grid = cls(GridConfig(height=len(rows), width=width))
        for r, row in enumerate(rows):
            grid.cells[r] = list(row)
        return grid
