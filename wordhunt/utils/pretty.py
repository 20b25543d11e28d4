"""Pretty-print helpers for word hunt boards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..engine.grid import WordHuntGrid


def format_snapshot(snapshot: Sequence[Sequence[str]]) -> str:
    width = len(snapshot[0]) if snapshot else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(snapshot):
        row_render = " ".join(f"{char:>2}" for char in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_grid(grid: WordHuntGrid) -> str:
    return format_snapshot(grid.snapshot())
