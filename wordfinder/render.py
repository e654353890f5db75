from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from wordfinder.finder import WordFinder


def _as_rows(grid) -> list[str]:
    # Accepts a WordFinder, a 2-D character array, or row strings
    if grid is None:
        return []
    if isinstance(getattr(grid, "lines", None), tuple):
        return list(grid.lines)
    return ["".join(row) for row in grid]


def _border(left: str, joint: str, right: str, cols: int) -> str:
    return left + joint.join("─" * cols) + right


def render_grid(grid: WordFinder | Sequence[str] | np.ndarray | None) -> str:
    """Draw the grid inside a box-drawing frame, one cell per character.

    ::

        ┌─┬─┐
        │a│b│
        ├─┼─┤
        │c│d│
        └─┴─┘
    """
    rows = _as_rows(grid)
    if not rows:
        return ""

    cols = len(rows[0])
    lines = [_border("┌", "┬", "┐", cols)]
    for i, row in enumerate(rows):
        lines.append("│" + "│".join(row) + "│")
        if i < len(rows) - 1:
            lines.append(_border("├", "┼", "┤", cols))
    lines.append(_border("└", "┴", "┘", cols))
    return "\n".join(lines)


def format_results(results: Iterable[tuple[str, int]]) -> str:
    lines = [f"- {word} ({count})" for word, count in results]
    if not lines:
        return "No words found in the matrix."
    return "\n".join(lines)
