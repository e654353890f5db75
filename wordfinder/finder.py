from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

import numpy as np

from wordfinder.errors import (
    EmptyGridError,
    InconsistentRowLengthError,
    NullInputError,
    OversizedGridError,
)

MAX_GRID_SIZE = 64
MAX_RESULTS = 10


class WordFinder:
    """Horizontal and vertical word search over an immutable character grid.

    The grid is validated and frozen at construction. Every search builds its
    own candidate map and tally, so one instance can be searched repeatedly
    (or from several threads) without results leaking between calls.
    """

    def __init__(self, rows: Iterable[str]):
        if rows is None:
            raise NullInputError("matrix")

        rows = list(rows)
        if not rows:
            raise EmptyGridError()

        n_rows = len(rows)
        n_cols = len(rows[0])
        if n_rows > MAX_GRID_SIZE or n_cols > MAX_GRID_SIZE:
            raise OversizedGridError(n_rows, n_cols, MAX_GRID_SIZE)

        for i, row in enumerate(rows[1:], start=2):
            if len(row) != n_cols:
                raise InconsistentRowLengthError(i, n_cols, len(row))

        grid = np.array([list(row) for row in rows], dtype="U1").reshape(n_rows, n_cols)
        grid.setflags(write=False)
        self._grid = grid

        # Lines come from the input strings; numpy drops trailing NULs in U1 cells
        self._row_lines: tuple[str, ...] = tuple(rows)
        self._col_lines: tuple[str, ...] = tuple("".join(row[c] for row in rows) for c in range(n_cols))

    @property
    def grid(self) -> np.ndarray:
        return self._grid

    @property
    def lines(self) -> tuple[str, ...]:
        """Row strings exactly as given at construction."""
        return self._row_lines

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def __repr__(self) -> str:
        return f"WordFinder({self.rows}x{self.cols})"

    def find(self, words: Iterable[str], max_results: int = MAX_RESULTS) -> list[str]:
        """Return the most repeated stream words found in the grid, best first."""
        return [word for word, _ in self.find_with_counts(words, max_results)]

    def find_with_counts(
        self, words: Iterable[str], max_results: int = MAX_RESULTS
    ) -> list[tuple[str, int]]:
        """Return up to ``max_results`` (word, count) pairs found in the grid.

        A word is counted once per matching window, horizontally (left to right)
        and vertically (top to bottom). Matching is case-insensitive; the label
        of each result is the casing first seen in ``words``.
        Results are ordered by count descending, then by word ascending.
        """
        if words is None:
            raise NullInputError("wordstream")

        candidates, lengths = _build_candidates(words)
        if not candidates:
            return []

        tally: dict[str, int] = defaultdict(int)
        _scan(self._row_lines, candidates, lengths, tally)
        _scan(self._col_lines, candidates, lengths, tally)

        return rank(tally, max_results)


def _build_candidates(words: Iterable[str]) -> tuple[dict[str, str], tuple[int, ...]]:
    """Map lowercase key -> first-seen casing, plus the distinct non-zero lengths."""
    candidates: dict[str, str] = {}
    lengths: set[int] = set()
    for word in words:
        key = word.lower()
        if key not in candidates:
            candidates[key] = word
        if word:
            lengths.add(len(word))
    return candidates, tuple(sorted(lengths))


def _scan(lines: Iterable[str], candidates: dict[str, str], lengths: tuple[int, ...], tally: dict[str, int]):
    # Only the lengths present in the stream are tried at each start position
    for line in lines:
        width = len(line)
        for start in range(width):
            for length in lengths:
                end = start + length
                if end > width:
                    break
                original = candidates.get(line[start:end].lower())
                if original is not None:
                    tally[original] += 1


def rank(tally: dict[str, int], max_results: int = MAX_RESULTS) -> list[tuple[str, int]]:
    """Sort: highest count first, then alphabetical. ``max_results <= 0`` keeps everything."""
    ordered = sorted(tally.items(), key=lambda item: (-item[1], item[0]))
    return ordered[:max_results] if max_results > 0 else ordered
