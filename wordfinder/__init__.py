from wordfinder.errors import (
    EmptyGridError,
    InconsistentRowLengthError,
    NullInputError,
    OversizedGridError,
    WordFinderError,
)
from wordfinder.finder import MAX_GRID_SIZE, MAX_RESULTS, WordFinder

__all__ = [
    "WordFinder",
    "WordFinderError",
    "NullInputError",
    "EmptyGridError",
    "OversizedGridError",
    "InconsistentRowLengthError",
    "MAX_GRID_SIZE",
    "MAX_RESULTS",
]
