class WordFinderError(ValueError):
    """Base class for every grid or word stream validation failure."""


class NullInputError(WordFinderError):
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} cannot be None")


class EmptyGridError(WordFinderError):
    def __init__(self):
        super().__init__("Matrix cannot be empty")


class OversizedGridError(WordFinderError):
    def __init__(self, rows: int, cols: int, limit: int):
        self.rows = rows
        self.cols = cols
        self.limit = limit
        super().__init__(f"Matrix size cannot exceed {limit}x{limit} (got {rows}x{cols})")


class InconsistentRowLengthError(WordFinderError):
    """A grid row whose length differs from the first row's."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"All matrix rows must have the same length. "
            f"Row 1 has {expected} characters, row {row} has {actual} characters"
        )
