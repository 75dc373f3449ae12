# src/toboggan/errors.py
# Typed failures for map construction, lookup and slope validation.
# Nothing here is recoverable inside the core; callers decide presentation.

from typing import Optional


class GridError(ValueError):
    """Malformed map input. No partial grid is produced."""


class InvalidMarkerError(GridError):
    def __init__(self, ch: str, row: Optional[int] = None, col: Optional[int] = None):
        self.ch = ch
        self.row = row
        self.col = col
        where = "" if row is None else f" at row {row}, column {col}"
        super().__init__(f"unknown marker {ch!r}{where}")


class RaggedGridError(GridError):
    pass


class InvalidSlopeError(ValueError):
    pass


class OutOfBoundsError(IndexError):
    pass
