from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import InvalidMarkerError, OutOfBoundsError, RaggedGridError
from .markers import Marker, classify_marker


@dataclass(frozen=True)
class Grid:
    cells: Tuple[Marker, ...]
    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))
        if self.width < 1 or self.height < 1:
            raise RaggedGridError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.width * self.height != len(self.cells):
            raise RaggedGridError(
                f"{len(self.cells)} cells do not fill a {self.width}x{self.height} grid"
            )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """
        Build a grid from text rows. Every row must be as wide as the first;
        the whole input is classified before a Grid exists.
        """
        cells: List[Marker] = []
        width = None
        height = 0
        for row, line in enumerate(lines):
            if width is None:
                width = len(line)
                if width == 0:
                    raise RaggedGridError("row 0 is empty")
            elif len(line) != width:
                raise RaggedGridError(f"row {row} has width {len(line)}, expected {width}")
            for col, ch in enumerate(line):
                try:
                    cells.append(classify_marker(ch))
                except InvalidMarkerError:
                    raise InvalidMarkerError(ch, row, col) from None
            height += 1
        if width is None:
            raise RaggedGridError("no rows in input")
        return cls(cells=tuple(cells), width=width, height=height)

    def idx(self, row: int, col: int) -> int:
        return row * self.width + (col % self.width)

    def marker_at(self, row: int, col: int) -> Marker:
        # Columns tile forever to the right; rows do not repeat.
        if not 0 <= row < self.height:
            raise OutOfBoundsError(f"row {row} outside 0..{self.height - 1}")
        if col < 0:
            raise OutOfBoundsError(f"column {col} is left of the origin")
        return self.cells[self.idx(row, col)]

    def rows(self) -> List[List[Marker]]:
        w = self.width
        return [list(self.cells[r * w:(r + 1) * w]) for r in range(self.height)]

    def to_text(self) -> str:
        return "\n".join("".join(m.value for m in row) for row in self.rows())
