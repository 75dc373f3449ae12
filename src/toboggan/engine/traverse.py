# src/toboggan/engine/traverse.py
# Ray walk from the top-left cell to the bottom edge of a Grid.
# Each call owns its counters and output list, so several slopes can be walked
# over the same Grid at once without coordination.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from ..errors import InvalidSlopeError
from ..grid import Grid
from ..markers import Marker

RC = Tuple[int, int]
TraversalResult = List[Marker]


@dataclass(frozen=True)
class Slope:
    down: int
    right: int

    def validate(self) -> "Slope":
        if self.down < 1:
            raise InvalidSlopeError(f"down step must be >= 1, got {self.down}")
        if self.right < 0:
            raise InvalidSlopeError(f"right step must be >= 0, got {self.right}")
        return self

    def as_tuple(self) -> RC:
        return (self.down, self.right)

    def __str__(self) -> str:
        return f"{self.down},{self.right}"


SlopeLike = Union[Slope, Tuple[int, int]]


def as_slope(slope: SlopeLike) -> Slope:
    if isinstance(slope, Slope):
        return slope
    down, right = slope
    return Slope(down=down, right=right)


def trace(grid: Grid, slope: SlopeLike, wrap: bool = True) -> List[RC]:
    """
    Positions the ray lands on, start cell excluded, in visiting order.

    The walk stops as soon as the next row would be at or past grid.height,
    so the result has ceil(height / down) - 1 entries. With wrap=False the
    column is left unbounded (useful for drawing the tiled map).
    """
    s = as_slope(slope).validate()
    out: List[RC] = []
    row, col = 0, 0
    while True:
        row += s.down
        col += s.right
        if row >= grid.height:
            break
        out.append((row, col % grid.width if wrap else col))
    return out


def traverse(grid: Grid, slope: SlopeLike) -> TraversalResult:
    return [grid.marker_at(row, col) for row, col in trace(grid, slope)]
