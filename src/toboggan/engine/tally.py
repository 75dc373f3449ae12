# src/toboggan/engine/tally.py
# Obstacle counts per slope and their combined product.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from ..grid import Grid
from ..markers import is_obstacle
from .traverse import Slope, SlopeLike, TraversalResult, as_slope, traverse


@dataclass(frozen=True)
class SlopeReport:
    slope: Slope
    visited: TraversalResult
    obstacles: int

    @property
    def steps(self) -> int:
        return len(self.visited)


def count_obstacles(result: TraversalResult) -> int:
    return sum(1 for m in result if is_obstacle(m))


def survey(grid: Grid, slopes: Iterable[SlopeLike]) -> List[SlopeReport]:
    """
    Walk the grid once per slope, in the order given.
    Every slope is validated before any walk starts.
    """
    checked = [as_slope(s).validate() for s in slopes]
    reports = []
    for s in checked:
        visited = traverse(grid, s)
        reports.append(SlopeReport(slope=s, visited=visited, obstacles=count_obstacles(visited)))
    return reports


def product_of_counts(counts: Iterable[int]) -> int:
    # Python ints are unbounded; an empty set multiplies to 1.
    return math.prod(counts)


def obstacle_product(grid: Grid, slopes: Iterable[SlopeLike]) -> int:
    return product_of_counts(r.obstacles for r in survey(grid, slopes))
