# src/toboggan/render/png.py
# Draw a grid and the cells each slope lands on, using Pillow.
# The map is repeated to the right as many times as the widest path needs.

import os
from typing import Dict, Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from ..engine.traverse import SlopeLike, trace
from ..grid import Grid
from ..markers import is_obstacle
from .palette import HIT, PASSED, RAY_ORIGIN, UNVISITED, cell_color, dimmed


def visit_states(grid: Grid, slopes: Iterable[SlopeLike]) -> Tuple[Dict[Tuple[int, int], int], int]:
    """
    Map unwrapped (row, col) -> PASSED/HIT for every slope, plus the number
    of horizontal map copies needed to show all of them.
    """
    states: Dict[Tuple[int, int], int] = {}
    max_col = 0
    for s in slopes:
        for row, col in trace(grid, s, wrap=False):
            hit = is_obstacle(grid.marker_at(row, col))
            states[(row, col)] = HIT if hit else PASSED
            max_col = max(max_col, col)
    return states, max_col // grid.width + 1


def render_traversal(
    grid: Grid,
    slopes: Iterable[SlopeLike],
    out_png: Optional[str] = None,
    tile_size: int = 8,
    margin: int = 0,
) -> Image.Image:
    states, copies = visit_states(grid, slopes)
    w = grid.width * copies * tile_size + 2 * margin
    h = grid.height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for row in range(grid.height):
        for col in range(grid.width * copies):
            marker = grid.marker_at(row, col)
            color = cell_color(marker, states.get((row, col), UNVISITED))
            if col >= grid.width and (row, col) not in states:
                color = dimmed(color)
            x0 = margin + col * tile_size
            y0 = margin + row * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=color)
    draw.rectangle((margin, margin, margin + tile_size - 1, margin + tile_size - 1), outline=RAY_ORIGIN)
    if out_png:
        parent = os.path.dirname(out_png)
        if parent:
            os.makedirs(parent, exist_ok=True)
        canvas.save(out_png)
    return canvas
