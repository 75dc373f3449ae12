# src/toboggan/render/palette.py
# RGBA colours shared by the Pillow and pygame renderers.

from typing import Tuple

from ..markers import Marker

RGBA = Tuple[int, int, int, int]

# Cell states beyond the two markers
UNVISITED = 0
PASSED = 1   # ray landed on open ground
HIT = 2      # ray landed on an obstacle

RAY_ORIGIN: RGBA = (255, 220, 0, 255)


def cell_color(marker: Marker, state: int = UNVISITED) -> RGBA:
    if state == HIT:
        return (220, 40, 40, 255)
    if state == PASSED:
        return (120, 200, 255, 255)
    if marker is Marker.OBSTACLE:
        return (30, 110, 40, 255)
    return (235, 235, 235, 255)


def dimmed(color: RGBA) -> RGBA:
    # Repeated map copies are drawn a little darker than the original tile.
    r, g, b, a = color
    return (r * 3 // 4, g * 3 // 4, b * 3 // 4, a)
