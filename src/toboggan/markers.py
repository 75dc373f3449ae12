# src/toboggan/markers.py
# Terrain markers and the character classification used by the map reader.

from enum import Enum

from .errors import InvalidMarkerError


class Marker(Enum):
    OPEN = "."
    OBSTACLE = "#"


def classify_marker(ch: str) -> Marker:
    try:
        return Marker(ch)
    except ValueError:
        raise InvalidMarkerError(ch) from None


def is_obstacle(marker: Marker) -> bool:
    return marker is Marker.OBSTACLE
