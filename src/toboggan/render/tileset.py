# src/toboggan/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache

from ..markers import Marker
from .palette import UNVISITED, cell_color, dimmed

class Tileset:
    """
    Tiny cached surface factory for the viewer:
      - one flat-coloured square per (marker, visit state)
      - copies of the map past the first are drawn dimmed
      - returns pygame.Surface of exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, marker: Marker, state: int = UNVISITED, repeat: bool = False) -> pygame.Surface:
        color = cell_color(marker, state)
        if repeat and state == UNVISITED:
            color = dimmed(color)
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(color)
        if self.tile_size >= 6:
            pygame.draw.rect(img, (0, 0, 0, 40), img.get_rect(), 1)
        return img
