# src/tileworld/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import TileKind
from .image import ENTITY_COLOR, TILE_COLORS, UNKNOWN_COLOR


class Tileset:
    """
    Tiny cached surface factory:
      - one flat-colored square per TileKind
      - a round marker for the player
      - surfaces are exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, kind: TileKind) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(TILE_COLORS.get(kind, UNKNOWN_COLOR))
        return img

    @lru_cache(maxsize=1)
    def marker(self) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        r = self.tile_size // 2
        pygame.draw.circle(img, ENTITY_COLOR, (r, r), max(1, r - self.tile_size // 5))
        return img

    def screen_xy(self, x: int, y: int, grid_height: int) -> Tuple[int, int]:
        # Grid +y is up; screen +y is down.
        return (x * self.tile_size, (grid_height - 1 - y) * self.tile_size)
