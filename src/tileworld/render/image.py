# src/tileworld/render/image.py
# Snapshot a Grid (and optionally the player) to a Pillow image.
# Reads only the public query surface: width, height, get_tile.

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from ..grid import Grid
from ..tiles import TileKind

RGBA = Tuple[int, int, int, int]

TILE_COLORS: Dict[TileKind, RGBA] = {
    TileKind.FLOOR: (220, 220, 220, 255),
    TileKind.WALL: (80, 80, 80, 255),
    TileKind.WATER: (60, 120, 220, 255),
}
UNKNOWN_COLOR: RGBA = (255, 0, 255, 255)
ENTITY_COLOR: RGBA = (230, 60, 40, 255)


def render_grid(
    grid: Grid,
    tile_size: int = 16,
    entity_pos: Optional[Tuple[int, int]] = None,
    flip_y: bool = True,
) -> Image.Image:
    """
    Paint one flat square per tile. With ``flip_y`` (the default) row 0 is
    drawn at the bottom so "up" (+y) points up on screen.
    """
    canvas = Image.new("RGBA", (grid.width * tile_size, grid.height * tile_size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)

    def box(x: int, y: int):
        sy = (grid.height - 1 - y) if flip_y else y
        x0, y0 = x * tile_size, sy * tile_size
        return (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1)

    for y in range(grid.height):
        for x in range(grid.width):
            color = TILE_COLORS.get(grid.get_tile(x, y), UNKNOWN_COLOR)
            draw.rectangle(box(x, y), fill=color)

    if entity_pos is not None:
        ex, ey = entity_pos
        if grid.in_bounds(ex, ey):
            x0, y0, x1, y1 = box(ex, ey)
            pad = max(1, tile_size // 5)
            draw.ellipse((x0 + pad, y0 + pad, x1 - pad, y1 - pad), fill=ENTITY_COLOR)
    return canvas


def save_png(grid: Grid, out_png: str, tile_size: int = 16, entity_pos: Optional[Tuple[int, int]] = None) -> None:
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_grid(grid, tile_size=tile_size, entity_pos=entity_pos).save(out_png)
