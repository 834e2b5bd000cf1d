# src/tileworld/mapgen/placement.py
from typing import Iterator, Optional, Tuple

from ..grid import Grid

XY = Tuple[int, int]


def _square(cx: int, cy: int, r: int) -> Iterator[XY]:
    # Column by column (x outer), bottom to top within each column.
    for x in range(cx - r, cx + r + 1):
        for y in range(cy - r, cy + r + 1):
            yield (x, y)


def find_spawn(grid: Grid) -> Optional[XY]:
    """
    Nearest walkable cell to the grid centre, scanning squares of growing
    radius in x-major order. Returns None when the grid has no walkable cell.
    """
    cx, cy = grid.width // 2, grid.height // 2
    if grid.is_walkable(cx, cy):
        return (cx, cy)
    for r in range(1, max(grid.width, grid.height) + 1):
        for x, y in _square(cx, cy, r):
            if grid.is_walkable(x, y):
                return (x, y)
    return None
