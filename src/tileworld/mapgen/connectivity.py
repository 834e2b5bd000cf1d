# src/tileworld/mapgen/connectivity.py
# Flood-fill reachability over a Grid's walkable cells (4-neighbour adjacency).
# Diagonal steps never count here, even though entities may move diagonally.

from __future__ import annotations

import logging
from collections import deque
from typing import Optional, Set, Tuple

from ..grid import Grid

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

NEIGHBOURS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


def first_walkable(grid: Grid) -> Optional[XY]:
    """Row-major scan for the first walkable cell, or None."""
    for x, y, _ in grid.cells():
        if grid.is_walkable(x, y):
            return (x, y)
    return None


def flood_region(grid: Grid, start: XY) -> Set[XY]:
    """Return every walkable cell reachable from ``start``.

    Cells are marked visited before they are queued, so each one is queued at
    most once. An unwalkable ``start`` yields an empty set.
    """
    sx, sy = start
    if not grid.is_walkable(sx, sy):
        return set()

    visited: Set[XY] = {start}
    queue = deque([start])
    while queue:
        cx, cy = queue.popleft()
        for dx, dy in NEIGHBOURS_4:
            nxt = (cx + dx, cy + dy)
            if nxt in visited:
                continue
            if not grid.is_walkable(*nxt):
                continue
            visited.add(nxt)
            queue.append(nxt)
    return visited


def is_fully_accessible(grid: Grid) -> bool:
    # 1) One scan: count walkables and remember the first as the seed.
    total = 0
    seed: Optional[XY] = None
    for x, y, _ in grid.cells():
        if grid.is_walkable(x, y):
            total += 1
            if seed is None:
                seed = (x, y)

    # A grid with no floor at all is never accessible.
    if seed is None:
        logger.debug("No walkable tiles in %r", grid)
        return False

    # 2) One traversal from the seed.
    reached = len(flood_region(grid, seed))
    logger.debug("Accessible walkable tiles: %d/%d", reached, total)
    return reached == total
