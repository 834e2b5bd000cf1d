# src/tileworld/mapgen/scatter.py
# One generation attempt: wall the outer ring, then scatter walls over the
# interior with an independent Bernoulli draw per cell.

from ..grid import Grid
from ..rng import RandomSource, bernoulli
from ..tiles import TileKind


def is_border(x: int, y: int, width: int, height: int) -> bool:
    return x == 0 or y == 0 or x == width - 1 or y == height - 1


def scatter_walls(width: int, height: int, wall_density: float, rng: RandomSource) -> Grid:
    """
    Produce one unvalidated candidate.
    Borders are always WALL; interior cells are WALL with probability
    ``wall_density`` and FLOOR otherwise. Draws happen in row-major order, so
    a seeded ``rng`` gives the same grid every time.
    """
    if not 0.0 <= wall_density <= 1.0:
        raise ValueError(f"wall_density must be within [0, 1], got {wall_density}")

    grid = Grid.filled(width, height, TileKind.FLOOR)
    for y in range(height):
        for x in range(width):
            if is_border(x, y, width, height):
                grid.set_tile(x, y, TileKind.WALL)
            elif bernoulli(rng, wall_density):
                grid.set_tile(x, y, TileKind.WALL)
            else:
                grid.set_tile(x, y, TileKind.FLOOR)
    return grid
