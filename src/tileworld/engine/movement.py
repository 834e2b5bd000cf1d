# src/tileworld/engine/movement.py
# One discrete step per call: bounds first, then the entity's own movement
# rule, then commit. Rejections are results, not exceptions.

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

from ..grid import Grid
from .entity import Entity

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

# "up" is +y, matching the grid's row order as seen by a y-up renderer.
DIRECTIONS: Dict[str, XY] = {
    "up": (0, 1),
    "down": (0, -1),
    "right": (1, 0),
    "left": (-1, 0),
    "up_left": (-1, 1),
    "up_right": (1, 1),
    "down_right": (1, -1),
    "down_left": (-1, -1),
}

CARDINALS: Tuple[XY, ...] = tuple(DIRECTIONS[k] for k in ("up", "down", "right", "left"))
DIAGONALS: Tuple[XY, ...] = tuple(DIRECTIONS[k] for k in ("up_left", "up_right", "down_right", "down_left"))


class MoveResult(Enum):
    MOVED = "moved"
    OUT_OF_BOUNDS = "rejected: out of bounds"
    BLOCKED = "rejected: blocked"

    @property
    def moved(self) -> bool:
        return self is MoveResult.MOVED


def try_move(entity: Entity, grid: Grid, dx: int, dy: int) -> MoveResult:
    """Attempt to step ``entity`` by ``(dx, dy)`` on ``grid``.

    A zero vector is a no-op that always reports MOVED, wherever the entity
    stands.
    """
    if dx not in (-1, 0, 1) or dy not in (-1, 0, 1):
        raise ValueError(f"direction components must be in -1..1, got ({dx}, {dy})")

    if dx == 0 and dy == 0:
        return MoveResult.MOVED

    tx, ty = entity.x + dx, entity.y + dy

    if not grid.in_bounds(tx, ty):
        logger.debug("Blocked %r: target (%d,%d) out of bounds", entity, tx, ty)
        return MoveResult.OUT_OF_BOUNDS

    if not entity.can_enter_tile(grid, tx, ty):
        logger.debug("Blocked %r: target (%d,%d) not enterable", entity, tx, ty)
        return MoveResult.BLOCKED

    logger.debug("%r moves to (%d,%d)", entity, tx, ty)
    entity.set_position(tx, ty)
    return MoveResult.MOVED


class MovementController:
    """Stateless facade over ``try_move`` for callers that want an object seam."""

    def try_move(self, entity: Entity, grid: Grid, dx: int, dy: int) -> MoveResult:
        return try_move(entity, grid, dx, dy)


def intent_from_keys(
    up: bool = False,
    down: bool = False,
    left: bool = False,
    right: bool = False,
    *,
    diagonal: bool = False,
) -> Optional[XY]:
    """Map held direction keys to a single step intent.

    Without the diagonal modifier the first held key in up, down, right, left
    order wins. With it, each key picks one diagonal: up→up-left,
    right→up-right, down→down-right, left→down-left.
    """
    if not diagonal:
        order = ((up, "up"), (down, "down"), (right, "right"), (left, "left"))
    else:
        order = ((up, "up_left"), (right, "up_right"), (down, "down_right"), (left, "down_left"))
    for held, name in order:
        if held:
            return DIRECTIONS[name]
    return None
