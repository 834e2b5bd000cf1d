# src/tileworld/engine/entity.py
# Positioned actors plus the pluggable "may I stand there" rules they carry.
# Entities never touch the grid; they only ask it questions.

from __future__ import annotations

from typing import Protocol, Tuple

from ..grid import Grid
from ..tiles import TileKind

XY = Tuple[int, int]


class MovementRule(Protocol):
    def can_enter(self, grid: Grid, x: int, y: int) -> bool: ...


class Walker:
    """Ground movement: only tiles the grid classifies as walkable."""

    def can_enter(self, grid: Grid, x: int, y: int) -> bool:
        return grid.is_walkable(x, y)


class Swimmer:
    """Walkable tiles plus open water."""

    def can_enter(self, grid: Grid, x: int, y: int) -> bool:
        if grid.is_walkable(x, y):
            return True
        return grid.in_bounds(x, y) and grid.get_tile(x, y) is TileKind.WATER


class Flyer:
    """Anything in bounds that isn't solid wall."""

    def can_enter(self, grid: Grid, x: int, y: int) -> bool:
        return grid.in_bounds(x, y) and grid.get_tile(x, y) is not TileKind.WALL


WALKER = Walker()


class Entity:
    def __init__(self, x: int, y: int, rule: MovementRule = WALKER) -> None:
        # Stored verbatim; the caller picks a sensible start cell.
        self.x = x
        self.y = y
        self.rule = rule

    @property
    def position(self) -> XY:
        return (self.x, self.y)

    def set_position(self, x: int, y: int) -> None:
        """Unconditional overwrite. Use MovementController for checked moves."""
        self.x = x
        self.y = y

    def can_enter_tile(self, grid: Grid, x: int, y: int) -> bool:
        return self.rule.can_enter(grid, x, y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y}, rule={type(self.rule).__name__})"


class Player(Entity):
    pass
