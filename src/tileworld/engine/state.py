# src/tileworld/engine/state.py
# Game session: owns the accepted grid and the player, and routes movement
# intents through the controller.

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_CONFIG, GenerationConfig
from ..grid import Grid
from ..mapgen.generator import generate_from_config
from ..mapgen.placement import find_spawn
from ..rng import RandomSource, make_rng
from .entity import Player
from .movement import MovementController, MoveResult

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, config: GenerationConfig = DEFAULT_CONFIG, rng: Optional[RandomSource] = None) -> None:
        self.config = config
        # One source for the whole session so a seeded config replays every regeneration.
        self.rng = rng if rng is not None else make_rng(config.seed)
        self.controller = MovementController()
        self.grid: Grid
        self.player: Player
        self.degraded = False
        self.attempts = 0
        self.regenerate()

    def regenerate(self) -> None:
        result = generate_from_config(self.config, rng=self.rng)
        self.grid = result.grid
        self.degraded = result.degraded
        self.attempts = result.attempts
        if result.degraded:
            logger.warning("Session running on a degraded grid (may be disconnected)")

        spawn = find_spawn(self.grid)
        if spawn is None:
            # No floor at all: park the player at the centre; every move will be rejected.
            spawn = (self.grid.width // 2, self.grid.height // 2)
            logger.warning("No walkable tile for spawn; placing player at grid centre %s", spawn)
        self.player = Player(*spawn)
        logger.info("New %dx%d world, player at %s", self.grid.width, self.grid.height, spawn)

    def move(self, dx: int, dy: int) -> MoveResult:
        return self.controller.try_move(self.player, self.grid, dx, dy)
