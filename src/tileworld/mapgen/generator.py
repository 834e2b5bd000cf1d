# src/tileworld/mapgen/generator.py
# Generate-and-validate loop: scatter a candidate, accept it if every floor
# tile is reachable, otherwise retry until the attempt budget runs out.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import GenerationConfig
from ..errors import GenerationDegraded
from ..grid import Grid
from ..rng import RandomSource, make_rng
from .connectivity import is_fully_accessible
from .scatter import scatter_walls

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 20


@dataclass(frozen=True)
class GenerationResult:
    grid: Grid
    attempts: int
    # True when the budget ran out and ``grid`` is an unvalidated fallback.
    degraded: bool = False


def generate_grid(
    width: int,
    height: int,
    wall_density: float = 0.15,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[RandomSource] = None,
    *,
    strict: bool = False,
) -> GenerationResult:
    """Return the first fully accessible candidate within ``max_attempts``.

    When every attempt is rejected a fresh, unvalidated candidate is returned
    with ``degraded=True`` so callers always get a playable grid. Pass
    ``strict=True`` to raise ``GenerationDegraded`` instead.
    """
    if max_attempts <= 0:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    if rng is None:
        rng = make_rng()

    for attempt in range(1, max_attempts + 1):
        candidate = scatter_walls(width, height, wall_density, rng)
        if is_fully_accessible(candidate):
            logger.info("Generated valid %dx%d grid in %d attempt(s)", width, height, attempt)
            return GenerationResult(grid=candidate, attempts=attempt)
        logger.debug("Attempt %d/%d rejected: grid not fully accessible", attempt, max_attempts)

    if strict:
        raise GenerationDegraded(max_attempts)

    logger.warning(
        "Failed to generate a fully accessible %dx%d grid after %d attempts; returning an unvalidated candidate",
        width, height, max_attempts,
    )
    return GenerationResult(
        grid=scatter_walls(width, height, wall_density, rng),
        attempts=max_attempts,
        degraded=True,
    )


def generate_from_config(
    config: GenerationConfig,
    rng: Optional[RandomSource] = None,
    *,
    strict: bool = False,
) -> GenerationResult:
    if rng is None:
        rng = make_rng(config.seed)
    return generate_grid(
        config.width,
        config.height,
        wall_density=config.wall_density,
        max_attempts=config.max_attempts,
        rng=rng,
        strict=strict,
    )
