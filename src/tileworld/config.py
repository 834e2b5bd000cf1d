from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidDimension


@dataclass(frozen=True)
class GenerationConfig:
    width: int = 32
    height: int = 18
    # Chance for a non-border cell to become a wall, 0..1.
    wall_density: float = 0.15
    max_attempts: int = 20
    # None means fresh randomness on every run.
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimension(f"grid dimensions must be positive, got {self.width}x{self.height}")
        if not 0.0 <= self.wall_density <= 1.0:
            raise ValueError(f"wall_density must be within [0, 1], got {self.wall_density}")
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")

    def with_overrides(self, **changes) -> "GenerationConfig":
        return replace(self, **changes)


@dataclass(frozen=True)
class ViewerConfig:
    # Caller-side settings for the interactive viewer; the core never reads these.
    tile_size: int = 24
    move_delay: float = 0.15
    fps: int = 60


DEFAULT_CONFIG = GenerationConfig()
