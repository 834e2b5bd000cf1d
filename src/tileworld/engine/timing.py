# src/tileworld/engine/timing.py
# Held-key repeat gate for the input layer. Movement itself has no notion of
# time; a caller asks the cadence whether a step may be taken this frame.

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MoveCadence:
    # Seconds between accepted movement opportunities while a key is held.
    delay: float = 0.15
    _cooldown: float = 0.0

    def __post_init__(self) -> None:
        if self.delay < 0:
            raise ValueError(f"delay must be non-negative, got {self.delay}")

    def tick(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; True when a step may be taken now."""
        self._cooldown = max(0.0, self._cooldown - dt)
        return self._cooldown <= 0.0

    def consume(self) -> None:
        # Call after an intent was fed to the movement controller.
        self._cooldown = self.delay

    def reset(self) -> None:
        self._cooldown = 0.0
