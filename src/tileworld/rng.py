import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in [0, 1); ``random.Random`` qualifies."""

    def random(self) -> float: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    # Unseeded by default; pass a seed only when a reproducible run is wanted.
    return random.Random(seed)


def bernoulli(rng: RandomSource, p: float) -> bool:
    return rng.random() < p
