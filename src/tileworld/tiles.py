# Canonical tile kinds and the walkability classification.

from enum import Enum
from typing import FrozenSet


class TileKind(Enum):
    FLOOR = 0
    WALL = 1
    WATER = 2  # never produced by the base generator


# Single decision point for "can a walker stand here".
WALKABLE_TILES: FrozenSet[TileKind] = frozenset({TileKind.FLOOR})

# ASCII glyphs used by Grid.from_lines / Grid.to_lines.
GLYPHS = {
    TileKind.FLOOR: ".",
    TileKind.WALL: "#",
    TileKind.WATER: "~",
}


def is_walkable_tile(kind: TileKind) -> bool:
    return kind in WALKABLE_TILES


def kind_for_glyph(ch: str) -> TileKind:
    for kind, glyph in GLYPHS.items():
        if glyph == ch:
            return kind
    raise ValueError(f"unknown tile glyph {ch!r}")
