from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidDimension, OutOfBounds
from .tiles import GLYPHS, TileKind, is_walkable_tile, kind_for_glyph


@dataclass(frozen=True)
class Grid:
    """Fixed-size tile buffer, row-major, indexed ``y * width + x``.

    The dataclass is frozen so ``width`` and ``height`` can never change; the
    tile buffer itself stays mutable through ``set_tile``.
    """

    width: int
    height: int
    buf: List[TileKind]

    # Tiles change in place, so a grid is compared by value but never hashed.
    __hash__ = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimension(f"grid dimensions must be positive, got {self.width}x{self.height}")
        if len(self.buf) != self.width * self.height:
            raise InvalidDimension(
                f"tile buffer holds {len(self.buf)} cells, expected {self.width * self.height}"
            )

    @classmethod
    def filled(cls, width: int, height: int, default_tile: TileKind = TileKind.FLOOR) -> "Grid":
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"grid dimensions must be positive, got {width}x{height}")
        return cls(width=width, height=height, buf=[default_tile] * (width * height))

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> TileKind:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self.buf[self.idx(x, y)]

    def set_tile(self, x: int, y: int, kind: TileKind) -> None:
        if not isinstance(kind, TileKind):
            raise TypeError(f"expected a TileKind, got {kind!r}")
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        self.buf[self.idx(x, y)] = kind

    def is_walkable(self, x: int, y: int) -> bool:
        # Never raises: out-of-bounds is simply not walkable.
        if not self.in_bounds(x, y):
            return False
        return is_walkable_tile(self.buf[self.idx(x, y)])

    def cells(self) -> Iterator[Tuple[int, int, TileKind]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.buf[self.idx(x, y)]

    def count(self, kind: TileKind) -> int:
        return self.buf.count(kind)

    def as_matrix(self) -> List[List[TileKind]]:
        out = []
        for y in range(self.height):
            start = y * self.width
            out.append(self.buf[start:start + self.width])
        return out

    def copy(self) -> "Grid":
        return Grid(width=self.width, height=self.height, buf=list(self.buf))

    @classmethod
    def from_lines(cls, lines: Sequence[str], mapping: Optional[Dict[str, TileKind]] = None) -> "Grid":
        """Build a grid from ASCII rows (row 0 is ``y == 0``).

        Default glyphs: ``.`` floor, ``#`` wall, ``~`` water.
        """
        if not lines or not lines[0]:
            raise InvalidDimension("ASCII layout must have at least one non-empty row")
        width = len(lines[0])
        for i, row in enumerate(lines):
            if len(row) != width:
                raise InvalidDimension(f"row {i} has width {len(row)}, expected {width}")

        buf: List[TileKind] = []
        for row in lines:
            for ch in row:
                if mapping is not None:
                    if ch not in mapping:
                        raise ValueError(f"unknown tile glyph {ch!r}")
                    buf.append(mapping[ch])
                else:
                    buf.append(kind_for_glyph(ch))
        return cls(width=width, height=len(lines), buf=buf)

    def to_lines(self, reverse_mapping: Optional[Dict[TileKind, str]] = None) -> List[str]:
        glyphs = reverse_mapping or GLYPHS
        return ["".join(glyphs.get(t, "?") for t in row) for row in self.as_matrix()]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
