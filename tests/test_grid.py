# tests/test_grid.py
import dataclasses

import pytest

from tileworld.errors import InvalidDimension, OutOfBounds
from tileworld.grid import Grid
from tileworld.tiles import TileKind

def test_in_bounds_covers_exactly_width_times_height():
    for w, h in [(1, 1), (3, 7), (10, 4)]:
        g = Grid.filled(w, h)
        hits = sum(1 for x in range(-2, w + 2) for y in range(-2, h + 2) if g.in_bounds(x, y))
        assert hits == w * h
        assert len(g.buf) == w * h

def test_filled_uses_default_tile():
    g = Grid.filled(4, 3, TileKind.WALL)
    assert all(t is TileKind.WALL for _, _, t in g.cells())
    assert Grid.filled(2, 2).count(TileKind.FLOOR) == 4

@pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-1, 3), (0, 0)])
def test_non_positive_dimensions_rejected(w, h):
    with pytest.raises(InvalidDimension):
        Grid.filled(w, h)
    # Also a ValueError for generic handlers
    with pytest.raises(ValueError):
        Grid.filled(w, h)

def test_buffer_length_must_match_dimensions():
    with pytest.raises(InvalidDimension):
        Grid(width=2, height=2, buf=[TileKind.FLOOR] * 3)

def test_dimensions_are_immutable():
    g = Grid.filled(3, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        g.width = 5

def test_grid_is_unhashable_but_comparable():
    g = Grid.filled(2, 2)
    with pytest.raises(TypeError, match="Grid"):
        hash(g)
    assert g == Grid.filled(2, 2)

def test_set_get_round_trip_everywhere():
    g = Grid.filled(5, 4)
    for y in range(4):
        for x in range(5):
            kind = TileKind.WALL if (x + y) % 2 else TileKind.WATER
            g.set_tile(x, y, kind)
            assert g.get_tile(x, y) is kind
    assert g.buf[g.idx(1, 0)] is TileKind.WALL

@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4), (99, 99)])
def test_direct_access_out_of_bounds_raises(x, y):
    g = Grid.filled(5, 4)
    with pytest.raises(OutOfBounds) as exc:
        g.get_tile(x, y)
    assert (exc.value.x, exc.value.y) == (x, y)
    with pytest.raises(IndexError):
        g.set_tile(x, y, TileKind.WALL)

def test_set_tile_requires_tile_kind():
    g = Grid.filled(2, 2)
    with pytest.raises(TypeError):
        g.set_tile(0, 0, 1)

def test_is_walkable_never_raises_out_of_bounds():
    g = Grid.filled(3, 3)
    for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3), (-50, 50)]:
        assert g.is_walkable(x, y) is False
    assert g.is_walkable(1, 1) is True
    g.set_tile(1, 1, TileKind.WALL)
    assert g.is_walkable(1, 1) is False

def test_ascii_round_trip():
    lines = [
        "#####",
        "#.~.#",
        "#####",
    ]
    g = Grid.from_lines(lines)
    assert (g.width, g.height) == (5, 3)
    assert g.get_tile(2, 1) is TileKind.WATER
    assert g.to_lines() == lines

def test_from_lines_rejects_bad_layouts():
    with pytest.raises(InvalidDimension):
        Grid.from_lines([])
    with pytest.raises(InvalidDimension):
        Grid.from_lines(["...", ".."])
    with pytest.raises(ValueError):
        Grid.from_lines([".x."])

def test_matrix_and_copy_are_detached():
    g = Grid.from_lines(["..", "#."])
    m = g.as_matrix()
    assert m[1][0] is TileKind.WALL
    m[0][0] = TileKind.WALL
    assert g.get_tile(0, 0) is TileKind.FLOOR
    c = g.copy()
    c.set_tile(1, 1, TileKind.WALL)
    assert g.get_tile(1, 1) is TileKind.FLOOR
    assert c != g
