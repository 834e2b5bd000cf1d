# tests/test_tiles.py
import pytest

from tileworld import tiles
from tileworld.grid import Grid
from tileworld.tiles import TileKind, is_walkable_tile, kind_for_glyph

def test_only_floor_is_walkable_in_base_rules():
    assert is_walkable_tile(TileKind.FLOOR)
    assert not is_walkable_tile(TileKind.WALL)
    assert not is_walkable_tile(TileKind.WATER)

def test_glyph_lookup():
    assert kind_for_glyph(".") is TileKind.FLOOR
    assert kind_for_glyph("#") is TileKind.WALL
    assert kind_for_glyph("~") is TileKind.WATER
    with pytest.raises(ValueError):
        kind_for_glyph("?")

def test_walkable_set_is_the_single_decision_point(monkeypatch):
    g = Grid.from_lines(["~."])
    assert not g.is_walkable(0, 0)
    monkeypatch.setattr(tiles, "WALKABLE_TILES", frozenset({TileKind.FLOOR, TileKind.WATER}))
    # Grid picks the change up without being touched.
    assert g.is_walkable(0, 0)
    assert g.is_walkable(1, 0)
