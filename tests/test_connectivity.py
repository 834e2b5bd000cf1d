# tests/test_connectivity.py
from tileworld.grid import Grid
from tileworld.mapgen.connectivity import first_walkable, flood_region, is_fully_accessible
from tileworld.tiles import TileKind

def test_no_floor_is_not_accessible():
    assert is_fully_accessible(Grid.filled(5, 5, TileKind.WALL)) is False

def test_walled_room_is_accessible():
    g = Grid.from_lines([
        "#####",
        "#...#",
        "#...#",
        "#...#",
        "#####",
    ])
    assert is_fully_accessible(g) is True

def test_solid_column_splits_the_room():
    g = Grid.from_lines([
        "#####",
        "#.#.#",
        "#.#.#",
        "#.#.#",
        "#####",
    ])
    assert is_fully_accessible(g) is False

def test_diagonal_contact_does_not_connect():
    g = Grid.from_lines([
        "#####",
        "#.###",
        "##.##",
        "#####",
    ])
    assert is_fully_accessible(g) is False

def test_single_floor_cell_is_accessible():
    g = Grid.filled(3, 3, TileKind.WALL)
    g.set_tile(1, 1, TileKind.FLOOR)
    assert is_fully_accessible(g) is True

def test_water_is_not_part_of_the_walkable_region():
    # Water splits the floor for a walker even though a swimmer could cross.
    g = Grid.from_lines([
        ".~.",
    ])
    assert is_fully_accessible(g) is False

def test_seed_scan_is_row_major():
    g = Grid.from_lines([
        "#.#",
        "..#",
    ])
    assert first_walkable(g) == (1, 0)
    assert first_walkable(Grid.filled(2, 2, TileKind.WALL)) is None

def test_flood_region_contents():
    g = Grid.from_lines([
        "..#.",
        "#.#.",
    ])
    assert flood_region(g, (0, 0)) == {(0, 0), (1, 0), (1, 1)}
    assert flood_region(g, (3, 1)) == {(3, 0), (3, 1)}
    assert flood_region(g, (2, 0)) == set()
    assert flood_region(g, (-1, 0)) == set()
