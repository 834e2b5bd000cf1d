# tests/test_render_image.py
from PIL import Image

from tileworld.grid import Grid
from tileworld.render.image import ENTITY_COLOR, TILE_COLORS, render_grid, save_png
from tileworld.tiles import TileKind

def test_canvas_size_matches_grid():
    img = render_grid(Grid.filled(4, 3), tile_size=8)
    assert img.size == (32, 24)

def test_row_zero_is_drawn_at_the_bottom():
    g = Grid.from_lines([
        "#..",
        "...",
    ])
    img = render_grid(g, tile_size=8)
    assert img.getpixel((1, 9)) == TILE_COLORS[TileKind.WALL]
    assert img.getpixel((1, 1)) == TILE_COLORS[TileKind.FLOOR]
    img = render_grid(g, tile_size=8, flip_y=False)
    assert img.getpixel((1, 1)) == TILE_COLORS[TileKind.WALL]

def test_entity_marker_drawn_at_position():
    g = Grid.filled(3, 3)
    img = render_grid(g, tile_size=10, entity_pos=(1, 1))
    assert img.getpixel((15, 15)) == ENTITY_COLOR
    assert img.getpixel((5, 5)) == TILE_COLORS[TileKind.FLOOR]

def test_save_png(tmp_path):
    out = tmp_path / "snap" / "grid.png"
    save_png(Grid.filled(5, 2, TileKind.WALL), str(out), tile_size=4)
    with Image.open(out) as img:
        assert img.size == (20, 8)
