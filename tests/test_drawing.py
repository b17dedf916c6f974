import pytest

from knightdrag import drawing
from knightdrag.image_manager import PieceImage


class RecordingCanvas:
    def __init__(self):
        self.rectangles = []
        self.texts = []

    def create_rectangle(self, *coords, **options):
        self.rectangles.append((coords, options))

    def create_text(self, *coords, **options):
        self.texts.append((coords, options))


@pytest.mark.parametrize("width,height", [(400, 400), (400, 300), (90, 500)])
def test_cell_size_is_half_of_smaller_side(width, height):
    assert drawing.cell_size_for(width, height) * 2 == min(width, height)


def test_to_hex_opaque_red():
    assert drawing.to_hex((1.0, 0.0, 0.0, 1.0)) == "#ff0000"


def test_to_hex_transparent_is_white():
    assert drawing.to_hex((0.0, 0.0, 0.0, 0.0)) == "#ffffff"


def test_to_hex_opaque_black():
    assert drawing.to_hex((0.0, 0.0, 0.0, 1.0)) == "#000000"


def test_to_hex_shape():
    value = drawing.to_hex(drawing.GREEN)
    assert value.startswith("#") and len(value) == 7
    int(value[1:], 16)


def test_cell_color_checkerboard():
    assert drawing.cell_color(0, 0, None, None) == drawing.NAVAJO_WHITE
    assert drawing.cell_color(1, 1, None, None) == drawing.NAVAJO_WHITE
    assert drawing.cell_color(0, 1, None, None) == drawing.PERU
    assert drawing.cell_color(1, 0, None, None) == drawing.PERU


def test_cell_color_start_is_red():
    assert drawing.cell_color(0, 1, (0, 1), None) == drawing.RED


def test_cell_color_end_overrides_start():
    assert drawing.cell_color(1, 0, (1, 0), (1, 0)) == drawing.GREEN


def test_cell_color_unrelated_highlights_ignored():
    assert drawing.cell_color(0, 0, (1, 1), (0, 1)) == drawing.NAVAJO_WHITE


def test_draw_content_draws_all_cells():
    canvas = RecordingCanvas()
    drawing.draw_content(canvas, 400, 400, PieceImage(200), None, None, None)
    assert len(canvas.rectangles) == drawing.GRID_SIZE**2
    assert canvas.texts == []


def test_draw_content_cells_cover_square():
    canvas = RecordingCanvas()
    drawing.draw_content(canvas, 400, 300, PieceImage(150), None, None, None)
    max_x = max(coords[2] for coords, _ in canvas.rectangles)
    max_y = max(coords[3] for coords, _ in canvas.rectangles)
    assert max_x == max_y == 300


def test_draw_content_highlight_colors():
    canvas = RecordingCanvas()
    drawing.draw_content(canvas, 200, 200, PieceImage(100), None, (0, 0), (1, 1))
    fills = [options["fill"] for _, options in canvas.rectangles]
    assert drawing.to_hex(drawing.RED) in fills
    assert drawing.to_hex(drawing.GREEN) in fills


def test_draw_content_piece_centered_in_cell():
    canvas = RecordingCanvas()
    piece = PieceImage(100)
    drawing.draw_content(canvas, 200, 200, piece, (1, 0), None, None)
    assert len(canvas.texts) == 1
    (x, y), options = canvas.texts[0]
    cell = drawing.cell_size_for(200, 200)
    assert 0 <= x < cell
    assert cell <= y < 2 * cell
    assert options["text"] == piece.glyph
    assert options["font"] == piece.font()