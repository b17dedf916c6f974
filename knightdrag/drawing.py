"""Rendering of the two-by-two board onto a Tk-style canvas."""

from __future__ import annotations

from itertools import product
from typing import Any, Optional, Tuple

Color = Tuple[float, float, float, float]
Location = Tuple[int, int]

GRID_SIZE = 2
DEFAULT_PIECE_SIZE = 200

NAVAJO_WHITE: Color = (1.0, 0.96, 0.86, 1.0)
PERU: Color = (0.80, 0.52, 0.25, 1.0)
RED: Color = (1.0, 0.0, 0.0, 0.45)
GREEN: Color = (0.0, 1.0, 0.0, 0.45)

PIECE_COLOR = "black"


def cell_size_for(width: float, height: float) -> float:
    """Return the side of one cell for a drawing area of the given size."""
    return min(width, height) / GRID_SIZE


def to_hex(color: Color) -> str:
    """Convert an RGBA colour to a ``#rrggbb`` string, blended over white."""
    *channels, alpha = color

    def channel(value: float) -> int:
        blended = value * alpha + (1.0 - alpha)
        return max(0, min(255, round(blended * 255)))

    return "#" + "".join(f"{channel(value):02x}" for value in channels)


def cell_color(
    row: int,
    col: int,
    dnd_start: Optional[Location],
    dnd_end: Optional[Location],
) -> Color:
    """Background colour of a cell, highlighting drag start and drag target."""
    color = NAVAJO_WHITE if (row + col) % 2 == 0 else PERU
    if dnd_start == (row, col):
        color = RED
    if dnd_end == (row, col):
        color = GREEN
    return color


def draw_content(
    canvas: Any,
    width: float,
    height: float,
    piece: Any,
    piece_location: Optional[Location],
    dnd_start: Optional[Location],
    dnd_end: Optional[Location],
) -> None:
    """Draw the cells and, when given a location, the piece on ``canvas``."""
    cell = cell_size_for(width, height)
    for row, col in product(range(GRID_SIZE), repeat=2):
        x, y = col * cell, row * cell
        canvas.create_rectangle(
            x,
            y,
            x + cell,
            y + cell,
            fill=to_hex(cell_color(row, col, dnd_start, dnd_end)),
            width=0,
            tags=("cell",),
        )
    if piece_location is not None:
        row, col = piece_location
        canvas.create_text(
            col * cell + cell / 2,
            row * cell + cell / 2,
            text=piece.glyph,
            font=piece.font(),
            fill=PIECE_COLOR,
            tags=("piece",),
        )