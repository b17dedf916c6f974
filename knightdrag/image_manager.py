"""The knight piece image, scaled to the board's cell size."""

from __future__ import annotations

from typing import Tuple

START_SIZE = 45
KNIGHT_GLYPH = "\u265e"
FONT_FAMILY = "DejaVu Sans"


def _checked_size(size: int) -> int:
    size = int(size)
    if size <= 0:
        raise ValueError(f"piece size must be positive, got {size}")
    return size


class PieceImage:
    """A knight drawn as a glyph whose pixel height follows the cell size."""

    def __init__(self, size: int = START_SIZE) -> None:
        self.glyph = KNIGHT_GLYPH
        self.size = _checked_size(size)

    def update_image_size(self, size: int) -> None:
        """Rescale the piece to ``size`` pixels."""
        self.size = _checked_size(size)

    def font(self) -> Tuple[str, int]:
        """Tk font description; a negative size is measured in pixels."""
        return (FONT_FAMILY, -self.size)