"""Board state with drag-and-drop of a single knight, and its Tk widget."""

from __future__ import annotations

import math
import tkinter as tk
from itertools import product
from typing import List, Optional, Tuple

from .drawing import DEFAULT_PIECE_SIZE, GRID_SIZE, draw_content, to_hex
from .image_manager import PieceImage

Location = Tuple[int, int]

KNIGHT = "n"
EMPTY = ""
_MAX_INDEX = 255


def _to_index(coordinate: float, cell_size: float) -> int:
    """Cell index for a pixel coordinate, saturating like an unsigned byte."""
    if cell_size:
        quotient = coordinate / cell_size
    else:
        quotient = math.inf if coordinate > 0 else 0.0
    if math.isnan(quotient):
        return 0
    return int(max(0.0, min(float(_MAX_INDEX), quotient)))


def _in_grid(location: Location) -> bool:
    return all(0 <= index < GRID_SIZE for index in location)


class Board:
    """A two-by-two board holding one knight that can be dragged around."""

    def __init__(self) -> None:
        self.piece_image = PieceImage()
        self.cells: List[List[str]] = [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]
        self.cell_size = 0.0
        self.start_pos: Optional[Location] = None
        self.end_pos: Optional[Location] = None
        self.cells[0][0] = KNIGHT

    def get_value_at(self, row: int, col: int) -> str:
        """Return the content of a cell; raises IndexError outside the grid."""
        if not _in_grid((row, col)):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self.cells[row][col]

    def set_value_at(self, row: int, col: int, value: str) -> None:
        """Set the content of a cell; raises IndexError outside the grid."""
        if not _in_grid((row, col)):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        self.cells[row][col] = value

    def piece_location(self) -> Optional[Location]:
        """First cell holding the knight in row-major order, or None."""
        for row, col in product(range(GRID_SIZE), repeat=2):
            if self.cells[row][col] == KNIGHT:
                return (row, col)
        return None

    def resize(self, width: int, height: int) -> None:
        """Adapt the cell and piece sizes to a drawing area of the given size."""
        cell_size = min(int(width), int(height)) / GRID_SIZE
        self.piece_image.update_image_size(int(cell_size))
        self.cell_size = cell_size

    def cell_at(self, x: float, y: float) -> Location:
        """Cell (row, col) under a pixel position; may lie outside the grid."""
        return (_to_index(y, self.cell_size), _to_index(x, self.cell_size))

    def prepare_drag(self, x: float, y: float) -> Optional[str]:
        """Start dragging from the pixel position; return the carried value."""
        row, col = self.cell_at(x, y)
        value = self.get_value_at(row, col)
        if value != KNIGHT:
            return None
        self.start_pos = (row, col)
        return value

    def motion(self, x: float, y: float) -> Location:
        """Record the cell currently hovered during a drag and return it."""
        self.end_pos = self.cell_at(x, y)
        return self.end_pos

    def drop(self, value: str, x: float, y: float) -> bool:
        """Finish a drag at the pixel position, moving the piece there."""
        if self.start_pos is None:
            raise RuntimeError("no drag in progress")
        start = self.start_pos
        row, col = self.cell_at(x, y)
        if not value:
            raise ValueError("dropped value is empty")
        piece = value[0]
        if (row, col) == start:
            self.set_value_at(*start, piece)
        else:
            self.set_value_at(row, col, piece)
            self.set_value_at(*start, EMPTY)
        self.start_pos = None
        self.end_pos = None
        return True


class BoardWidget(tk.Canvas):
    """Canvas showing a :class:`Board` and handling mouse drag-and-drop."""

    def __init__(self, master: tk.Misc, board: Board) -> None:
        size = DEFAULT_PIECE_SIZE * GRID_SIZE
        super().__init__(master, width=size, height=size, highlightthickness=0)
        self.board = board
        self._size = (size, size)
        self._drag: Optional[Tuple[str, float, float]] = None
        self._pointer: Tuple[float, float] = (0.0, 0.0)
        board.resize(size, size)
        self.bind("<Configure>", self._on_configure)
        self.bind("<ButtonPress-1>", self._on_press)
        self.bind("<B1-Motion>", self._on_motion)
        self.bind("<ButtonRelease-1>", self._on_release)
        self.redraw()

    def redraw(self) -> None:
        """Repaint the board and, while dragging, the piece under the pointer."""
        self.delete("all")
        board = self.board
        location = board.piece_location() if board.start_pos is None else None
        width, height = self._size
        draw_content(
            self,
            width,
            height,
            board.piece_image,
            location,
            board.start_pos,
            board.end_pos,
        )
        if self._drag is not None:
            x, y = self._pointer
            self.create_text(
                x,
                y,
                text=board.piece_image.glyph,
                font=board.piece_image.font(),
                fill=to_hex((0.0, 0.0, 0.0, 1.0)),
                tags=("drag_icon",),
            )

    def _on_configure(self, event: tk.Event) -> None:
        if min(event.width, event.height) < GRID_SIZE:
            return
        self._size = (event.width, event.height)
        self.board.resize(event.width, event.height)
        self.redraw()

    def _on_press(self, event: tk.Event) -> None:
        if not _in_grid(self.board.cell_at(event.x, event.y)):
            return
        value = self.board.prepare_drag(event.x, event.y)
        if value is None:
            return
        self._drag = (value, event.x, event.y)
        self._pointer = (event.x, event.y)
        self.redraw()

    def _on_motion(self, event: tk.Event) -> None:
        if self._drag is None:
            return
        self.board.motion(event.x, event.y)
        self._pointer = (event.x, event.y)
        self.redraw()

    def _on_release(self, event: tk.Event) -> None:
        if self._drag is None:
            return
        value, start_x, start_y = self._drag
        self._drag = None
        if _in_grid(self.board.cell_at(event.x, event.y)):
            self.board.drop(value, event.x, event.y)
        else:
            self.board.drop(value, start_x, start_y)
        self.redraw()