# knightdrag

A tiny desktop board with a single knight on it. The board has four
squares in a 2×2 grid. The knight starts on the top-left square. Pick
it up with the left mouse button and drop it on any other square.

While a drag is in progress, the square the knight came from is shaded
red. The square under the pointer is shaded green. The knight follows
the pointer.

Dropping the knight back where it started leaves it there. Releasing
the button outside the board also returns it to its starting square.
The squares and the piece scale with the window. The piece is drawn as
the `♞` text glyph in the "DejaVu Sans" font, sized in pixels to match
a square.

## Installing

```
pip install .
```

The window is drawn with Tkinter, which ships with most Python
installations. No other libraries are needed.

## Running

```
knightdrag
```

The command takes no options apart from `--help`. It opens the window
and returns when the window is closed.

## Using the board from code

The board logic lives in `knightdrag.board.Board` and has no user
interface of its own, so it can be driven directly:

```python
from knightdrag.board import Board

board = Board()
board.resize(400, 400)            # each square is now 200 pixels wide
print(board.piece_location())     # (0, 0): the knight starts top left

value = board.prepare_drag(50, 50)  # pick up the knight; returns "n"
board.motion(250, 250)              # hover over the bottom right square
board.drop(value, 250, 250)         # and drop it there
print(board.piece_location())       # (1, 1)
```

Other methods of `Board`:

- `get_value_at(row, col)` reads a square.
- `set_value_at(row, col, value)` writes a square.

Both raise `IndexError` outside the grid. An empty square holds `""`
and the knight is `"n"`.

- `cell_at(x, y)` maps a pixel position to a `(row, col)` pair.
- `prepare_drag(x, y)` returns `None` when there is no knight under
  the pointer.
- `drop(...)` raises `RuntimeError` if no drag is in progress.

`knightdrag.board.BoardWidget` wraps a `Board` in a Tkinter canvas.
`knightdrag.app.build_ui(root)` places a widget in a Tk window and
returns it.

The drawing helpers live in `knightdrag.drawing`:

- `cell_size_for` gives the size of one square.
- `cell_color` gives the colour of a square.
- `to_hex` turns an RGBA tuple into a Tk colour string.
- `draw_content` paints a board onto a canvas.

`knightdrag.image_manager.PieceImage` holds the glyph and its pixel
size.

## What it does not do

There is one piece and no chess rules: the knight may be dropped on
any square, and moves are not recorded or saved.

## Tests

```
pip install .[test]
pytest
```