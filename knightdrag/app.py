"""Application window and command-line entry point."""

from __future__ import annotations

import argparse
import tkinter as tk
from typing import Optional, Sequence

from .board import Board, BoardWidget

TITLE = "Simple chess dragging"


def build_ui(root: tk.Misc) -> BoardWidget:
    """Fill ``root`` with a board widget and return it."""
    root.title(TITLE)
    widget = BoardWidget(root, Board())
    widget.pack(fill=tk.BOTH, expand=True)
    return widget


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the board window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="knightdrag",
        description="Drag a knight around a two-by-two board.",
    )
    parser.parse_args(argv)
    root = tk.Tk(className="knightdrag")
    build_ui(root)
    root.mainloop()
    return 0