"""A 2×2 board with one knight that can be moved by dragging it, shown with Tkinter."""

__version__ = "0.1.0"
__all__ = ["__version__"]