"""Map validation, XPM sprite decoding, X11 colours and scene layout for a tile-based puzzle game."""

__version__ = "0.1.0"
__all__ = ["colors", "wordtab", "xpm", "mapcheck", "render"]