"""Reading and validation of tile maps for a collect-and-exit puzzle game."""

__version__ = "0.1.0"
__all__ = ["chars", "cli", "fmt", "lines", "mapcheck", "strutil"]