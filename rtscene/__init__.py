"""Scene-file parsing, XPM images, X11 colour names and a pixel buffer for a small ray tracer."""

__version__ = "0.1.0"
__all__ = ["colors", "wordtab", "xpm", "numbers", "elements", "parser", "image"]