"""XPM decoding, X11 colour names, string and line helpers, and view controls."""

__version__ = "0.1.0"
__all__ = ["strings", "textops", "linereader", "textscan", "colors", "xpm", "controls"]