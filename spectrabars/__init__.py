"""Spectrabars - frequency bars for frame-by-frame audio visualization."""

__version__ = "0.1.0"
