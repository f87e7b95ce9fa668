"""Building blocks for a software-rendered game runtime: bitmaps, painter, input, timing and archives."""

__version__ = "0.0.1"