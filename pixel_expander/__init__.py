"""Expand a column or row of pixels to the dimensions of an image."""

__version__ = "1.0.0"
