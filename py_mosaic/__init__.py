"""Circumcircle-guided mosaic growth."""

__version__ = "0.1.0"
