"""Palette-animated bouncing balls controlled from the keyboard."""

__version__ = "0.1.0"
__all__ = ["__version__"]