"""
Immutable 8-bit RGB colors used as gradient stops and outlier colors.

>>> from chromascale.colors import ColorRGB
>>> ColorRGB((255, 128, 0)) == ColorRGB.from_hex("#ff8000")
True
"""

from .rgb import ColorRGB, as_color, colors_to_array

__all__ = ["ColorRGB", "as_color", "colors_to_array"]
