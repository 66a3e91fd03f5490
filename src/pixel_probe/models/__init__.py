"""
Data Models
===========

Value types passed between pipeline stages.

Models:
    - RawColor: Pixel value in the codec's native depth
    - Color: Straight-alpha 8-bit RGBA sample
    - Bounds: Half-open pixel rectangle
    - RasterImage: Read-only decoded image
"""

from pixel_probe.models.color import Color, RawColor
from pixel_probe.models.raster import Bounds, RasterImage

__all__ = [
    "RawColor",
    "Color",
    "Bounds",
    "RasterImage",
]
