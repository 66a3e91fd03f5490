"""
Pixel Access
============

Bounds-checked pixel lookup and channel normalization.

Normalization turns a RawColor into a straight-alpha 8-bit Color:

    1. Premultiplied sources are un-premultiplied:
           c = min(c * max_value // a, max_value)   (a > 0)
           c = 0                                    (a == 0)
    2. 16-bit channels map to 8 bits with integer division by 257,
       which sends 0 -> 0 and 65535 -> 255 exactly.

Coordinates use a half-open rectangle: x == width and y == height are
out of bounds.
"""

import logging

from pixel_probe.errors import OutOfBoundsError
from pixel_probe.models.color import Color, RawColor
from pixel_probe.models.raster import RasterImage


logger = logging.getLogger(__name__)


def validate_pixel_coords(image: RasterImage, x: int, y: int) -> None:
    """
    Check that (x, y) addresses a pixel of the image.

    Raises:
        OutOfBoundsError: If the coordinates are outside the image rectangle
    """
    bounds = image.bounds
    if not bounds.contains(x, y):
        raise OutOfBoundsError(x, y, bounds)


def _to_8bit(value: int, max_value: int) -> int:
    if max_value == 255:
        return value
    if max_value == 65535:
        return value // 257
    # other depths scale linearly onto [0, 255]
    return value * 255 // max_value


def to_nrgba(raw: RawColor) -> Color:
    """
    Convert a raw codec color to a straight-alpha 8-bit Color.

    Args:
        raw: Color in the codec's native depth and alpha convention

    Returns:
        Color with all channels in [0, 255]
    """
    r, g, b, a = raw.r, raw.g, raw.b, raw.a
    max_value = raw.max_value

    if raw.premultiplied and a != max_value:
        if a == 0:
            r = g = b = 0
        else:
            r = min(r * max_value // a, max_value)
            g = min(g * max_value // a, max_value)
            b = min(b * max_value // a, max_value)

    return Color(
        r=_to_8bit(r, max_value),
        g=_to_8bit(g, max_value),
        b=_to_8bit(b, max_value),
        a=_to_8bit(a, max_value),
    )


def get_pixel_value(image: RasterImage, x: int, y: int) -> Color:
    """
    Return the straight-alpha 8-bit color at (x, y).

    Args:
        image: Decoded image
        x: Column
        y: Row

    Returns:
        Normalized Color

    Raises:
        OutOfBoundsError: If (x, y) is outside the image
    """
    validate_pixel_coords(image, x, y)

    raw = image.at(x, y)
    color = to_nrgba(raw)
    logger.debug(f"Pixel ({x}, {y}): raw={raw} -> {color}")
    return color


def alpha_to_float(alpha: int) -> float:
    """Convert an 8-bit alpha value to a float in [0, 1]."""
    return alpha / 255
