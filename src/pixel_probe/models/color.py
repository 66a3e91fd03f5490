"""
Color Models
============

Pixel color representations used on either side of normalization.

    RawColor: channels exactly as the codec produced them (8 or 16 bit,
              straight or premultiplied alpha)
    Color:    straight-alpha, 8-bit-per-channel sample reported to the user
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawColor:
    """
    Pixel value in the codec's native representation.

    Attributes:
        r, g, b: Color channels in [0, max_value]. Grayscale sets r == g == b.
        a: Alpha in [0, max_value]; max_value when the image has no alpha
        max_value: 255 for 8-bit sources, 65535 for 16-bit sources
        premultiplied: True if r, g, b already include the alpha factor
    """

    r: int
    g: int
    b: int
    a: int
    max_value: int = 255
    premultiplied: bool = False


@dataclass(frozen=True, slots=True)
class Color:
    """Straight-alpha 8-bit RGBA sample."""

    r: int
    g: int
    b: int
    a: int

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b, self.a)
