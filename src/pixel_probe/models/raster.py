"""
Raster Image Model
==================

Read-only, pixel-addressable view over a decoded image.

Design Rules:
    - Pixels are stored as (H, W, C) with channels in R, G, B(, A) order
    - C is 1 (gray), 2 (gray + alpha), 3 (RGB) or 4 (RGBA)
    - dtype is uint8 or uint16; nothing here rescales values
    - The bounding rectangle is half-open: [min, max)
"""

from dataclasses import dataclass, field

import numpy as np

from pixel_probe.models.color import RawColor


@dataclass(frozen=True, slots=True)
class Bounds:
    """
    Half-open pixel rectangle [min_x, max_x) x [min_y, max_y).

    Attributes:
        min_x: First valid column
        min_y: First valid row
        max_x: One past the last valid column
        max_y: One past the last valid row
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) addresses a pixel inside the rectangle."""
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y


@dataclass(frozen=True, eq=False)
class RasterImage:
    """
    Decoded image owned by the pipeline for one run.

    Attributes:
        pixels: Channel array (H, W, C), uint8 or uint16, RGB(A) order
        format: Name of the sniffed format ("jpeg", "png")
        premultiplied: True if color channels include the alpha factor
    """

    pixels: np.ndarray
    format: str = "unknown"
    premultiplied: bool = False
    bounds: Bounds = field(init=False)

    def __post_init__(self) -> None:
        pixels = self.pixels.view()
        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        if pixels.ndim != 3 or pixels.shape[2] not in (1, 2, 3, 4):
            raise ValueError(f"Unsupported pixel array shape: {pixels.shape}")
        if pixels.dtype not in (np.uint8, np.uint16):
            raise ValueError(f"Unsupported pixel dtype: {pixels.dtype}")
        pixels.setflags(write=False)
        object.__setattr__(self, "pixels", pixels)

        height, width = pixels.shape[:2]
        object.__setattr__(self, "bounds", Bounds(0, 0, width, height))

    @property
    def channels(self) -> int:
        return self.pixels.shape[2]

    @property
    def bit_depth(self) -> int:
        return 16 if self.pixels.dtype == np.uint16 else 8

    @property
    def max_value(self) -> int:
        return 65535 if self.bit_depth == 16 else 255

    def at(self, x: int, y: int) -> RawColor:
        """
        Return the raw color at column x, row y.

        Callers are expected to bounds-check first; numpy would otherwise
        wrap negative indices around.
        """
        values = [int(v) for v in self.pixels[y, x]]
        channels = len(values)

        if channels in (1, 2):
            r = g = b = values[0]
        else:
            r, g, b = values[:3]

        a = values[-1] if channels in (2, 4) else self.max_value

        return RawColor(
            r=r,
            g=g,
            b=b,
            a=a,
            max_value=self.max_value,
            premultiplied=self.premultiplied,
        )

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the pixel data."""
        return (
            f"RasterImage(format={self.format}, "
            f"size={self.bounds.width}x{self.bounds.height}, "
            f"channels={self.channels}, bit_depth={self.bit_depth})"
        )
