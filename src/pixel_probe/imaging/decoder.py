"""
Image Decoder
=============

The ONLY place in the codebase that decodes images.

Format is detected from the leading bytes of the content, never from the
file extension. Each registered format pairs a magic-byte pattern with a
decode function; JPEG and PNG are registered at import time and both
decode through OpenCV.

Design Rules:
    - Decoding preserves bit depth (8 or 16) and the alpha channel
    - OpenCV's BGR(A) order is converted to RGB(A) here and nowhere else
    - Fails fast with DecodeError on unknown or corrupt content
    - The file handle is released before load_image returns
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List

import cv2
import numpy as np

from pixel_probe.errors import DecodeError, NotFoundError
from pixel_probe.models.raster import RasterImage
from pixel_probe.validation import (
    DEFAULT_EXTENSIONS,
    validate_filepath,
    validate_filetype,
)


logger = logging.getLogger(__name__)


JPEG_MAGIC = b"\xff\xd8"
PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


@dataclass(frozen=True)
class ImageFormat:
    """
    A registered image format.

    Attributes:
        name: Short format name ("jpeg", "png")
        magic: Leading byte pattern; "?" matches any single byte
        decode: Callable turning the full byte string into a RasterImage
    """

    name: str
    magic: bytes
    decode: Callable[[bytes], RasterImage]

    def matches(self, data: bytes) -> bool:
        if len(data) < len(self.magic):
            return False
        return all(m == ord("?") or m == d for m, d in zip(self.magic, data))


_FORMATS: List[ImageFormat] = []


def register_format(name: str, magic: bytes, decode: Callable[[bytes], RasterImage]) -> ImageFormat:
    """
    Register an image format for content sniffing.

    Formats are tried in registration order.

    Args:
        name: Format name
        magic: Magic-byte prefix ("?" is a single-byte wildcard)
        decode: Decoder for content of this format

    Returns:
        The registered ImageFormat
    """
    fmt = ImageFormat(name=name, magic=magic, decode=decode)
    _FORMATS.append(fmt)
    logger.debug(f"Registered image format: {name}")
    return fmt


def registered_formats() -> List[ImageFormat]:
    return list(_FORMATS)


def sniff_format(data: bytes) -> ImageFormat:
    """
    Pick the registered format whose magic bytes prefix the data.

    Raises:
        DecodeError: If no registered format matches
    """
    for fmt in _FORMATS:
        if fmt.matches(data):
            return fmt
    raise DecodeError("image: unknown format")


def _bgr_to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Reorder OpenCV channel layout to RGB(A). Gray images pass through."""
    if pixels.ndim == 3 and pixels.shape[2] == 3:
        return pixels[:, :, [2, 1, 0]]
    if pixels.ndim == 3 and pixels.shape[2] == 4:
        return pixels[:, :, [2, 1, 0, 3]]
    return pixels


def _opencv_decoder(format_name: str) -> Callable[[bytes], RasterImage]:
    """Build a decode function that runs the bytes through cv2.imdecode."""

    def decode(data: bytes) -> RasterImage:
        buf = np.frombuffer(data, dtype=np.uint8)
        try:
            pixels = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
        except cv2.error as e:
            raise DecodeError(f"{format_name}: {e}") from e

        if pixels is None:
            raise DecodeError(f"{format_name}: invalid or truncated image data")

        if pixels.dtype not in (np.uint8, np.uint16):
            raise DecodeError(f"{format_name}: unsupported sample type {pixels.dtype}")

        try:
            # OpenCV always returns straight alpha
            return RasterImage(pixels=_bgr_to_rgb(pixels), format=format_name)
        except ValueError as e:
            raise DecodeError(f"{format_name}: {e}") from e

    return decode


register_format("jpeg", JPEG_MAGIC, _opencv_decoder("jpeg"))
register_format("png", PNG_MAGIC, _opencv_decoder("png"))


def decode_image(data: bytes) -> RasterImage:
    """
    Decode an in-memory image.

    Args:
        data: Complete encoded image

    Returns:
        RasterImage in RGB(A) order at the source bit depth

    Raises:
        DecodeError: If the format is unknown or the content is corrupt
    """
    fmt = sniff_format(data)
    image = fmt.decode(data)
    logger.debug(f"Decoded {image!r}")
    return image


def load_image(path: str, allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> RasterImage:
    """
    Validate, read and decode the image at path.

    Args:
        path: Path to a JPEG or PNG file
        allowed_extensions: Extension allow-list for the filetype check

    Returns:
        Decoded RasterImage

    Raises:
        UnsupportedTypeError: If the extension is not allowed
        EmptyPathError: If path is empty
        NotFoundError: If the file is missing or cannot be opened
        IsDirectoryError: If the path is a directory
        DecodeError: If the file content is not a valid image
    """
    validate_filetype(path, allowed_extensions)
    validate_filepath(path)

    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise NotFoundError(path, e.strerror or str(e)) from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return decode_image(data)
