"""
Imaging Module
==============

Content-sniffing image decoding.

Example:
    from pixel_probe.imaging import load_image

    image = load_image("photo.jpg")
    print(image.bounds.width, image.bounds.height)
"""

from pixel_probe.imaging.decoder import (
    ImageFormat,
    decode_image,
    load_image,
    register_format,
    registered_formats,
    sniff_format,
)


__all__ = [
    "ImageFormat",
    "decode_image",
    "load_image",
    "register_format",
    "registered_formats",
    "sniff_format",
]
