"""
pixel-probe
===========

Report the RGBA value of a single pixel in a JPEG or PNG image.

Components:
    - validation: Path and extension checks
    - imaging: Content-sniffing decoder backed by OpenCV
    - pixel: Bounds-checked lookup and 8-bit straight-alpha normalization
    - formatter: Report line rendering
    - config: Run configuration and settings loading

Example:
    from pixel_probe.imaging import load_image
    from pixel_probe.pixel import get_pixel_value

    image = load_image("photo.jpg")
    color = get_pixel_value(image, 297, 85)
    print(color.r, color.g, color.b, color.a)
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
