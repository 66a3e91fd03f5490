"""Tests for report line rendering."""

from pixel_probe.formatter import format_pixel
from pixel_probe.models.color import Color


def test_integer_alpha():
    line = format_pixel(297, 85, Color(179, 192, 200, 255))
    assert line == "Pixel at (297, 85) has RGBA values of R: 179, G: 192, B: 200, A: 255"


def test_float_alpha():
    line = format_pixel(297, 85, Color(179, 192, 200, 255), alpha_as_float=True)
    assert line == "Pixel at (297, 85) has RGBA values of R: 179, G: 192, B: 200, A: 1.000000"


def test_float_alpha_translucent():
    line = format_pixel(1, 2, Color(10, 20, 30, 128), alpha_as_float=True)
    assert line.endswith("A: 0.501961")


def test_float_alpha_precision():
    line = format_pixel(0, 0, Color(0, 0, 0, 0), alpha_as_float=True, precision=2)
    assert line.endswith("A: 0.00")


def test_precision_ignored_for_integer_alpha():
    line = format_pixel(0, 0, Color(0, 0, 0, 64), precision=2)
    assert line.endswith("A: 64")
