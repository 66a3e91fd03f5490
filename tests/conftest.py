"""
Test Configuration
==================

Pytest fixtures and test configuration for pixel-probe.

Sample images are generated with OpenCV into a temporary directory, so
the exact pixel values each test relies on are visible here.
"""

import logging
from pathlib import Path

import cv2
import numpy as np
import pytest


WIDTH = 600
HEIGHT = 400

# RGB colors placed at known coordinates in the color JPEG
NOSE_RGB = (179, 192, 200)
BODY_RGB = (90, 218, 255)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep settings discovery away from the real working dir and home."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in (
        "PIXEL_PROBE_ALLOWED_EXTENSIONS",
        "PIXEL_PROBE_ALPHA_PRECISION",
        "PIXEL_PROBE_LOG_LEVEL",
        "PIXEL_PROBE_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def image_dir(tmp_path) -> Path:
    path = tmp_path / "testdata"
    path.mkdir()
    return path


@pytest.fixture
def color_jpg(image_dir) -> Path:
    """
    600x400 color JPEG.

    Solid 16x16 blocks (aligned to JPEG MCUs) cover (297, 85) with
    NOSE_RGB and (299, 130) with BODY_RGB.
    """
    bgr = np.zeros((HEIGHT, WIDTH, 3), dtype=np.uint8)
    bgr[:, :] = (40, 80, 120)
    bgr[80:96, 288:304] = NOSE_RGB[::-1]
    bgr[128:144, 288:304] = BODY_RGB[::-1]

    path = image_dir / "gophers.jpg"
    assert cv2.imwrite(str(path), bgr, [cv2.IMWRITE_JPEG_QUALITY, 100])
    return path


@pytest.fixture
def grayscale_png(image_dir) -> Path:
    """600x400 8-bit grayscale PNG with 189 at (297, 85) and 184 at (299, 130)."""
    gray = np.full((HEIGHT, WIDTH), 100, dtype=np.uint8)
    gray[85, 297] = 189
    gray[130, 299] = 184

    path = image_dir / "gophers_grayscale.png"
    assert cv2.imwrite(str(path), gray)
    return path


@pytest.fixture
def rgba_png(image_dir) -> Path:
    """4x3 8-bit RGBA PNG; pixel (1, 2) is RGBA (10, 20, 30, 128)."""
    bgra = np.zeros((3, 4, 4), dtype=np.uint8)
    bgra[:, :] = (0, 0, 255, 255)
    bgra[2, 1] = (30, 20, 10, 128)
    bgra[0, 3] = (0, 0, 0, 0)

    path = image_dir / "translucent.png"
    assert cv2.imwrite(str(path), bgra)
    return path


@pytest.fixture
def rgb16_png(image_dir) -> Path:
    """4x4 16-bit RGB PNG; pixel (2, 1) is RGB (65535, 0, 46239)."""
    bgr = np.zeros((4, 4, 3), dtype=np.uint16)
    bgr[1, 2] = (46239, 0, 65535)
    bgr[3, 3] = (257, 514, 65534)

    path = image_dir / "deep.png"
    assert cv2.imwrite(str(path), bgr)
    return path


@pytest.fixture
def not_an_image_txt(image_dir) -> Path:
    path = image_dir / "not_an_image.txt"
    path.write_text("this is not an image\n")
    return path


@pytest.fixture
def fake_png(image_dir) -> Path:
    """Text content behind a .png extension."""
    path = image_dir / "fake.png"
    path.write_text("this is not an image either\n")
    return path
