"""Pytest fixtures for pixel_color tests."""
from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from pixel_color import Config, Primaries, RgbColorSpace, Transfer, Whitepoint


@pytest.fixture
def default_config() -> Config:
    """Return a default Config instance."""
    return Config()


@pytest.fixture
def linear_srgb() -> RgbColorSpace:
    """sRGB primaries and whitepoint without a transfer curve."""
    return RgbColorSpace(Primaries.BT709, Transfer.LINEAR, Whitepoint.D65)


@pytest.fixture
def linear_bt2020() -> RgbColorSpace:
    """BT.2020 primaries with D65 white, linear."""
    return RgbColorSpace(Primaries.BT2020, Transfer.LINEAR, Whitepoint.D65)


@pytest.fixture
def sample_pixels() -> np.ndarray:
    """A reproducible (256, 4) buffer of in-gamut RGBA values."""
    rng = np.random.default_rng(42)
    return rng.uniform(0.0, 1.0, size=(256, 4))


@pytest.fixture
def primary_pixels() -> np.ndarray:
    """Black, white, the three primaries and one mixed color, opaque."""
    return np.array([
        [0.0, 0.0, 0.0, 1.0],
        [1.0, 1.0, 1.0, 1.0],
        [1.0, 0.0, 0.0, 1.0],
        [0.0, 1.0, 0.0, 1.0],
        [0.0, 0.0, 1.0, 1.0],
        [0.5, 0.25, 0.75, 1.0],
    ])


@pytest.fixture
def gradient_image() -> Image.Image:
    """Create a 64x16 RGBA image with a horizontal gray gradient."""
    img = Image.new("RGBA", (64, 16), (255, 255, 255, 255))
    arr = np.array(img)

    for x in range(64):
        gray = int(x * 255 / 63)
        arr[:, x] = (gray, gray, gray, 200)

    return Image.fromarray(arr)
