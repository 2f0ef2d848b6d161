"""Color conversion of Pillow images."""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PIL import Image

from .channels import from_normalized, to_normalized
from .colorspace import ColorSpace, RgbColorSpace, Scalars
from .config import Config, InvalidColorSpaceError, PixelColorError
from .convert import convert_buffer

logger = logging.getLogger("pixel_color")


def _check_storable(color: ColorSpace) -> None:
    if not isinstance(color, (RgbColorSpace, Scalars)):
        raise InvalidColorSpaceError(
            f"{type(color).__name__} values cannot be stored in 8-bit image channels"
        )


def convert_image(
    img: Image.Image,
    source: ColorSpace,
    destination: ColorSpace,
    config: Optional[Config] = None,
) -> Image.Image:
    """Convert an 8-bit RGB or RGBA image between color spaces.

    Args:
        img: Input image in mode ``RGB`` or ``RGBA``.
        source: Color space of the stored channels.
        destination: Color space of the output channels.
        config: Conversion options. Uses defaults if None.

    Returns:
        New image with the same mode and size.

    Raises:
        PixelColorError: If the image mode is not supported.
        InvalidColorSpaceError: If a color space has no [0, 1] encoding.
    """
    if img.mode not in ("RGB", "RGBA"):
        raise PixelColorError(f"Unsupported image mode: {img.mode}")
    _check_storable(source)
    _check_storable(destination)

    arr = np.array(img.convert("RGBA"), dtype=np.uint8)
    logger.debug(f"Converting {img.mode} image of size {img.size[0]}x{img.size[1]}")

    pixels = to_normalized(arr)
    converted = convert_buffer(pixels, source, destination, config=config)
    result = Image.fromarray(from_normalized(converted, np.uint8))

    if img.mode == "RGB":
        return result.convert("RGB")
    return result
