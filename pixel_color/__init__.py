"""Pixel Color - Convert pixels between encoded and linear color spaces.

This package decodes pixel values through their transfer function into a
linear representation, maps them between RGB primaries through CIE XYZ and
into perceptual spaces such as Oklab and SRLAB2, and encodes them again.

Example:
    import numpy as np
    from pixel_color import RgbColorSpace, OKLAB, convert_buffer

    pixels = np.array([[1.0, 0.5, 0.25, 1.0]])
    lab = convert_buffer(pixels, RgbColorSpace.SRGB, OKLAB)

For a single pixel, use convert_pixel:

    from pixel_color import Primaries, RgbColorSpace, Transfer, Whitepoint, convert_pixel

    linear_srgb = RgbColorSpace(Primaries.BT709, Transfer.LINEAR, Whitepoint.D65)
    linear = convert_pixel((0.5, 0.5, 0.5, 1.0), RgbColorSpace.SRGB, linear_srgb)

For debug logging, enable with:

    import logging
    logging.getLogger("pixel_color").setLevel(logging.DEBUG)
    logging.basicConfig(level=logging.DEBUG)
"""
import logging

# Package logger - disabled by default, enable with logging.getLogger("pixel_color").setLevel(logging.DEBUG)
logger = logging.getLogger("pixel_color")
logger.addHandler(logging.NullHandler())
from .adaptation import adaptation_matrix
from .colorspace import (
    OKLAB,
    ColorSpace,
    Differencing,
    Oklab,
    RgbColorSpace,
    SampleParts,
    Scalars,
    SrLab2,
    YuvColorSpace,
    check_sample_parts,
)
from .config import (
    ColorNotImplementedError,
    Config,
    InvalidColorSpaceError,
    PixelColorError,
    SingularMatrixError,
)
from .convert import convert_buffer, convert_pixel, reencode_inplace
from .image import convert_image
from .matrix import ColMatrix, RowMatrix
from .primaries import Luminance, Primaries, primaries_to_xyz, xyz_to_primaries
from .transfer import (
    Transfer,
    encoded_to_optical,
    from_optical_buffer,
    optical_to_encoded,
    to_optical_buffer,
)
from .whitepoint import Whitepoint

__all__ = [
    "Config",
    "PixelColorError",
    "ColorNotImplementedError",
    "InvalidColorSpaceError",
    "SingularMatrixError",
    # Descriptors
    "ColorSpace",
    "RgbColorSpace",
    "YuvColorSpace",
    "Oklab",
    "OKLAB",
    "SrLab2",
    "Scalars",
    "SampleParts",
    "Differencing",
    "check_sample_parts",
    "Primaries",
    "Whitepoint",
    "Luminance",
    "Transfer",
    # Conversion
    "convert_pixel",
    "convert_buffer",
    "reencode_inplace",
    "convert_image",
    # Building blocks
    "RowMatrix",
    "ColMatrix",
    "primaries_to_xyz",
    "xyz_to_primaries",
    "adaptation_matrix",
    "encoded_to_optical",
    "optical_to_encoded",
    "to_optical_buffer",
    "from_optical_buffer",
]

__version__ = "1.0.0"
