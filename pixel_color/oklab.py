"""Oklab, a perceptual color space by Björn Ottosson.

Two linear transforms with a cube root between them. The coefficients were
optimized against matching pairs of the CAM16 model; the reference white is
fixed to D65.

Reference: https://bottosson.github.io/posts/oklab/
"""
from __future__ import annotations

import numpy as np

from .matrix import RowMatrix

# CIE XYZ (D65) to approximate cone responses
XYZ_TO_LMS = RowMatrix([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715, 0.0361456387],
    [0.0482003018, 0.2643662691, 0.6338517070],
])

# Non-linear cone responses to Lab
LMS_TO_LAB = RowMatrix([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

LMS_TO_XYZ = XYZ_TO_LMS.inv()
LAB_TO_LMS = LMS_TO_LAB.inv()


def xyz_to_oklab(xyz: np.ndarray) -> np.ndarray:
    """Convert CIE XYZ values to Oklab.

    Negative cone responses use the signed cube root, so values slightly
    outside the display gamut keep a well-defined inverse.

    Args:
        xyz: Array of shape (N, 3) with D65-relative XYZ values.

    Returns:
        Array of shape (N, 3) with L, a and b.
    """
    lms = XYZ_TO_LMS.apply(np.asarray(xyz, dtype=np.float64))
    return LMS_TO_LAB.apply(np.cbrt(lms))


def oklab_to_xyz(lab: np.ndarray) -> np.ndarray:
    """Convert Oklab values back to CIE XYZ."""
    lms_ = LAB_TO_LMS.apply(np.asarray(lab, dtype=np.float64))
    return LMS_TO_XYZ.apply(lms_ ** 3)
