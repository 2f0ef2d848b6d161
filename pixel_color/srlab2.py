"""SRLAB2, a compromise between the simplicity of CIELAB and CIECAM02.

Whitepoint adaptation happens in the CIECAM02 (CAT02) space, the L*-style
transfer is applied to Hunt-Pointer-Estevez cone responses. The surround
luminance model of CIECAM02 is left out. Being based on L*a*b*, it is tuned
for the small gamut of SDR content.

Reference: https://www.magnetkern.de/srlab2.html
"""
from __future__ import annotations

import numpy as np

from .matrix import RowMatrix
from .whitepoint import Whitepoint

M_CAT02 = RowMatrix([
    [0.7328, 0.4296, -0.1624],
    [-0.7036, 1.6975, 0.0061],
    [0.0030, 0.0136, 0.9834],
])

M_HPE = RowMatrix([
    [0.38971, 0.68898, -0.07868],
    [-0.22981, 1.18340, 0.04641],
    [0.00000, 0.00000, 1.00000],
])

# Non-linear cone responses to L, a, b
M_LAB = RowMatrix([
    [37.0950, 62.9054, -0.0008],
    [663.4684, -750.5078, 87.0328],
    [63.9569, 108.4576, -172.4152],
])

M_CAT02_INV = M_CAT02.inv()
M_HPE_INV = M_HPE.inv()
M_LAB_INV = M_LAB.inv()

# L* constants, epsilon = (6/29)^3 and kappa / 100
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 2700.0


def _cone_transfer(x: np.ndarray) -> np.ndarray:
    power = 1.16 * np.cbrt(np.maximum(x, _EPSILON)) - 0.16
    return np.where(x <= _EPSILON, x * _KAPPA, power)


def _cone_transfer_inv(x: np.ndarray) -> np.ndarray:
    knee = _EPSILON * _KAPPA
    power = ((np.maximum(x, knee) + 0.16) / 1.16) ** 3
    return np.where(x <= knee, x / _KAPPA, power)


def _adaptation(whitepoint: Whitepoint) -> np.ndarray:
    """Per-channel CAT02 gains for full adaptation to ``whitepoint``."""
    return 1.0 / M_CAT02.mul_vec(whitepoint.to_xyz())


def xyz_to_srlab2(xyz: np.ndarray, whitepoint: Whitepoint = Whitepoint.D65) -> np.ndarray:
    """Convert CIE XYZ values to SRLAB2.

    Args:
        xyz: Array of shape (N, 3), XYZ relative to ``whitepoint``.
        whitepoint: The adopted white, mapped to L=100, a=b=0.

    Returns:
        Array of shape (N, 3) with L, a and b.
    """
    rgb = M_CAT02.apply(np.asarray(xyz, dtype=np.float64)) * _adaptation(whitepoint)
    lms = M_HPE.apply(M_CAT02_INV.apply(rgb))
    return M_LAB.apply(_cone_transfer(lms))


def srlab2_to_xyz(lab: np.ndarray, whitepoint: Whitepoint = Whitepoint.D65) -> np.ndarray:
    """Convert SRLAB2 values back to CIE XYZ relative to ``whitepoint``."""
    lms = _cone_transfer_inv(M_LAB_INV.apply(np.asarray(lab, dtype=np.float64)))
    rgb = M_CAT02.apply(M_HPE_INV.apply(lms)) / _adaptation(whitepoint)
    return M_CAT02_INV.apply(rgb)
