"""RGB primaries and the derivation of their CIE XYZ conversion matrices."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Tuple

import numpy as np

from .matrix import ColMatrix, RowMatrix
from .whitepoint import Whitepoint

logger = logging.getLogger("pixel_color")

Chromaticities = Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]


class Primaries(Enum):
    """The relative stimuli of the three corners of a triangular RGB gamut."""

    # Linear values are CIE XYZ already
    XYZ = "xyz"
    # Same as SMPTE-240M
    BT601_525 = "bt601_525"
    BT601_625 = "bt601_625"
    BT709 = "bt709"
    SMPTE240 = "smpte240"
    # Wide color gamut
    BT2020 = "bt2020"
    BT2100 = "bt2100"

    def chromaticities(self) -> Optional[Chromaticities]:
        """The (x, y) chromaticity of red, green and blue.

        Returns None for :attr:`XYZ`, which has no physical primaries.
        """
        return _CHROMATICITIES.get(self)

    def to_xyz(self, whitepoint: Whitepoint) -> RowMatrix:
        return primaries_to_xyz(self, whitepoint)

    def from_xyz(self, whitepoint: Whitepoint) -> RowMatrix:
        return xyz_to_primaries(self, whitepoint)


# https://en.wikipedia.org/wiki/Color_spaces_with_RGB_primaries#Specifications_with_RGB_primaries
_CHROMATICITIES: Dict[Primaries, Chromaticities] = {
    Primaries.BT601_525: ((0.63, 0.34), (0.31, 0.595), (0.155, 0.07)),
    Primaries.SMPTE240: ((0.63, 0.34), (0.31, 0.595), (0.155, 0.07)),
    Primaries.BT601_625: ((0.64, 0.33), (0.29, 0.6), (0.15, 0.06)),
    Primaries.BT709: ((0.64, 0.33), (0.30, 0.60), (0.15, 0.06)),
    Primaries.BT2020: ((0.708, 0.292), (0.170, 0.797), (0.131, 0.046)),
    Primaries.BT2100: ((0.708, 0.292), (0.170, 0.797), (0.131, 0.046)),
}


class Luminance(Enum):
    """The reference peak brightness of a color specification."""

    SDR = "sdr"
    HDR = "hdr"
    ADOBE_RGB = "adobe_rgb"
    # Optimized for projector use
    DCI_P3 = "dci_p3"

    @property
    def cd_per_m2(self) -> float:
        return _LUMINANCE[self]


_LUMINANCE: Dict[Luminance, float] = {
    Luminance.SDR: 100.0,
    Luminance.HDR: 10000.0,
    Luminance.ADOBE_RGB: 160.0,
    Luminance.DCI_P3: 1000.0,
}


def _unweighted_xyz(xy: Tuple[float, float]) -> np.ndarray:
    """CIE XYZ of a primary at unit luminance."""
    x, y = xy
    return np.array([x / y, 1.0, (1.0 - x - y) / y])


def primaries_to_xyz(primaries: Primaries, whitepoint: Whitepoint) -> RowMatrix:
    """Derive the matrix mapping primaries-relative linear RGB to CIE XYZ.

    Each primary is scaled individually so that equal RGB maps exactly to
    the whitepoint (the van Kries construction used by sRGB et al.). This is
    not a full chromatic adaptation model; see SRLAB2 or CIECAM02 for models
    that are perceptually more correct with regard to illuminants.

    Args:
        primaries: The RGB primaries.
        whitepoint: Reference white of the RGB values.

    Returns:
        Row-major matrix ``M`` with ``XYZ = M · RGB``.

    Raises:
        SingularMatrixError: If the chromaticities are degenerate.
    """
    xy = primaries.chromaticities()
    if xy is None:
        return RowMatrix.identity()

    xyz_r, xyz_g, xyz_b = (_unweighted_xyz(p) for p in xy)

    # Unweighted conversion N = [xyz_r | xyz_g | xyz_b], XYZ = N · RGB
    n_inv = ColMatrix([xyz_r, xyz_g, xyz_b]).inv()

    # Weights that give the whitepoint, solving W = N · S
    w = whitepoint.to_xyz()
    s = n_inv.mul_vec(w)

    matrix = ColMatrix([s[0] * xyz_r, s[1] * xyz_g, s[2] * xyz_b]).transpose()
    logger.debug(
        f"Primaries {primaries.name} under {whitepoint.name}: weights={s.round(6).tolist()}"
    )
    return matrix


def xyz_to_primaries(primaries: Primaries, whitepoint: Whitepoint) -> RowMatrix:
    """Inverse of :func:`primaries_to_xyz`, mapping CIE XYZ to linear RGB."""
    return primaries_to_xyz(primaries, whitepoint).inv()
