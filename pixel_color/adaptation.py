"""Chromatic adaptation transforms between whitepoints.

The transforms scale the whitepoint ratio in a cone-like response space:
``M⁻¹ · diag(ρ_dst / ρ_src) · M``. Conversion only applies them when
``Config.chromatic_adaptation`` names a method.
"""
from __future__ import annotations

import logging
from typing import Dict

import numpy as np

from .config import PixelColorError
from .matrix import RowMatrix
from .whitepoint import Whitepoint

logger = logging.getLogger("pixel_color")

BRADFORD = RowMatrix([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
])

VON_KRIES = RowMatrix([
    [0.40024, 0.70760, -0.08081],
    [-0.22630, 1.16532, 0.04570],
    [0.00000, 0.00000, 0.91822],
])

CAT02 = RowMatrix([
    [0.7328, 0.4296, -0.1624],
    [-0.7036, 1.6975, 0.0061],
    [0.0030, 0.0136, 0.9834],
])

_CONE_SPACES: Dict[str, RowMatrix] = {
    "bradford": BRADFORD,
    "von_kries": VON_KRIES,
    "cat02": CAT02,
    "xyz_scaling": RowMatrix.identity(),
}

ADAPTATION_METHODS = tuple(_CONE_SPACES)


def adaptation_matrix(
    source: Whitepoint, destination: Whitepoint, method: str = "bradford"
) -> RowMatrix:
    """Build the XYZ to XYZ matrix adapting ``source`` white to ``destination``.

    Args:
        source: Whitepoint the XYZ values are relative to.
        destination: Whitepoint to adapt to.
        method: One of ``bradford``, ``von_kries``, ``cat02``, ``xyz_scaling``.

    Returns:
        Row-major adaptation matrix.

    Raises:
        PixelColorError: If the method is unknown.
    """
    try:
        cone = _CONE_SPACES[method]
    except KeyError:
        raise PixelColorError(
            f"Unknown chromatic adaptation: {method}. "
            f"Available: {', '.join(ADAPTATION_METHODS)}"
        ) from None

    if source == destination:
        return RowMatrix.identity()

    rho_src = cone.mul_vec(source.to_xyz())
    rho_dst = cone.mul_vec(destination.to_xyz())
    gains = RowMatrix(np.diag(rho_dst / rho_src))
    logger.debug(
        f"Adapting {source.name} -> {destination.name} ({method}): "
        f"gains={(rho_dst / rho_src).round(6).tolist()}"
    )
    return cone.inv().mul_mat(gains).mul_mat(cone)
