"""Transfer functions between encoded and optical (linear) values.

Each :class:`Transfer` names an EOTF/OETF pair. The curves are applied to the
R, G and B channels independently, alpha is passed through unchanged. The
scalar, per-pixel and buffer forms share one numpy implementation per curve
so they produce the same numbers.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from .config import ColorNotImplementedError, validate_pixels

Curve = Callable[[np.ndarray], np.ndarray]
SliceFn = Callable[[np.ndarray, np.ndarray], None]
InplaceFn = Callable[[np.ndarray], None]


class Transfer(Enum):
    """Named transfer curves."""

    LINEAR = "linear"
    SRGB = "srgb"
    BT709 = "bt709"
    BT470M = "bt470m"
    BT601 = "bt601"
    SMPTE240 = "smpte240"
    BT2020_10BIT = "bt2020_10bit"
    BT2020_12BIT = "bt2020_12bit"
    SMPTE2084 = "smpte2084"
    BT2100_PQ = "bt2100_pq"
    BT2100_HLG = "bt2100_hlg"
    BT2100_SCENE = "bt2100_scene"

    @property
    def is_implemented(self) -> bool:
        """Whether the curve has a numeric definition."""
        return self in _CURVES


@dataclass(frozen=True)
class _PiecewiseGamma:
    """A power curve with a linear segment near black.

    The optical to encoded direction is ``slope * x`` below ``beta`` and
    ``alpha * x**exponent - (alpha - 1)`` above it. With the published
    (rounded) constants the two segments do not meet exactly; encoded values
    inside that gap decode to ``beta``.
    """

    alpha: float
    beta: float
    slope: float
    exponent: float

    def to_optical(self, x: np.ndarray) -> np.ndarray:
        offset = self.alpha - 1.0
        upper_knee = self.alpha * self.beta ** self.exponent - offset
        power = ((np.maximum(x, upper_knee) + offset) / self.alpha) ** (1.0 / self.exponent)
        return np.where(x < self.slope * self.beta, x / self.slope, power)

    def from_optical(self, x: np.ndarray) -> np.ndarray:
        offset = self.alpha - 1.0
        power = self.alpha * np.maximum(x, self.beta) ** self.exponent - offset
        return np.where(x < self.beta, self.slope * x, power)


# Rec. ITU-R BT.709-6, also used by BT.601 and (10-bit) BT.2020
_BT709 = _PiecewiseGamma(alpha=1.099, beta=0.018, slope=4.5, exponent=0.45)
# SMPTE ST 240M
_SMPTE240 = _PiecewiseGamma(alpha=1.1115, beta=0.0228, slope=4.0, exponent=0.45)


def _eo_srgb(x: np.ndarray) -> np.ndarray:
    power = ((np.maximum(x, 0.04045) + 0.055) / 1.055) ** 2.4
    return np.where(x <= 0.04045, x / 12.92, power)


def _oe_srgb(x: np.ndarray) -> np.ndarray:
    power = 1.055 * np.maximum(x, 0.0031308) ** (1.0 / 2.4) - 0.055
    return np.where(x <= 0.0031308, 12.92 * x, power)


def _eo_bt470m(x: np.ndarray) -> np.ndarray:
    # Pure gamma 2.2, odd extension below zero
    return np.sign(x) * np.abs(x) ** 2.2


def _oe_bt470m(x: np.ndarray) -> np.ndarray:
    return np.sign(x) * np.abs(x) ** (1.0 / 2.2)


# SMPTE ST 2084, optical values are relative to 10000 cd/m²
_PQ_M1 = 2610.0 / 16384.0
_PQ_M2 = 2523.0 / 4096.0 * 128.0
_PQ_C1 = 3424.0 / 4096.0
_PQ_C2 = 2413.0 / 4096.0 * 32.0
_PQ_C3 = 2392.0 / 4096.0 * 32.0


def _eo_smpte2084(x: np.ndarray) -> np.ndarray:
    e = np.clip(x, 0.0, 1.0) ** (1.0 / _PQ_M2)
    return (np.maximum(e - _PQ_C1, 0.0) / (_PQ_C2 - _PQ_C3 * e)) ** (1.0 / _PQ_M1)


def _oe_smpte2084(x: np.ndarray) -> np.ndarray:
    y = np.maximum(x, 0.0) ** _PQ_M1
    return ((_PQ_C1 + _PQ_C2 * y) / (1.0 + _PQ_C3 * y)) ** _PQ_M2


def _identity(x: np.ndarray) -> np.ndarray:
    return x


# Transfer -> (encoded to optical, optical to encoded)
_CURVES: Dict[Transfer, Tuple[Curve, Curve]] = {
    Transfer.LINEAR: (_identity, _identity),
    Transfer.SRGB: (_eo_srgb, _oe_srgb),
    Transfer.BT709: (_BT709.to_optical, _BT709.from_optical),
    Transfer.BT470M: (_eo_bt470m, _oe_bt470m),
    Transfer.BT601: (_BT709.to_optical, _BT709.from_optical),
    Transfer.SMPTE240: (_SMPTE240.to_optical, _SMPTE240.from_optical),
    Transfer.BT2020_10BIT: (_BT709.to_optical, _BT709.from_optical),
    Transfer.SMPTE2084: (_eo_smpte2084, _oe_smpte2084),
}


def curves(transfer: Transfer) -> Tuple[Curve, Curve]:
    """Look up the (encoded to optical, optical to encoded) curve pair.

    Raises:
        ColorNotImplementedError: If the transfer has no numeric definition.
    """
    try:
        return _CURVES[transfer]
    except KeyError:
        raise ColorNotImplementedError(
            f"Transfer {transfer.name} is not implemented"
        ) from None


def encoded_to_optical(transfer: Transfer, x: float) -> float:
    """Apply the EOTF of ``transfer`` to a single channel value."""
    eo, _ = curves(transfer)
    return float(eo(np.float64(x)))


def optical_to_encoded(transfer: Transfer, x: float) -> float:
    """Apply the OETF of ``transfer`` to a single channel value."""
    _, oe = curves(transfer)
    return float(oe(np.float64(x)))


def _rgb_slice(curve: Curve) -> SliceFn:
    def apply(texels: np.ndarray, pixels: np.ndarray) -> None:
        rgb = curve(texels[..., :3])
        pixels[..., 3] = texels[..., 3]
        pixels[..., :3] = rgb

    return apply


def _rgb_inplace(curve: Curve) -> InplaceFn:
    def apply(pixels: np.ndarray) -> None:
        pixels[..., :3] = curve(pixels[..., :3])

    return apply


def to_optical_slice(transfer: Transfer) -> SliceFn:
    """Buffer function decoding ``texels`` into ``pixels``."""
    eo, _ = curves(transfer)
    return _rgb_slice(eo)


def to_optical_slice_inplace(transfer: Transfer) -> InplaceFn:
    """Buffer function decoding ``pixels`` in place."""
    eo, _ = curves(transfer)
    return _rgb_inplace(eo)


def from_optical_slice(transfer: Transfer) -> SliceFn:
    """Buffer function encoding ``pixels`` into ``texels``."""
    _, oe = curves(transfer)
    return _rgb_slice(oe)


def from_optical_slice_inplace(transfer: Transfer) -> InplaceFn:
    """Buffer function encoding ``pixels`` in place."""
    _, oe = curves(transfer)
    return _rgb_inplace(oe)


def to_optical_buffer(
    transfer: Transfer, pixels: np.ndarray, out: Optional[np.ndarray] = None
) -> np.ndarray:
    """Decode a buffer of RGBA values to optical values.

    Args:
        transfer: Transfer curve of the encoded values.
        pixels: Array of shape (..., 4).
        out: Optional destination, may be ``pixels`` itself.

    Returns:
        Array of shape (..., 4) with linear RGB and unchanged alpha.

    Raises:
        ColorNotImplementedError: If the transfer has no numeric definition.
        PixelColorError: If the buffers have the wrong shape.
    """
    apply = to_optical_slice(transfer)
    pixels = np.asarray(pixels, dtype=np.float64)
    validate_pixels(pixels, out)
    if out is None:
        out = np.empty_like(pixels)
    apply(pixels, out)
    return out


def from_optical_buffer(
    transfer: Transfer, pixels: np.ndarray, out: Optional[np.ndarray] = None
) -> np.ndarray:
    """Encode a buffer of linear RGBA values, see :func:`to_optical_buffer`."""
    apply = from_optical_slice(transfer)
    pixels = np.asarray(pixels, dtype=np.float64)
    validate_pixels(pixels, out)
    if out is None:
        out = np.empty_like(pixels)
    apply(pixels, out)
    return out


def to_optical(transfer: Transfer, pixel: Sequence[float]) -> Tuple[float, ...]:
    """Decode one RGBA pixel."""
    result = to_optical_buffer(transfer, np.asarray(pixel, dtype=np.float64)[None, :])
    return tuple(float(v) for v in result[0])


def from_optical(transfer: Transfer, pixel: Sequence[float]) -> Tuple[float, ...]:
    """Encode one linear RGBA pixel."""
    result = from_optical_buffer(transfer, np.asarray(pixel, dtype=np.float64)[None, :])
    return tuple(float(v) for v in result[0])
