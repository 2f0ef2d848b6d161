"""Color space descriptors.

A descriptor names the path from the numbers stored in a pixel to a linear
representation suitable for mixing and blending, and from there to CIE XYZ.
They are immutable values, passed by value into every conversion.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, FrozenSet, Union

from .config import InvalidColorSpaceError
from .primaries import Luminance, Primaries
from .transfer import Transfer
from .whitepoint import Whitepoint


class SampleParts(Enum):
    """Channel layout of the stored samples."""

    RGB = "rgb"
    RGBA = "rgba"
    XYZ = "xyz"
    XYZA = "xyza"
    YUV = "yuv"
    YUVA = "yuva"
    LAB = "lab"
    LABA = "laba"
    LCH = "lch"
    LCHA = "lcha"


class Differencing(Enum):
    """The differencing scheme used in a YUV construction."""

    # Rec. BT.470 M/PAL, the naming origin of 'YUV'
    BT470_MPAL = "bt470_mpal"
    # BT.470 M/PAL re-derived from its parameters instead of its published typo
    BT470_MPAL_PRECISE = "bt470_mpal_precise"
    BT601 = "bt601"
    # Quantized with headroom, intended for analog use
    BT601_QUANTIZED = "bt601_quantized"
    BT601_FULL_SWING = "bt601_full_swing"
    BT709 = "bt709"
    BT709_QUANTIZED = "bt709_quantized"
    # Introduced in H.264, not an ITU BT recommendation
    BT709_FULL_SWING = "bt709_full_swing"
    # Factors from analog SECAM
    YDBDR = "ydbdr"
    BT2020 = "bt2020"
    # Same coefficients as BT2020
    BT2100 = "bt2100"
    # ITU-T H.273
    YCOCG = "ycocg"


@dataclass(frozen=True)
class RgbColorSpace:
    """An additive RGB model based on the CIE 1931 XYZ observer.

    The linear representation is screen-space linear RGB relative to the
    primaries, whitepoint and reference luminance. It is derived from the
    encoded form through the transfer function.
    """

    primaries: Primaries
    transfer: Transfer
    whitepoint: Whitepoint
    luminance: Luminance = Luminance.SDR

    SRGB: ClassVar["RgbColorSpace"]
    BT709_RGB: ClassVar["RgbColorSpace"]


RgbColorSpace.SRGB = RgbColorSpace(
    primaries=Primaries.BT709,
    transfer=Transfer.SRGB,
    whitepoint=Whitepoint.D65,
    luminance=Luminance.SDR,
)
RgbColorSpace.BT709_RGB = RgbColorSpace(
    primaries=Primaries.BT709,
    transfer=Transfer.BT709,
    whitepoint=Whitepoint.D65,
    luminance=Luminance.SDR,
)


@dataclass(frozen=True)
class YuvColorSpace:
    """Luma and color difference channels over an RGB model."""

    differencing: Differencing
    primaries: Primaries
    transfer: Transfer
    whitepoint: Whitepoint
    luminance: Luminance = Luminance.SDR


@dataclass(frozen=True)
class Oklab:
    """The perceptual space Oklab by Björn Ottosson.

    Reference: https://bottosson.github.io/posts/oklab/
    """


@dataclass(frozen=True)
class SrLab2:
    """SRLAB2, CIECAM02 whitepoint adaptation with an L*-style transfer.

    Reference: https://www.magnetkern.de/srlab2.html
    """

    whitepoint: Whitepoint = Whitepoint.D65


@dataclass(frozen=True)
class Scalars:
    """Coefficients with no assigned relation to physical quantities.

    The linear values pass unchanged into the linear representation of the
    other side of a conversion. ``transfer`` encodes them as if they were
    RGB, use ``Transfer.LINEAR`` to store them as-is.
    """

    transfer: Transfer = Transfer.LINEAR
    parts: SampleParts = SampleParts.XYZ

    def __post_init__(self) -> None:
        if self.parts not in (SampleParts.XYZ, SampleParts.XYZA):
            raise InvalidColorSpaceError(
                f"Scalars must use an XYZ sample layout, got {self.parts.name}"
            )


ColorSpace = Union[RgbColorSpace, YuvColorSpace, Oklab, SrLab2, Scalars]

OKLAB = Oklab()

_ALLOWED_PARTS: Dict[type, FrozenSet[SampleParts]] = {
    RgbColorSpace: frozenset({SampleParts.RGB, SampleParts.RGBA}),
    YuvColorSpace: frozenset({SampleParts.YUV, SampleParts.YUVA}),
    Oklab: frozenset(
        {SampleParts.LAB, SampleParts.LABA, SampleParts.LCH, SampleParts.LCHA}
    ),
    SrLab2: frozenset(
        {SampleParts.LAB, SampleParts.LABA, SampleParts.LCH, SampleParts.LCHA}
    ),
    Scalars: frozenset({SampleParts.XYZ, SampleParts.XYZA}),
}


def check_sample_parts(color: ColorSpace, parts: SampleParts) -> None:
    """Validate that a channel layout can hold values of ``color``.

    Raises:
        InvalidColorSpaceError: If the combination is not allowed.
    """
    allowed = _ALLOWED_PARTS.get(type(color))
    if allowed is None:
        raise InvalidColorSpaceError(f"Unknown color space: {color!r}")
    if parts not in allowed:
        raise InvalidColorSpaceError(
            f"{type(color).__name__} cannot be stored as {parts.name}"
        )


def describe(color: ColorSpace) -> str:
    """Short human-readable name used in log messages."""
    if isinstance(color, RgbColorSpace):
        return (
            f"Rgb({color.primaries.name}, {color.transfer.name}, "
            f"{color.whitepoint.name})"
        )
    if isinstance(color, YuvColorSpace):
        return f"Yuv({color.differencing.name}, {color.primaries.name})"
    if isinstance(color, SrLab2):
        return f"SrLab2({color.whitepoint.name})"
    if isinstance(color, Scalars):
        return f"Scalars({color.transfer.name})"
    return type(color).__name__
