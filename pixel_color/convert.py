"""Conversion of pixels and pixel buffers between color spaces."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .adaptation import adaptation_matrix
from .colorspace import (
    ColorSpace,
    Oklab,
    RgbColorSpace,
    Scalars,
    SrLab2,
    YuvColorSpace,
    describe,
)
from .config import (
    ColorNotImplementedError,
    Config,
    InvalidColorSpaceError,
    PixelColorError,
    validate_config,
    validate_pixels,
)
from .matrix import RowMatrix
from .oklab import oklab_to_xyz, xyz_to_oklab
from .primaries import primaries_to_xyz, xyz_to_primaries
from .srlab2 import srlab2_to_xyz, xyz_to_srlab2
from .transfer import (
    InplaceFn,
    from_optical_slice_inplace,
    to_optical_slice_inplace,
)
from .whitepoint import Whitepoint

logger = logging.getLogger("pixel_color")

LinearMap = Callable[[np.ndarray], np.ndarray]
Plan = Callable[[np.ndarray], np.ndarray]


def _no_op(pixels: np.ndarray) -> None:
    return None


def _yuv_not_implemented(color: YuvColorSpace) -> ColorNotImplementedError:
    return ColorNotImplementedError(
        f"YUV differencing {color.differencing.name} is not implemented"
    )


def _decoder(color: ColorSpace) -> InplaceFn:
    """In-place function turning stored values into the linear representation."""
    if isinstance(color, (RgbColorSpace, Scalars)):
        return to_optical_slice_inplace(color.transfer)
    if isinstance(color, YuvColorSpace):
        raise _yuv_not_implemented(color)
    if isinstance(color, (Oklab, SrLab2)):
        return _no_op
    raise InvalidColorSpaceError(f"Unknown color space: {color!r}")


def _encoder(color: ColorSpace) -> InplaceFn:
    """In-place function turning the linear representation into stored values."""
    if isinstance(color, (RgbColorSpace, Scalars)):
        return from_optical_slice_inplace(color.transfer)
    if isinstance(color, YuvColorSpace):
        raise _yuv_not_implemented(color)
    if isinstance(color, (Oklab, SrLab2)):
        return _no_op
    raise InvalidColorSpaceError(f"Unknown color space: {color!r}")


def _reference_white(color: ColorSpace) -> Whitepoint:
    if isinstance(color, (RgbColorSpace, SrLab2)):
        return color.whitepoint
    return Whitepoint.D65


def _to_xyz(color: ColorSpace) -> LinearMap:
    if isinstance(color, RgbColorSpace):
        return primaries_to_xyz(color.primaries, color.whitepoint).apply
    if isinstance(color, Oklab):
        return oklab_to_xyz
    if isinstance(color, SrLab2):
        whitepoint = color.whitepoint
        return lambda lab: srlab2_to_xyz(lab, whitepoint)
    raise InvalidColorSpaceError(f"{describe(color)} has no XYZ representation")


def _from_xyz(color: ColorSpace) -> LinearMap:
    if isinstance(color, RgbColorSpace):
        return xyz_to_primaries(color.primaries, color.whitepoint).apply
    if isinstance(color, Oklab):
        return xyz_to_oklab
    if isinstance(color, SrLab2):
        whitepoint = color.whitepoint
        return lambda xyz: xyz_to_srlab2(xyz, whitepoint)
    raise InvalidColorSpaceError(f"{describe(color)} has no XYZ representation")


def _adaptation(
    source: ColorSpace, destination: ColorSpace, config: Config
) -> Optional[RowMatrix]:
    if config.chromatic_adaptation is None:
        return None
    src_white = _reference_white(source)
    dst_white = _reference_white(destination)
    if src_white == dst_white:
        return None
    return adaptation_matrix(src_white, dst_white, config.chromatic_adaptation)


def _linear_map(
    source: ColorSpace, destination: ColorSpace, config: Config
) -> LinearMap:
    """Map the linear representation of ``source`` to that of ``destination``."""
    adapt = _adaptation(source, destination, config)

    if isinstance(source, RgbColorSpace) and isinstance(destination, RgbColorSpace):
        # Fuse RGB -> XYZ -> RGB into a single matrix
        matrix = xyz_to_primaries(destination.primaries, destination.whitepoint)
        if adapt is not None:
            matrix = matrix.mul_mat(adapt)
        matrix = matrix.mul_mat(
            primaries_to_xyz(source.primaries, source.whitepoint)
        )
        return matrix.apply

    to_xyz = _to_xyz(source)
    from_xyz = _from_xyz(destination)
    if adapt is None:
        return lambda values: from_xyz(to_xyz(values))
    return lambda values: from_xyz(adapt.apply(to_xyz(values)))


def _build_plan(
    source: ColorSpace, destination: ColorSpace, config: Config
) -> Plan:
    """Resolve every curve and matrix of a conversion before touching data.

    Raises:
        ColorNotImplementedError: If part of the path has no numeric definition.
        InvalidColorSpaceError: If the descriptors cannot be combined.
    """
    decode = _decoder(source)
    encode = _encoder(destination)

    if source == destination:
        return lambda block: np.array(block, dtype=np.float64)

    if isinstance(source, Scalars) or isinstance(destination, Scalars):
        # Coefficients carry over into the other linear representation as-is
        linear_map: Optional[LinearMap] = None
    else:
        linear_map = _linear_map(source, destination, config)

    def run(block: np.ndarray) -> np.ndarray:
        work = np.array(block, dtype=np.float64)
        decode(work)
        if linear_map is not None:
            work[..., :3] = linear_map(work[..., :3])
        encode(work)
        return work

    return run


def _run_chunked(plan: Plan, flat: np.ndarray, config: Config) -> np.ndarray:
    """Apply ``plan`` to independent chunks, optionally on a thread pool."""
    n_pixels = flat.shape[0]
    bounds: List[Tuple[int, int]] = [
        (start, min(start + config.chunk_size, n_pixels))
        for start in range(0, n_pixels, config.chunk_size)
    ]
    if not bounds:
        return np.empty_like(flat)

    if config.workers > 1 and len(bounds) > 1:
        logger.debug(f"Converting {len(bounds)} chunks on {config.workers} workers")
        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            results = list(pool.map(lambda b: plan(flat[b[0]:b[1]]), bounds))
    else:
        results = [plan(flat[start:end]) for start, end in bounds]

    return np.concatenate(results, axis=0)


def convert_buffer(
    pixels: np.ndarray,
    source: ColorSpace,
    destination: ColorSpace,
    out: Optional[np.ndarray] = None,
    config: Optional[Config] = None,
) -> np.ndarray:
    """Convert a buffer of pixels between color spaces.

    Every pixel is converted independently. Either the whole buffer is
    converted or an error is raised and ``out`` is left untouched.

    Args:
        pixels: Array of shape (..., 4), three color channels and alpha.
        source: Color space of the input values.
        destination: Color space of the output values.
        out: Optional destination array of the same shape.
        config: Conversion options. Uses defaults if None.

    Returns:
        Converted array of shape (..., 4), ``out`` when it was given.

    Raises:
        ColorNotImplementedError: If the conversion path is not implemented.
        InvalidColorSpaceError: If the descriptors cannot be combined.
        PixelColorError: If the buffers or the configuration are invalid.
    """
    config = config or Config()
    validate_config(config)

    pixels = np.asarray(pixels, dtype=np.float64)
    shape = validate_pixels(pixels, out)
    plan = _build_plan(source, destination, config)

    flat = pixels.reshape(-1, 4)
    logger.debug(
        f"Converting {flat.shape[0]} pixels: {describe(source)} -> {describe(destination)}"
    )
    result = _run_chunked(plan, flat, config).reshape(shape)

    if out is None:
        return result
    out[...] = result
    return out


def convert_pixel(
    pixel: Sequence[float],
    source: ColorSpace,
    destination: ColorSpace,
    config: Optional[Config] = None,
) -> Tuple[float, ...]:
    """Convert a single pixel (three color channels and alpha)."""
    result = convert_buffer(
        np.asarray(pixel, dtype=np.float64)[None, :], source, destination, config=config
    )
    return tuple(float(v) for v in result[0])


def reencode_inplace(
    pixels: np.ndarray, source: RgbColorSpace, destination: RgbColorSpace
) -> None:
    """Change only the transfer function of an RGB buffer, in place.

    Args:
        pixels: Floating point array of shape (..., 4), modified in place.
        source: Color space of the input values.
        destination: Color space with the same primaries and whitepoint.

    Raises:
        InvalidColorSpaceError: If primaries or whitepoints differ.
        ColorNotImplementedError: If a transfer is not implemented.
        PixelColorError: If the buffer cannot be modified in place.
    """
    if not isinstance(source, RgbColorSpace) or not isinstance(
        destination, RgbColorSpace
    ):
        raise InvalidColorSpaceError("In-place re-encoding requires RGB color spaces")
    if (source.primaries, source.whitepoint) != (
        destination.primaries,
        destination.whitepoint,
    ):
        raise InvalidColorSpaceError(
            "In-place re-encoding requires matching primaries and whitepoint"
        )
    if not isinstance(pixels, np.ndarray) or not np.issubdtype(
        pixels.dtype, np.floating
    ):
        raise PixelColorError("In-place re-encoding requires a floating point array")
    validate_pixels(pixels)

    decode = to_optical_slice_inplace(source.transfer)
    encode = from_optical_slice_inplace(destination.transfer)
    if source.transfer == destination.transfer:
        return
    decode(pixels)
    encode(pixels)
