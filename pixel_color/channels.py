"""Adapters between concrete channel widths and normalized floats."""
from __future__ import annotations

import numpy as np

from .config import PixelColorError


def to_normalized(values: np.ndarray) -> np.ndarray:
    """Convert channel values to float64.

    Unsigned integers are scaled so their full range maps to [0, 1], floats
    are taken as already normalized.

    Raises:
        PixelColorError: If the dtype is not supported.
    """
    values = np.asarray(values)
    if np.issubdtype(values.dtype, np.floating):
        return values.astype(np.float64)
    if values.dtype in (np.uint8, np.uint16):
        return values.astype(np.float64) / np.iinfo(values.dtype).max
    raise PixelColorError(f"Unsupported channel type: {values.dtype}")


def from_normalized(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Convert normalized floats to ``dtype``, rounding and clamping integers.

    Raises:
        PixelColorError: If the dtype is not supported.
    """
    dtype = np.dtype(dtype)
    values = np.asarray(values, dtype=np.float64)
    if np.issubdtype(dtype, np.floating):
        return values.astype(dtype)
    if dtype in (np.uint8, np.uint16):
        max_value = np.iinfo(dtype).max
        scaled = np.rint(np.clip(values, 0.0, 1.0) * max_value)
        return scaled.astype(dtype)
    raise PixelColorError(f"Unsupported channel type: {dtype}")
