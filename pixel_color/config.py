"""Configuration, errors and validation for pixel color conversion."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


class PixelColorError(Exception):
    """Base exception for pixel color errors."""

    pass


class ColorNotImplementedError(PixelColorError, NotImplementedError):
    """A transfer curve or color path has no numeric definition yet."""

    pass


class InvalidColorSpaceError(PixelColorError, ValueError):
    """A color space descriptor combination is not allowed."""

    pass


class SingularMatrixError(PixelColorError, ArithmeticError):
    """A 3x3 matrix could not be inverted."""

    pass


@dataclass
class Config:
    """Configuration for buffer conversion."""

    # Chromatic adaptation between differing whitepoints, None disables it
    chromatic_adaptation: Optional[str] = None

    # Threaded chunking of large buffers
    workers: int = 1
    chunk_size: int = 65536


def validate_config(config: Config) -> None:
    """Validate conversion configuration values.

    Args:
        config: Configuration to check.

    Raises:
        PixelColorError: If a value is out of range.
    """
    from .adaptation import ADAPTATION_METHODS

    if config.workers < 1:
        raise PixelColorError("Number of workers must be at least 1")
    if config.chunk_size < 1:
        raise PixelColorError("Chunk size must be at least 1")
    if (
        config.chromatic_adaptation is not None
        and config.chromatic_adaptation not in ADAPTATION_METHODS
    ):
        raise PixelColorError(
            f"Unknown chromatic adaptation: {config.chromatic_adaptation}. "
            f"Available: {', '.join(ADAPTATION_METHODS)}"
        )


def validate_pixels(
    pixels: np.ndarray, out: Optional[np.ndarray] = None
) -> Tuple[int, ...]:
    """Validate a pixel buffer and an optional output buffer.

    Args:
        pixels: Array whose last dimension holds RGBA-like channels.
        out: Optional destination array.

    Returns:
        Shape of the pixel buffer.

    Raises:
        PixelColorError: If the buffers have the wrong shape.
    """
    if pixels.ndim == 0 or pixels.shape[-1] != 4:
        raise PixelColorError(
            f"Pixels must have 4 channels in the last dimension, got shape {pixels.shape}"
        )
    if out is not None and out.shape != pixels.shape:
        raise PixelColorError(
            f"Output shape {out.shape} does not match input shape {pixels.shape}"
        )
    return pixels.shape
