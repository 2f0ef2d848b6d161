"""Tests for config module."""
from __future__ import annotations

import numpy as np
import pytest

from pixel_color.config import (
    ColorNotImplementedError,
    Config,
    InvalidColorSpaceError,
    PixelColorError,
    SingularMatrixError,
    validate_config,
    validate_pixels,
)


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self, default_config: Config) -> None:
        """Config should have sensible defaults."""
        assert default_config.chromatic_adaptation is None
        assert default_config.workers == 1
        assert default_config.chunk_size == 65536

    def test_custom_values(self) -> None:
        """Config should accept custom values."""
        config = Config(chromatic_adaptation="bradford", workers=4, chunk_size=128)
        assert config.chromatic_adaptation == "bradford"
        assert config.workers == 4
        assert config.chunk_size == 128


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_valid(self) -> None:
        """Should accept defaults and known methods."""
        validate_config(Config())
        validate_config(Config(chromatic_adaptation="cat02"))

    def test_zero_workers(self) -> None:
        """Should reject zero workers."""
        with pytest.raises(PixelColorError, match="workers"):
            validate_config(Config(workers=0))

    def test_zero_chunk(self) -> None:
        """Should reject an empty chunk size."""
        with pytest.raises(PixelColorError, match="Chunk size"):
            validate_config(Config(chunk_size=0))

    def test_unknown_adaptation(self) -> None:
        """Should reject unknown adaptation methods."""
        with pytest.raises(PixelColorError, match="Unknown chromatic adaptation"):
            validate_config(Config(chromatic_adaptation="guess"))


class TestValidatePixels:
    """Tests for validate_pixels function."""

    def test_valid_shapes(self) -> None:
        """Should accept any buffer with 4 trailing channels."""
        assert validate_pixels(np.zeros((10, 4))) == (10, 4)
        assert validate_pixels(np.zeros((2, 3, 4))) == (2, 3, 4)

    def test_wrong_channels(self) -> None:
        """Should reject 3-channel buffers."""
        with pytest.raises(PixelColorError, match="4 channels"):
            validate_pixels(np.zeros((10, 3)))

    def test_scalar(self) -> None:
        """Should reject 0-d arrays."""
        with pytest.raises(PixelColorError, match="4 channels"):
            validate_pixels(np.array(1.0))

    def test_mismatched_out(self) -> None:
        """Should reject an output buffer of a different shape."""
        with pytest.raises(PixelColorError, match="does not match"):
            validate_pixels(np.zeros((10, 4)), np.zeros((9, 4)))


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_is_exception(self) -> None:
        """Should be a proper Exception subclass."""
        assert issubclass(PixelColorError, Exception)

    def test_subclasses(self) -> None:
        """Specific errors should share the package base class."""
        assert issubclass(ColorNotImplementedError, PixelColorError)
        assert issubclass(ColorNotImplementedError, NotImplementedError)
        assert issubclass(InvalidColorSpaceError, PixelColorError)
        assert issubclass(InvalidColorSpaceError, ValueError)
        assert issubclass(SingularMatrixError, PixelColorError)

    def test_message(self) -> None:
        """Should preserve error message."""
        error = PixelColorError("test message")
        assert str(error) == "test message"
