"""Tests for oklab, srlab2 and polar modules."""
from __future__ import annotations

import numpy as np
import pytest

from pixel_color.oklab import oklab_to_xyz, xyz_to_oklab
from pixel_color.polar import lab_to_lch, lch_to_lab
from pixel_color.primaries import Primaries, primaries_to_xyz
from pixel_color.srlab2 import srlab2_to_xyz, xyz_to_srlab2
from pixel_color.whitepoint import Whitepoint


@pytest.fixture
def xyz_samples() -> np.ndarray:
    """XYZ values including some slightly outside the visible gamut."""
    rng = np.random.default_rng(7)
    values = rng.uniform(0.0, 1.0, size=(64, 3))
    extra = np.array([
        [0.0, 0.0, 0.0],
        [-0.01, 0.002, -0.005],
        [1.2, 1.1, 1.3],
    ])
    return np.vstack([values, extra])


class TestOklab:
    """Tests for the Oklab converter."""

    def test_white(self) -> None:
        """D65 white should map to L=1, a=b=0."""
        lab = xyz_to_oklab(Whitepoint.D65.to_xyz()[None, :])
        np.testing.assert_allclose(lab[0], [1.0, 0.0, 0.0], atol=1e-3)

    def test_black(self) -> None:
        """Black should map to the origin."""
        lab = xyz_to_oklab(np.zeros((1, 3)))
        np.testing.assert_allclose(lab[0], [0.0, 0.0, 0.0], atol=1e-12)

    def test_gray_is_neutral(self) -> None:
        """Scaled D65 white should stay on the neutral axis."""
        lab = xyz_to_oklab(0.18 * Whitepoint.D65.to_xyz()[None, :])
        assert lab[0, 0] == pytest.approx(np.cbrt(0.18), abs=1e-3)
        np.testing.assert_allclose(lab[0, 1:], [0.0, 0.0], atol=1e-3)

    def test_round_trip(self, xyz_samples: np.ndarray) -> None:
        """XYZ -> Oklab -> XYZ should recover the input."""
        np.testing.assert_allclose(
            oklab_to_xyz(xyz_to_oklab(xyz_samples)), xyz_samples, atol=1e-9
        )

    def test_below_black_stays_finite(self) -> None:
        """Negative cone responses should use the signed cube root."""
        with np.errstate(all="raise"):
            lab = xyz_to_oklab(np.array([[-0.01, -0.01, -0.01]]))
        assert np.all(np.isfinite(lab))
        assert lab[0, 0] < 0


class TestSrLab2:
    """Tests for the SRLAB2 converter."""

    @pytest.mark.parametrize(
        "whitepoint", [Whitepoint.D65, Whitepoint.D50, Whitepoint.A, Whitepoint.E]
    )
    def test_white(self, whitepoint: Whitepoint) -> None:
        """The adopted white should map to L=100, a=b=0."""
        lab = xyz_to_srlab2(whitepoint.to_xyz()[None, :], whitepoint)
        np.testing.assert_allclose(lab[0], [100.0, 0.0, 0.0], atol=0.02)

    def test_black(self) -> None:
        """Black should map to the origin."""
        lab = xyz_to_srlab2(np.zeros((1, 3)))
        np.testing.assert_allclose(lab[0], [0.0, 0.0, 0.0], atol=1e-9)

    def test_middle_gray(self) -> None:
        """18% gray should land near L*=49.5."""
        lab = xyz_to_srlab2(0.18 * Whitepoint.D65.to_xyz()[None, :])
        assert lab[0, 0] == pytest.approx(49.5, abs=0.1)
        np.testing.assert_allclose(lab[0, 1:], [0.0, 0.0], atol=0.02)

    def test_srgb_red(self) -> None:
        """Linear sRGB red should match the published SRLAB2 value."""
        red = primaries_to_xyz(Primaries.BT709, Whitepoint.D65).mul_vec([1.0, 0.0, 0.0])
        lab = xyz_to_srlab2(red[None, :])
        np.testing.assert_allclose(lab[0], [53.23, 78.20, 67.70], atol=0.1)

    def test_adaptation_changes_result(self) -> None:
        """The same XYZ should differ under different whites."""
        xyz = Whitepoint.D65.to_xyz()[None, :]
        under_d50 = xyz_to_srlab2(xyz, Whitepoint.D50)
        assert abs(under_d50[0, 2]) > 1.0

    @pytest.mark.parametrize("whitepoint", [Whitepoint.D65, Whitepoint.D50, Whitepoint.F11])
    def test_round_trip(self, xyz_samples: np.ndarray, whitepoint: Whitepoint) -> None:
        """XYZ -> SRLAB2 -> XYZ should recover the input."""
        lab = xyz_to_srlab2(xyz_samples, whitepoint)
        np.testing.assert_allclose(srlab2_to_xyz(lab, whitepoint), xyz_samples, atol=1e-9)

    def test_below_black_stays_finite(self) -> None:
        """Negative responses should use the linear segment."""
        with np.errstate(all="raise"):
            lab = xyz_to_srlab2(np.array([[-0.01, -0.01, -0.01]]))
        assert np.all(np.isfinite(lab))
        assert lab[0, 0] < 0


class TestPolar:
    """Tests for LCh conversion."""

    def test_hue_quadrants(self) -> None:
        """Hue should be measured counter-clockwise from +a in radians."""
        lab = np.array([
            [0.5, 0.1, 0.0],
            [0.5, 0.0, 0.1],
            [0.5, -0.1, 0.0],
            [0.5, 0.0, -0.1],
        ])
        lch = lab_to_lch(lab)
        np.testing.assert_allclose(lch[:, 0], 0.5)
        np.testing.assert_allclose(lch[:, 1], 0.1)
        np.testing.assert_allclose(
            lch[:, 2], [0.0, np.pi / 2, np.pi, 3 * np.pi / 2], atol=1e-12
        )

    def test_hue_range(self) -> None:
        """Hue should lie in [0, 2π)."""
        rng = np.random.default_rng(3)
        lab = rng.normal(size=(100, 3))
        hue = lab_to_lch(lab)[:, 2]
        assert np.all(hue >= 0.0)
        assert np.all(hue < 2 * np.pi)

    def test_round_trip(self) -> None:
        """Lab -> LCh -> Lab should recover the input."""
        rng = np.random.default_rng(5)
        lab = rng.normal(size=(50, 3))
        np.testing.assert_allclose(lch_to_lab(lab_to_lch(lab)), lab, atol=1e-12)
