"""Polar lightness/chroma/hue form of Lab-like coordinates."""
from __future__ import annotations

import numpy as np


def lab_to_lch(lab: np.ndarray) -> np.ndarray:
    """Convert (N, 3) Lab values to LCh with hue in radians in [0, 2π)."""
    lab = np.asarray(lab, dtype=np.float64)
    chroma = np.hypot(lab[..., 1], lab[..., 2])
    hue = np.mod(np.arctan2(lab[..., 2], lab[..., 1]), 2.0 * np.pi)
    return np.stack([lab[..., 0], chroma, hue], axis=-1)


def lch_to_lab(lch: np.ndarray) -> np.ndarray:
    """Convert (N, 3) LCh values back to Lab."""
    lch = np.asarray(lch, dtype=np.float64)
    chroma, hue = lch[..., 1], lch[..., 2]
    return np.stack(
        [lch[..., 0], chroma * np.cos(hue), chroma * np.sin(hue)], axis=-1
    )
