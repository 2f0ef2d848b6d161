"""Standard illuminants and their CIE XYZ tristimulus values."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

import numpy as np


class Whitepoint(Enum):
    """The whitepoint/standard illuminant.

    | Illuminant | X       | Y       | Z       |
    |------------|---------|---------|---------|
    | A          | 1.09850 | 1.00000 | 0.35585 |
    | B          | 0.99072 | 1.00000 | 0.85223 |
    | C          | 0.98074 | 1.00000 | 1.18232 |
    | D50        | 0.96422 | 1.00000 | 0.82521 |
    | D55        | 0.95682 | 1.00000 | 0.92149 |
    | D65        | 0.95047 | 1.00000 | 1.08883 |
    | D75        | 0.94972 | 1.00000 | 1.22638 |
    | E          | 1.00000 | 1.00000 | 1.00000 |
    | F2         | 0.99186 | 1.00000 | 0.67393 |
    | F7         | 0.95041 | 1.00000 | 1.08747 |
    | F11        | 1.00962 | 1.00000 | 0.64350 |
    """

    A = "A"
    B = "B"
    C = "C"
    D50 = "D50"
    D55 = "D55"
    D65 = "D65"
    D75 = "D75"
    E = "E"
    F2 = "F2"
    F7 = "F7"
    F11 = "F11"

    def to_xyz(self) -> np.ndarray:
        """Tristimulus value under unit luminance (Y = 1)."""
        return np.array(_TRISTIMULUS[self], dtype=np.float64)

    def chromaticity(self) -> Tuple[float, float]:
        """Project the tristimulus value to (x, y) chromaticity."""
        x, y, z = _TRISTIMULUS[self]
        total = x + y + z
        return x / total, y / total


# http://www.brucelindbloom.com/index.html
_TRISTIMULUS: Dict[Whitepoint, Tuple[float, float, float]] = {
    Whitepoint.A: (1.09850, 1.00000, 0.35585),
    Whitepoint.B: (0.99072, 1.00000, 0.85223),
    Whitepoint.C: (0.98074, 1.00000, 1.18232),
    Whitepoint.D50: (0.96422, 1.00000, 0.82521),
    Whitepoint.D55: (0.95682, 1.00000, 0.92149),
    Whitepoint.D65: (0.95047, 1.00000, 1.08883),
    Whitepoint.D75: (0.94972, 1.00000, 1.22638),
    Whitepoint.E: (1.00000, 1.00000, 1.00000),
    Whitepoint.F2: (0.99186, 1.00000, 0.67393),
    Whitepoint.F7: (0.95041, 1.00000, 1.08747),
    Whitepoint.F11: (1.00962, 1.00000, 0.64350),
}
