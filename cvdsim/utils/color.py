"""
Color space transformations between linear RGB, CIE XYZ and chromaticity.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

Triplet = Tuple[float, float, float]

# Linear RGB to XYZ (sRGB primaries)
RGB_TO_XYZ = np.array(
    [
        [0.430574, 0.341550, 0.178325],
        [0.222015, 0.706655, 0.071330],
        [0.020183, 0.129553, 0.939180],
    ]
)

# XYZ to linear RGB. Published pair, not np.linalg.inv(RGB_TO_XYZ).
XYZ_TO_RGB = np.array(
    [
        [3.063218, -1.393325, -0.475802],
        [-0.969243, 1.875966, 0.041555],
        [0.067871, -0.228834, 1.069251],
    ]
)

RGB_TO_XYZ.flags.writeable = False
XYZ_TO_RGB.flags.writeable = False


def _apply(matrix: np.ndarray, a: float, b: float, c: float) -> Triplet:
    out = np.dot(matrix, np.array([a, b, c], dtype=float))
    return float(out[0]), float(out[1]), float(out[2])


class ColorTransform:
    """Color space transformation utilities for single colors."""

    def __init__(self) -> None:
        self.rgb_to_xyz_matrix = RGB_TO_XYZ
        self.xyz_to_rgb_matrix = XYZ_TO_RGB

    def linear_rgb_to_xyz(self, r: float, g: float, b: float) -> Triplet:
        """Convert linear RGB in [0, 1] to XYZ tristimulus values."""

        return _apply(self.rgb_to_xyz_matrix, r, g, b)

    def xyz_to_linear_rgb(self, x: float, y: float, z: float) -> Triplet:
        """
        Convert XYZ to linear RGB.

        The result is not clipped and may fall outside [0, 1].
        """

        return _apply(self.xyz_to_rgb_matrix, x, y, z)

    def chromaticity(self, x: float, y: float, z: float) -> Tuple[float, float]:
        """
        Compute chromaticity ``(x / sum, y / sum)``.

        Pure black (sum exactly zero) yields ``(0.0, 0.0)``.
        """

        total = x + y + z
        if total == 0:
            return 0.0, 0.0
        return x / total, y / total
