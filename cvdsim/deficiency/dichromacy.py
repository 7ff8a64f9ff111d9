"""
Dichromacy simulation by confusion-line projection.

The color's chromaticity is moved along the line through the deficiency's
confusion point until it meets the dichromat's fixed confusion line. The
luminance (Y) is kept, and the result is pulled back into the RGB cube along
the direction towards the neutral axis.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from cvdsim.core.config import Deficiency
from cvdsim.core.rgba import RGBA
from cvdsim.deficiency.constants import DEFICIENCY_PARAMS, WHITE_POINT
from cvdsim.utils.color import ColorTransform
from cvdsim.utils.gamma import GammaCodec

logger = logging.getLogger(__name__)


class DeficiencySimulator:
    """Simulate protanopia, deuteranopia or tritanopia for a single color."""

    def __init__(
        self,
        gamma: Optional[GammaCodec] = None,
        color_transform: Optional[ColorTransform] = None,
    ) -> None:
        self.gamma = gamma or GammaCodec()
        self.color_transform = color_transform or ColorTransform()

    def simulate(self, rgba: RGBA, deficiency: Deficiency) -> RGBA:
        """Return the color as perceived with the given dichromacy."""

        linear = self.simulate_linear(rgba, deficiency)
        red, green, blue = (self.gamma.encode(channel) for channel in linear)
        return rgba.with_rgb(red, green, blue)

    def simulate_linear(self, rgba: RGBA, deficiency: Deficiency) -> Tuple[float, float, float]:
        """Run the projection and gamut adjustment, returning unencoded linear RGB."""

        params = DEFICIENCY_PARAMS[deficiency]
        wx, wy, wz = WHITE_POINT

        cx, cy, cz = self.color_transform.linear_rgb_to_xyz(
            self.gamma.decode(rgba.red),
            self.gamma.decode(rgba.green),
            self.gamma.decode(rgba.blue),
        )
        cu, cv = self.color_transform.chromaticity(cx, cy, cz)

        # Neutral axis at the color's own luminance
        nx = wx * cy / wy
        nz = wz * cy / wy

        # Numerator/denominator order matters near the confusion point.
        if cu < params.cpu:
            clm = (params.cpv - cv) / (params.cpu - cu)
        else:
            clm = (cv - params.cpv) / (cu - params.cpu)

        clyi = cv - cu * clm
        du = (params.ayi - clyi) / (clm - params.am)
        dv = (clm * du) + clyi

        sx = du * cy / dv
        sy = cy
        sz = (1 - (du + dv)) * cy / dv
        sr, sg, sb = self.color_transform.xyz_to_linear_rgb(sx, sy, sz)

        dr, dg, db = self.color_transform.xyz_to_linear_rgb(nx - sx, 0.0, nz - sz)
        adjust = max(
            _adjustment(sr, dr),
            _adjustment(sg, dg),
            _adjustment(sb, db),
        )

        logger.debug(
            "%s: uv=(%0.4f, %0.4f) -> (%0.4f, %0.4f), adjust=%0.4f",
            deficiency.value,
            cu,
            cv,
            du,
            dv,
            adjust,
        )

        return sr + adjust * dr, sg + adjust * dg, sb + adjust * db


def _adjustment(channel: float, delta: float) -> float:
    """
    Fraction of ``delta`` that moves ``channel`` onto its nearest bound.

    Only positive deltas qualify, and factors outside [0, 1] count as 0.
    """

    if delta <= 0:
        return 0.0
    bound = 0.0 if channel < 0 else 1.0
    factor = (bound - channel) / delta
    if factor < 0 or factor > 1:
        return 0.0
    return factor
