"""Achromatopsia: collapse a color to luma-weighted gray."""

from __future__ import annotations

from cvdsim.core.rgba import RGBA
from cvdsim.utils.rounding import round_half_up

# Rec. 601 luma weights, applied to gamma-encoded 8-bit values.
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


class MonochromeConverter:
    """Monochrome conversion for achromatopsia and achromatomaly."""

    def to_gray(self, rgba: RGBA) -> RGBA:
        wr, wg, wb = LUMA_WEIGHTS
        z = round_half_up(rgba.red * wr + rgba.green * wg + rgba.blue * wb)
        return rgba.with_rgb(z, z, z)
