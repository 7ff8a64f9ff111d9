"""
Anomalous trichromacy as a fixed blend towards the dichromatic result.
"""

from __future__ import annotations

from cvdsim.core.rgba import RGBA
from cvdsim.utils.rounding import round_half_up

# Weight of the fully simulated color. Fixed approximation: it is not derived
# from measured anomaly severities and is intentionally not configurable.
ANOMALY_WEIGHT = 1.75


class SeverityBlender:
    """Interpolate between an original color and its full simulation."""

    def __init__(self) -> None:
        self.weight = ANOMALY_WEIGHT

    def blend(self, original: RGBA, simulated: RGBA) -> RGBA:
        """
        Per channel ``(v * simulated + original) / (v + 1)`` with ``v = 1.75``.

        Alpha is taken from ``original``.
        """

        v = self.weight
        d = v + 1
        return original.with_rgb(
            round_half_up((v * simulated.red + original.red) / d),
            round_half_up((v * simulated.green + original.green) / d),
            round_half_up((v * simulated.blue + original.blue) / d),
        )
