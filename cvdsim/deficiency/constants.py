"""Confusion-line constants for the dichromatic deficiency classes."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from cvdsim.core.config import Deficiency


@dataclass(frozen=True)
class DeficiencyParams:
    """
    Confusion point and dichromat confusion line in chromaticity space.

    Attributes
    ----------
    cpu, cpv : float
        Confusion (copunctal) point the color's confusion line runs through.
    am, ayi : float
        Slope and v-intercept of the fixed line the simulated chromaticity is
        projected onto.
    """

    cpu: float
    cpv: float
    am: float
    ayi: float


DEFICIENCY_PARAMS: Mapping[Deficiency, DeficiencyParams] = MappingProxyType(
    {
        Deficiency.PROTAN: DeficiencyParams(cpu=0.735, cpv=0.265, am=1.273463, ayi=-0.073894),
        Deficiency.DEUTAN: DeficiencyParams(cpu=1.14, cpv=-0.14, am=0.968437, ayi=0.003331),
        Deficiency.TRITAN: DeficiencyParams(cpu=0.171, cpv=-0.003, am=0.062921, ayi=0.292119),
    }
)

# Reference white (D65-like) as normalised XYZ.
WHITE_POINT: Tuple[float, float, float] = (0.312713, 0.329016, 0.358271)
