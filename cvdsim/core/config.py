"""
Configuration primitives for cvdsim.

Defines enums for deficiency classes and user-facing blindness types, and a
dataclass collecting the configurable parameters of the simulator.
"""

from dataclasses import dataclass
from enum import Enum


class Deficiency(Enum):
    """Dichromatic deficiency classes (one missing photopigment)."""

    PROTAN = "protan"  # L cones, red hues
    DEUTAN = "deutan"  # M cones, green hues
    TRITAN = "tritan"  # S cones, blue-yellow


class BlindnessType(Enum):
    """Form of color blindness to simulate."""

    NORMAL = "normal"
    PROTANOPIA = "protanopia"
    PROTANOMALY = "protanomaly"
    DEUTERANOPIA = "deuteranopia"
    DEUTERANOMALY = "deuteranomaly"
    TRITANOPIA = "tritanopia"
    TRITANOMALY = "tritanomaly"
    ACHROMATOPSIA = "achromatopsia"
    ACHROMATOMALY = "achromatomaly"

    @property
    def deficiency(self):
        """Dichromatic class behind this type, ``None`` for normal and achromat* types."""

        return _TYPE_TO_DEFICIENCY.get(self)

    @property
    def is_anomalous(self) -> bool:
        """True for the partial (blended) variants."""

        return self in _ANOMALOUS_TYPES

    @property
    def is_monochrome(self) -> bool:
        return self in (BlindnessType.ACHROMATOPSIA, BlindnessType.ACHROMATOMALY)


_TYPE_TO_DEFICIENCY = {
    BlindnessType.PROTANOPIA: Deficiency.PROTAN,
    BlindnessType.PROTANOMALY: Deficiency.PROTAN,
    BlindnessType.DEUTERANOPIA: Deficiency.DEUTAN,
    BlindnessType.DEUTERANOMALY: Deficiency.DEUTAN,
    BlindnessType.TRITANOPIA: Deficiency.TRITAN,
    BlindnessType.TRITANOMALY: Deficiency.TRITAN,
}

_ANOMALOUS_TYPES = frozenset(
    {
        BlindnessType.PROTANOMALY,
        BlindnessType.DEUTERANOMALY,
        BlindnessType.TRITANOMALY,
        BlindnessType.ACHROMATOMALY,
    }
)


@dataclass
class SimulatorConfig:
    """
    Complete configuration for color vision simulation.

    All parameters have sensible defaults; the numeric model itself is fixed.
    """

    use_gamma_lut: bool = True  # precomputed 256-entry decode table
    validate_input: bool = False  # reject out-of-range RGBA at the facade
    log_dispatch: bool = False  # DEBUG record per processed color

    def validate(self) -> None:
        """Validate configuration parameters."""

        for name in ("use_gamma_lut", "validate_input", "log_dispatch"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a bool, got {value!r}")
