"""
Immutable 8-bit RGBA color value.
"""

from __future__ import annotations

import math
import numbers
import string
from dataclasses import dataclass
from typing import Tuple

CHANNEL_MAX = 255


@dataclass(frozen=True)
class RGBA:
    """
    Four integer channels, each conventionally in [0, 255].

    Values are not range-checked on construction; call :meth:`validate` at
    the boundary where a caller hands colors to the simulator.
    """

    red: int
    green: int
    blue: int
    alpha: int = CHANNEL_MAX

    def validate(self) -> None:
        """Raise ``ValueError`` unless every channel is an int in [0, 255]."""

        for name, value in zip(("red", "green", "blue", "alpha"), self.as_tuple()):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} channel must be an int, got {value!r}")
            if not (0 <= value <= CHANNEL_MAX):
                raise ValueError(f"{name} channel {value} out of range [0, 255]")

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def with_rgb(self, red: int, green: int, blue: int) -> "RGBA":
        """Return a new color with replaced color channels and the same alpha."""

        return RGBA(red, green, blue, self.alpha)

    # ------------------------------------------------------------------
    # Conversions for platform color objects
    # ------------------------------------------------------------------

    @classmethod
    def from_unit(
        cls,
        red: float,
        green: float,
        blue: float,
        alpha: float = 1.0,
    ) -> "RGBA":
        """
        Build a color from floating point components in [0, 1].

        Components are scaled by 255 and truncated. A component that cannot
        be determined (``None``, NaN, or outside [0, 1]) raises ``ValueError``.
        """

        channels = []
        for name, value in zip(("red", "green", "blue", "alpha"), (red, green, blue, alpha)):
            if value is None:
                raise ValueError(f"{name} component is unspecified")
            value = float(value)
            if not math.isfinite(value) or not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} component {value} out of range [0, 1]")
            channels.append(int(value * CHANNEL_MAX))
        return cls(*channels)

    def to_unit(self) -> Tuple[float, float, float, float]:
        """Return ``(r, g, b, a)`` as floats in [0, 1]."""

        return tuple(channel / CHANNEL_MAX for channel in self.as_tuple())  # type: ignore[return-value]

    @classmethod
    def from_hex(cls, value: str) -> "RGBA":
        """Parse ``#rrggbb`` or ``#rrggbbaa`` (leading ``#`` optional)."""

        digits = value.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected 6 or 8 hex digits, got {value!r}")
        if not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Invalid hex color {value!r}")
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_hex(self, include_alpha: bool = False) -> str:
        channels = self.as_tuple() if include_alpha else self.as_tuple()[:3]
        return "#" + "".join(f"{channel:02x}" for channel in channels)
