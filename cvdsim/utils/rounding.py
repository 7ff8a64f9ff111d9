"""Integer rounding shared by the 8-bit channel transforms."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negative input."""

    return int(math.floor(value + 0.5))
