"""
Power-law gamma decoding and encoding of 8-bit channels.
"""

from __future__ import annotations

import numpy as np

GAMMA = 2.2


def _decode_channel(index: int) -> float:
    return float(np.power(index / 255.0, GAMMA))


def _build_decode_table() -> np.ndarray:
    # Same per-channel evaluation as the direct path, so both agree bit for bit.
    table = np.array([_decode_channel(index) for index in range(256)], dtype=float)
    table.flags.writeable = False
    return table


# Shared read-only table, computed once at import.
DECODE_TABLE = _build_decode_table()


class GammaCodec:
    """
    Convert between 8-bit channel values and linear light.

    Parameters
    ----------
    use_lookup : bool
        Serve :meth:`decode` from the precomputed 256-entry table. Disabling
        it evaluates the power curve directly with the same result.
    """

    def __init__(self, use_lookup: bool = True) -> None:
        self.use_lookup = use_lookup

    def decode(self, channel: int) -> float:
        """Return ``(channel / 255) ** 2.2``, bounding the channel to [0, 255]."""

        index = min(max(int(channel), 0), 255)
        if self.use_lookup:
            return float(DECODE_TABLE[index])
        return _decode_channel(index)

    def encode(self, linear: float) -> int:
        """
        Return ``255 * linear ** (1 / 2.2)`` truncated to an integer.

        Linear values at or below 0 map to 0 and values at or above 1 map to
        255, so the result always lies in [0, 255].
        """

        if linear <= 0.0:
            return 0
        if linear >= 1.0:
            return 255
        return int(255.0 * float(np.power(linear, 1.0 / GAMMA)))
