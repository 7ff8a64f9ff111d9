"""Gamma and color space helpers."""

from cvdsim.utils.color import ColorTransform
from cvdsim.utils.gamma import GammaCodec
from cvdsim.utils.rounding import round_half_up

__all__ = ["ColorTransform", "GammaCodec", "round_half_up"]
