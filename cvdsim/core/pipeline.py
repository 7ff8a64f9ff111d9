"""
Main color vision simulation pipeline.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from cvdsim.core.config import BlindnessType, SimulatorConfig
from cvdsim.core.rgba import RGBA
from cvdsim.deficiency.anomaly import SeverityBlender
from cvdsim.deficiency.dichromacy import DeficiencySimulator
from cvdsim.deficiency.monochrome import MonochromeConverter
from cvdsim.utils.color import ColorTransform
from cvdsim.utils.gamma import GammaCodec

logger = logging.getLogger(__name__)

BlindnessLike = Union[BlindnessType, str]


class ColorVisionSimulator:
    """
    Simulate how a color appears with a given color vision deficiency.

    Dispatch by blindness type:
        normal                 identity
        *-anopia               dichromacy simulation
        *-anomaly              dichromacy simulation blended with the input
        achromatopsia          monochrome
        achromatomaly          monochrome blended with the input
    """

    def __init__(self, config: Optional[SimulatorConfig] = None) -> None:
        self.config = config or SimulatorConfig()
        self.config.validate()

        logger.info("Initializing color vision simulator")
        logger.info("  Gamma lookup table: %s", "on" if self.config.use_gamma_lut else "off")

        self._init_components()

    def _init_components(self) -> None:
        self.gamma = GammaCodec(use_lookup=self.config.use_gamma_lut)
        self.color_transform = ColorTransform()
        self.dichromacy = DeficiencySimulator(self.gamma, self.color_transform)
        self.blender = SeverityBlender()
        self.monochrome = MonochromeConverter()

    def process(
        self,
        rgba: RGBA,
        blindness_type: BlindnessLike,
        return_intermediate: bool = False,
    ) -> Union[RGBA, Dict[str, Optional[RGBA]]]:
        """
        Simulate ``rgba`` for ``blindness_type``.

        With ``return_intermediate`` a dict with ``"input"``, ``"simulated"``
        (full dichromatic or monochrome color, ``None`` for normal vision) and
        ``"output"`` is returned instead of the output color.
        """

        kind = coerce_blindness_type(blindness_type)
        if self.config.validate_input:
            rgba.validate()

        if kind == BlindnessType.NORMAL:
            simulated = None
            output = rgba
        else:
            if kind.is_monochrome:
                simulated = self.monochrome.to_gray(rgba)
            else:
                simulated = self.dichromacy.simulate(rgba, kind.deficiency)
            output = self.blender.blend(rgba, simulated) if kind.is_anomalous else simulated

        if self.config.log_dispatch:
            logger.debug("%s: %s -> %s", kind.value, rgba.as_tuple(), output.as_tuple())

        if return_intermediate:
            return {"input": rgba, "simulated": simulated, "output": output}

        return output

    def simulate_all(self, rgba: RGBA) -> Dict[BlindnessType, RGBA]:
        """Simulate ``rgba`` for every blindness type."""

        return {kind: self.process(rgba, kind) for kind in BlindnessType}


def coerce_blindness_type(value: BlindnessLike) -> BlindnessType:
    """Accept a :class:`BlindnessType` or its string value."""

    if isinstance(value, BlindnessType):
        return value
    if isinstance(value, str):
        try:
            return BlindnessType(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(kind.value for kind in BlindnessType)
    raise ValueError(f"Unknown blindness type: {value!r}. Expected one of: {choices}")


def simulate_color(rgba: RGBA, blindness_type: BlindnessLike) -> RGBA:
    """
    Convenience wrapper for quick simulation with the default configuration.
    """

    simulator = ColorVisionSimulator()
    return simulator.process(rgba, blindness_type)
