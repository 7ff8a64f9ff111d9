"""cvdsim: color vision deficiency simulation.

Simulates how an 8-bit RGBA color appears to observers with protan, deutan
or tritan dichromacy, their anomalous (partial) variants, and achromatopsia.
"""

from cvdsim.core.config import BlindnessType, Deficiency, SimulatorConfig
from cvdsim.core.pipeline import ColorVisionSimulator, simulate_color
from cvdsim.core.rgba import RGBA

__all__ = [
    "ColorVisionSimulator",
    "SimulatorConfig",
    "BlindnessType",
    "Deficiency",
    "RGBA",
    "simulate_color",
]

__version__ = "1.0.0"
