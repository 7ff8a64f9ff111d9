"""
Basic usage examples for cvdsim.
"""

from __future__ import annotations

from typing import Dict

from cvdsim import (
    RGBA,
    BlindnessType,
    ColorVisionSimulator,
    SimulatorConfig,
    simulate_color,
)


def example_simple() -> RGBA:
    """Simulate one color with the default configuration."""

    simulator = ColorVisionSimulator()
    result = simulator.process(RGBA(255, 0, 0, 255), BlindnessType.PROTANOPIA)
    print(f"Red under protanopia: {result.to_hex()}")
    return result


def example_all_types() -> Dict[BlindnessType, RGBA]:
    """List a brand color as seen with every deficiency."""

    brand = RGBA.from_hex("#2e7d32")
    simulator = ColorVisionSimulator(SimulatorConfig(validate_input=True))
    results = simulator.simulate_all(brand)
    for kind, color in results.items():
        print(f"{kind.value:>14}: {color.to_hex()}")
    return results


def example_convenience_function() -> RGBA:
    """Simulate using the high-level convenience wrapper and float components."""

    color = RGBA.from_unit(0.2, 0.4, 0.9, 1.0)
    result = simulate_color(color, "tritanomaly")
    print(f"Tritanomaly: {color.to_unit()} -> {result.to_unit()}")
    return result


if __name__ == "__main__":
    print("Running cvdsim basic examples...")
    example_simple()
    example_all_types()
    example_convenience_function()
