"""
Tests for the RGBA value type and its platform conversions.
"""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from cvdsim import RGBA


def test_rgba_is_immutable() -> None:
    color = RGBA(1, 2, 3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        color.red = 5  # type: ignore[misc]


def test_default_alpha_is_opaque() -> None:
    assert RGBA(1, 2, 3).alpha == 255


def test_with_rgb_keeps_alpha() -> None:
    assert RGBA(1, 2, 3, 4).with_rgb(7, 8, 9) == RGBA(7, 8, 9, 4)


def test_validate_accepts_full_range() -> None:
    RGBA(0, 0, 0, 0).validate()
    RGBA(255, 255, 255, 255).validate()


def test_validate_accepts_numpy_integers() -> None:
    RGBA(*np.array([1, 2, 3, 4])).validate()
    RGBA(*np.array([0, 128, 255, 255], dtype=np.uint8)).validate()


def test_validate_rejects_out_of_range_numpy_integers() -> None:
    with pytest.raises(ValueError):
        RGBA(*np.array([256, 0, 0, 255])).validate()


@pytest.mark.parametrize(
    "color",
    [RGBA(256, 0, 0), RGBA(0, -1, 0), RGBA(0, 0, 0, 300), RGBA(1.5, 0, 0), RGBA(True, 0, 0)],  # type: ignore[arg-type]
)
def test_validate_rejects_invalid_channels(color: RGBA) -> None:
    with pytest.raises(ValueError):
        color.validate()


def test_from_unit_truncates() -> None:
    assert RGBA.from_unit(1.0, 0.5, 0.0) == RGBA(255, 127, 0, 255)
    assert RGBA.from_unit(0.2, 0.4, 0.6, 0.0).alpha == 0


@pytest.mark.parametrize("component", [None, float("nan"), -0.1, 1.1])
def test_from_unit_rejects_unspecified_components(component) -> None:
    with pytest.raises(ValueError):
        RGBA.from_unit(component, 0.0, 0.0)


def test_to_unit() -> None:
    assert RGBA(255, 0, 51, 255).to_unit() == (1.0, 0.0, 0.2, 1.0)


def test_hex_parsing() -> None:
    assert RGBA.from_hex("#ff8000") == RGBA(255, 128, 0, 255)
    assert RGBA.from_hex("FF800080") == RGBA(255, 128, 0, 128)


@pytest.mark.parametrize("text", ["#fff", "#gg0000", "", "#ff00000", "ff-1ff", "#+f00ff", "# f00ff"])
def test_hex_parsing_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        RGBA.from_hex(text)


def test_to_hex() -> None:
    assert RGBA(255, 128, 0, 16).to_hex() == "#ff8000"
    assert RGBA(255, 128, 0, 16).to_hex(include_alpha=True) == "#ff800010"
