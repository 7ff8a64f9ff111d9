"""
Tests for linear RGB / XYZ / chromaticity conversions.
"""

from __future__ import annotations

import numpy as np

from cvdsim.utils.color import ColorTransform


def test_rgb_to_xyz_primaries() -> None:
    transform = ColorTransform()
    np.testing.assert_allclose(
        transform.linear_rgb_to_xyz(1.0, 0.0, 0.0), (0.430574, 0.222015, 0.020183)
    )
    np.testing.assert_allclose(
        transform.linear_rgb_to_xyz(0.0, 1.0, 0.0), (0.341550, 0.706655, 0.129553)
    )
    np.testing.assert_allclose(
        transform.linear_rgb_to_xyz(0.0, 0.0, 1.0), (0.178325, 0.071330, 0.939180)
    )


def test_white_has_unit_luminance() -> None:
    _, y, _ = ColorTransform().linear_rgb_to_xyz(1.0, 1.0, 1.0)
    assert np.isclose(y, 1.0)


def test_xyz_to_rgb_inverts_forward_matrix() -> None:
    transform = ColorTransform()
    rng = np.random.default_rng(0)
    for rgb in rng.random((20, 3)):
        xyz = transform.linear_rgb_to_xyz(*rgb)
        back = transform.xyz_to_linear_rgb(*xyz)
        np.testing.assert_allclose(back, rgb, atol=1e-5)


def test_xyz_to_rgb_is_not_clipped() -> None:
    r, g, b = ColorTransform().xyz_to_linear_rgb(1.0, 0.0, 0.0)
    assert r > 1.0
    assert g < 0.0


def test_chromaticity() -> None:
    u, v = ColorTransform().chromaticity(0.2, 0.3, 0.5)
    assert np.isclose(u, 0.2)
    assert np.isclose(v, 0.3)


def test_chromaticity_of_black_is_origin() -> None:
    assert ColorTransform().chromaticity(0.0, 0.0, 0.0) == (0.0, 0.0)


def test_white_chromaticity_near_reference_white() -> None:
    transform = ColorTransform()
    u, v = transform.chromaticity(*transform.linear_rgb_to_xyz(1.0, 1.0, 1.0))
    assert np.isclose(u, 0.312713, atol=1e-4)
    assert np.isclose(v, 0.329016, atol=1e-4)
