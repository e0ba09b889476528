################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for units helpers."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.typing import NDArray

from oasis_space.math_utils.units import Angle
from oasis_space.math_utils.units import SpaceConstants
from oasis_space.math_utils.units import assert_finite


def test_deg_rad_roundtrip_scalar() -> None:
    """Checks scalar deg/rad conversion roundtrip."""
    value_deg: float = 45.0
    value_rad: float = float(Angle.deg2rad(value_deg))
    roundtrip: float = float(Angle.rad2deg(value_rad))
    assert np.isclose(value_rad, np.pi / 4.0)
    assert np.isclose(roundtrip, value_deg)


def test_deg_rad_roundtrip_array() -> None:
    """Checks array deg/rad conversion roundtrip."""
    values_deg: NDArray[np.float64] = np.array([0.0, 90.0, 180.0], dtype=float)
    values_rad: NDArray[np.float64] = np.asarray(Angle.deg2rad(values_deg), dtype=float)
    roundtrip: NDArray[np.float64] = np.asarray(Angle.rad2deg(values_rad), dtype=float)
    assert np.allclose(roundtrip, values_deg)


def test_constants() -> None:
    """Ensures the default tolerance is small, positive and finite."""
    eps: float = SpaceConstants.EPS
    assert np.isfinite(eps)
    assert 0.0 < eps < 1.0e-3
    assert SpaceConstants.MATRIX_SIZES == (2, 3, 4)


def test_assert_finite() -> None:
    """Ensures assert_finite rejects non-finite inputs."""
    assert_finite([1.0, 2.0, 3.0], "good")
    with pytest.raises(ValueError, match="bad must be finite"):
        assert_finite([1.0, float("inf"), 3.0], "bad")
