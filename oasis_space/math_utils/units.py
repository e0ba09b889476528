################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Angle conversions and shared numeric constants."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


class Angle:
    """Angular unit conversions."""

    @staticmethod
    def deg2rad(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
        """Convert degrees to radians."""
        arr: NDArray[np.float64] = np.asarray(x, dtype=float)
        result: NDArray[np.float64] = np.deg2rad(arr)
        if np.ndim(result) == 0:
            return float(result)
        return result

    @staticmethod
    def rad2deg(x: float | NDArray[np.float64]) -> float | NDArray[np.float64]:
        """Convert radians to degrees."""
        arr: NDArray[np.float64] = np.asarray(x, dtype=float)
        result: NDArray[np.float64] = np.rad2deg(arr)
        if np.ndim(result) == 0:
            return float(result)
        return result


class SpaceConstants:
    """Constants shared by the spatial math layer."""

    # Default tolerance for equality and degeneracy tests
    EPS: float = 1.0e-6

    # Matrix sizes supported by the transform engine
    MATRIX_SIZES: tuple[int, ...] = (2, 3, 4)


def assert_finite(x: Sequence[float] | NDArray[np.float64], name: str) -> None:
    """Raise ValueError when the values contain non-finite entries."""
    if not np.all(np.isfinite(np.asarray(x, dtype=float))):
        raise ValueError(f"{name} must be finite")
