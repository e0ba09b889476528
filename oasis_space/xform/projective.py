################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Conversions between Cartesian and homogeneous coordinates

Lifting appends a ``w = 1`` coordinate to a 2D or 3D vector, and embeds a
2x2 or 3x3 matrix plus a translation into the next larger matrix:

    [ M  t ]
    [ 0  1 ]

Projecting divides the leading components by ``w``. When ``|w| <= eps`` the
point lies at infinity and the result is ``DEGENERATE``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from oasis_space.math_utils.tolerance import float_is_zero
from oasis_space.math_utils.units import SpaceConstants
from oasis_space.space_types.degenerate import DEGENERATE
from oasis_space.space_types.degenerate import Degenerate
from oasis_space.space_types.matrix import Dense
from oasis_space.space_types.matrix import SquareMatrix
from oasis_space.space_types.matrix import mat_values
from oasis_space.space_types.vector import Vector


_LOG: logging.Logger = logging.getLogger(__name__)

# Cartesian dimensions that have a homogeneous lift within 4x4
_CARTESIAN_SIZES: tuple[int, ...] = (2, 3)


def vec_lift(v: Sequence[float]) -> Vector:
    """Lift a 2D or 3D vector to homogeneous coordinates with ``w = 1``."""
    if len(v) not in _CARTESIAN_SIZES:
        raise ValueError("v must have 2 or 3 components")
    return tuple(float(vi) for vi in v) + (1.0,)


def mat_lift(m: SquareMatrix, t: Sequence[float]) -> Dense:
    """Lift a 2x2 or 3x3 matrix and translation to a homogeneous matrix.

    Args:
        m: Linear part, 2x2 or 3x3
        t: Translation with ``m.size`` components

    Returns:
        Matrix of size ``m.size + 1`` with ``m`` in the top-left block, ``t``
        in the last column and ``(0, ..., 0, 1)`` as the last row

    Raises:
        ValueError: If the sizes are invalid
    """
    n: int = m.size
    if n not in _CARTESIAN_SIZES:
        raise ValueError("m must be 2x2 or 3x3")
    if len(t) != n:
        raise ValueError(f"t must have length {n}")
    values: tuple[float, ...] = mat_values(m)
    out: list[float] = []
    for r in range(n):
        out.extend(values[r * n : (r + 1) * n])
        out.append(float(t[r]))
    out.extend([0.0] * n)
    out.append(1.0)
    return Dense(n + 1, tuple(out))


def vec_project(
    v: Sequence[float],
    eps: float = SpaceConstants.EPS,
) -> Vector | Degenerate:
    """Project a 3D or 4D homogeneous vector to Cartesian coordinates.

    Args:
        v: Homogeneous vector whose last component is ``w``
        eps: Magnitude of ``w`` at or below which the point is at infinity

    Returns:
        Leading components divided by ``w``, or ``DEGENERATE``
    """
    if len(v) not in (3, 4):
        raise ValueError("v must have 3 or 4 components")
    w: float = float(v[-1])
    if float_is_zero(w, eps):
        _LOG.debug("Homogeneous vector at infinity, w=%g", w)
        return DEGENERATE
    return tuple(float(vi) / w for vi in v[:-1])
