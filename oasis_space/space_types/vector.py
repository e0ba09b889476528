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
Fixed-size float vectors

A vector is an immutable tuple of 2, 3 or 4 floats. In homogeneous
coordinates the last component of a 3-vector or 4-vector is the projective
``w`` coordinate.
"""

from __future__ import annotations

from collections.abc import Sequence

from oasis_space.math_utils.tolerance import float_equals
from oasis_space.math_utils.units import SpaceConstants


Vector = tuple[float, ...]

VECTOR_SIZES: tuple[int, ...] = (2, 3, 4)


def _as_float(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number")
    return float(value)


def vec_new(*components: float) -> Vector:
    """Create a vector from 2, 3 or 4 numeric components.

    Integer components are promoted to float.

    Raises:
        ValueError: If the arity or component types are invalid
    """
    if len(components) not in VECTOR_SIZES:
        raise ValueError("vector must have 2, 3 or 4 components")
    return tuple(_as_float("component", c) for c in components)


def vec_size(v: Sequence[float]) -> int:
    """Return the dimension of a vector, validating it."""
    if len(v) not in VECTOR_SIZES:
        raise ValueError("vector must have 2, 3 or 4 components")
    return len(v)


def vec_dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two vectors of the same size."""
    if len(a) != len(b):
        raise ValueError("vectors must have the same size")
    total: float = 0.0
    for ai, bi in zip(a, b, strict=True):
        total += ai * bi
    return total


def vec_equals(
    a: Sequence[float],
    b: Sequence[float],
    eps: float = SpaceConstants.EPS,
) -> bool:
    """Compare two vectors component-wise within tolerance.

    Vectors of different sizes are never equal.
    """
    if len(a) != len(b):
        return False
    return all(float_equals(ai, bi, eps) for ai, bi in zip(a, b, strict=True))
