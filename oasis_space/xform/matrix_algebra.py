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
Equality, pointwise arithmetic, trace and transpose for square matrices

Pointwise operations expand an identity operand to its dense values and then
combine entries one by one. ``mat_dot`` is the pointwise (Hadamard) product,
not the matrix product; see ``matrix_product.mat_mul`` for that.
"""

from __future__ import annotations

from oasis_space.math_utils.tolerance import float_equals
from oasis_space.math_utils.units import SpaceConstants
from oasis_space.space_types.matrix import Dense
from oasis_space.space_types.matrix import Identity
from oasis_space.space_types.matrix import SquareMatrix
from oasis_space.space_types.matrix import mat_values


def _validate_same_size(a: SquareMatrix, b: SquareMatrix) -> None:
    if a.size != b.size:
        raise ValueError("matrices must have the same size")


def mat_equals(
    a: SquareMatrix,
    b: SquareMatrix,
    eps: float = SpaceConstants.EPS,
) -> bool:
    """Compare two matrices element-wise within tolerance.

    An identity equals any dense matrix holding the identity values. Matrices
    of different sizes are never equal.

    Args:
        a: Left matrix
        b: Right matrix
        eps: Absolute tolerance per element

    Returns:
        True if every element pair differs by at most ``eps``
    """
    if a.size != b.size:
        return False
    return all(
        float_equals(aij, bij, eps)
        for aij, bij in zip(mat_values(a), mat_values(b), strict=True)
    )


def mat_scale(s: float, m: SquareMatrix) -> Dense:
    """Multiply every element by a scalar."""
    if isinstance(s, bool) or not isinstance(s, (int, float)):
        raise ValueError("s must be a number")
    return Dense(m.size, tuple(s * mij for mij in mat_values(m)))


def mat_add(a: SquareMatrix, b: SquareMatrix) -> Dense:
    """Add two matrices of the same size."""
    _validate_same_size(a, b)
    return Dense(
        a.size,
        tuple(
            aij + bij for aij, bij in zip(mat_values(a), mat_values(b), strict=True)
        ),
    )


def mat_sub(a: SquareMatrix, b: SquareMatrix) -> Dense:
    """Subtract two matrices of the same size, ``a - b``."""
    _validate_same_size(a, b)
    return Dense(
        a.size,
        tuple(
            aij - bij for aij, bij in zip(mat_values(a), mat_values(b), strict=True)
        ),
    )


def mat_dot(a: SquareMatrix, b: SquareMatrix) -> Dense:
    """Multiply two matrices of the same size element by element."""
    _validate_same_size(a, b)
    return Dense(
        a.size,
        tuple(
            aij * bij for aij, bij in zip(mat_values(a), mat_values(b), strict=True)
        ),
    )


def mat_trace(m: SquareMatrix) -> float:
    """Return the sum of the diagonal elements."""
    if isinstance(m, Identity):
        return float(m.size)
    # Diagonal entries are spaced size + 1 apart in row-major order
    return sum(m.values[:: m.size + 1])


def mat_transpose(m: SquareMatrix) -> SquareMatrix:
    """Return the transpose, exchanging elements (i, j) and (j, i).

    An identity is its own transpose.
    """
    if isinstance(m, Identity):
        return m
    n: int = m.size
    out: list[float] = [0.0] * (n * n)
    for r in range(n):
        for c in range(n):
            out[c * n + r] = m.values[r * n + c]
    return Dense(n, tuple(out))
