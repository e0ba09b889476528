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
Determinant, cofactor, adjoint and inverse of square matrices

Each size has its own closed-form routine, selected by the matrix size:

    det2 = m11 m22 - m12 m21
    det3 = m11 det(C11) - m12 det(C12) + m13 det(C13)
    det4 = m11 det(C11) - m12 det(C12) + m13 det(C13) - m14 det(C14)

where ``Cij`` is the minor with row i and column j removed. Larger sizes expand
along row 1 with alternating signs starting positive at (1, 1).

The cofactor matrix has element ``(-1)^(i+j) det(Cij)``, the adjoint is its
transpose and the inverse is ``adj(m) / det(m)``. A matrix whose determinant
is within ``eps`` of zero has no inverse; ``mat_inv`` returns ``DEGENERATE``
for it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from oasis_space.math_utils.tolerance import float_is_zero
from oasis_space.math_utils.units import SpaceConstants
from oasis_space.space_types.degenerate import DEGENERATE
from oasis_space.space_types.degenerate import Degenerate
from oasis_space.space_types.matrix import Dense
from oasis_space.space_types.matrix import Identity
from oasis_space.space_types.matrix import SquareMatrix
from oasis_space.space_types.matrix import mat_values
from oasis_space.xform.matrix_algebra import mat_scale
from oasis_space.xform.matrix_algebra import mat_transpose


_LOG: logging.Logger = logging.getLogger(__name__)

Values = tuple[float, ...]


def _minor_values(values: Values, n: int, i: int, j: int) -> Values:
    # Remove row i and column j (1-based) from an n x n row-major matrix
    return tuple(
        values[r * n + c]
        for r in range(n)
        if r != i - 1
        for c in range(n)
        if c != j - 1
    )


def _cofactor_sign(i: int, j: int) -> float:
    return 1.0 if (i + j) % 2 == 0 else -1.0


def _det2(v: Values) -> float:
    m11, m12, m21, m22 = v
    return m11 * m22 - m12 * m21


def _det3(v: Values) -> float:
    m11, m12, m13, m21, m22, m23, m31, m32, m33 = v
    return (
        m11 * _det2((m22, m23, m32, m33))
        - m12 * _det2((m21, m23, m31, m33))
        + m13 * _det2((m21, m22, m31, m32))
    )


def _det4(v: Values) -> float:
    (
        m11, m12, m13, m14,
        m21, m22, m23, m24,
        m31, m32, m33, m34,
        m41, m42, m43, m44,
    ) = v
    return (
        m11 * _det3((m22, m23, m24, m32, m33, m34, m42, m43, m44))
        - m12 * _det3((m21, m23, m24, m31, m33, m34, m41, m43, m44))
        + m13 * _det3((m21, m22, m24, m31, m32, m34, m41, m42, m44))
        - m14 * _det3((m21, m22, m23, m31, m32, m33, m41, m42, m43))
    )


def _cofactor2(v: Values) -> Values:
    m11, m12, m21, m22 = v
    return (m22, -m21, -m12, m11)


def _cofactor3(v: Values) -> Values:
    return tuple(
        _cofactor_sign(i, j) * _det2(_minor_values(v, 3, i, j))
        for i in range(1, 4)
        for j in range(1, 4)
    )


def _cofactor4(v: Values) -> Values:
    return tuple(
        _cofactor_sign(i, j) * _det3(_minor_values(v, 4, i, j))
        for i in range(1, 5)
        for j in range(1, 5)
    )


_DET_BY_SIZE: dict[int, Callable[[Values], float]] = {
    2: _det2,
    3: _det3,
    4: _det4,
}

_COFACTOR_BY_SIZE: dict[int, Callable[[Values], Values]] = {
    2: _cofactor2,
    3: _cofactor3,
    4: _cofactor4,
}


def mat_det(m: SquareMatrix) -> float:
    """Return the determinant of a matrix.

    The determinant of an identity is exactly 1.0.
    """
    if isinstance(m, Identity):
        return 1.0
    return _DET_BY_SIZE[m.size](m.values)


def mat_minor(m: SquareMatrix, i: int, j: int) -> Dense:
    """Return the minor of a 3x3 or 4x4 matrix with row i and column j removed.

    Raises:
        ValueError: If the matrix is 2x2 or an index is out of range
    """
    if m.size == 2:
        raise ValueError("minor of a 2x2 matrix is not a square matrix")
    for index in (i, j):
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError("row and column indices must be ints")
        if index < 1 or index > m.size:
            raise ValueError("row or column index out of range")
    return Dense(m.size - 1, _minor_values(mat_values(m), m.size, i, j))


def mat_cofactor(m: SquareMatrix) -> SquareMatrix:
    """Return the cofactor matrix, element (i, j) = (-1)^(i+j) det(Cij)."""
    if isinstance(m, Identity):
        return m
    return Dense(m.size, _COFACTOR_BY_SIZE[m.size](m.values))


def mat_adjoint(m: SquareMatrix) -> SquareMatrix:
    """Return the adjoint, the transpose of the cofactor matrix."""
    if isinstance(m, Identity):
        return m
    return mat_transpose(mat_cofactor(m))


def mat_inv(
    m: SquareMatrix,
    eps: float = SpaceConstants.EPS,
) -> SquareMatrix | Degenerate:
    """Invert a matrix.

    Args:
        m: Matrix to invert
        eps: Determinant magnitude at or below which ``m`` is singular

    Returns:
        Inverse ``adj(m) / det(m)``, the identity itself for an identity, or
        ``DEGENERATE`` if the matrix is singular within tolerance
    """
    if isinstance(m, Identity):
        return m
    det: float = mat_det(m)
    if float_is_zero(det, eps):
        _LOG.debug("Matrix %dx%d is not invertible, det=%g", m.size, m.size, det)
        return DEGENERATE
    return mat_scale(1.0 / det, mat_adjoint(m))
