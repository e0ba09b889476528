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
Matrix products and matrix-vector application

Products are built from dot products: element (i, j) of ``A B`` is
``row_i(A) . column_j(B)`` and element i of ``A v`` is ``row_i(A) . v``.
An identity operand returns the other operand unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

from oasis_space.space_types.matrix import Dense
from oasis_space.space_types.matrix import Identity
from oasis_space.space_types.matrix import SquareMatrix
from oasis_space.space_types.matrix import mat_values
from oasis_space.space_types.vector import Vector
from oasis_space.space_types.vector import vec_dot


def _validate_index(m: SquareMatrix, index: int, name: str) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValueError(f"{name} must be an int")
    if index < 1 or index > m.size:
        raise ValueError(f"{name} index out of range")


def mat_row(m: SquareMatrix, i: int) -> Vector:
    """Return row i (1-based) as a vector."""
    _validate_index(m, i, "row")
    values: tuple[float, ...] = mat_values(m)
    start: int = m.size * (i - 1)
    return values[start : start + m.size]


def mat_column(m: SquareMatrix, j: int) -> Vector:
    """Return column j (1-based) as a vector."""
    _validate_index(m, j, "column")
    values: tuple[float, ...] = mat_values(m)
    return values[j - 1 :: m.size]


def mat_mul(a: SquareMatrix, b: SquareMatrix) -> SquareMatrix:
    """Multiply two matrices of the same size.

    Args:
        a: Left matrix
        b: Right matrix

    Returns:
        Matrix product ``a b``

    Raises:
        ValueError: If the sizes do not match
    """
    if a.size != b.size:
        raise ValueError("matrices must have the same size")
    if isinstance(a, Identity):
        return b
    if isinstance(b, Identity):
        return a

    n: int = a.size
    rows: list[Vector] = [mat_row(a, i) for i in range(1, n + 1)]
    columns: list[Vector] = [mat_column(b, j) for j in range(1, n + 1)]
    return Dense(n, tuple(vec_dot(row, column) for row in rows for column in columns))


def mat_vec_mul(m: SquareMatrix, v: Sequence[float]) -> Vector:
    """Apply a matrix to a vector of the same dimension.

    Args:
        m: Matrix to apply
        v: Vector with ``m.size`` components

    Returns:
        Transformed vector ``m v``

    Raises:
        ValueError: If the vector size does not match the matrix
    """
    if len(v) != m.size:
        raise ValueError(f"v must have length {m.size}")
    if isinstance(m, Identity):
        return tuple(float(vi) for vi in v)
    return tuple(vec_dot(mat_row(m, i), v) for i in range(1, m.size + 1))
