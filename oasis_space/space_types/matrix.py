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
Square matrix values for 2x2, 3x3 and 4x4 transforms

A matrix is one of two immutable variants:

    * ``Identity(size)``: the identity matrix, stored as a size tag only
    * ``Dense(size, values)``: ``size * size`` floats in row-major order

Element (i, j) uses 1-based row and column indices and lives at flat offset
``size * (i - 1) + (j - 1)`` of ``values``. Every operation must give the same
result for ``Identity(n)`` as for the dense matrix holding the identity values;
the identity variant only lets operations skip work.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike
from numpy.typing import NDArray

from oasis_space.math_utils.units import SpaceConstants
from oasis_space.math_utils.units import assert_finite


def _validate_size(size: object) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError("size must be an int")
    if size not in SpaceConstants.MATRIX_SIZES:
        raise ValueError("size must be 2, 3 or 4")


def _identity_values(size: int) -> tuple[float, ...]:
    return tuple(
        1.0 if r == c else 0.0 for r in range(size) for c in range(size)
    )


_IDENTITY_VALUES: dict[int, tuple[float, ...]] = {
    size: _identity_values(size) for size in SpaceConstants.MATRIX_SIZES
}


@dataclass(frozen=True, slots=True)
class Identity:
    """Identity matrix of the given size, without stored values."""

    size: int

    def __post_init__(self) -> None:
        _validate_size(self.size)


@dataclass(frozen=True, slots=True)
class Dense:
    """Matrix with explicit row-major values."""

    size: int
    values: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate the size and promote values to a tuple of floats."""
        _validate_size(self.size)
        if len(self.values) != self.size * self.size:
            raise ValueError(
                f"values must have length {self.size * self.size} "
                f"for {self.size}x{self.size}"
            )
        values: list[float] = []
        for value in self.values:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError("matrix entries must be numbers")
            values.append(float(value))
        object.__setattr__(self, "values", tuple(values))


SquareMatrix = Identity | Dense

# A stack of 2D homogeneous (3x3) transforms, pushed and popped while walking
# a scene hierarchy. Matrices are post-multiplied onto the head of the stack.
Xform2dStack = list[SquareMatrix]


def mat_identity(size: int) -> Identity:
    """Return the identity matrix of the given size."""
    return Identity(size)


def mat_new(size: int, *values: float) -> Dense:
    """Create a dense matrix from ``size * size`` row-major values.

    Values can be int or float; ints are promoted to float.

    Args:
        size: Matrix dimension, one of 2, 3 or 4
        values: Matrix entries in row-major order

    Returns:
        Dense matrix

    Raises:
        ValueError: If the size or number of values is invalid
    """
    return Dense(size, tuple(values))


def mat_from_rows(rows: Sequence[Sequence[float]]) -> Dense:
    """Create a dense matrix from a sequence of equal-length rows."""
    size: int = len(rows)
    _validate_size(size)
    values: list[float] = []
    for row in rows:
        if len(row) != size:
            raise ValueError("rows must form a square matrix")
        values.extend(row)
    return Dense(size, tuple(values))


def mat_from_array(a: ArrayLike) -> Dense:
    """Create a dense matrix from a square 2D array."""
    mat: NDArray[np.float64] = np.asarray(a, dtype=float)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError("array must be square")
    assert_finite(mat, "array")
    return Dense(int(mat.shape[0]), tuple(float(x) for x in mat.reshape(-1)))


def mat_as_array(m: SquareMatrix) -> NDArray[np.float64]:
    """Return the matrix as a ``(size, size)`` float array."""
    if isinstance(m, Identity):
        return np.eye(m.size, dtype=float)
    return np.asarray(m.values, dtype=float).reshape((m.size, m.size))


def mat_size(m: SquareMatrix) -> int:
    """Return the matrix dimension."""
    return m.size


def mat_values(m: SquareMatrix) -> tuple[float, ...]:
    """Return the row-major values, expanding an identity."""
    if isinstance(m, Identity):
        return _IDENTITY_VALUES[m.size]
    return m.values


def mat_dense(m: SquareMatrix) -> Dense:
    """Return the dense form of a matrix."""
    if isinstance(m, Identity):
        return Dense(m.size, _IDENTITY_VALUES[m.size])
    return m


def mat_element(m: SquareMatrix, i: int, j: int) -> float:
    """Return the (i, j) element using 1-based indices.

    An identity answers from its indices without expanding.

    Raises:
        ValueError: If an index is outside ``[1, size]``
    """
    for index in (i, j):
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError("row and column indices must be ints")
        if index < 1 or index > m.size:
            raise ValueError("row or column index out of range")
    if isinstance(m, Identity):
        return 1.0 if i == j else 0.0
    return m.values[m.size * (i - 1) + (j - 1)]
