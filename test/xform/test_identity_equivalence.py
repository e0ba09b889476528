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
Identity tag versus dense identity

Every operation must give the same result for ``Identity(n)`` as for the dense
matrix holding the identity values. These tests run each operation both ways.
"""

from __future__ import annotations

import numpy as np

from oasis_space.space_types.degenerate import Degenerate
from oasis_space.space_types.matrix import Dense
from oasis_space.space_types.matrix import Identity
from oasis_space.space_types.matrix import SquareMatrix
from oasis_space.space_types.matrix import mat_dense
from oasis_space.space_types.matrix import mat_from_array
from oasis_space.space_types.matrix import mat_identity
from oasis_space.space_types.matrix import mat_values
from oasis_space.space_types.vector import Vector
from oasis_space.xform.determinant import mat_adjoint
from oasis_space.xform.determinant import mat_cofactor
from oasis_space.xform.determinant import mat_det
from oasis_space.xform.determinant import mat_inv
from oasis_space.xform.matrix_algebra import mat_add
from oasis_space.xform.matrix_algebra import mat_dot
from oasis_space.xform.matrix_algebra import mat_equals
from oasis_space.xform.matrix_algebra import mat_scale
from oasis_space.xform.matrix_algebra import mat_sub
from oasis_space.xform.matrix_algebra import mat_trace
from oasis_space.xform.matrix_algebra import mat_transpose
from oasis_space.xform.matrix_product import mat_mul
from oasis_space.xform.matrix_product import mat_vec_mul


SIZES: tuple[int, ...] = (2, 3, 4)


def _pair(size: int) -> tuple[Identity, Dense]:
    iden: Identity = mat_identity(size)
    return iden, mat_dense(iden)


def _sample(size: int) -> Dense:
    rng: np.random.Generator = np.random.default_rng(size)
    return mat_from_array(rng.normal(size=(size, size)) + 3.0 * np.eye(size))


def _same(a: SquareMatrix | Degenerate, b: SquareMatrix | Degenerate) -> bool:
    if isinstance(a, Degenerate) or isinstance(b, Degenerate):
        return a is b
    return mat_values(a) == mat_values(b)


def test_equality() -> None:
    """Both forms compare equal to each other and to the same matrices."""
    for size in SIZES:
        iden, dense = _pair(size)
        m: Dense = _sample(size)
        assert mat_equals(iden, dense)
        assert mat_equals(dense, iden)
        assert mat_equals(iden, m) == mat_equals(dense, m)


def test_pointwise() -> None:
    """Pointwise arithmetic agrees for both forms."""
    for size in SIZES:
        iden, dense = _pair(size)
        m: Dense = _sample(size)
        assert _same(mat_scale(2.5, iden), mat_scale(2.5, dense))
        assert _same(mat_add(iden, m), mat_add(dense, m))
        assert _same(mat_add(m, iden), mat_add(m, dense))
        assert _same(mat_sub(iden, m), mat_sub(dense, m))
        assert _same(mat_sub(m, iden), mat_sub(m, dense))
        assert _same(mat_dot(iden, m), mat_dot(dense, m))


def test_trace_and_transpose() -> None:
    """Trace and transpose agree for both forms."""
    for size in SIZES:
        iden, dense = _pair(size)
        assert mat_trace(iden) == mat_trace(dense)
        assert _same(mat_transpose(iden), mat_transpose(dense))


def test_products() -> None:
    """Products with an identity agree with the full dense computation."""
    for size in SIZES:
        iden, dense = _pair(size)
        m: Dense = _sample(size)
        assert _same(mat_mul(iden, m), mat_mul(dense, m))
        assert _same(mat_mul(m, iden), mat_mul(m, dense))
        assert _same(mat_mul(iden, iden), mat_mul(dense, dense))


def test_application() -> None:
    """Applying either form leaves a vector unchanged."""
    for size in SIZES:
        iden, dense = _pair(size)
        v: Vector = tuple(float(k) - 1.5 for k in range(size))
        assert mat_vec_mul(iden, v) == mat_vec_mul(dense, v) == v


def test_determinant_engine() -> None:
    """Determinant, cofactor, adjoint and inverse agree for both forms."""
    for size in SIZES:
        iden, dense = _pair(size)
        assert mat_det(iden) == mat_det(dense) == 1.0
        assert _same(mat_cofactor(iden), mat_cofactor(dense))
        assert _same(mat_adjoint(iden), mat_adjoint(dense))
        assert _same(mat_inv(iden), mat_inv(dense))
