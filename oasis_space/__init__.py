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
Spatial primitives for 2D, 3D and 4D geometry

Square matrices (2x2, 3x3, 4x4) with algebra, determinants, inverses and
homogeneous-coordinate conversions.
"""

from __future__ import annotations

from oasis_space.config.space_params import SpaceParams
from oasis_space.math_utils.units import SpaceConstants
from oasis_space.space_types.degenerate import DEGENERATE
from oasis_space.space_types.degenerate import Degenerate
from oasis_space.space_types.degenerate import is_degenerate
from oasis_space.space_types.matrix import Dense
from oasis_space.space_types.matrix import Identity
from oasis_space.space_types.matrix import SquareMatrix
from oasis_space.space_types.matrix import Xform2dStack
from oasis_space.space_types.matrix import mat_as_array
from oasis_space.space_types.matrix import mat_dense
from oasis_space.space_types.matrix import mat_element
from oasis_space.space_types.matrix import mat_from_array
from oasis_space.space_types.matrix import mat_from_rows
from oasis_space.space_types.matrix import mat_identity
from oasis_space.space_types.matrix import mat_new
from oasis_space.space_types.matrix import mat_size
from oasis_space.space_types.matrix import mat_values
from oasis_space.space_types.vector import Vector
from oasis_space.space_types.vector import vec_dot
from oasis_space.space_types.vector import vec_equals
from oasis_space.space_types.vector import vec_new
from oasis_space.space_types.vector import vec_size
from oasis_space.xform.determinant import mat_adjoint
from oasis_space.xform.determinant import mat_cofactor
from oasis_space.xform.determinant import mat_det
from oasis_space.xform.determinant import mat_inv
from oasis_space.xform.determinant import mat_minor
from oasis_space.xform.matrix_algebra import mat_add
from oasis_space.xform.matrix_algebra import mat_dot
from oasis_space.xform.matrix_algebra import mat_equals
from oasis_space.xform.matrix_algebra import mat_scale
from oasis_space.xform.matrix_algebra import mat_sub
from oasis_space.xform.matrix_algebra import mat_trace
from oasis_space.xform.matrix_algebra import mat_transpose
from oasis_space.xform.matrix_product import mat_column
from oasis_space.xform.matrix_product import mat_mul
from oasis_space.xform.matrix_product import mat_row
from oasis_space.xform.matrix_product import mat_vec_mul
from oasis_space.xform.projective import mat_lift
from oasis_space.xform.projective import vec_lift
from oasis_space.xform.projective import vec_project
from oasis_space.xform.transforms2d import reflect2d
from oasis_space.xform.transforms2d import reflect2d_x
from oasis_space.xform.transforms2d import reflect2d_y
from oasis_space.xform.transforms2d import rotate2d
from oasis_space.xform.transforms2d import rotate2d_90
from oasis_space.xform.transforms2d import rotate2d_180
from oasis_space.xform.transforms2d import rotate2d_270
from oasis_space.xform.transforms2d import scale2d


__all__ = [
    "DEGENERATE",
    "Degenerate",
    "Dense",
    "Identity",
    "SpaceConstants",
    "SpaceParams",
    "SquareMatrix",
    "Vector",
    "Xform2dStack",
    "is_degenerate",
    "mat_add",
    "mat_adjoint",
    "mat_as_array",
    "mat_cofactor",
    "mat_column",
    "mat_dense",
    "mat_det",
    "mat_dot",
    "mat_element",
    "mat_equals",
    "mat_from_array",
    "mat_from_rows",
    "mat_identity",
    "mat_inv",
    "mat_lift",
    "mat_minor",
    "mat_mul",
    "mat_new",
    "mat_row",
    "mat_scale",
    "mat_size",
    "mat_sub",
    "mat_trace",
    "mat_transpose",
    "mat_values",
    "mat_vec_mul",
    "reflect2d",
    "reflect2d_x",
    "reflect2d_y",
    "rotate2d",
    "rotate2d_180",
    "rotate2d_270",
    "rotate2d_90",
    "scale2d",
    "vec_dot",
    "vec_equals",
    "vec_lift",
    "vec_new",
    "vec_project",
    "vec_size",
]
