################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Value types for spatial transforms."""

from __future__ import annotations

from oasis_space.space_types.degenerate import DEGENERATE
from oasis_space.space_types.degenerate import Degenerate
from oasis_space.space_types.degenerate import is_degenerate
from oasis_space.space_types.matrix import Dense
from oasis_space.space_types.matrix import Identity
from oasis_space.space_types.matrix import SquareMatrix
from oasis_space.space_types.matrix import Xform2dStack
from oasis_space.space_types.vector import Vector


__all__ = [
    "DEGENERATE",
    "Degenerate",
    "Dense",
    "Identity",
    "SquareMatrix",
    "Vector",
    "Xform2dStack",
    "is_degenerate",
]
