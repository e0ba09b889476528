################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import enum


class Degenerate(enum.Enum):
    """
    Outcome tag for results that are numerically undefined

    Returned instead of a value when a matrix is singular within tolerance or
    a homogeneous divisor is zero within tolerance. It is an expected result
    that callers branch on, not an error.

    Attributes:
        DEGENERATE: The single degenerate outcome
    """

    DEGENERATE = "degenerate"


DEGENERATE: Degenerate = Degenerate.DEGENERATE


def is_degenerate(result: object) -> bool:
    """Return True when a result is the degenerate outcome."""
    return result is DEGENERATE
