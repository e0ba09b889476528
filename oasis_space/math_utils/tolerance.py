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
Tolerance-based scalar comparisons

Both helpers treat a difference that is exactly ``eps`` as equal, so an
``eps`` of zero reduces to exact comparison.
"""

from __future__ import annotations

from oasis_space.math_utils.units import SpaceConstants


def _validate_eps(eps: float) -> None:
    if eps < 0.0:
        raise ValueError("eps must be >= 0")


def float_equals(a: float, b: float, eps: float = SpaceConstants.EPS) -> bool:
    """Return True when ``|a - b| <= eps``."""
    _validate_eps(eps)
    return abs(a - b) <= eps


def float_is_zero(x: float, eps: float = SpaceConstants.EPS) -> bool:
    """Return True when ``|x| <= eps``."""
    _validate_eps(eps)
    return abs(x) <= eps
