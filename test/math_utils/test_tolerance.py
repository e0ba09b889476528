################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for tolerance comparisons."""

from __future__ import annotations

import pytest

from oasis_space.math_utils.tolerance import float_equals
from oasis_space.math_utils.tolerance import float_is_zero


def test_float_equals_within_eps() -> None:
    """Values closer than eps compare equal."""
    assert float_equals(1.0, 1.0 + 5.0e-7)
    assert not float_equals(1.0, 1.0 + 5.0e-6)


def test_float_equals_boundary_inclusive() -> None:
    """A difference of exactly eps is equal."""
    assert float_equals(0.0, 0.5, eps=0.5)
    assert float_equals(2.0, 2.0, eps=0.0)
    assert not float_equals(2.0, 2.5, eps=0.0)


def test_float_is_zero() -> None:
    """Zero test honors the tolerance on both signs."""
    assert float_is_zero(0.0)
    assert float_is_zero(-1.0e-7)
    assert not float_is_zero(1.0e-3)
    assert float_is_zero(1.0e-3, eps=1.0e-2)


def test_negative_eps_rejected() -> None:
    """Negative tolerances are a caller error."""
    with pytest.raises(ValueError):
        float_equals(1.0, 1.0, eps=-1.0)
    with pytest.raises(ValueError):
        float_is_zero(0.0, eps=-1.0)
