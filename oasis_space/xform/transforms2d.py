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
Common 2D linear transforms as 2x2 matrices

Conventions:
    * +x to the right, +y upwards, right-handed with z out of the plane
    * Angles are in degrees, measured counter-clockwise from +x
    * Quarter-turn rotations and axis reflections use exact values
"""

from __future__ import annotations

import math

from oasis_space.math_utils.units import Angle
from oasis_space.space_types.matrix import Dense


def scale2d(sx: float, sy: float) -> Dense:
    """Scale x by ``sx`` and y by ``sy``."""
    return Dense(2, (sx, 0.0, 0.0, sy))


def rotate2d(theta_deg: float) -> Dense:
    """Rotate counter-clockwise by ``theta_deg`` degrees."""
    theta_rad: float = float(Angle.deg2rad(theta_deg))
    c: float = math.cos(theta_rad)
    s: float = math.sin(theta_rad)
    return Dense(2, (c, -s, s, c))


def rotate2d_90() -> Dense:
    """Rotate counter-clockwise by 90 degrees."""
    return Dense(2, (0.0, -1.0, 1.0, 0.0))


def rotate2d_180() -> Dense:
    """Rotate by 180 degrees."""
    return Dense(2, (-1.0, 0.0, 0.0, -1.0))


def rotate2d_270() -> Dense:
    """Rotate counter-clockwise by 270 degrees."""
    return Dense(2, (0.0, 1.0, -1.0, 0.0))


def reflect2d(theta_deg: float) -> Dense:
    """Reflect in the line through the origin at ``theta_deg`` degrees."""
    two_theta_rad: float = float(Angle.deg2rad(2.0 * theta_deg))
    c2: float = math.cos(two_theta_rad)
    s2: float = math.sin(two_theta_rad)
    return Dense(2, (c2, s2, s2, -c2))


def reflect2d_x() -> Dense:
    """Reflect in the x-axis, negating y."""
    return Dense(2, (1.0, 0.0, 0.0, -1.0))


def reflect2d_y() -> Dense:
    """Reflect in the y-axis, negating x."""
    return Dense(2, (-1.0, 0.0, 0.0, 1.0))
