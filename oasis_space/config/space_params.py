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

import math
from dataclasses import dataclass
from typing import Mapping

from oasis_space.math_utils.units import SpaceConstants


@dataclass(frozen=True, slots=True)
class SpaceParams:
    """Configuration parameters for the spatial math layer.

    Responsibility:
        Hold the tolerance that callers pass to comparison and degeneracy
        sensitive operations.

    Data contract:
        - epsilon: absolute tolerance used by mat_equals, vec_equals, mat_inv
          and vec_project. Must be finite and >= 0.

    Determinism and edge cases:
        - Parameters are explicit inputs; operations never read them
          implicitly. Overriding epsilon for one caller does not affect
          another.
        - from_dict() rejects unknown keys and non-numeric values.
    """

    epsilon: float

    @staticmethod
    def defaults() -> SpaceParams:
        """Return the default parameter set."""
        params: SpaceParams = SpaceParams(epsilon=SpaceConstants.EPS)
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> SpaceParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise ValueError(f"unknown parameter: {unknown_keys[0]}")
        defaults: SpaceParams = cls.defaults()
        result: SpaceParams = cls(
            epsilon=cls._as_float("epsilon", params.get("epsilon", defaults.epsilon)),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameters and raise ValueError on failure."""
        if not math.isfinite(self.epsilon):
            raise ValueError("epsilon must be finite")
        if self.epsilon < 0.0:
            raise ValueError("epsilon must be >= 0")

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "epsilon": self.epsilon,
        }

    @staticmethod
    def _as_float(name: str, value: object) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a float")
        return float(value)

    @staticmethod
    def _field_order() -> list[str]:
        return [
            "epsilon",
        ]
