from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _frozen_array(values: np.ndarray) -> np.ndarray:
    array = np.array(values, dtype=float)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, slots=True, eq=False)
class Material:
    """Surface response of a sphere.

    albedo weights the diffuse, specular and reflected terms in that order.
    The weights need not sum to 1; values above 1 give over-bright or
    mirror-like surfaces.
    """

    albedo: np.ndarray
    diffuse_color: np.ndarray
    specular_exponent: float

    def __post_init__(self) -> None:
        albedo = _frozen_array(self.albedo)
        if albedo.shape != (3,):
            raise ValueError(f"albedo must have 3 weights, got shape {albedo.shape}")
        if np.any(albedo < 0.0):
            raise ValueError("albedo weights must be non-negative")
        if self.specular_exponent <= 0.0:
            raise ValueError("specular_exponent must be positive")
        object.__setattr__(self, "albedo", albedo)
        object.__setattr__(self, "diffuse_color", _frozen_array(self.diffuse_color))
        object.__setattr__(self, "specular_exponent", float(self.specular_exponent))
