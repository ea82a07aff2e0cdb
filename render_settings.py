from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np

from scene import FAR_PLANE

DEFAULT_BACKGROUND_COLOR = (0.2, 0.7, 0.8)
DEFAULT_BIAS_EPSILON: float = 1e-3 # secondary ray origin offset along the surface normal
DEFAULT_MAX_DEPTH: int = 4
DEFAULT_FOV: float = math.pi / 2.0


@dataclass(frozen=True, slots=True, eq=False)
class RenderSettings:
    background_color: np.ndarray = field(default_factory=lambda: np.asarray(DEFAULT_BACKGROUND_COLOR, dtype=float))
    bias_epsilon: float = DEFAULT_BIAS_EPSILON
    far_plane: float = FAR_PLANE
    max_depth: int = DEFAULT_MAX_DEPTH
    fov: float = DEFAULT_FOV

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError("max_depth must be non-negative")
        if not 0.0 < self.fov < math.pi:
            raise ValueError("fov must be in the open interval (0, pi) radians")
        background = np.array(self.background_color, dtype=float)
        background.flags.writeable = False
        object.__setattr__(self, "background_color", background)
