from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True, eq=False)
class Light:
    position: np.ndarray
    intensity: float

    def __post_init__(self) -> None:
        if self.intensity < 0.0:
            raise ValueError("light intensity must be non-negative")
        position = np.array(self.position, dtype=float)
        position.flags.writeable = False
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "intensity", float(self.intensity))
