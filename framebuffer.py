from __future__ import annotations

from typing import Tuple

import numpy as np

from utils.vector_operations import quantize_color


class Framebuffer:
    """Row-major grid of RGB samples over one contiguous array, indexed as fb[row, column]."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, 3), dtype=float)

    def __getitem__(self, index: Tuple[int, int]) -> np.ndarray:
        row, column = index
        return self.pixels[row, column].copy()

    def __setitem__(self, index: Tuple[int, int], color: np.ndarray) -> None:
        row, column = index
        self.pixels[row, column, :] = color

    def tone_map(self) -> None:
        """Rescale every pixel whose brightest channel exceeds 1 so that channel becomes 1.

        The rescale is uniform per pixel, so channel ratios (hue) are kept.
        """
        brightest = self.pixels.max(axis=2, keepdims=True)
        scale = np.where(brightest > 1.0, 1.0 / np.maximum(brightest, 1.0), 1.0)
        self.pixels *= scale

    def to_bytes(self) -> bytes:
        """Quantize into a row-major RGB byte string of length width * height * 3."""
        return quantize_color(self.pixels).tobytes()
