from __future__ import annotations

import numpy as np


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=float)


def vector_add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) + np.asarray(b, dtype=float)


def vector_subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) - np.asarray(b, dtype=float)


def vector_negate(v: np.ndarray) -> np.ndarray:
    return -np.asarray(v, dtype=float)


def vector_scale(v: np.ndarray, factor: float) -> np.ndarray:
    return np.asarray(v, dtype=float) * float(factor)


def vector_length(v: np.ndarray) -> float: #Euclidean length (magnitude) of a vector
    vector_array = np.asarray(v, dtype=float)
    return float(np.linalg.norm(vector_array))


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    magnitude = np.linalg.norm(vector_array)
    if magnitude == 0.0:
        raise ValueError("Cannot normalize a zero vector")
    return vector_array / magnitude


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def reflect_vector(I: np.ndarray, N: np.ndarray) -> np.ndarray:
    """Calculates the reflection vector R given the incident vector I and surface normal N.
       Assumes I points toward the surface"""
    vector_I = np.asarray(I, dtype=float)
    vector_N = np.asarray(N, dtype=float)
    return vector_I - vector_N * 2.0 * vector_dot(vector_I, vector_N)


def clamp_color01(color_rgb: np.ndarray) -> np.ndarray:
    """Clamps an RGB color array to the range [0.0, 1.0]."""
    color_array = np.asarray(color_rgb, dtype=float)
    return np.clip(color_array, 0.0, 1.0)


def quantize_color(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB color array (clamped to [0, 1]) to 8-bit integer [0, 255].

    Channels are truncated, not rounded: 0.25 maps to 63 and 0.5 to 127.
    Works on a single color or on a whole (..., 3) image array.
    """
    clamped_color = clamp_color01(color_rgb)
    return (clamped_color * 255.0).astype(np.uint8)
