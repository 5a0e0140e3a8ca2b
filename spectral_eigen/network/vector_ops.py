"""Stateless vector primitives used by the step engine.

Thin numpy wrappers kept in one place so the update rule reads like the
algorithm it implements.
"""

import numpy as np


def magnitude(v: np.ndarray) -> float:
    """Euclidean length of a vector.

    Args:
        v: Input vector

    Returns:
        sqrt(sum(v_i^2)). Returns 0.0 for an all-zero vector.
    """
    return float(np.linalg.norm(v))


def dot(v1: np.ndarray, v2: np.ndarray) -> float:
    """Inner product of two equal-length vectors."""
    return float(np.dot(v1, v2))


def scale(v: np.ndarray, s: float) -> np.ndarray:
    """Return a new vector with every element multiplied by ``s``."""
    return np.asarray(v, dtype=np.float64) * s


def normalize_in_place(v: np.ndarray) -> np.ndarray:
    """Divide ``v`` by its magnitude in place.

    No epsilon guard: an all-zero vector becomes non-finite. Callers that
    can see silent input add their own epsilon before dividing.

    Args:
        v: Float vector, modified in place

    Returns:
        The same array, for chaining.
    """
    norm = magnitude(v)
    with np.errstate(divide="ignore", invalid="ignore"):
        v /= norm
    return v
