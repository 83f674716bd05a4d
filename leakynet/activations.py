"""Activation functions, their derivatives and small numeric helpers."""

from __future__ import annotations

import random

import numpy as np
from numpy.typing import ArrayLike

LEAK = 0.01


def _scalar_or_array(result: np.ndarray) -> float | np.ndarray:
    return float(result) if result.ndim == 0 else result


def random_double(low: float, high: float) -> float:
    """Return a float drawn uniformly from [low, high)."""
    if low > high:
        raise ValueError("random_double: low must not exceed high")
    return random.uniform(low, high)


def random_int(low: int, high: int) -> int:
    """Return an integer drawn uniformly from [low, high], both ends included."""
    if low > high:
        raise ValueError("random_int: low must not exceed high")
    return random.randint(low, high)


def relu(x: ArrayLike) -> float | np.ndarray:
    """Rectified linear unit, applied element-wise."""
    arr = np.asarray(x, dtype=float)
    return _scalar_or_array(np.where(arr > 0, arr, 0.0))


def relu_derivative(x: ArrayLike) -> float | np.ndarray:
    """Derivative of ReLU: 1 where x > 0, otherwise 0."""
    arr = np.asarray(x, dtype=float)
    return _scalar_or_array(np.where(arr > 0, 1.0, 0.0))


def leaky_relu(x: ArrayLike) -> float | np.ndarray:
    """Leaky ReLU with a slope of 0.01 for non-positive inputs."""
    arr = np.asarray(x, dtype=float)
    return _scalar_or_array(np.where(arr > 0, arr, LEAK * arr))


def leaky_relu_derivative(x: ArrayLike) -> float | np.ndarray:
    """Derivative of leaky ReLU: 1 where x > 0, otherwise 0.01."""
    arr = np.asarray(x, dtype=float)
    return _scalar_or_array(np.where(arr > 0, 1.0, LEAK))


def squared_error(prediction: ArrayLike, label: ArrayLike) -> float:
    """Sum of squared differences between prediction and label."""
    diff = np.asarray(prediction, dtype=float) - np.asarray(label, dtype=float)
    return float(np.dot(diff, diff))