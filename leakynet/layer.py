"""Fully connected layers with leaky ReLU activation."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from leakynet.activations import leaky_relu

_RNG = np.random.default_rng()


class Layer:
    """A dense layer; a layer with no inputs passes its inputs through unchanged."""

    def __init__(self, num_inputs: int, size: int) -> None:
        if num_inputs < 0 or size <= 0:
            raise ValueError("Layer: invalid number of inputs or size")
        self.size = size
        weights = _RNG.uniform(-1.0, 1.0, (size, num_inputs))
        if num_inputs > 0:
            weights *= math.sqrt(2.0 / num_inputs)
        self._weights = weights
        self._biases = np.zeros(size)
        self._weighted_sums = np.zeros(0)
        self._activations = np.zeros(0)

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @weights.setter
    def weights(self, value: ArrayLike) -> None:
        arr = np.asarray(value, dtype=float)
        if arr.shape != self._weights.shape:
            raise ValueError("Layer.weights: invalid size of weights")
        self._weights = arr.copy()

    @property
    def biases(self) -> np.ndarray:
        return self._biases

    @biases.setter
    def biases(self, value: ArrayLike) -> None:
        arr = np.asarray(value, dtype=float)
        if arr.shape != self._biases.shape:
            raise ValueError("Layer.biases: invalid size of biases")
        self._biases = arr.copy()

    @property
    def weighted_sums(self) -> np.ndarray:
        return self._weighted_sums

    @property
    def activations(self) -> np.ndarray:
        return self._activations

    def feed_forward(self, inputs: ArrayLike) -> np.ndarray:
        """Compute and store this layer's activations for the given inputs."""
        x = np.asarray(inputs, dtype=float)
        if self._weights.size == 0:
            self._activations = x
            return x
        if x.shape != (self._weights.shape[1],):
            raise ValueError(
                f"Layer.feed_forward: invalid number of inputs for layer of size {self.size}"
            )
        self._weighted_sums = self._weights @ x + self._biases
        self._activations = leaky_relu(self._weighted_sums)
        return self._activations


class InputLayer(Layer):
    """A layer without weights whose activations are set directly."""

    def __init__(self, size: int) -> None:
        super().__init__(0, size)

    def set_activations(self, activations: ArrayLike) -> None:
        arr = np.asarray(activations, dtype=float)
        if arr.shape != (self.size,):
            raise ValueError("InputLayer.set_activations: invalid size of activations")
        self._activations = arr.copy()