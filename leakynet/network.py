"""A feed-forward neural network trained by backpropagation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

from leakynet.activations import leaky_relu_derivative
from leakynet.layer import Layer


class NeuralNetwork:
    """A stack of dense leaky-ReLU layers; the first entry of the topology is the input size."""

    def __init__(self, topology: Sequence[int]) -> None:
        self.topology = list(topology)
        if not self.topology:
            raise ValueError("NeuralNetwork: topology must not be empty")
        self.layers = [Layer(0, self.topology[0])]
        self.layers.extend(
            Layer(prev, size) for prev, size in zip(self.topology, self.topology[1:])
        )

    def feed_forward(self, inputs: ArrayLike) -> np.ndarray:
        """Run the inputs through every layer and return the output activations."""
        values = np.asarray(inputs, dtype=float)
        for layer in self.layers:
            values = layer.feed_forward(values)
        return values

    def backpropagate(
        self, inputs: ArrayLike, target: ArrayLike, learning_rate: float
    ) -> None:
        """Perform one gradient-descent step on a single example."""
        if len(self.layers) < 2:
            raise ValueError("NeuralNetwork.backpropagate: needs at least two layers")
        self.feed_forward(inputs)
        target = np.asarray(target, dtype=float)

        output_layer = self.layers[-1]
        error = leaky_relu_derivative(output_layer.weighted_sums) * (
            output_layer.activations - target
        )
        previous = self.layers[-2].activations
        output_layer.weights = output_layer.weights - learning_rate * np.outer(error, previous)
        output_layer.biases = output_layer.biases - learning_rate * error

        for index in range(len(self.layers) - 2, 0, -1):
            hidden = self.layers[index]
            following = self.layers[index + 1]
            hidden_error = leaky_relu_derivative(hidden.weighted_sums) * (
                following.weights.T @ error
            )
            previous = self.layers[index - 1].activations
            hidden.weights = hidden.weights - learning_rate * np.outer(hidden_error, previous)
            hidden.biases = hidden.biases - learning_rate * hidden_error
            error = hidden_error

    def predict(self, inputs: ArrayLike) -> np.ndarray:
        """Return the network's output for the given inputs."""
        return self.feed_forward(inputs).copy()