"""A small feedforward neural network with leaky ReLU activations and MNIST file readers."""

__version__ = "0.1.0"
__all__ = ["activations", "data", "layer", "network"]