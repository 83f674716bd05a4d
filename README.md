# leakynet

A small feedforward neural network built on numpy. Every layer uses a leaky
ReLU activation (slope 0.01 below zero), and the network learns by plain
per-sample gradient descent on the squared error.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Building a network

A network is described by its topology: the number of neurons in each layer,
from the input layer to the output layer.

```python
import numpy as np
from leakynet.network import NeuralNetwork

network = NeuralNetwork([8, 6, 6])

inputs = np.array([0.43, 0.9, 0.3, 0.034, 0.12, 0.3232, 0.1, 0.23])
target = np.array([1.0, 0.0, 0.0, 0.0, 0.0, 0.0])

for _ in range(5000):
    network.backpropagate(inputs, target, 0.02)

print(network.predict(inputs))
```

- `NeuralNetwork(topology)` builds a pass-through input layer of
  `topology[0]` neurons followed by one dense layer per remaining entry. An
  empty topology raises `ValueError`. The topology and the layers are
  available as `network.topology` and `network.layers`.
- `feed_forward(inputs)` runs the inputs through every layer and returns the
  output layer's activations.
- `backpropagate(inputs, target, learning_rate)` runs a forward pass, then
  updates every layer's weights and biases by one gradient step of the given
  learning rate. A network with fewer than two layers raises `ValueError`.
- `predict(inputs)` runs a forward pass and returns a copy of the output
  activations.

## Layers

`leakynet.layer.Layer(num_inputs, size)` is a dense layer with `size`
neurons, each connected to `num_inputs` neurons of the previous layer.
Weights start out uniformly random in `[-1, 1)`, scaled by
`sqrt(2 / num_inputs)`; biases start at zero. A layer with no inputs passes
its inputs through unchanged.

A layer exposes `size`, `weights`, `biases`, `weighted_sums` and
`activations`. `weights` and `biases` can be assigned; a value of the wrong
shape raises `ValueError`. `feed_forward(inputs)` computes, stores and
returns the layer's activations; an input of the wrong length raises
`ValueError`, as does building a layer with a non-positive size or a
negative number of inputs.

`leakynet.layer.InputLayer(size)` is a pass-through layer whose activations
can be set directly with `set_activations(activations)`; a vector whose
length is not `size` raises `ValueError`.

## Activation helpers

`leakynet.activations` provides `relu`, `relu_derivative`, `leaky_relu` and
`leaky_relu_derivative`. Each works element-wise and returns a float for a
single number or a numpy array for an array. It also provides
`squared_error(prediction, label)` (the sum of squared differences),
`random_double(low, high)` (uniform in `[low, high)`) and
`random_int(low, high)` (uniform over `low` to `high`, both included); the
random helpers raise `ValueError` when `low` exceeds `high`.

## MNIST data

`leakynet.data` reads the IDX files that the MNIST dataset ships in:

```python
from leakynet.data import read_mnist_images, read_mnist_labels

images = read_mnist_images("data/train-images.idx3-ubyte")
labels = read_mnist_labels("data/train-labels.idx1-ubyte")
```

`read_mnist_images` returns every pixel of every image, in order, as a single
flat float array. `read_mnist_labels` returns one float per label. A file that
cannot be opened raises `OSError`; a truncated header or fewer data bytes than
the header announces raises `ValueError`.

`TrainingSettings` is a dataclass holding `learning_rate`, `epochs`,
`batch_size`, `training_data` and `labels`.

## What it does not do

There is no command-line program and no training loop over a dataset:
`TrainingSettings` only holds values, and nothing in the package reads it.
Training on MNIST, batching, epochs and evaluation are left to the caller,
who can drive `NeuralNetwork.backpropagate` one example at a time.