[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leakynet"
version = "0.1.0"
description = "A small fully connected neural network with leaky ReLU activations, trained by per-sample gradient descent"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["neural network", "backpropagation", "leaky relu", "mnist", "machine learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["leakynet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
