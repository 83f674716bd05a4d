"""Training settings and readers for MNIST IDX files."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike

import numpy as np


@dataclass
class TrainingSettings:
    """Parameters for stochastic gradient descent."""

    learning_rate: float
    epochs: int
    batch_size: int
    training_data: np.ndarray
    labels: np.ndarray


def _read_header(handle, count: int, path) -> tuple[int, ...]:
    raw = handle.read(4 * count)
    if len(raw) != 4 * count:
        raise ValueError(f"{path}: truncated IDX header")
    return struct.unpack(f">{count}i", raw)


def _read_payload(handle, length: int, path) -> np.ndarray:
    raw = handle.read(length)
    if len(raw) != length:
        raise ValueError(f"{path}: expected {length} data bytes, found {len(raw)}")
    return np.frombuffer(raw, dtype=np.uint8).astype(float)


def read_mnist_images(path: str | PathLike) -> np.ndarray:
    """Read an MNIST image file into one flat vector of pixel values."""
    with open(path, "rb") as handle:
        _magic, num_images, num_rows, num_cols = _read_header(handle, 4, path)
        return _read_payload(handle, num_images * num_rows * num_cols, path)


def read_mnist_labels(path: str | PathLike) -> np.ndarray:
    """Read an MNIST label file into a vector of label values."""
    with open(path, "rb") as handle:
        _magic, num_labels = _read_header(handle, 2, path)
        return _read_payload(handle, num_labels, path)