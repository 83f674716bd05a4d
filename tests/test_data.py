import struct

import numpy as np
import pytest

from leakynet.data import TrainingSettings, read_mnist_images, read_mnist_labels


def _write(path, header, payload):
    path.write_bytes(header + bytes(payload))
    return path


def test_read_images_round_trip(tmp_path):
    pixels = [0, 17, 128, 255, 3, 4, 5, 6]
    path = _write(tmp_path / "images", struct.pack(">iiii", 2051, 2, 2, 2), pixels)
    data = read_mnist_images(path)
    assert np.array_equal(data, np.array(pixels, dtype=float))


def test_read_images_ignores_trailing_bytes(tmp_path):
    path = _write(tmp_path / "images", struct.pack(">iiii", 2051, 1, 1, 2), [9, 8, 7])
    assert np.array_equal(read_mnist_images(path), np.array([9.0, 8.0]))


def test_read_images_truncated_raises(tmp_path):
    path = _write(tmp_path / "images", struct.pack(">iiii", 2051, 2, 2, 2), [1, 2])
    with pytest.raises(ValueError):
        read_mnist_images(path)


def test_read_images_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_mnist_images(tmp_path / "absent")


def test_read_labels_round_trip(tmp_path):
    labels = [7, 2, 1, 0, 4]
    path = _write(tmp_path / "labels", struct.pack(">ii", 2049, len(labels)), labels)
    assert np.array_equal(read_mnist_labels(path), np.array(labels, dtype=float))


def test_read_labels_truncated_header(tmp_path):
    path = tmp_path / "labels"
    path.write_bytes(b"\x00\x00")
    with pytest.raises(ValueError):
        read_mnist_labels(path)


def test_training_settings_holds_values():
    data = np.zeros(4)
    labels = np.ones(2)
    settings = TrainingSettings(0.02, 5, 2, data, labels)
    assert settings.learning_rate == 0.02
    assert settings.epochs == 5
    assert settings.batch_size == 2
    assert settings.training_data is data
    assert settings.labels is labels