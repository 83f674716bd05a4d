import numpy as np
import pytest

from leakynet.activations import (
    leaky_relu,
    leaky_relu_derivative,
    random_double,
    random_int,
    relu,
    relu_derivative,
    squared_error,
)


@pytest.mark.parametrize(
    "value, expected", [(0, 0), (1, 1), (-1, 0), (100, 100), (-100, 0)]
)
def test_relu(value, expected):
    assert relu(value) == expected


@pytest.mark.parametrize(
    "value, expected", [(0, 0), (1, 1), (-1, 0), (100, 1), (-100, 0)]
)
def test_relu_derivative(value, expected):
    assert relu_derivative(value) == expected


def test_relu_on_vector():
    result = relu(np.array([-2.0, 0.0, 3.0]))
    assert np.array_equal(result, np.array([0.0, 0.0, 3.0]))


def test_leaky_relu_positive_is_identity():
    assert leaky_relu(5.0) == 5.0


def test_leaky_relu_negative_is_scaled():
    assert leaky_relu(-100.0) == pytest.approx(-1.0)


def test_leaky_relu_derivative_values():
    result = leaky_relu_derivative(np.array([-3.0, 0.0, 2.0]))
    assert np.allclose(result, [0.01, 0.01, 1.0])


def test_squared_error():
    assert squared_error(np.array([1.0, 2.0]), np.array([0.0, 0.0])) == pytest.approx(5.0)


def test_squared_error_of_identical_vectors_is_zero():
    v = np.array([0.3, -0.7, 1.5])
    assert squared_error(v, v) == 0.0


def test_random_int_within_inclusive_bounds():
    values = {random_int(1, 3) for _ in range(200)}
    assert values <= {1, 2, 3}
    assert len(values) > 1


def test_random_double_within_bounds():
    for _ in range(100):
        value = random_double(-2.0, 5.0)
        assert -2.0 <= value <= 5.0


def test_random_int_rejects_inverted_range():
    with pytest.raises(ValueError):
        random_int(5, 1)