import numpy as np
import pytest

from models.FNN.helpers import Backend as backend_module
from models.FNN.helpers import initializers
from models.FNN.helpers.Backend import Backend, backend
from models.FNN.helpers.errors import (
    NNError,
    NumericDomainError,
    ShapeMismatchError,
    UninitializedStateError,
    check_shape,
)
from models.FNN.helpers.gradcheck import gradient_check, numerical_grad


def test_ensure_array_casts_to_default_float():
    arr = backend.ensure_array([[1, 2], [3, 4]])
    assert isinstance(arr, np.ndarray)
    assert arr.dtype == np.float64


def test_ensure_matrix_promotes_vectors_and_rejects_tensors():
    assert backend.ensure_matrix([1.0, 2.0, 3.0]).shape == (1, 3)
    with pytest.raises(ShapeMismatchError):
        backend.ensure_matrix(np.zeros((2, 2, 2)))


def test_configure_float32():
    backend.configure(default_float=np.float32)
    assert backend.ensure_array([1, 2]).dtype == np.float32


def test_gpu_request_without_cupy_falls_back(monkeypatch):
    monkeypatch.setattr(backend_module, "CUPY_AVAILABLE", False)
    b = Backend(use_gpu=True)
    assert b.use_gpu is False
    assert b.xp is np


def test_env_configuration(monkeypatch):
    monkeypatch.setenv("FNN_USE_GPU", "yes")
    monkeypatch.setenv("FNN_FLOAT", "float32")
    assert backend_module._env_flag("FNN_USE_GPU") is True
    assert backend_module._env_float("FNN_FLOAT") is np.float32
    monkeypatch.setenv("FNN_FLOAT", "float16")
    with pytest.raises(ValueError):
        backend_module._env_float("FNN_FLOAT")


def test_attribute_delegation():
    assert backend.pi == pytest.approx(np.pi)


def test_initializers_shapes_and_values():
    assert initializers.uniform(3, 4).shape == (3, 4)
    w = initializers.he_normal(200, 50)
    assert w.std() == pytest.approx(np.sqrt(2.0 / 50), rel=0.1)
    np.testing.assert_array_equal(initializers.constant(2.0)(2, 1), [[2.0], [2.0]])
    np.testing.assert_array_equal(initializers.zeros(1, 2), [[0.0, 0.0]])


def test_numerical_grad_of_quadratic():
    x = np.array([[1.0, -2.0], [0.5, 3.0]])
    grad = numerical_grad(lambda v: np.sum(v ** 2), x)
    np.testing.assert_allclose(grad, 2 * x, atol=1e-6)
    # input is not modified
    np.testing.assert_array_equal(x, [[1.0, -2.0], [0.5, 3.0]])


def test_gradient_check_flags_wrong_gradient():
    x = np.array([1.0, 2.0])
    ok, _ = gradient_check(lambda v: np.sum(v ** 2), x, 2 * x)
    assert ok
    ok, err = gradient_check(lambda v: np.sum(v ** 2), x, 3 * x)
    assert not ok and err > 1e-4
    ok, err = gradient_check(lambda v: np.sum(v ** 2), x, np.zeros(3))
    assert not ok and err == float("inf")


def test_error_taxonomy():
    for exc, builtin in [(ShapeMismatchError, ValueError),
                         (UninitializedStateError, RuntimeError),
                         (NumericDomainError, ArithmeticError)]:
        assert issubclass(exc, NNError)
        assert issubclass(exc, builtin)
    check_shape("x", (2, 3), (2, 3))
    with pytest.raises(ShapeMismatchError, match="expected shape"):
        check_shape("x", (2, 3), (3, 2))


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_clip_limit_keeps_sigmoid_off_the_bounds(dtype):
    limit = dtype(backend.clip_limit(dtype))
    one = dtype(1.0)
    assert one / (one + np.exp(-limit)) < one
    assert one / (one + np.exp(limit)) > 0
