import logging

import numpy as np
import pytest

from models.FNN.helpers.Backend import backend


@pytest.fixture(autouse=True)
def cpu_backend():
    """Run every test on the NumPy float64 backend with a fixed seed."""
    backend.configure(use_gpu=False, default_float=np.float64)
    backend.seed(0)
    logging.getLogger("models.FNN").setLevel(logging.CRITICAL)
    yield
    logging.getLogger("models.FNN").setLevel(logging.NOTSET)


@pytest.fixture
def batch_A():
    return np.array([[-4.0, -3.0],
                     [-2.0, -1.0],
                     [0.0, 1.0],
                     [2.0, 3.0]])


@pytest.fixture
def batch_Y():
    return np.array([[0.0, 1.0],
                     [1.0, 0.0],
                     [1.0, 0.0],
                     [0.0, 1.0]])
