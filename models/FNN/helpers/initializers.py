"""
Parameter initializers. Each one is a callable (rows, cols) -> matrix on the
active backend; Linear calls it once for its weights and once for its bias.
"""
import numpy as np
from .Backend import backend


def uniform(rows, cols, low=-1.0, high=1.0):
    # Initialize on CPU, then move to backend
    values = np.random.uniform(low, high, size=(rows, cols))
    return backend.ensure_array(values)


def he_normal(rows, cols):
    # He initialization, fan_in is the column count of W (out, in)
    fan_in = max(cols, 1)
    values = np.random.randn(rows, cols) * np.sqrt(2.0 / fan_in)
    return backend.ensure_array(values)


def constant(value):
    def init(rows, cols):
        return backend.ensure_array(np.full((rows, cols), value))
    return init


zeros = constant(0.0)
