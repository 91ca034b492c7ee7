import logging

from .Layer import Layer
from ..helpers.Backend import backend
from ..helpers.errors import ShapeMismatchError
from ..helpers import initializers

logger = logging.getLogger(__name__)


class Linear(Layer):
    """
    Affine transform Z = A W^T + 1_N b^T.

    weights: (out_features, in_features)
    bias:    (out_features, 1)
    """

    def __init__(self, in_features, out_features, initializer=None, bias_initializer=None):
        if in_features <= 0 or out_features <= 0:
            raise ValueError(f"Linear sizes must be positive, got ({in_features}, {out_features})")
        super().__init__()
        self.in_features = in_features
        self.out_features = out_features

        initializer = initializer or initializers.uniform
        bias_initializer = bias_initializer or initializer
        self.weights = backend.ensure_array(initializer(out_features, in_features))
        self.bias = backend.ensure_array(bias_initializer(out_features, 1))

        # grads (filled during backward)
        self.dW = None
        self.db = None

    def forward(self, x):
        # x shape: (batch, in_features)
        # return: (batch, out_features)
        x = backend.ensure_matrix(x, "Linear input")
        if x.shape[1] != self.in_features:
            raise ShapeMismatchError(
                f"Linear expects {self.in_features} input features, got {x.shape[1]}"
            )
        self.x = x.copy()  # private cache for backward
        self.N = x.shape[0]
        ones = backend.ones((self.N, 1))
        Z = backend.matmul(x, backend.transpose(self.weights)) \
            + backend.matmul(ones, backend.transpose(self.bias))
        logger.debug("Linear forward %s -> %s", x.shape, Z.shape)
        return Z

    def backward(self, grad_out):
        grad_out = self._grad_output(grad_out, self.out_features)
        ones = backend.ones((self.N, 1))
        self.dW = backend.matmul(backend.transpose(grad_out), self.x)  # (out, in)
        self.db = backend.matmul(backend.transpose(grad_out), ones)    # (out, 1)
        logger.debug("Linear backward %s -> %s", grad_out.shape, self.x.shape)
        return backend.matmul(grad_out, self.weights)  # (B, in)

    def params(self):
        return [self.weights, self.bias]

    def grads(self):
        return [self.dW, self.db]

    def __repr__(self):
        return f"Linear(in_features={self.in_features}, out_features={self.out_features})"
