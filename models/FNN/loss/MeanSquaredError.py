import logging

from .Loss import Loss
from ..helpers.Backend import backend

logger = logging.getLogger(__name__)


class MeanSquaredError(Loss):
    """
    loss    = sum((A - Y)^2) / (N * C)
    dL/dA   = 2 (A - Y) / (N * C)
    """

    def forward(self, A, Y):
        A, Y = self._validate(A, Y)
        N, C = A.shape
        loss = backend.sum((A - Y) ** 2) / (N * C)
        self._store(A, Y)
        value = backend.scalar(loss)
        logger.debug("MSE forward %s -> %.6g", A.shape, value)
        return value

    def backward(self):
        self._require_cache()
        return 2.0 * (self.A - self.Y) / (self.N * self.C)
