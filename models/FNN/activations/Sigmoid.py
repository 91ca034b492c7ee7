import logging

from .Activation import Activation
from ..helpers.Backend import backend

logger = logging.getLogger(__name__)


class Sigmoid(Activation):
    """
    forward:  A = 1 / (1 + e^-Z)
    backward: dA/dZ = A * (1 - A)
    """

    def forward(self, Z):
        Z = backend.ensure_array(Z)
        # Clip so exp(-Z) cannot overflow and A stays strictly inside (0, 1) for Z.dtype
        limit = backend.clip_limit(Z.dtype)
        A = 1.0 / (1.0 + backend.exp(-backend.clip(Z, -limit, limit)))
        logger.debug("Sigmoid forward %s", Z.shape)
        return self._keep(A)

    def backward(self, dLdA):
        dLdA = self._grad_input(dLdA)
        A = self.A
        return dLdA * (A * (1.0 - A))
