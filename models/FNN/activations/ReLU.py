import logging

from .Activation import Activation
from ..helpers.Backend import backend

logger = logging.getLogger(__name__)


class ReLU(Activation):
    def forward(self, Z):
        Z = backend.ensure_array(Z)
        A = backend.maximum(0, Z)
        logger.debug("ReLU forward %s", Z.shape)
        return self._keep(A)

    def backward(self, dLdA):
        dLdA = self._grad_input(dLdA)
        # derivative at exactly 0 is taken as 0
        dAdZ = (self.A > 0).astype(dLdA.dtype)
        return dLdA * dAdZ
