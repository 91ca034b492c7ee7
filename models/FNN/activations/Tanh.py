import logging

from .Activation import Activation
from ..helpers.Backend import backend

logger = logging.getLogger(__name__)


class Tanh(Activation):
    """
    forward:  A = (e^Z - e^-Z) / (e^Z + e^-Z)
    backward: dA/dZ = 1 - A^2
    """

    def forward(self, Z):
        Z = backend.ensure_array(Z)
        # closed form of the ratio above; does not overflow for large |Z|
        A = backend.tanh(Z)
        logger.debug("Tanh forward %s", Z.shape)
        return self._keep(A)

    def backward(self, dLdA):
        dLdA = self._grad_input(dLdA)
        A = self.A
        return dLdA * (1.0 - A * A)
