import logging

from ..helpers.Backend import backend
from ..helpers.errors import UninitializedStateError, check_shape

logger = logging.getLogger(__name__)


class Activation:
    """
    Elementwise nonlinearity. forward() caches the activated output A;
    backward() turns dL/dA into dL/dZ = dL/dA * dA/dZ evaluated at that A.
    """

    def __init__(self):
        self.A = None  # activated output from the last forward

    def forward(self, Z):
        raise NotImplementedError

    def backward(self, dLdA):
        raise NotImplementedError

    def _keep(self, A):
        # cache A privately; the caller gets its own copy to modify
        self.A = A
        return A.copy()

    def _grad_input(self, dLdA):
        # validate against the cached output before any math
        if self.A is None:
            raise UninitializedStateError(f"{type(self).__name__}.backward() called before forward()")
        dLdA = backend.ensure_array(dLdA)
        check_shape(f"{type(self).__name__} grad", dLdA.shape, self.A.shape)
        return dLdA

    def __repr__(self):
        return f"{type(self).__name__}()"
