from ..helpers.Backend import backend
from ..helpers.errors import UninitializedStateError, check_shape


class Layer:
    """
    Parametric stage of the network. forward(A) caches its input and returns Z;
    backward(dLdZ) fills the parameter gradients from that cache and returns
    dLdA for the stage before it. Parameters are never updated here.
    """

    def __init__(self):
        self.x = None  # input from the last forward
        self.N = 0     # its row count

    def forward(self, A):
        raise NotImplementedError

    def backward(self, dLdZ):
        raise NotImplementedError

    def _grad_output(self, grad_out, width):
        # a forward must have run, and grad_out must match its batch
        if self.x is None:
            raise UninitializedStateError(f"{type(self).__name__}.backward() called before forward()")
        grad_out = backend.ensure_matrix(grad_out, f"{type(self).__name__} grad")
        check_shape(f"{type(self).__name__} grad", grad_out.shape, (self.N, width))
        return grad_out

    def params(self):
        # parameters in the order an optimizer should see them
        return []

    def grads(self):
        # gradients matching params(); None before the first backward
        return []
