import logging

from ..helpers.Backend import backend
from ..helpers.errors import NumericDomainError, ShapeMismatchError, UninitializedStateError

logger = logging.getLogger(__name__)


class Loss:
    """
    Scalar objective over a prediction A and a target Y, both (N, C).

    refresh_cache: when True (default) every forward() replaces the cached
        A, Y, N, C used by backward(). When False the first forward() latches
        them and later calls only return a fresh loss value.
    """

    def __init__(self, refresh_cache=True):
        self.refresh_cache = refresh_cache
        # cache from forward
        self.A = None
        self.Y = None
        self.N = 0
        self.C = 0

    def forward(self, A, Y):
        raise NotImplementedError

    def backward(self):
        raise NotImplementedError

    def __call__(self, A, Y):
        return self.forward(A, Y)

    # ----- helpers -----
    def _validate(self, A, Y):
        A = backend.ensure_matrix(A, "prediction")
        Y = backend.ensure_matrix(Y, "target")
        if A.shape != Y.shape:
            raise ShapeMismatchError(f"prediction shape {A.shape} must match target shape {Y.shape}")
        N, C = A.shape
        if N == 0 or C == 0:
            raise NumericDomainError(f"cannot average a loss over shape {A.shape}")
        return A, Y

    def _store(self, A, Y, **extra):
        """Cache forward state according to the refresh policy. Returns True if stored."""
        if not self.refresh_cache and self.A is not None:
            logger.warning("%s latched on its first batch; backward() ignores this one",
                           type(self).__name__)
            return False
        # private copies; the caller may reuse its buffers after forward()
        self.A = A.copy()
        self.Y = Y.copy()
        self.N, self.C = A.shape
        for name, value in extra.items():
            setattr(self, name, value)
        return True

    def _require_cache(self):
        if self.A is None or self.Y is None or self.N == 0 or self.C == 0:
            raise UninitializedStateError(f"{type(self).__name__}.backward() called before forward()")

    def __repr__(self):
        return f"{type(self).__name__}(refresh_cache={self.refresh_cache})"
