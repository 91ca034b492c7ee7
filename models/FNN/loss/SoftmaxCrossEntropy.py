import logging

from .Loss import Loss
from ..helpers.Backend import backend
from ..helpers.errors import NumericDomainError

logger = logging.getLogger(__name__)


class SoftmaxCrossEntropy(Loss):
    def __init__(self, eps=1e-12, refresh_cache=True):
        super().__init__(refresh_cache=refresh_cache)
        if eps < 0:
            raise ValueError(f"eps must be non-negative, got {eps}")
        self.eps = eps
        self.probs = None

    @staticmethod
    def softmax(A):
        """Row-wise softmax with the row max subtracted first."""
        A = backend.ensure_matrix(A, "logits")
        z = A - backend.max(A, axis=1, keepdims=True)  # (B, C)
        exp = backend.exp(z)
        return exp / backend.sum(exp, axis=1, keepdims=True)

    def forward(self, A, Y):
        """
        A: (batch, num_classes) -- pre-softmax
        Y: (batch, num_classes) -- target distribution, usually one-hot
        returns: loss scalar, -sum(Y * log(softmax(A))) / N
        """
        A, Y = self._validate(A, Y)
        probs = self.softmax(A)
        if self.eps > 0:
            safe = backend.maximum(probs, self.eps)
        elif bool(backend.min(probs) <= 0):
            raise NumericDomainError("softmax underflowed to 0 and eps=0 disables the log floor")
        else:
            safe = probs
        loss = -backend.sum(Y * backend.log(safe)) / A.shape[0]
        self._store(A, Y, probs=probs)
        value = backend.scalar(loss)
        logger.debug("SoftmaxCrossEntropy forward %s -> %.6g", A.shape, value)
        return value

    def backward(self):
        """
        dL/dA = (softmax(A) - Y) / N
        This is the fused softmax+CE gradient.
        """
        self._require_cache()
        return (self.probs - self.Y) / self.N

    def __repr__(self):
        return f"SoftmaxCrossEntropy(eps={self.eps}, refresh_cache={self.refresh_cache})"
