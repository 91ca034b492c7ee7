import numpy as np
from .Backend import backend


def numerical_grad(f, x, eps=1e-5):
    """Finite-diff gradient of scalar function f at array x (central differences).

    f is called with perturbed copies of x, so x itself is never modified.
    """
    base = np.array(backend.to_cpu(backend.ensure_array(x)), copy=True)
    grad = np.zeros_like(base)
    it = np.nditer(base, flags=["multi_index"])
    while not it.finished:
        idx = it.multi_index
        plus = base.copy()
        plus[idx] += eps
        minus = base.copy()
        minus[idx] -= eps
        y1 = float(f(backend.ensure_array(plus)))
        y2 = float(f(backend.ensure_array(minus)))
        grad[idx] = (y1 - y2) / (2 * eps)
        it.iternext()
    return grad


def gradient_check(f, x, analytic, eps=1e-5, tol=1e-4):
    """Compare an analytic gradient to numerical_grad(f, x). Returns (ok, max_abs_error)."""
    numeric = numerical_grad(f, x, eps=eps)
    analytic = np.asarray(backend.to_cpu(analytic))
    if analytic.shape != numeric.shape:
        return False, float("inf")
    err = float(np.max(np.abs(analytic - numeric))) if numeric.size else 0.0
    return err <= tol, err
