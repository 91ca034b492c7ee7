# models/FNN/helpers/Backend.py
import os
import logging
import numpy as np

from .errors import ShapeMismatchError

logger = logging.getLogger(__name__)

VERBOSE_STARTUP = os.environ.get("FNN_VERBOSE_STARTUP", "0") == "1"

try:
    import cupy as cp
    # Quick runtime check
    try:
        _ = (cp.array([1, 2, 3]) + 1).sum()
        CUPY_AVAILABLE = True
        if VERBOSE_STARTUP:
            logger.info("CuPy %s available, GPU count: %d",
                        cp.__version__, cp.cuda.runtime.getDeviceCount())
    except Exception as e:
        logger.warning("CuPy installed but CUDA runtime error: %s; falling back to NumPy", e)
        cp = None
        CUPY_AVAILABLE = False
except ImportError:
    cp = None
    CUPY_AVAILABLE = False


_FLOATS = {"float64": np.float64, "float32": np.float32}


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(name, default="float64"):
    value = os.environ.get(name, default).strip().lower()
    if value not in _FLOATS:
        raise ValueError(f"{name} must be one of {sorted(_FLOATS)}, got {value!r}")
    return _FLOATS[value]


class Backend:
    """Backend abstraction for NumPy/CuPy compatibility."""
    def __init__(self, use_gpu=False, default_float=np.float64):
        self.use_gpu = False
        self.xp = np
        self.default_float = default_float
        self.configure(use_gpu=use_gpu)

    def configure(self, use_gpu=None, default_float=None):
        """
        Re-target this backend in place. Components import the shared
        instance, so changing it here affects every layer, activation and loss.
        """
        if default_float is not None:
            self.default_float = np.dtype(default_float).type
        if use_gpu is None:
            return self
        self.use_gpu = bool(use_gpu and CUPY_AVAILABLE)
        if use_gpu and not CUPY_AVAILABLE:
            logger.warning("GPU backend requested but CuPy is unavailable")
        self.xp = cp if self.use_gpu else np
        logger.info("Using %s backend (%s)",
                    "GPU" if self.use_gpu else "CPU",
                    "CuPy" if self.use_gpu else "NumPy")
        return self

    # -------- device transfer --------
    def to_cpu(self, x):
        """Move array to CPU (NumPy)."""
        if cp is not None and isinstance(x, cp.ndarray):
            return cp.asnumpy(x)
        return x

    def ensure_array(self, x, dtype=None, copy=False):
        """
        Ensure 'x' is a floating array of the current backend.
        Accepts list/tuple/np/cp arrays; returns xp.ndarray.
        """
        dtype = dtype or self.default_float
        target_xp = cp if self.use_gpu else np
        if isinstance(x, target_xp.ndarray):
            if x.dtype != dtype:
                return x.astype(dtype, copy=copy)
            return x.copy() if copy else x
        # If it's the other backend array:
        if self.use_gpu and isinstance(x, np.ndarray):
            return cp.asarray(x).astype(dtype, copy=False)
        if (not self.use_gpu) and (cp is not None) and isinstance(x, cp.ndarray):
            return cp.asnumpy(x).astype(dtype, copy=False)
        # If it's list/tuple/other array-like:
        return target_xp.asarray(x, dtype=dtype)

    def ensure_matrix(self, x, name="input"):
        """Like ensure_array, but promotes 1-D input to a single row and rejects >2-D."""
        x = self.ensure_array(x)
        if x.ndim == 1:
            x = x.reshape(1, -1)
        if x.ndim != 2:
            raise ShapeMismatchError(f"{name} must be a 2-D matrix, got {x.ndim}-D shape {x.shape}")
        return x

    # -------- array creation --------
    def ones(self, *args, **kwargs):
        kwargs.setdefault("dtype", self.default_float)
        return self.xp.ones(*args, **kwargs)

    # -------- math / linalg (thin wrappers) --------
    def maximum(self, a, b):return self.xp.maximum(a, b)
    def sum(self, x, axis=None, keepdims=False):  return self.xp.sum(x, axis=axis, keepdims=keepdims)
    def max(self, x, axis=None, keepdims=False):  return self.xp.max(x, axis=axis, keepdims=keepdims)
    def min(self, x, axis=None, keepdims=False):  return self.xp.min(x, axis=axis, keepdims=keepdims)
    def exp(self, x):                              return self.xp.exp(x)
    def log(self, x):                              return self.xp.log(x)
    def tanh(self, x):                             return self.xp.tanh(x)
    def clip(self, x, lo, hi):                     return self.xp.clip(x, lo, hi)
    def transpose(self, x, axes=None):            return self.xp.transpose(x, axes)
    def matmul(self, a, b):                        return self.xp.matmul(a, b)

    def clip_limit(self, dtype):
        """Largest |z| for which 1 / (1 + exp(-z)) stays strictly inside (0, 1) in dtype."""
        return float(-np.log(np.finfo(dtype).eps)) - 1.0

    def scalar(self, x):
        """Reduce a 0-d backend array to a Python float."""
        return float(self.to_cpu(x))

    # -------- randomness --------
    def seed(self, seed=42):
        """Seed RNG for reproducibility."""
        if self.use_gpu:
            cp.random.seed(seed)
        np.random.seed(seed)  # keep NumPy seeded too

    # -------- delegate unknown attrs to xp --------
    def __getattr__(self, name):
        if name == "xp":
            raise AttributeError(name)
        return getattr(self.xp, name)


# Global backend instance - reconfigure with backend.configure(...)
backend = Backend(use_gpu=_env_flag("FNN_USE_GPU"), default_float=_env_float("FNN_FLOAT"))
