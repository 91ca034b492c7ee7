from .Loss import Loss
from .MeanSquaredError import MeanSquaredError
from .SoftmaxCrossEntropy import SoftmaxCrossEntropy

__all__ = [
    "Loss",
    "MeanSquaredError",
    "SoftmaxCrossEntropy",
]
