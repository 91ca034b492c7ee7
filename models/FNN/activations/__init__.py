from .Activation import Activation
from .ReLU import ReLU
from .Sigmoid import Sigmoid
from .Tanh import Tanh

__all__ = [
    "Activation",
    "ReLU",
    "Sigmoid",
    "Tanh",
]
