from .Layer import Layer
from .Linear import Linear

__all__ = [
    "Layer",
    "Linear",
]
