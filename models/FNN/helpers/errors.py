class NNError(Exception):
    """Base class for errors raised by the network components."""


class ShapeMismatchError(NNError, ValueError):
    # operand dimensions disagree with each other or with cached state
    pass


class UninitializedStateError(NNError, RuntimeError):
    # backward() called on an instance that has no forward cache
    pass


class NumericDomainError(NNError, ArithmeticError):
    # log of a non-positive value, or an empty sample/class axis
    pass


def check_shape(name, actual, expected):
    if tuple(actual) != tuple(expected):
        raise ShapeMismatchError(f"{name}: expected shape {tuple(expected)}, got {tuple(actual)}")
