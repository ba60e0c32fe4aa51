"""
Errors raised by the neighbour selection engine.
"""


class KNNError(ValueError):
    """Base class for invalid classification requests."""


class InvalidK(KNNError):
    pass


class InsufficientTrainingData(KNNError):
    pass


class DimensionMismatch(KNNError):
    pass


class InvalidLabel(KNNError):
    pass
