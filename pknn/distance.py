import numpy as np

from .errors import DimensionMismatch


def _features(point, d):
    point = np.asarray(point, dtype=float)
    if point.ndim != 1 or point.shape[0] < d:
        raise DimensionMismatch(f"point has {point.size} coordinates, expected at least {d}")
    # Anything past index d (the label) is ignored
    return point[:d]


def euclidean(a, b, d):
    """Euclidean distance over the first d coordinates of a and b."""
    diff = _features(a, d) - _features(b, d)
    return float(np.sqrt(np.sum(diff * diff)))


def manhattan(a, b, d):
    return float(np.sum(np.abs(_features(a, d) - _features(b, d))))


METRICS = {
    'euclidean': euclidean,
    'manhattan': manhattan,
}


def get_metric(name):
    try:
        return METRICS[name]
    except KeyError:
        raise ValueError(f"Unknown metric '{name}', choose from {sorted(METRICS)}") from None
