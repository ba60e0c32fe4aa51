import heapq

import numpy as np

from .distance import euclidean
from .errors import DimensionMismatch, InsufficientTrainingData, InvalidK, InvalidLabel


class BoundedNeighborSet:
    """Keeps the `capacity` smallest (distance, index) pairs offered so far.

    Backed by a heapq min-heap over negated keys, so the root is the worst
    member: the largest distance and, among equal distances, the latest index.
    Once full, a new pair only gets in when its distance is strictly smaller
    than the worst one, which makes the earliest-seen point win ties.
    """

    def __init__(self, capacity):
        self.capacity = capacity
        self._heap = []

    def __len__(self):
        return len(self._heap)

    def worst(self):
        neg_dist, neg_index = self._heap[0]
        return -neg_dist, -neg_index

    def offer(self, distance, index):
        entry = (-distance, -index)
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, entry)
            return True
        if distance < -self._heap[0][0]:
            heapq.heapreplace(self._heap, entry)
            return True
        return False

    def indices(self):
        # Nearest first, scan order among equal distances
        return [index for _, index in sorted((-nd, -ni) for nd, ni in self._heap)]


def _check_request(train, k, d):
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k <= 0:
        raise InvalidK(f"k must be > 0, got {k!r}")
    if len(train) < k:
        raise InsufficientTrainingData(f"k={k} cannot be larger than number of training points ({len(train)})")
    if d <= 0:
        raise DimensionMismatch(f"d must be > 0, got {d}")


def nearest_neighbors(train, query, k, d, metric=euclidean):
    """Indices of the k training rows closest to query, nearest first."""
    _check_request(train, k, d)

    neighbors = BoundedNeighborSet(k)
    for i, row in enumerate(train):
        neighbors.offer(metric(query, row, d), i)
    return neighbors.indices()


def majority_vote(train, indices, d):
    """Signed tally over binary labels: 0 counts -1, 1 counts +1.

    A tally of zero (even split) resolves to 1.
    """
    vote = 0
    for idx in indices:
        row = train[idx]
        if len(row) <= d:
            raise DimensionMismatch(f"training point {idx} has no label at index {d}")
        label = row[d]
        if label == 0:
            vote -= 1
        elif label == 1:
            vote += 1
        else:
            raise InvalidLabel(f"training point {idx} has label {label!r}, expected 0 or 1")
    return 1 if vote >= 0 else 0


def predict_one(train, query, k, d, metric=euclidean):
    """Predict the label of one query point from its k nearest training rows.

    Parameters
    ----------
    train : sequence of rows
        Training points, each holding d features followed by the label.
    query : sequence of float
        Point to classify; only its first d coordinates are used.
    k : int
        Number of neighbours taking part in the vote.
    d : int
        Dimensionality of the feature vectors.
    metric : callable
        ``metric(a, b, d) -> float``, Euclidean by default.
    """
    indices = nearest_neighbors(train, query, k, d, metric=metric)
    return majority_vote(train, indices, d)


class KNN:
    def __init__(self, k=3, metric=euclidean):
        self.k = k
        self.metric = metric
        self.train = None
        self.d = None

    def fit(self, X_train, y_train):
        X_train = np.asarray(X_train, dtype=float)
        if X_train.ndim != 2:
            raise DimensionMismatch(f"X_train must be 2-D, got shape {X_train.shape}")
        # Label goes in the column right after the features
        self.train = np.column_stack((X_train, np.asarray(y_train, dtype=float)))
        self.d = X_train.shape[1]
        return self

    def predict(self, x):
        if self.train is None:
            raise RuntimeError("Model has not been fitted")
        return predict_one(self.train, x, self.k, self.d, metric=self.metric)

    def predict_batch(self, X):
        return np.array([self.predict(x) for x in X], dtype=int)
