"""
Batch classification: run the neighbour selector for every query point and
append the predicted label to each one.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence

import numpy as np

from .distance import euclidean
from .knn import predict_one

logger = logging.getLogger(__name__)


def find_knn(
    train: Sequence,
    test_points: Sequence,
    k: int,
    d: int,
    metric: Callable = euclidean,
    workers: Optional[int] = None,
) -> np.ndarray:
    """Classify ``test_points`` against ``train``.

    Parameters
    ----------
    train: sequence of rows
        Training points with the label at column ``d``.
    test_points: sequence of rows
        Unlabelled query points with at least ``d`` coordinates.
    k: int
        Number of neighbours per vote.
    d: int
        Feature dimensionality.
    metric: callable
        Distance function handed to the selector.
    workers: int, optional
        Number of threads.  ``None`` or ``1`` runs the queries serially.

    Returns
    -------
    np.ndarray
        Copy of ``test_points`` (first ``d`` columns) with the predicted
        label appended as an extra column, in input order.  The first query
        that fails aborts the whole batch.
    """
    queries = [np.asarray(q, dtype=float) for q in test_points]

    def classify(query):
        return predict_one(train, query, k, d, metric=metric)

    if workers is not None and workers > 1 and len(queries) > 1:
        logger.debug("Classifying %d points on %d threads", len(queries), workers)
        # Training data is only read, each call keeps its own neighbour heap
        with ThreadPoolExecutor(max_workers=workers) as executor:
            labels = list(executor.map(classify, queries))
    else:
        labels = [classify(q) for q in queries]

    if not queries:
        return np.empty((0, d + 1))
    features = np.array([q[:d] for q in queries])
    return np.column_stack((features, np.asarray(labels, dtype=float)))


def accuracy(y_true, y_pred) -> float:
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    if y_true.size == 0:
        return 0.0
    return float(np.mean(y_true == y_pred))
