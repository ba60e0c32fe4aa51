import logging

import numpy as np
import pandas as pd
from sklearn.datasets import make_blobs

logger = logging.getLogger(__name__)

N_CLASSES = 2  # binary labels 0/1


def generate_points(n, d, labeled=True, rng=None):
    """Uniform [0, 1) points with d features.

    When ``labeled`` the class label (0 or 1) is appended at column d.
    ``rng`` is a seed or a ``np.random.Generator``; nothing global is touched.
    """
    rng = np.random.default_rng(rng)
    points = rng.random((n, d))
    if labeled:
        labels = rng.integers(0, N_CLASSES, size=n)
        points = np.column_stack((points, labels.astype(float)))
    logger.debug("Generated %d uniform points (d=%d, labeled=%s)", n, d, labeled)
    return points


def generate_blobs(n, d, rng=None, spread=0.15):
    rng = np.random.default_rng(rng)

    # One cluster centre per class, inside the unit cube
    centers = rng.random((N_CLASSES, d))
    X, y = make_blobs(n_samples=n, centers=centers, cluster_std=spread, n_features=d,
                      random_state=int(rng.integers(0, 2**31 - 1)))
    logger.debug("Generated %d clustered points around %d centres (d=%d)", n, N_CLASSES, d)
    return np.column_stack((X, y.astype(float)))


def save_dataset(points, path):
    df = pd.DataFrame(data=np.asarray(points))
    df.to_csv(path, index=False, header=False)
    logger.info("Dataset saved as '%s' (%d rows)", path, len(df))
