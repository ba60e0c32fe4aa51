"""
Exact k-nearest-neighbour classification with a bounded max-heap.
"""

from pknn.distance import euclidean, manhattan, get_metric  # noqa: F401
from pknn.errors import (  # noqa: F401
    DimensionMismatch,
    InsufficientTrainingData,
    InvalidK,
    InvalidLabel,
    KNNError,
)
from pknn.knn import KNN, BoundedNeighborSet, majority_vote, nearest_neighbors, predict_one  # noqa: F401
from pknn.batch import accuracy, find_knn  # noqa: F401
from pknn.generate_dataset import generate_blobs, generate_points, save_dataset  # noqa: F401

__version__ = "0.1.0"
