import math

import numpy as np
import pytest

from pknn.distance import euclidean, get_metric, manhattan
from pknn.errors import DimensionMismatch


def test_three_four_five():
    assert euclidean((0, 0), (3, 4), 2) == pytest.approx(5.0)


def test_label_column_is_ignored():
    # Same features, different trailing labels
    assert euclidean([1.0, 2.0, 0.0], [1.0, 2.0, 1.0], 2) == 0.0
    assert euclidean([0.0, 0.0], [3.0, 4.0, 1.0], 2) == pytest.approx(5.0)


def test_only_first_d_coordinates():
    assert euclidean([0.0, 0.0, 100.0], [1.0, 0.0, -100.0], 1) == 1.0


def test_symmetric_and_non_negative():
    rng = np.random.default_rng(3)
    a, b = rng.random(5), rng.random(5)
    assert euclidean(a, b, 5) == euclidean(b, a, 5)
    assert euclidean(a, b, 5) >= 0.0
    assert euclidean(a, a, 5) == 0.0


def test_matches_numpy_norm():
    rng = np.random.default_rng(0)
    a, b = rng.random(7), rng.random(7)
    assert euclidean(a, b, 7) == pytest.approx(np.linalg.norm(a - b))


def test_too_few_coordinates():
    with pytest.raises(DimensionMismatch):
        euclidean([1.0], [1.0, 2.0], 2)
    with pytest.raises(DimensionMismatch):
        euclidean([1.0, 2.0], [1.0], 2)


def test_manhattan():
    assert manhattan((0, 0), (3, 4), 2) == 7.0
    assert manhattan((0, 0, 1), (3, 4, 0), 2) == 7.0


def test_get_metric():
    assert get_metric("euclidean") is euclidean
    assert get_metric("manhattan") is manhattan
    with pytest.raises(ValueError, match="Unknown metric"):
        get_metric("cosine")


def test_result_is_float():
    assert isinstance(euclidean([0, 0], [1, 1], 2), float)
    assert euclidean([0, 0], [1, 1], 2) == pytest.approx(math.sqrt(2))
