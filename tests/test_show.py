import io

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pknn.generate_dataset import save_dataset
from pknn.show import format_points, plot_points, print_results, read_dataset


def test_format_points():
    assert format_points([[0.5, 0.25, 1.0], [0.125, 1.0, 0.0]]) == "0.5 0.25 1\n0.125 1 0"


def test_print_results():
    out = io.StringIO()
    print_results([[0.5, 1.0]], [[0.25, 0.0]], file=out)
    assert out.getvalue() == (
        "TRAIN (features + label):\n0.5 1\n"
        "\nTEST (features + predicted label):\n0.25 0\n"
    )


def test_read_dataset_round_trip(tmp_path):
    points = np.array([[0.1, 0.2, 1.0], [0.3, 0.4, 0.0]])
    path = tmp_path / "data.csv"
    save_dataset(points, path)
    assert read_dataset(path, 2) == [[0.1, 0.2, 1.0], [0.3, 0.4, 0.0]]


def test_read_dataset_without_labels(tmp_path):
    path = tmp_path / "test.csv"
    path.write_text("0.5,0.75\n0.25,1.0\n")
    assert read_dataset(path, 2) == [[0.5, 0.75], [0.25, 1.0]]


def test_plot_points():
    points = [[0.1, 0.2, 0.0], [0.3, 0.4, 1.0], [0.5, 0.6, 1.0]]
    ax = plot_points(points, 2, title="Generated Dataset")
    assert ax.get_title() == "Generated Dataset"
    # one scatter collection per class
    assert len(ax.collections) == 2
    assert ax.collections[1].get_offsets().shape == (2, 2)
    plt.close(ax.figure)


def test_plot_needs_two_features():
    with pytest.raises(ValueError):
        plot_points([[0.1, 0.0]], 1)
