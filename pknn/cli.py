"""
Command-line entry point: generate a random dataset, classify the test
points with k-NN and print (or save/plot) the result.

Usage::

    pknn N_TRAIN D N_TEST K [--seed S] [--workers W] [--plot]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from .batch import find_knn
from .distance import METRICS, get_metric
from .errors import KNNError
from .generate_dataset import generate_blobs, generate_points, save_dataset
from .show import plot_points, print_results

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"'{value}' must be a positive integer")
    return number


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pknn",
        description="Classify random points with k-nearest neighbours",
    )
    parser.add_argument("n_train", type=_positive_int, help="number of training points")
    parser.add_argument("d", type=_positive_int, help="number of features per point")
    parser.add_argument("n_test", type=_positive_int, help="number of points to classify")
    parser.add_argument("k", type=_positive_int, help="number of neighbours in the vote")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the generated data")
    parser.add_argument("--workers", type=_positive_int, default=1, help="threads used for classification")
    parser.add_argument("--metric", choices=sorted(METRICS), default="euclidean")
    parser.add_argument("--dataset", choices=["uniform", "blobs"], default="uniform",
                        help="how training points are generated")
    parser.add_argument("--output-dir", default=None, help="write train.csv and test.csv here")
    parser.add_argument("--plot", action="store_true", help="scatter plot of the first two features")
    parser.add_argument("--quiet", action="store_true", help="do not print the points")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    rng = np.random.default_rng(args.seed)
    if args.dataset == "blobs":
        train = generate_blobs(args.n_train, args.d, rng=rng)
    else:
        train = generate_points(args.n_train, args.d, labeled=True, rng=rng)
    test = generate_points(args.n_test, args.d, labeled=False, rng=rng)

    try:
        results = find_knn(train, test, args.k, args.d,
                           metric=get_metric(args.metric), workers=args.workers)
    except KNNError as e:
        logger.error(f"Classification failed: {e}")
        return 1
    logger.info(f"Classified {len(results)} points with k={args.k} ({args.metric})")

    if not args.quiet:
        print_results(train, results)

    if args.output_dir:
        os.makedirs(args.output_dir, exist_ok=True)
        save_dataset(train, os.path.join(args.output_dir, "train.csv"))
        save_dataset(results, os.path.join(args.output_dir, "test.csv"))

    if args.plot:
        if args.d < 2:
            logger.warning("Plotting needs at least 2 features, skipping")
        else:
            ax = plot_points(train, args.d, title="Training points and predictions")
            plot_points(results, args.d, ax=ax, marker='x', title="Training points and predictions")
            plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
