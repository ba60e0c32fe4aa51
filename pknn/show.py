import csv

import matplotlib.pyplot as plt

COLORS = ['blue', 'red']


def read_dataset(filename, d):
    points = []
    with open(filename, 'r', newline='') as csvfile:
        reader = csv.reader(csvfile)
        for row in reader:
            if not row:
                continue
            features = [float(v) for v in row[:d]]
            # Trailing column, if any, is the label
            if len(row) > d:
                features.append(float(row[d]))
            points.append(features)
    return points


def format_points(points):
    return "\n".join(" ".join(f"{v:g}" for v in row) for row in points)


def print_results(train, test, file=None):
    print("TRAIN (features + label):", file=file)
    if len(train):
        print(format_points(train), file=file)
    print("\nTEST (features + predicted label):", file=file)
    if len(test):
        print(format_points(test), file=file)


def plot_points(points, d, ax=None, title='Scatter Plot of Labelled Points', marker='o'):
    """Scatter the first two features of each point, coloured by its label."""
    if d < 2:
        raise ValueError("plotting needs at least 2 features")
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 6))

    # Create lists for each class
    classes = {i: ([], []) for i in range(len(COLORS))}
    for p in points:
        label = int(p[d])
        classes[label][0].append(p[0])
        classes[label][1].append(p[1])

    for i, (xs, ys) in classes.items():
        ax.scatter(xs, ys, color=COLORS[i], marker=marker, label=f'Class {i}')

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title(title)
    ax.legend()
    ax.grid(True)
    return ax
