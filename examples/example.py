from hclust.agnes import agnes
from hclust.utils import setup_logging

if __name__ == "__main__":
    setup_logging()

    # Example dataset
    X = [
        [1.0, 0.0],
        [9.0, 1.0],
        [1.0, 1.0],
        [6.0, 2.0],
        [5.0, 6.0],
    ]

    # Perform agglomerative clustering
    root = agnes(X, method="average")

    for child in root.children:
        points = [X[i] for i in child.indices]
        print(f"Merged at {root.height}: {points} (joined at {child.height})")
