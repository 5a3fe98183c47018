from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from scipy.cluster.hierarchy import dendrogram

from hclust.cluster import ClusterNode, to_linkage_matrix


def plot_dendrogram(root: ClusterNode,
                    ax: Optional[Axes] = None,
                    labels: Optional[Sequence[str]] = None,
                    show: bool = True) -> dict:
    """
    Plots the dendrogram produced by agnes(), or any branch of it.

    Args:
        root (ClusterNode): Node to draw; needs at least two leaves.
        ax (Axes): Axis to draw on. A new figure is created when omitted.
        labels (Sequence[str]): Labels indexed by original item index. Leaves
            are labelled with their item index when omitted.
        show (bool): Call plt.show() once drawn.

    Returns:
        dict: The layout computed by scipy.cluster.hierarchy.dendrogram.
    """
    if root.is_leaf:
        raise ValueError("Cannot plot a dendrogram with a single leaf.")

    Z = to_linkage_matrix(root)
    items = sorted(root.members)
    if labels is None:
        leaf_labels = [str(i) for i in items]
    else:
        leaf_labels = [labels[i] for i in items]

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 7))

    tree = dendrogram(Z, ax=ax, labels=leaf_labels)
    ax.set_title('Dendrogram for Agglomerative Clustering')
    ax.set_xlabel('Sample Index')
    ax.set_ylabel('Distance')

    if show:
        plt.show()
    return tree


if __name__ == "__main__":
    # Points 0-2 tie at distance 1 and merge as one three-way node
    from hclust.agnes import agnes
    points = [[0.0], [1.0], [2.0], [6.0], [7.5], [12.0]]
    plot_dendrogram(agnes(points, method='complete'))
