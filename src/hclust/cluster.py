"""Dendrogram nodes produced by agglomerative clustering."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Tuple

import numpy as np


class ClusterNode:
    """
    Common interface of leaves and merged clusters.

    Subclasses provide ``children``, ``height`` and ``indices``; everything
    else derives from those.
    """

    children: Tuple["ClusterNode", ...]
    height: float
    indices: Tuple[int, ...]
    members: FrozenSet[int]

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def size(self) -> int:
        return len(self.indices)

    @property
    def distance(self) -> float:
        """Alias of ``height``."""
        return self.height


@dataclass(frozen=True)
class ClusterLeaf(ClusterNode):
    index: int
    indices: Tuple[int, ...] = field(init=False, repr=False, compare=False)
    members: FrozenSet[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "indices", (self.index,))
        object.__setattr__(self, "members", frozenset(self.indices))

    @property
    def children(self) -> Tuple[ClusterNode, ...]:
        return ()

    @property
    def height(self) -> float:
        return 0.0


@dataclass(frozen=True)
class Cluster(ClusterNode):
    """
    Internal node formed by merging two or more clusters at ``height``.

    ``indices`` lists the leaf indices of the children in child order and
    ``members`` holds the same indices as a set.
    """

    children: Tuple[ClusterNode, ...]
    height: float
    indices: Tuple[int, ...] = field(init=False, repr=False, compare=False)
    members: FrozenSet[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        children = tuple(self.children)
        if len(children) < 2:
            raise ValueError("A merged cluster needs at least two children.")
        indices = tuple(i for child in children for i in child.indices)
        object.__setattr__(self, "children", children)
        object.__setattr__(self, "indices", indices)
        object.__setattr__(self, "members", frozenset(indices))


def to_linkage_matrix(root: ClusterNode) -> np.ndarray:
    """
    Convert a dendrogram into a SciPy-style linkage matrix.

    Rows are [id1, id2, height, size]. Leaf ids are the ranks of the leaf
    indices under root, so a full tree keeps its item indices and a branch is
    renumbered 0..size-1. The i-th row creates id n + i. A node with k > 2
    children becomes k - 1 rows at the same height, folding the children in
    left to right.

    @param root: any node of a dendrogram
    @return: array of shape (n - 1, 4)
    """
    n = root.size
    rows: List[List[float]] = []
    node_ids: Dict[int, int] = {}
    next_id = n
    leaf_ids = {index: rank for rank, index in enumerate(sorted(root.members))}

    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if node.is_leaf:
            node_ids[id(node)] = leaf_ids[node.index]
            continue
        if not expanded:
            stack.append((node, True))
            for child in reversed(node.children):
                stack.append((child, False))
            continue

        first = node.children[0]
        current = node_ids[id(first)]
        size = first.size
        for child in node.children[1:]:
            size += child.size
            rows.append([float(current), float(node_ids[id(child)]), float(node.height), float(size)])
            current = next_id
            next_id += 1
        node_ids[id(node)] = current

    return np.array(rows, dtype=float).reshape(-1, 4)
