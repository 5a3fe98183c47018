#!/usr/bin/env python3
# agnes.py
"""
AGNES (AGglomerative NESting) hierarchical clustering returning a dendrogram.

Starting from one leaf per item, every round evaluates the linkage between all
pairs of active clusters, rounds the values to 4 decimal places and merges the
pairs that share the minimum. Tied pairs that share a cluster are merged
together, so a single round may produce a node with more than two children.
The full pairwise distance matrix is kept in memory (O(n^2)) and each round
costs O(k^2) linkage evaluations for k active clusters.

Supported linkages:
    - 'single', 'complete', 'average', 'centroid', 'ward', or a callable

Doxygen-style docstrings are used (with @param / @return tags).
"""

import logging
import math
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np

from hclust.cluster import Cluster, ClusterLeaf, ClusterNode
from hclust.config import DEFAULTS
from hclust.linkage import LinkFn, linkage
from hclust.utils import round_half_up

__all__ = [
    "euclidean",
    "compute_pairwise_distances",
    "distance_matrix",
    "init_clusters",
    "find_closest_pairs",
    "group_tied_pairs",
    "merge_groups",
    "agnes",
]

logger = logging.getLogger(DEFAULTS.logger_name)


def euclidean(a: Any, b: Any) -> float:
    """
    Euclidean distance between two items.

    @param a: numeric vector (or scalar)
    @param b: numeric vector (or scalar) of the same length as a
    @return: sqrt(sum((a - b)^2))
    """
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return float(np.sqrt(np.sum(diff * diff)))


def compute_pairwise_distances(X: Any) -> np.ndarray:
    """
    Euclidean distances between every pair of items, computed by broadcasting.

    @param X: items as rows of a (n, d) array; a flat sequence is n scalars
    @return: (n, n) array, D[i, j] == euclidean(X[i], X[j]), zero diagonal
    """
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X[:, None]
    diff = X[:, None, :] - X[None, :, :]
    D = np.sqrt(np.sum(diff * diff, axis=-1))
    np.fill_diagonal(D, 0.0)
    return D


def distance_matrix(data: Sequence[Any], distance_function: Callable[[Any, Any], float]) -> np.ndarray:
    """
    Build a symmetric distance matrix with an arbitrary distance function.

    @param data: sequence of n items
    @param distance_function: f(a, b) -> float, evaluated once per unordered pair
    @return: (n, n) array with D[i, j] = D[j, i] = f(data[i], data[j]) and a zero diagonal
    """
    n = len(data)
    D = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i + 1, n):
            D[i, j] = D[j, i] = distance_function(data[i], data[j])
    return D


def init_clusters(n: int) -> List[ClusterNode]:
    """
    Initialize the active cluster list.

    @param n: number of items
    @return: list of n leaves, leaf i wrapping item i
    """
    return [ClusterLeaf(i) for i in range(n)]


def find_closest_pairs(clusters: Sequence[ClusterNode],
                       D: np.ndarray,
                       link: LinkFn,
                       decimals: int = DEFAULTS.height_decimals) -> Tuple[float, List[Tuple[int, int]]]:
    """
    Evaluate the linkage for every pair of active clusters and keep the closest.

    Values are rounded to `decimals` places before comparing, so pairs whose
    rounded values are equal are ties. NaN values never win.

    @param clusters: active clusters
    @param D: (n, n) distance matrix over the original items
    @param link: linkage criterion
    @param decimals: rounding applied to every linkage value
    @return: tuple (minimum, pairs) where pairs lists (j, k), j < k, positions
             in `clusters` whose rounded value equals minimum, in scan order
             (empty when every value is NaN)
    """
    minimum = math.inf
    scored: List[Tuple[int, int, float]] = []
    for j in range(len(clusters)):
        for k in range(j + 1, len(clusters)):
            value = round_half_up(link(clusters[j].indices, clusters[k].indices, D), decimals)
            scored.append((j, k, value))
            if value < minimum:
                minimum = value

    pairs = [(j, k) for j, k, value in scored if value == minimum]
    return minimum, pairs


def group_tied_pairs(pairs: Sequence[Tuple[int, int]]) -> List[List[int]]:
    """
    Group tied pairs into connected components.

    A group starts from the first unused pair and absorbs every pair sharing
    a cluster with it until nothing more joins. Positions are appended in the
    order they are first met.

    @param pairs: (j, k) positions of tied pairs, in scan order
    @return: list of groups, each a list of 2 or more distinct positions
    """
    remaining = list(pairs)
    groups: List[List[int]] = []
    while remaining:
        group = list(remaining.pop(0))
        grown = True
        while grown:
            grown = False
            rest = []
            for pair in remaining:
                if pair[0] in group or pair[1] in group:
                    group.extend(p for p in pair if p not in group)
                    grown = True
                else:
                    rest.append(pair)
            remaining = rest
        groups.append(group)
    return groups


def merge_groups(clusters: Sequence[ClusterNode],
                 groups: Sequence[Sequence[int]],
                 height: float) -> List[ClusterNode]:
    """
    Replace every group of clusters by one merged cluster.

    @param clusters: active clusters
    @param groups: disjoint lists of positions in `clusters`
    @param height: merge height given to every new cluster
    @return: new active list: untouched clusters in their original order,
             followed by one new Cluster per group in group order
    """
    merged = {position for group in groups for position in group}
    survivors = [c for position, c in enumerate(clusters) if position not in merged]
    created = [Cluster(children=tuple(clusters[p] for p in group), height=height) for group in groups]
    return survivors + created


def agnes(data: Any,
          distance_function: Optional[Callable[[Any, Any], float]] = None,
          method: Any = DEFAULTS.method,
          is_distance_matrix: bool = False) -> ClusterNode:
    """
    Cluster `data` bottom-up until a single cluster remains.

    @param data: sequence of n items, or an (n, n) distance matrix when
                 is_distance_matrix is True
    @param distance_function: f(a, b) -> float between two items; defaults to
                              Euclidean distance. Ignored for distance matrices.
    @param method: 'single' | 'complete' | 'average' | 'centroid' | 'ward', or
                   a callable link(group_a, group_b, D) -> float
    @param is_distance_matrix: treat `data` as a precomputed distance matrix

    @return: root of the dendrogram (a ClusterLeaf when n == 1)
    @raises UnknownMethodError: if method is an unknown name
    @raises InvalidMethodTypeError: if method is neither a string nor callable
    @raises ValueError: if data is empty or the distance matrix is not square
                        (raised up front), or if every linkage value in a
                        round is NaN (raised mid-run, after earlier rounds
                        have merged; no tree is returned)
    """
    link = linkage(method)

    if len(data) == 0:
        raise ValueError("data must contain at least one item.")

    if is_distance_matrix:
        D = np.asarray(data, dtype=float)
        if D.ndim != 2 or D.shape[0] != D.shape[1]:
            raise ValueError("A distance matrix must be a square 2D array (n_samples, n_samples).")
    elif distance_function is None:
        D = compute_pairwise_distances(data)
    else:
        D = distance_matrix(data, distance_function)

    n = D.shape[0]
    clusters = init_clusters(n)

    rounds = 0
    while len(clusters) > 1:
        minimum, pairs = find_closest_pairs(clusters, D, link)
        if not pairs:
            raise ValueError("No mergeable pair: every linkage value is NaN.")

        groups = group_tied_pairs(pairs)
        clusters = merge_groups(clusters, groups, minimum)
        rounds += 1
        logger.debug("Round %d: merged %d group(s) at height %.4f, %d cluster(s) left",
                     rounds, len(groups), minimum, len(clusters))

    root = clusters[0]
    logger.info("AGNES clustered %d items in %d rounds (method=%s, root height=%.4f)",
                n, rounds, getattr(method, "__name__", method), root.height)
    return root
