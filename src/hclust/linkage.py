"""
Linkage criteria: turn the item-to-item distances between two clusters into a
single dissimilarity.

Every criterion has the signature ``link(group_a, group_b, D) -> float`` where
the groups are sequences of leaf indices (rows/columns of the distance matrix
D). The built-in criteria pull the |A| x |B| block of D with one fancy-indexing
call and reduce it with NumPy.

Doxygen-style docstrings are used (with @param / @return tags).
"""

from enum import Enum
from typing import Callable, Sequence, Union

import numpy as np

from hclust.errors import InvalidMethodTypeError, UnknownMethodError

__all__ = [
    "Linkage",
    "LinkFn",
    "single_link",
    "complete_link",
    "average_link",
    "centroid_link",
    "ward_link",
    "linkage",
]

LinkFn = Callable[[Sequence[int], Sequence[int], np.ndarray], float]


class Linkage(str, Enum):
    SINGLE = "single"
    COMPLETE = "complete"
    AVERAGE = "average"
    CENTROID = "centroid"
    WARD = "ward"


def _block(group_a: Sequence[int], group_b: Sequence[int], D: np.ndarray) -> np.ndarray:
    """
    Extract the distances between every a in group_a and every b in group_b.

    @param group_a: leaf indices of the first cluster
    @param group_b: leaf indices of the second cluster
    @param D: (n, n) distance matrix
    @return: array of shape (len(group_a), len(group_b))
    """
    return np.asarray(D, dtype=float)[np.ix_(list(group_a), list(group_b))]


def single_link(group_a: Sequence[int], group_b: Sequence[int], D: np.ndarray) -> float:
    """Minimum distance between the two groups."""
    return float(_block(group_a, group_b, D).min())


def complete_link(group_a: Sequence[int], group_b: Sequence[int], D: np.ndarray) -> float:
    """Maximum distance between the two groups."""
    return float(_block(group_a, group_b, D).max())


def average_link(group_a: Sequence[int], group_b: Sequence[int], D: np.ndarray) -> float:
    """Mean of the |A|*|B| distances between the two groups."""
    return float(_block(group_a, group_b, D).mean())


def centroid_link(group_a: Sequence[int], group_b: Sequence[int], D: np.ndarray) -> float:
    """
    Median of the |A|*|B| distances between the two groups.

    With an even number of distances the two middle values are averaged.
    """
    return float(np.median(_block(group_a, group_b, D)))


def ward_link(group_a: Sequence[int], group_b: Sequence[int], D: np.ndarray) -> float:
    """
    Centroid linkage scaled by the harmonic size factor of the two groups.

    @param group_a: leaf indices of the first cluster
    @param group_b: leaf indices of the second cluster
    @param D: (n, n) distance matrix
    @return: centroid_link(A, B) * |A| * |B| / (|A| + |B|)
    """
    size_a = len(group_a)
    size_b = len(group_b)
    return centroid_link(group_a, group_b, D) * size_a * size_b / (size_a + size_b)


_LINK_FUNCTIONS = {
    Linkage.SINGLE: single_link,
    Linkage.COMPLETE: complete_link,
    Linkage.AVERAGE: average_link,
    Linkage.CENTROID: centroid_link,
    Linkage.WARD: ward_link,
}


def linkage(method: Union[str, Linkage, LinkFn]) -> LinkFn:
    """
    Resolve a linkage method to its criterion function.

    @param method: a built-in method name ('single', 'complete', 'average',
                   'centroid', 'ward'), a Linkage member, or any callable with
                   the signature link(group_a, group_b, D) -> float, which is
                   returned unchanged
    @return: the criterion function
    @raises UnknownMethodError: if method is a string naming no built-in method
    @raises InvalidMethodTypeError: if method is neither a string nor callable
    """
    if isinstance(method, str):
        try:
            return _LINK_FUNCTIONS[Linkage(method)]
        except ValueError:
            raise UnknownMethodError(method) from None
    if callable(method):
        return method
    raise InvalidMethodTypeError(method)
