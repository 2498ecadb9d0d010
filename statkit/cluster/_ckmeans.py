"""
Ckmeans: optimal univariate k-means by dynamic programming.

Wang & Song (2011), with the divide-and-conquer column fill of Song &
Zhong (2020). Row ``k`` of the cost matrix holds the minimal within-
cluster sum of squares of splitting ``sorted[:i + 1]`` into ``k + 1``
clusters; the backtrack matrix holds where the last cluster starts.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.exceptions import ValidationError
from statkit.core.validation import check_finite, check_positive_integer, check_sample
from statkit.numeric import numeric_sort


def _ssq(j: int, i: int, sums: NDArray, sums_of_squares: NDArray) -> float:
    """Within-cluster sum of squares of sorted[j:i + 1]."""
    if j > 0:
        mu = (sums[i] - sums[j - 1]) / (i - j + 1)
        sji = sums_of_squares[i] - sums_of_squares[j - 1] - (i - j + 1) * mu * mu
    else:
        sji = sums_of_squares[i] - sums[i] * sums[i] / (i + 1)
    return max(0.0, float(sji))


def _fill_column(
    i_min: int,
    i_max: int,
    cluster: int,
    cost: NDArray,
    backtrack: NDArray,
    sums: NDArray,
    sums_of_squares: NDArray,
) -> None:
    # midpoint first, then each half bounded by the filled midpoint
    stack = [(i_min, i_max)]
    last = cost.shape[1] - 1
    while stack:
        lo, hi = stack.pop()
        if lo > hi:
            continue
        i = (lo + hi) // 2

        cost[cluster, i] = cost[cluster - 1, i - 1]
        backtrack[cluster, i] = i

        j_low = cluster
        if lo > cluster:
            j_low = max(j_low, int(backtrack[cluster, lo - 1]))
        j_low = max(j_low, int(backtrack[cluster - 1, i]))

        j_high = i - 1
        if hi < last:
            j_high = min(j_high, int(backtrack[cluster, hi + 1]))

        j = j_high
        while j >= j_low:
            sji = _ssq(j, i, sums, sums_of_squares)
            if sji + cost[cluster - 1, j_low - 1] >= cost[cluster, i]:
                break

            candidate = _ssq(j_low, i, sums, sums_of_squares) + cost[cluster - 1, j_low - 1]
            if candidate < cost[cluster, i]:
                cost[cluster, i] = candidate
                backtrack[cluster, i] = j_low
            j_low += 1

            candidate = sji + cost[cluster - 1, j - 1]
            if candidate < cost[cluster, i]:
                cost[cluster, i] = candidate
                backtrack[cluster, i] = j
            j -= 1

        stack.append((i + 1, hi))
        stack.append((lo, i - 1))


def _fill_matrices(data: NDArray, cost: NDArray, backtrack: NDArray) -> None:
    n = cost.shape[1]
    # shifting by the median keeps the cumulative sums small
    shifted = data - data[n // 2]
    sums = np.cumsum(shifted)
    sums_of_squares = np.cumsum(shifted * shifted)

    for i in range(n):
        cost[0, i] = _ssq(0, i, sums, sums_of_squares)
    backtrack[0, :] = 0

    n_clusters = cost.shape[0]
    for cluster in range(1, n_clusters):
        # only the last cell of the final row is ever read
        i_min = cluster if cluster < n_clusters - 1 else n - 1
        _fill_column(i_min, n - 1, cluster, cost, backtrack, sums, sums_of_squares)


def ckmeans(x: ArrayLike, n_clusters: int) -> list[NDArray[np.floating[Any]]]:
    """
    Optimal 1-D clustering into ``n_clusters`` groups.

    Minimises the total within-cluster sum of squared deviations over all
    ways of cutting the sorted sample into contiguous groups.

    Args:
        x: Sample
        n_clusters: Number of clusters requested

    Returns:
        List of sorted arrays, one per cluster, in ascending order. When
        every value is identical a single cluster is returned whatever
        ``n_clusters`` is.

    Raises:
        ValidationError: If n_clusters exceeds the sample size

    Examples:
        >>> [c.tolist() for c in ckmeans([-1, 2, -1, 2, 4, 5, 6, -1, 2, -1], 3)]
        [[-1.0, -1.0, -1.0, -1.0], [2.0, 2.0, 2.0], [4.0, 5.0, 6.0]]
    """
    n_clusters = check_positive_integer(n_clusters, "n_clusters")
    arr = check_sample(x, "ckmeans", min_samples=1)
    check_finite(arr, "x")
    if n_clusters > len(arr):
        raise ValidationError(
            "cannot generate more classes than there are data values: "
            f"n_clusters={n_clusters}, n={len(arr)}"
        )

    data = numeric_sort(arr)
    if data[0] == data[-1]:
        return [data]

    n = len(data)
    cost = np.zeros((n_clusters, n))
    backtrack = np.zeros((n_clusters, n), dtype=np.intp)
    _fill_matrices(data, cost, backtrack)

    clusters: list[NDArray[np.floating[Any]]] = [data[:0]] * n_clusters
    right = n - 1
    for cluster in range(n_clusters - 1, -1, -1):
        left = int(backtrack[cluster, right])
        clusters[cluster] = data[left:right + 1]
        if cluster > 0:
            right = left - 1
    return clusters
