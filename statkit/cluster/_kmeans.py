"""
Lloyd's k-means for points in any number of dimensions.

Initial centroids are ``n_clusters`` distinct input points drawn through
the random source. Iteration stops when the centroids no longer move at
all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.exceptions import ConvergenceError, EmptyClusterError, ValidationError
from statkit.core.random import RandomSource
from statkit.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_positive_integer,
)
from statkit.numeric import sample


@dataclass(frozen=True)
class KMeansResult:
    """Cluster labels, final centroids and the number of Lloyd iterations."""
    labels: NDArray[np.intp]
    centroids: NDArray[np.floating[Any]]
    iterations: int


def _as_points(points: ArrayLike) -> NDArray[np.floating[Any]]:
    arr = check_array(points, "points")
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    check_2d(arr, "points")
    check_finite(arr, "points")
    return arr


def euclidean_distance(left: ArrayLike, right: ArrayLike) -> float:
    """Euclidean distance between two points of the same dimension."""
    a = np.asarray(left, dtype=np.float64)
    b = np.asarray(right, dtype=np.float64)
    if a.shape != b.shape:
        raise ValidationError(f"points differ in shape: {a.shape} vs {b.shape}")
    return float(np.sqrt(np.sum((a - b) ** 2)))


def label_points(points: NDArray, centroids: NDArray) -> NDArray[np.intp]:
    """Index of the nearest centroid for each point; ties go to the lower index."""
    distances = np.sqrt(((points[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2).sum(axis=2))
    return np.argmin(distances, axis=1)


def calculate_centroids(
    points: NDArray,
    labels: NDArray[np.intp],
    n_clusters: int,
) -> NDArray[np.floating[Any]]:
    """
    Mean of the points assigned to each cluster.

    Raises:
        EmptyClusterError: If some cluster has no points
    """
    counts = np.bincount(labels, minlength=n_clusters)
    for cluster in range(n_clusters):
        if counts[cluster] == 0:
            raise EmptyClusterError(f"Centroid {cluster} has no points", cluster)
    sums = np.zeros((n_clusters, points.shape[1]))
    np.add.at(sums, labels, points)
    return sums / counts[:, np.newaxis]


def k_means_cluster(
    points: ArrayLike,
    n_clusters: int,
    random_source: RandomSource = None,
    max_iterations: int = 1000,
) -> KMeansResult:
    """
    Partition points into ``n_clusters`` groups with Lloyd's algorithm.

    Args:
        points: (n, d) array-like; a 1-D sample is treated as n points in 1-D
        n_clusters: Number of clusters
        random_source: Seed, numpy Generator or callable used to pick the
            initial centroids
        max_iterations: Upper bound on assignment / update rounds

    Returns:
        KMeansResult(labels, centroids, iterations)

    Raises:
        ValidationError: If n_clusters exceeds the number of points
        EmptyClusterError: If a centroid attracts no points
        ConvergenceError: If the centroids still move after max_iterations

    Examples:
        >>> result = k_means_cluster([[0.0], [0.5], [1.0], [5.0], [5.5], [6.0]], 2, random_source=0)
        >>> sorted(result.centroids.ravel().tolist())
        [0.5, 5.5]
    """
    arr = _as_points(points)
    n_clusters = check_positive_integer(n_clusters, "n_clusters")
    max_iterations = check_positive_integer(max_iterations, "max_iterations")
    if n_clusters > len(arr):
        raise ValidationError(
            f"n_clusters={n_clusters} exceeds the number of points ({len(arr)})"
        )

    chosen = sample(list(range(len(arr))), n_clusters, random_source)
    centroids = arr[np.asarray(chosen, dtype=np.intp)]

    change = np.inf
    iterations = 0
    while change != 0:
        if iterations >= max_iterations:
            raise ConvergenceError(
                f"k_means_cluster: centroids still moving after {iterations} iterations",
                iterations=iterations,
                final_change=float(change),
                reason='max_iterations',
                threshold=0.0,
            )
        labels = label_points(arr, centroids)
        new_centroids = calculate_centroids(arr, labels, n_clusters)
        change = float(np.sqrt(((new_centroids - centroids) ** 2).sum(axis=1)).sum())
        centroids = new_centroids
        iterations += 1

    return KMeansResult(labels=labels, centroids=centroids, iterations=iterations)
