"""
Silhouette scores for a labelled clustering.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.exceptions import ValidationError
from statkit.core.validation import check_consistent_length
from statkit.cluster._kmeans import _as_points


def _pairwise_distances(points: NDArray) -> NDArray[np.floating[Any]]:
    diff = points[:, np.newaxis, :] - points[np.newaxis, :, :]
    return np.sqrt((diff ** 2).sum(axis=2))


def silhouette(points: ArrayLike, labels: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Silhouette value of each point.

    s(i) = (b - a) / max(a, b). a is the mean distance from point i to the
    other members of its cluster: the distance sum is divided by the cluster
    size minus one, so i itself is not counted. b is the smallest mean
    distance to the members of another cluster, divided by that cluster's
    full size. Points alone in their cluster score 0.

    Raises:
        DimensionError: If labels and points differ in length
        ValidationError: If fewer than two clusters are present
    """
    arr = _as_points(points)
    label_arr = np.asarray(labels)
    if label_arr.ndim != 1:
        raise ValidationError(f"labels: expected 1D, got {label_arr.ndim}D")
    check_consistent_length(arr, label_arr, names=("points", "labels"))

    groups = [np.flatnonzero(label_arr == g) for g in np.unique(label_arr)]
    if len(groups) < 2:
        raise ValidationError(
            f"silhouette needs at least two clusters, got {len(groups)}"
        )
    group_of = {int(i): k for k, members in enumerate(groups) for i in members}

    distances = _pairwise_distances(arr)
    result = np.zeros(len(arr))
    for i in range(len(arr)):
        own = group_of[i]
        if len(groups[own]) < 2:
            continue
        # self-distance is zero, so dividing by n - 1 excludes it
        a = distances[i, groups[own]].sum() / (len(groups[own]) - 1)
        b = min(
            distances[i, members].mean()
            for k, members in enumerate(groups) if k != own
        )
        denom = max(a, b)
        result[i] = (b - a) / denom if denom > 0 else 0.0
    return result


def silhouette_metric(points: ArrayLike, labels: ArrayLike) -> float:
    """Largest silhouette value over all points."""
    return float(np.max(silhouette(points, labels)))
