"""
Clustering and class breaks.

One-dimensional:
    ckmeans(x, n_clusters)               - optimal k-means clusters
    jenks(x, n_classes)                  - natural break values
    equal_interval_breaks(x, n_classes)

Multi-dimensional:
    k_means_cluster(points, n_clusters, random_source=None) -> KMeansResult
    silhouette(points, labels), silhouette_metric(points, labels)
"""

from statkit.cluster._ckmeans import ckmeans
from statkit.cluster._breaks import jenks, equal_interval_breaks
from statkit.cluster._kmeans import (
    KMeansResult,
    k_means_cluster,
    euclidean_distance,
    label_points,
    calculate_centroids,
)
from statkit.cluster._silhouette import silhouette, silhouette_metric

__all__ = [
    "ckmeans",
    "jenks",
    "equal_interval_breaks",
    "KMeansResult",
    "k_means_cluster",
    "euclidean_distance",
    "label_points",
    "calculate_centroids",
    "silhouette",
    "silhouette_metric",
]
