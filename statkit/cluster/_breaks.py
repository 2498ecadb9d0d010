"""
Class breaks for choropleth-style binning: Jenks natural breaks and
equal-interval breaks.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.exceptions import ValidationError
from statkit.core.validation import check_finite, check_positive_integer, check_sample
from statkit.numeric import numeric_sort


def _jenks_matrices(data: NDArray, n_classes: int) -> NDArray[np.intp]:
    """
    Fisher-Jenks DP over the sorted data.

    ``lower[l, j]`` is the 1-based index where the last of ``j`` classes
    starts in an optimal split of the first ``l`` values.
    """
    n = len(data)
    lower = np.zeros((n + 1, n_classes + 1), dtype=np.intp)
    variance_combinations = np.zeros((n + 1, n_classes + 1))

    lower[1, 1:] = 1
    variance_combinations[2:, 1:] = np.inf

    variance = 0.0
    for l in range(2, n + 1):
        s = 0.0
        s2 = 0.0
        w = 0
        for m in range(1, l + 1):
            lower_class_limit = l - m + 1
            val = data[lower_class_limit - 1]
            w += 1
            s += val
            s2 += val * val
            variance = s2 - s * s / w
            i4 = lower_class_limit - 1
            if i4 != 0:
                for j in range(2, n_classes + 1):
                    candidate = variance + variance_combinations[i4, j - 1]
                    if variance_combinations[l, j] >= candidate:
                        lower[l, j] = lower_class_limit
                        variance_combinations[l, j] = candidate
        lower[l, 1] = 1
        variance_combinations[l, 1] = variance

    return lower


def jenks(x: ArrayLike, n_classes: int) -> NDArray[np.floating]:
    """
    Jenks natural breaks.

    Returns:
        ``n_classes + 1`` break values: the minimum, the lower bound of
        each class after the first, and the maximum.

    Raises:
        ValidationError: If n_classes exceeds the sample size

    Examples:
        >>> jenks([1, 2, 4, 5, 7, 9, 10, 20], 3).tolist()
        [1.0, 7.0, 20.0, 20.0]
    """
    n_classes = check_positive_integer(n_classes, "n_classes")
    arr = check_sample(x, "jenks", min_samples=1)
    check_finite(arr, "x")
    if n_classes > len(arr):
        raise ValidationError(
            "cannot generate more classes than there are data values: "
            f"n_classes={n_classes}, n={len(arr)}"
        )

    data = numeric_sort(arr)
    lower = _jenks_matrices(data, n_classes)

    breaks = np.empty(n_classes + 1)
    breaks[n_classes] = data[-1]
    k = len(data)
    for count in range(n_classes, 0, -1):
        breaks[count - 1] = data[lower[k, count] - 1]
        k = lower[k, count] - 1
    return breaks


def equal_interval_breaks(x: ArrayLike, n_classes: int) -> NDArray[np.floating]:
    """
    ``n_classes + 1`` evenly spaced breaks from min(x) to max(x).

    A sample with fewer than two values is returned as is.

    Examples:
        >>> equal_interval_breaks([1, 2, 3, 4, 5, 6], 4).tolist()
        [1.0, 2.25, 3.5, 4.75, 6.0]
    """
    n_classes = check_positive_integer(n_classes, "n_classes")
    arr = check_sample(x, "equal_interval_breaks")
    check_finite(arr, "x")
    if len(arr) < 2:
        return arr.copy()

    lo = float(arr.min())
    hi = float(arr.max())
    size = (hi - lo) / n_classes
    breaks = lo + size * np.arange(n_classes + 1, dtype=np.float64)
    breaks[-1] = hi
    return breaks
