"""
Order-based statistics: quantiles, ranks, mode and spread.

Quantile rule on sorted data of length n with fraction p:
    p == 0                     -> first element
    p == 1                     -> last element
    n * p not an integer       -> x[ceil(n * p) - 1]
    n * p integer, n even      -> mean of x[n * p - 1] and x[n * p]
    n * p integer, n odd       -> x[n * p]

quantile() never sorts the whole sample. A single p goes through
quickselect and several p share one multi_quantile_select pass.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from statkit.core.exceptions import InsufficientDataError, ValidationError
from statkit.core.validation import check_sample
from statkit.numeric import (
    multi_quantile_select,
    numeric_sort,
    quantile_index,
    quantile_select,
)


def _check_fraction(p: float) -> float:
    if not 0 <= p <= 1:
        raise ValidationError(f"quantiles must be between 0 and 1, got {p}")
    return p


def quantile_sorted(x: Sequence[float], p: float) -> float:
    """p-quantile of an ascending sample."""
    n = len(x)
    if n == 0:
        raise InsufficientDataError("quantile", 1, 0)
    _check_fraction(p)
    if p == 1:
        return float(x[n - 1])
    if p == 0:
        return float(x[0])
    idx = n * p
    if idx % 1 != 0:
        return float(x[math.ceil(idx) - 1])
    idx = int(idx)
    if n % 2 == 0:
        return (float(x[idx - 1]) + float(x[idx])) / 2
    return float(x[idx])


def quantile(x: ArrayLike, p: float | Sequence[float]):
    """
    p-quantile(s) of an unsorted sample.

    Args:
        x: Sample (left untouched; a copy is partitioned)
        p: A fraction in [0, 1] or a sequence of them

    Returns:
        float for scalar p, list of floats for a sequence

    Examples:
        >>> quantile([3, 6, 7, 8, 8, 9, 10, 13, 15, 16, 20], 0.5)
        9.0
        >>> quantile([3, 6, 7, 8, 8, 9, 10, 13, 15, 16, 20], [0.25, 0.75])
        [7.0, 15.0]
    """
    arr = check_sample(x, "quantile", min_samples=1).copy()

    if np.ndim(p) > 0:
        ps = [_check_fraction(float(q)) for q in p]
        multi_quantile_select(arr, ps)
        return [quantile_sorted(arr, q) for q in ps]

    p = _check_fraction(float(p))
    quantile_select(arr, quantile_index(len(arr), p), 0, len(arr) - 1)
    return quantile_sorted(arr, p)


def median(x: ArrayLike) -> float:
    """
    Examples:
        >>> median([10, 2, 5, 100, 2, 1])
        3.5
    """
    return quantile(x, 0.5)


def median_sorted(x: Sequence[float]) -> float:
    return quantile_sorted(x, 0.5)


def interquartile_range(x: ArrayLike) -> float:
    """Difference between the 0.75 and 0.25 quantiles."""
    q1, q3 = quantile(x, [0.25, 0.75])
    return q3 - q1


def median_absolute_deviation(x: ArrayLike) -> float:
    """median(|x - median(x)|), not scaled for consistency with the SD."""
    arr = check_sample(x, "median_absolute_deviation", min_samples=1)
    return median(np.abs(arr - median(arr)))


def quantile_rank_sorted(x: Sequence[float], value: float) -> float:
    """
    Fraction of the sorted sample at or below value.

    A value that occurs several times gets the mean of the ranks it spans.
    """
    n = len(x)
    if n == 0:
        raise InsufficientDataError("quantile_rank", 1, 0)
    arr = np.asarray(x, dtype=np.float64)
    lower = int(np.searchsorted(arr, value, side='left'))
    if lower >= n:
        return 1.0
    if arr[lower] != value:
        return lower / n
    upper = int(np.searchsorted(arr, value, side='right'))
    return (lower + 1 + upper) / 2 / n


def quantile_rank(x: ArrayLike, value: float) -> float:
    return quantile_rank_sorted(numeric_sort(x), value)


def ecdf(x: ArrayLike, v: float | ArrayLike):
    """
    Empirical CDF of x evaluated at v.

    Returns a float for scalar v and a float64 array otherwise.
    """
    arr = numeric_sort(check_sample(x, "ecdf", min_samples=1))
    counts = np.searchsorted(arr, v, side='right')
    if np.ndim(v) == 0:
        return int(counts) / len(arr)
    return np.asarray(counts, dtype=np.float64) / len(arr)


def mode_sorted(x: Sequence[float]) -> float:
    """
    Most frequent value of an ascending sample.

    Ties: among equally frequent values the smallest one is returned, not
    the last one reached in sorted order. A run only replaces the current
    best when it is strictly longer.
    """
    n = len(x)
    if n == 0:
        raise InsufficientDataError("mode", 1, 0)
    if n == 1:
        return float(x[0])

    last = x[0]
    value = math.nan
    max_seen = 0
    seen_this = 1
    for i in range(1, n + 1):
        if i == n or x[i] != last:
            if seen_this > max_seen:
                max_seen = seen_this
                value = last
            seen_this = 1
            if i < n:
                last = x[i]
        else:
            seen_this += 1
    return float(value)


def mode(x: ArrayLike) -> float:
    """Most frequent value; ties go to the smallest tied value."""
    return mode_sorted(numeric_sort(x))


def mode_fast(x: Iterable[Hashable]) -> Any:
    """
    Most frequent element by hash counting; works for any hashable values.

    Ties go to the value seen first in x.
    """
    counts: dict[Hashable, int] = {}
    for value in x:
        counts[value] = counts.get(value, 0) + 1
    if not counts:
        raise InsufficientDataError("mode", 1, 0)

    best = None
    best_count = 0
    for value, count in counts.items():
        if count > best_count:
            best = value
            best_count = count
    return best

