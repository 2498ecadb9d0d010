"""
Order-statistic selection.

quickselect rearranges a mutable sequence in place so that position k
holds the k-th smallest value, everything left of it is <= and everything
right of it is >=. Partitions wider than FLOYD_RIVEST_CUTOFF are first
narrowed by recursing on a sampled sub-range (Floyd & Rivest, 1975).

multi_quantile_select places several order statistics at once: it sorts
the target indices, then bisects the list of indices, selecting the
middle target strictly between the positions its already-placed
neighbours occupy, so later selections never move an earlier one.
q targets cost O(n log q) instead of q full selections.
"""

from __future__ import annotations

import math
from typing import Any, MutableSequence, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.compute.tolerances import FLOYD_RIVEST_CUTOFF
from statkit.core.validation import check_sample


def _swap(arr: MutableSequence[float], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def quickselect(
    arr: MutableSequence[float],
    k: int,
    left: int = 0,
    right: int | None = None,
) -> MutableSequence[float]:
    """
    Partially sort ``arr[left:right + 1]`` so that ``arr[k]`` is in place.

    Args:
        arr: Mutable sequence (list or 1D ndarray), modified in place
        k: Target index
        left: First index of the range to work on
        right: Last index of the range (default: last element)

    Returns:
        The same sequence, for chaining
    """
    k = int(k)
    if right is None:
        right = len(arr) - 1

    while right > left:
        if right - left > FLOYD_RIVEST_CUTOFF:
            n = right - left + 1
            m = k - left + 1
            z = math.log(n)
            s = 0.5 * math.exp(2 * z / 3)
            sd = 0.5 * math.sqrt(z * s * (n - s) / n)
            if m - n / 2 < 0:
                sd = -sd
            new_left = max(left, math.floor(k - m * s / n + sd))
            new_right = min(right, math.floor(k + (n - m) * s / n + sd))
            quickselect(arr, k, new_left, new_right)

        t = arr[k]
        i = left
        j = right

        _swap(arr, left, k)
        if arr[right] > t:
            _swap(arr, left, right)

        while i < j:
            _swap(arr, i, j)
            i += 1
            j -= 1
            while arr[i] < t:
                i += 1
            while arr[j] > t:
                j -= 1

        if arr[left] == t:
            _swap(arr, left, j)
        else:
            j += 1
            _swap(arr, j, right)

        if j <= k:
            left = j + 1
        if k <= j:
            right = j - 1

    return arr


def quantile_index(length: int, p: float) -> float:
    """
    Position of the p-quantile in a sorted sample of the given length.

    Mirrors quantile_sorted: a half-integer is returned when the quantile
    is the average of two neighbours (even length, integral n * p).
    """
    idx = length * p
    if p == 1:
        return length - 1
    if p == 0:
        return 0
    if idx % 1 != 0:
        return math.ceil(idx) - 1
    if length % 2 == 0:
        return idx - 0.5
    return int(idx)


def quantile_select(
    arr: MutableSequence[float],
    k: float,
    left: int,
    right: int,
) -> None:
    """Select index k, or both neighbours when k is a half-integer."""
    if k % 1 == 0:
        quickselect(arr, int(k), left, right)
    else:
        k = math.floor(k)
        quickselect(arr, k, left, right)
        quickselect(arr, k + 1, k + 1, right)


def multi_quantile_select(
    arr: MutableSequence[float],
    ps: Sequence[float],
) -> MutableSequence[float]:
    """
    Place every order statistic needed for the quantiles ``ps``.

    Afterwards quantile_sorted(arr, p) is correct for each p in ps even
    though arr is not fully sorted.
    """
    n = len(arr)
    targets = sorted(quantile_index(n, p) for p in ps)

    # (first target, end target, lowest free position, highest free position)
    stack = [(0, len(targets), 0, n - 1)]
    while stack:
        a, b, lo, hi = stack.pop()
        if a >= b or lo > hi:
            continue

        m = (a + b) // 2
        below, above = math.floor(targets[m]), math.ceil(targets[m])
        start = lo
        for k in sorted({below, above}):
            if start <= k <= hi:
                quickselect(arr, k, start, hi)
                start = k + 1

        # placed positions are never inside a later selection range
        stack.append((a, m, lo, min(below - 1, hi)))
        stack.append((m + 1, b, max(above + 1, lo), hi))

    return arr


def numeric_sort(x: ArrayLike) -> NDArray[np.floating[Any]]:
    """Ascending float64 copy of a sample."""
    return np.sort(check_sample(x, "numeric_sort"))
