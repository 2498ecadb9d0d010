"""
Summation and extrema.

compensated_sum is the accumulator every mean in the package goes
through. It follows the Kahan-Babuska (Neumaier) variant: the running
correction picks whichever operand lost low-order bits, so large values
followed by small ones do not erode the total.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike

from statkit.core.exceptions import InsufficientDataError
from statkit.core.validation import check_sample


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def compensated_sum(x: Iterable[Any]) -> float:
    """
    Sum a sample with Kahan-Babuska error compensation.

    An empty sample sums to 0. If any element is not a real number the
    result is NaN (no exception is raised).

    Examples:
        >>> compensated_sum([0.1] * 10)
        1.0
        >>> compensated_sum([1, 'a'])
        nan
    """
    values = list(x)
    if not values:
        return 0.0
    if not _is_number(values[0]):
        return math.nan

    total = float(values[0])
    correction = 0.0
    for value in values[1:]:
        if not _is_number(value):
            return math.nan
        value = float(value)
        transition = total + value
        if abs(total) >= abs(value):
            correction += total - transition + value
        else:
            correction += value - transition + total
        total = transition

    return total + correction


def naive_sum(x: Iterable[Any]) -> float:
    """Plain left-to-right sum. NaN for non-numeric elements."""
    total = 0.0
    for value in x:
        if not _is_number(value):
            return math.nan
        total += float(value)
    return total


def product(x: Iterable[Any]) -> float:
    """Product of all elements; 1 for an empty sample."""
    result = 1.0
    for value in x:
        if not _is_number(value):
            return math.nan
        result *= float(value)
    return result


def sample_min(x: ArrayLike) -> float:
    """Smallest value. Raises InsufficientDataError on an empty sample."""
    arr = check_sample(x, "min", min_samples=1)
    return float(np.min(arr))


def sample_max(x: ArrayLike) -> float:
    """Largest value. Raises InsufficientDataError on an empty sample."""
    arr = check_sample(x, "max", min_samples=1)
    return float(np.max(arr))


def extent(x: ArrayLike) -> tuple[float, float]:
    """(min, max) in a single pass."""
    arr = check_sample(x, "extent", min_samples=1)
    return float(np.min(arr)), float(np.max(arr))


def min_sorted(x: ArrayLike) -> float:
    """First element of an ascending sample."""
    if len(x) == 0:
        raise InsufficientDataError("min", 1, 0)
    return float(x[0])


def max_sorted(x: ArrayLike) -> float:
    """Last element of an ascending sample."""
    if len(x) == 0:
        raise InsufficientDataError("max", 1, 0)
    return float(x[len(x) - 1])


def extent_sorted(x: ArrayLike) -> tuple[float, float]:
    """(first, last) of an ascending sample."""
    if len(x) == 0:
        raise InsufficientDataError("extent", 1, 0)
    return float(x[0]), float(x[len(x) - 1])
