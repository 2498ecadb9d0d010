"""
Input validation utilities for statkit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from statkit.core.exceptions import (
    ValidationError, DimensionError, InsufficientDataError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types or
    non-numeric data) and non-numeric dtypes such as strings or booleans.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.size == 0 and result.dtype != np.float64:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [len(arr) for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: ArrayLike, min_samples: int, name: str) -> None:
    """
    Verify a sample has at least the minimum number of data points.

    Args:
        array: Sample to check (anything with a length)
        min_samples: Minimum required data points
        name: Operation name used in the error message

    Raises:
        InsufficientDataError: If the sample is too short
    """
    n = len(array)
    if n < min_samples:
        raise InsufficientDataError(name, min_samples, n)


def check_sample(
    x: ArrayLike,
    name: str,
    min_samples: int = 0,
) -> NDArray[np.floating[Any]]:
    """
    Convert a Sample to a 1D float64 array and check its length.

    Args:
        x: Sample as any array-like
        name: Operation name used in error messages
        min_samples: Minimum number of data points the operation needs

    Returns:
        1D float64 array (a new array when conversion was needed)
    """
    arr = check_array(x, name)
    check_1d(arr, name)
    check_min_samples(arr, min_samples, name)
    return arr


def check_probability(p: float, name: str, *, open_interval: bool = False) -> float:
    """
    Verify p is a probability.

    Args:
        p: Value to check
        name: Parameter name for error messages
        open_interval: Require 0 < p < 1 instead of 0 <= p <= 1

    Returns:
        p as a float

    Raises:
        ValidationError: If p is outside the interval
    """
    if not isinstance(p, numbers.Real) or isinstance(p, bool):
        raise ValidationError(f"{name} must be a real number, got {p!r}")
    p = float(p)
    if open_interval:
        if not (0.0 < p < 1.0):
            raise ValidationError(f"{name} must be in (0, 1), got {p}")
    elif not (0.0 <= p <= 1.0):
        raise ValidationError(f"{name} must be in [0, 1], got {p}")
    return p


def check_positive_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Integral floats such as 3.0 are accepted.

    Raises:
        ValidationError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    if value < 1:
        raise ValidationError(f"{name} must be a positive number, got {value}")
    if not math.isfinite(value) or int(value) != value:
        raise ValidationError(f"{name} must be an integer, got {value}")
    return int(value)
