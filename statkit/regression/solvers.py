"""
Solver entry points for simple linear regression.

Public API:
    linear_regression(points) or linear_regression(x, y)
        -> LinearRegressionSolution
    linear_regression_line(fit) -> callable x -> m * x + b
    r_squared(points, line) -> float
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

import numpy as np
from numpy.typing import ArrayLike

from statkit.core.exceptions import DimensionError, ValidationError
from statkit.core.validation import check_array, check_finite
from statkit.regression.design import RegressionDesign
from statkit.regression.solution import LinearRegressionSolution
from statkit.regression.backends.cpu import CPULeastSquaresBackend


def linear_regression(
    points: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
) -> LinearRegressionSolution:
    """
    Fit y = m * x + b by ordinary least squares.

    Args:
        points: (n, 2) array-like of [x, y] pairs, or the x sample when
            ``y`` is given, or a pre-built RegressionDesign.
        y: Optional response sample paired with ``points``.

    Returns:
        LinearRegressionSolution with m, b, residual standard error,
        coefficient standard errors / t / p and R^2.

    Raises:
        NumericalError: If every x value is identical.

    Example:
        >>> fit = linear_regression([[0, 0], [1, 1]])
        >>> fit.m, fit.b
        (1.0, 0.0)
    """
    if isinstance(points, RegressionDesign):
        design = points
    elif y is None:
        design = RegressionDesign.from_points(points)
    else:
        design = RegressionDesign.from_arrays(points, y)

    result = CPULeastSquaresBackend().solve(design)
    return LinearRegressionSolution(_result=result, _design=design)


def linear_regression_line(
    fit: LinearRegressionSolution | Mapping[str, float],
) -> Callable[[float], float]:
    """
    Turn a fitted line (or a mapping with 'm' and 'b') into a function of x.

    Example:
        >>> line = linear_regression_line({'m': 2, 'b': 1})
        >>> line(3)
        7
    """
    if isinstance(fit, LinearRegressionSolution):
        m, b = fit.m, fit.b
    else:
        try:
            m, b = fit['m'], fit['b']
        except KeyError as e:
            raise ValidationError(f"fit: missing key {e.args[0]!r}") from e
    return lambda x: b + m * x


def r_squared(points: ArrayLike, line: Callable[[float], Any]) -> float:
    """
    Coefficient of determination of ``line`` over ``points``.

    1 - sum((y - line(x))^2) / sum((y - mean(y))^2). Fewer than two points
    give 1. When every y is equal the result is 1 for a perfect fit and
    0 otherwise.
    """
    arr = check_array(points, 'points')
    if arr.size == 0:
        return 1.0
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise DimensionError(f"points: expected shape (n, 2), got {arr.shape}")
    check_finite(arr, 'points')
    if len(arr) < 2:
        return 1.0

    x, y = arr[:, 0], arr[:, 1]
    average = float(np.mean(y))
    sum_of_squares = float(np.sum((average - y) ** 2))
    err = float(sum((yi - line(xi)) ** 2 for xi, yi in zip(x, y)))

    if sum_of_squares == 0:
        return 1.0 if err == 0 else 0.0
    return 1.0 - err / sum_of_squares
