"""
Simple linear regression.

Public API:
    linear_regression(points) or linear_regression(x, y)
        -> LinearRegressionSolution
    linear_regression_line(fit) -> callable
    r_squared(points, line) -> float

Example:
    >>> from statkit.regression import linear_regression
    >>> fit = linear_regression([[1, 2], [2, 4], [3, 6.5]])
    >>> print(fit.summary())
"""

from statkit.regression.design import RegressionDesign
from statkit.regression.solution import LinearRegressionParams, LinearRegressionSolution
from statkit.regression.solvers import linear_regression, linear_regression_line, r_squared

__all__ = [
    "linear_regression",
    "linear_regression_line",
    "r_squared",
    "RegressionDesign",
    "LinearRegressionParams",
    "LinearRegressionSolution",
]
