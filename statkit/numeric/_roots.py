"""
Root finding and quadrature.

These are the numerical workhorses behind the distributions: bisect
inverts CDFs that have no closed-form quantile, and adaptive_simpson
integrates the incomplete beta function.
"""

from __future__ import annotations

import math
from typing import Callable

from statkit.core.compute.tolerances import (
    EPSILON, ROOT_TOLERANCE, ROOT_MAX_ITERATIONS,
    SIMPSON_TOLERANCE, SIMPSON_MAX_DEPTH,
)
from statkit.core.exceptions import ConvergenceError, ValidationError


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def bisect(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    *,
    tolerance: float = ROOT_TOLERANCE,
    max_iterations: int = ROOT_MAX_ITERATIONS,
) -> float:
    """
    Find a root of f in [lower, upper] by interval halving.

    Args:
        f: Continuous function with a sign change on the bracket
        lower, upper: Bracket end points
        tolerance: Stop once the half-width drops below this
        max_iterations: Iteration cap

    Returns:
        Midpoint of the final bracket

    Raises:
        ValidationError: If f has the same sign at both end points
        ConvergenceError: If max_iterations is reached
    """
    if not callable(f):
        raise ValidationError("f must be callable")

    f_lower = f(lower)
    if f_lower == 0:
        return lower
    f_upper = f(upper)
    if f_upper == 0:
        return upper
    if _sign(f_lower) == _sign(f_upper):
        raise ValidationError(
            f"root is not bracketed: f({lower})={f_lower}, f({upper})={f_upper}"
        )

    for _ in range(max_iterations):
        mid = (lower + upper) / 2
        f_mid = f(mid)
        if f_mid == 0 or abs((upper - lower) / 2) < tolerance:
            return mid
        if _sign(f_mid) == _sign(f_lower):
            lower, f_lower = mid, f_mid
        else:
            upper = mid

    raise ConvergenceError(
        "maximum number of iterations exceeded",
        iterations=max_iterations,
        final_change=abs(upper - lower),
        reason='max_iterations',
        threshold=tolerance,
    )


def secant(
    f: Callable[[float], float],
    x0: float,
    x1: float,
    *,
    tolerance: float = ROOT_TOLERANCE,
    max_iterations: int = ROOT_MAX_ITERATIONS,
) -> float:
    """
    Find a root of f by the secant method from starting points x0, x1.

    Returns:
        Midpoint of the last two iterates

    Raises:
        ConvergenceError: If the secant becomes horizontal or the
            iteration cap is reached
    """
    for iteration in range(max_iterations):
        if abs(x0 - x1) <= tolerance:
            return (x0 + x1) / 2
        f0, f1 = f(x0), f(x1)
        if f1 == f0:
            raise ConvergenceError(
                f"secant is horizontal at x={x1}",
                iterations=iteration,
                final_change=abs(x1 - x0),
                reason='flat',
                threshold=tolerance,
            )
        x0, x1 = x1, (x0 * f1 - x1 * f0) / (f1 - f0)

    raise ConvergenceError(
        "maximum number of iterations exceeded",
        iterations=max_iterations,
        final_change=abs(x1 - x0),
        reason='max_iterations',
        threshold=tolerance,
    )


def adaptive_simpson(
    f: Callable[[float], float],
    a: float,
    b: float,
    eps: float = SIMPSON_TOLERANCE,
    depth: int = SIMPSON_MAX_DEPTH,
) -> float:
    """
    Integrate f over [a, b] with adaptive Simpson's rule.

    Each interval is split in two until the two-panel estimate agrees with
    the one-panel estimate to 15 * eps, halving eps on every split, or
    until ``depth`` splits have been made. The accepted value includes
    Richardson extrapolation.
    """
    c = (a + b) / 2
    fa, fb, fc = f(a), f(b), f(c)
    whole = (b - a) / 6 * (fa + 4 * fc + fb)
    return _adaptive(f, a, b, eps, whole, fa, fb, fc, depth)


def _adaptive(f, a, b, eps, whole, fa, fb, fc, depth):
    c = (a + b) / 2
    h = b - a
    fd = f((a + c) / 2)
    fe = f((c + b) / 2)
    left = h / 12 * (fa + 4 * fd + fc)
    right = h / 12 * (fc + 4 * fe + fb)
    split = left + right
    if depth <= 0 or abs(split - whole) <= 15 * eps:
        return split + (split - whole) / 15
    return (
        _adaptive(f, a, c, eps / 2, left, fa, fc, fd, depth - 1)
        + _adaptive(f, c, b, eps / 2, right, fc, fb, fe, depth - 1)
    )


def relative_error(actual: float, expected: float) -> float:
    """|actual - expected| / |expected|; 0 when both are 0."""
    if actual == 0 and expected == 0:
        return 0.0
    if expected == 0:
        return math.inf
    return abs((actual - expected) / expected)


def approx_equal(actual: float, expected: float, tolerance: float = EPSILON) -> bool:
    """Relative-error comparison."""
    return relative_error(actual, expected) <= tolerance
