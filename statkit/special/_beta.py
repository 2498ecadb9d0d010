"""
Complete and incomplete beta functions.

The regularized incomplete beta I_x(a, b) is obtained by integrating the
beta density with adaptive Simpson's rule. Two rewrites keep the integrand
smooth enough for Simpson:

    - When x lies above the mean a / (a + b), the complementary tail
      1 - I_{1-x}(b, a) is integrated instead, so the upper limit never
      approaches the (1 - y)^(b - 1) singularity at y = 1.
    - When a < 1, the substitution y = u^(1/a) absorbs the y^(a - 1)
      singularity at y = 0.

Integrating the normalized density means the absolute tolerance is a
tolerance on probabilities, whatever the size of B(a, b).
"""

from __future__ import annotations

import math

from statkit.core.compute.tolerances import SIMPSON_TOLERANCE, BETA_MAX_DEPTH
from statkit.core.exceptions import ValidationError
from statkit.numeric import adaptive_simpson
from statkit.special._gamma import gammaln


def _check_shape(a: float, b: float) -> None:
    if not (a > 0 and b > 0):
        raise ValidationError(f"beta shape parameters must be positive, got a={a}, b={b}")


def log_beta(a: float, b: float) -> float:
    """log B(a, b) from log-gamma."""
    _check_shape(a, b)
    return gammaln(a) + gammaln(b) - gammaln(a + b)


def beta(a: float, b: float) -> float:
    """Complete beta function B(a, b) = G(a) G(b) / G(a + b)."""
    return math.exp(log_beta(a, b))


def _lower_tail(x: float, a: float, b: float) -> float:
    lb = log_beta(a, b)

    if a < 1:
        inv_a = 1 / a

        def integrand(u: float) -> float:
            y = u ** inv_a
            return math.exp((b - 1) * math.log1p(-y) - lb) * inv_a

        return adaptive_simpson(integrand, 0.0, x ** a, SIMPSON_TOLERANCE, BETA_MAX_DEPTH)

    def integrand(y: float) -> float:
        if y <= 0.0:
            return math.exp(-lb) if a == 1 else 0.0
        return math.exp((a - 1) * math.log(y) + (b - 1) * math.log1p(-y) - lb)

    return adaptive_simpson(integrand, 0.0, x, SIMPSON_TOLERANCE, BETA_MAX_DEPTH)


def regularized_incomplete_beta(x: float, a: float, b: float) -> float:
    """
    I_x(a, b) = B(x; a, b) / B(a, b).

    Clamped to [0, 1]; returns 0 for x <= 0 and 1 for x >= 1.
    """
    _check_shape(a, b)
    if math.isnan(x):
        return math.nan
    if x <= 0:
        return 0.0
    if x >= 1:
        return 1.0

    if x > a / (a + b):
        value = 1.0 - _lower_tail(1.0 - x, b, a)
    else:
        value = _lower_tail(x, a, b)
    return min(1.0, max(0.0, value))


def incomplete_beta(x: float, a: float, b: float) -> float:
    """Unnormalized lower incomplete beta B(x; a, b)."""
    return regularized_incomplete_beta(x, a, b) * beta(a, b)
