"""
Confidence bounds for a mean and power / sample-size for two groups.

The bounds are t-based: mean +/- t(n - 1) quantile * s / sqrt(n).
sample_size and power use the normal approximation for comparing two
equal-sized groups with common standard deviation sd.
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from statkit.core.validation import check_probability, check_sample
from statkit.core.exceptions import ValidationError
from statkit.descriptive import mean, standard_error
from statkit.distributions import StandardNormal, StudentT


def _mean_and_sem(x: ArrayLike, operation: str) -> tuple[float, float, int]:
    arr = check_sample(x, operation, min_samples=2)
    return mean(arr), standard_error(arr), len(arr)


def confidence_interval(x: ArrayLike, conf_level: float = 0.95) -> tuple[float, float]:
    """
    Two-sided t interval for the mean.

    Examples:
        >>> lo, hi = confidence_interval([1, 2, 3, 4, 5])
        >>> round(lo, 4), round(hi, 4)
        (1.0368, 4.9632)
    """
    conf_level = check_probability(conf_level, "conf_level", open_interval=True)
    m, sem, n = _mean_and_sem(x, "confidence_interval")
    alpha = 1 - conf_level
    t_crit = StudentT(n - 1).ppf(1 - alpha / 2)
    return m - t_crit * sem, m + t_crit * sem


def confidence_upper(x: ArrayLike, conf_level: float = 0.95) -> float:
    """One-sided upper confidence bound for the mean."""
    conf_level = check_probability(conf_level, "conf_level", open_interval=True)
    m, sem, n = _mean_and_sem(x, "confidence_upper")
    return m + StudentT(n - 1).ppf(conf_level) * sem


def confidence_lower(x: ArrayLike, conf_level: float = 0.95) -> float:
    """One-sided lower confidence bound for the mean."""
    conf_level = check_probability(conf_level, "conf_level", open_interval=True)
    m, sem, n = _mean_and_sem(x, "confidence_lower")
    return m - StudentT(n - 1).ppf(conf_level) * sem


def _check_design_inputs(alpha: float, sd: float, effect: float) -> None:
    check_probability(alpha, "alpha", open_interval=True)
    if not sd > 0:
        raise ValidationError(f"sd must be positive, got {sd}")
    if effect == 0:
        raise ValidationError("effect must be non-zero")


def sample_size(alpha: float, power: float, sd: float, effect: float) -> float:
    """
    Per-group sample size to detect a mean difference ``effect``.

    n = 2 (z_{1 - alpha/2} + z_{power})^2 sd^2 / effect^2, not rounded.
    """
    _check_design_inputs(alpha, sd, effect)
    power = check_probability(power, "power", open_interval=True)
    normal = StandardNormal()
    z = normal.ppf(1 - alpha / 2) + normal.ppf(power)
    return 2 * z * z * sd * sd / (effect * effect)


def power(n: float, alpha: float, sd: float, effect: float) -> float:
    """Power of the two-group comparison with n per group; inverse of sample_size."""
    _check_design_inputs(alpha, sd, effect)
    if not n > 0:
        raise ValidationError(f"n must be positive, got {n}")
    normal = StandardNormal()
    return normal.cdf(abs(effect) * math.sqrt(n / 2) / sd - normal.ppf(1 - alpha / 2))
