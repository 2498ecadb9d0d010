"""
Central tendency, dispersion and moment statistics.

Every function validates its sample length first and raises
InsufficientDataError below the minimum (variance needs one data point,
sample variance two, skewness three, kurtosis four). ``mean`` is the one
exception to strict conversion: it sums through compensated_sum, so a
non-numeric element yields NaN instead of an error.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.stats import rankdata

from statkit.core.exceptions import InsufficientDataError, ValidationError
from statkit.core.validation import check_consistent_length, check_sample
from statkit.numeric import compensated_sum, product


def mean(x: ArrayLike) -> float:
    """
    Arithmetic mean.

    Examples:
        >>> mean([0, 10])
        5.0
    """
    values = list(x)
    if not values:
        raise InsufficientDataError("mean", 1, 0)
    return compensated_sum(values) / len(values)


def sum_nth_power_deviations(x: ArrayLike, n: int) -> float:
    """Sum of (x_i - mean)^n."""
    arr = check_sample(x, "sum_nth_power_deviations", min_samples=1)
    deviations = arr - mean(arr)
    if n == 2:
        return float(np.sum(deviations * deviations))
    return float(np.sum(deviations ** n))


def variance(x: ArrayLike) -> float:
    """Population variance (divisor n)."""
    arr = check_sample(x, "variance", min_samples=1)
    return sum_nth_power_deviations(arr, 2) / len(arr)


def standard_deviation(x: ArrayLike) -> float:
    """Population standard deviation. A single value has deviation 0."""
    arr = check_sample(x, "standard_deviation", min_samples=1)
    if len(arr) == 1:
        return 0.0
    return math.sqrt(variance(arr))


def sample_variance(x: ArrayLike) -> float:
    """Bessel-corrected variance (divisor n - 1)."""
    arr = check_sample(x, "sample_variance", min_samples=2)
    return sum_nth_power_deviations(arr, 2) / (len(arr) - 1)


def sample_standard_deviation(x: ArrayLike) -> float:
    """Square root of sample_variance."""
    arr = check_sample(x, "sample_standard_deviation", min_samples=2)
    return math.sqrt(sample_variance(arr))


def _central_moments(arr: NDArray[np.floating[Any]]) -> tuple[float, float, float]:
    deviations = arr - mean(arr)
    squared = deviations * deviations
    return (
        float(np.sum(squared)),
        float(np.sum(squared * deviations)),
        float(np.sum(squared * squared)),
    )


def skewness(x: ArrayLike) -> float:
    """Moment coefficient of skewness m3 / m2^(3/2), no bias correction."""
    arr = check_sample(x, "skewness", min_samples=3)
    n = len(arr)
    m2, m3, _ = _central_moments(arr)
    return (m3 / n) / (m2 / n) ** 1.5


def sample_skewness(x: ArrayLike) -> float:
    """
    Adjusted Fisher-Pearson skewness.

    n * sum(d^3) / ((n - 1)(n - 2) s^3) with s the sample standard
    deviation. Agrees with scipy.stats.skew(x, bias=False).
    """
    arr = check_sample(x, "sample_skewness", min_samples=3)
    n = len(arr)
    m2, m3, _ = _central_moments(arr)
    s = math.sqrt(m2 / (n - 1))
    return n * m3 / ((n - 1) * (n - 2) * s ** 3)


def kurtosis(x: ArrayLike) -> float:
    """Moment coefficient of kurtosis m4 / m2^2 (not excess, no bias correction)."""
    arr = check_sample(x, "kurtosis", min_samples=4)
    n = len(arr)
    m2, _, m4 = _central_moments(arr)
    return (m4 / n) / (m2 / n) ** 2


def sample_kurtosis(x: ArrayLike) -> float:
    """
    Bias-corrected excess kurtosis.

    Agrees with scipy.stats.kurtosis(x, fisher=True, bias=False).
    """
    arr = check_sample(x, "sample_kurtosis", min_samples=4)
    n = len(arr)
    m2, _, m4 = _central_moments(arr)
    return (
        (n - 1) / ((n - 2) * (n - 3))
        * (n * (n + 1) * m4 / (m2 * m2) - 3 * (n - 1))
    )


def _paired(x: ArrayLike, y: ArrayLike, name: str, min_samples: int):
    x_arr = check_sample(x, name)
    y_arr = check_sample(y, name)
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    if len(x_arr) < min_samples:
        raise InsufficientDataError(name, min_samples, len(x_arr))
    return x_arr, y_arr


def sample_covariance(x: ArrayLike, y: ArrayLike) -> float:
    """Bessel-corrected covariance of a paired sample."""
    x_arr, y_arr = _paired(x, y, "sample_covariance", 2)
    return float(np.sum((x_arr - mean(x_arr)) * (y_arr - mean(y_arr)))) / (len(x_arr) - 1)


def sample_correlation(x: ArrayLike, y: ArrayLike) -> float:
    """Pearson correlation coefficient."""
    x_arr, y_arr = _paired(x, y, "sample_correlation", 2)
    return (
        sample_covariance(x_arr, y_arr)
        / sample_standard_deviation(x_arr)
        / sample_standard_deviation(y_arr)
    )


def sample_rank_correlation(x: ArrayLike, y: ArrayLike) -> float:
    """
    Spearman correlation: Pearson correlation of the ranks.

    Ties get consecutive ranks in order of appearance, not averaged ranks.
    """
    x_arr, y_arr = _paired(x, y, "sample_rank_correlation", 2)
    return sample_correlation(
        rankdata(x_arr, method='ordinal'),
        rankdata(y_arr, method='ordinal'),
    )


def _require_positive(arr: NDArray[np.floating[Any]], name: str) -> None:
    if np.any(arr <= 0):
        raise ValidationError(f"{name} requires only positive numbers as input")


def geometric_mean(x: ArrayLike) -> float:
    """n-th root of the product. Use log_average for long samples."""
    arr = check_sample(x, "geometric_mean", min_samples=1)
    _require_positive(arr, "geometric_mean")
    return product(arr) ** (1 / len(arr))


def log_average(x: ArrayLike) -> float:
    """Geometric mean computed as exp(mean(log x)), safe from product overflow."""
    arr = check_sample(x, "log_average", min_samples=1)
    _require_positive(arr, "log_average")
    return math.exp(compensated_sum(np.log(arr)) / len(arr))


def harmonic_mean(x: ArrayLike) -> float:
    arr = check_sample(x, "harmonic_mean", min_samples=1)
    _require_positive(arr, "harmonic_mean")
    return len(arr) / compensated_sum(1.0 / arr)


def root_mean_square(x: ArrayLike) -> float:
    arr = check_sample(x, "root_mean_square", min_samples=1)
    return math.sqrt(compensated_sum(arr * arr) / len(arr))


def coefficient_of_variation(x: ArrayLike) -> float:
    """Sample standard deviation divided by the mean."""
    arr = check_sample(x, "coefficient_of_variation", min_samples=2)
    return sample_standard_deviation(arr) / mean(arr)


def standard_error(x: ArrayLike) -> float:
    """Standard error of the mean, s / sqrt(n)."""
    arr = check_sample(x, "standard_error", min_samples=2)
    return sample_standard_deviation(arr) / math.sqrt(len(arr))


def z_score(x: float, mean: float, standard_deviation: float) -> float:
    return (x - mean) / standard_deviation


# Running-mean helpers

def add_to_mean(mean: float, n: int, new_value: float) -> float:
    """Mean of n values after appending new_value."""
    return mean + (new_value - mean) / (n + 1)


def subtract_from_mean(mean: float, n: int, value: float) -> float:
    """Mean of n values after removing value."""
    return (mean * n - value) / (n - 1)


def combine_means(mean1: float, n1: int, mean2: float, n2: int) -> float:
    return (mean1 * n1 + mean2 * n2) / (n1 + n2)


def combine_variances(
    variance1: float, mean1: float, n1: int,
    variance2: float, mean2: float, n2: int,
) -> float:
    """Population variance of the union of two samples given their summaries."""
    new_mean = combine_means(mean1, n1, mean2, n2)
    return (
        n1 * (variance1 + (mean1 - new_mean) ** 2)
        + n2 * (variance2 + (mean2 - new_mean) ** 2)
    ) / (n1 + n2)
