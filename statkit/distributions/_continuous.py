"""
Continuous distributions: Normal, Student-t, F and Kolmogorov.

Each distribution is a frozen value object holding only its parameters.
Scalar queries are ``pdf``, ``cdf``, ``sf`` and ``ppf``; the ``*_array``
variants take any array-like and return a float64 array of the same shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.compute.tolerances import SERIES_TOLERANCE, ROOT_TOLERANCE
from statkit.core.exceptions import ConvergenceError, ValidationError
from statkit.numeric import bisect
from statkit.special import erf, gammaln, log_beta, regularized_incomplete_beta

# Acklam's rational approximation to the standard normal quantile
_A = (-3.969683028665376e+01, 2.209460984245205e+02, -2.759285104469687e+02,
      1.383577518672690e+02, -3.066479806614716e+01, 2.506628277459239e+00)
_B = (-5.447609879822406e+01, 1.615858368580409e+02, -1.556989798598866e+02,
      6.680131188771972e+01, -1.328068155288572e+01)
_C = (-7.784894002430293e-03, -3.223964580411365e-01, -2.400758277161838e+00,
      -2.549732539343734e+00, 4.374664141464968e+00, 2.938163982698783e+00)
_D = (7.784695709041462e-03, 3.224671290700398e-01, 2.445134137142996e+00,
      3.754408661907416e+00)
_P_LOW = 0.02425
_P_HIGH = 1 - _P_LOW

# Each expansion doubles the bracket width
_MAX_BRACKET_EXPANSIONS = 64


def _horner(coefficients: tuple[float, ...], x: float) -> float:
    value = 0.0
    for c in coefficients:
        value = value * x + c
    return value


def _standard_normal_ppf(p: float) -> float:
    if p < _P_LOW:
        q = math.sqrt(-2 * math.log(p))
        return _horner(_C, q) / (_horner(_D, q) * q + 1)
    if p <= _P_HIGH:
        q = p - 0.5
        r = q * q
        return _horner(_A, r) * q / (_horner(_B, r) * r + 1)
    q = math.sqrt(-2 * math.log(1 - p))
    return -_horner(_C, q) / (_horner(_D, q) * q + 1)


def _check_quantile_arg(p: float) -> float:
    if not 0.0 <= p <= 1.0:
        raise ValidationError(f"probability must be in [0, 1], got {p}")
    return float(p)


def _invert_cdf(
    cdf: Callable[[float], float],
    p: float,
    lower: float,
    upper: float,
    *,
    expand_lower: bool = True,
) -> float:
    """Solve cdf(x) = p by bisection, widening [lower, upper] until it brackets p."""
    for _ in range(_MAX_BRACKET_EXPANSIONS):
        below = expand_lower and cdf(lower) > p
        above = cdf(upper) < p
        if not (below or above):
            return bisect(lambda x: cdf(x) - p, lower, upper, tolerance=ROOT_TOLERANCE)
        width = upper - lower
        if below:
            lower -= width
        if above:
            upper += width
    raise ConvergenceError(
        f"could not bracket the quantile for p={p}",
        iterations=_MAX_BRACKET_EXPANSIONS,
        reason='bracket',
    )


class _Vectorized:
    """Array entry points built on the scalar methods."""

    @staticmethod
    def _apply(func: Callable[[float], float], x: ArrayLike) -> NDArray[np.floating[Any]]:
        arr = np.asarray(x, dtype=np.float64)
        out = np.array([func(float(v)) for v in arr.ravel()], dtype=np.float64)
        return out.reshape(arr.shape)

    def pdf_array(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Density at every element of x."""
        return self._apply(self.pdf, x)

    def cdf_array(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Cumulative probability at every element of x."""
        return self._apply(self.cdf, x)

    def sf_array(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """Upper-tail probability at every element of x."""
        return self._apply(self.sf, x)

    def ppf_array(self, p: ArrayLike) -> NDArray[np.floating[Any]]:
        """Quantile for every probability in p."""
        return self._apply(self.ppf, p)


@dataclass(frozen=True)
class Normal(_Vectorized):
    """
    Normal distribution parameterised by mean and variance.

    Examples:
        >>> Normal(0, 1).cdf(1.96)  # doctest: +ELLIPSIS
        0.97500...
        >>> Normal(10, 4).ppf(0.5)
        10.0
    """
    mean: float = 0.0
    variance: float = 1.0

    def __post_init__(self) -> None:
        if not self.variance > 0:
            raise ValidationError(f"variance must be positive, got {self.variance}")

    @property
    def sd(self) -> float:
        return math.sqrt(self.variance)

    def pdf(self, x: float) -> float:
        return (
            math.exp(-((x - self.mean) ** 2) / (2 * self.variance))
            / (self.sd * math.sqrt(2 * math.pi))
        )

    def cdf(self, x: float) -> float:
        return 0.5 * (1 + erf((x - self.mean) / (self.sd * math.sqrt(2))))

    def sf(self, x: float) -> float:
        return 0.5 * (1 - erf((x - self.mean) / (self.sd * math.sqrt(2))))

    def ppf(self, p: float) -> float:
        """
        Quantile function (Acklam's algorithm, relative error < 1.2e-9).

        Returns -inf at p = 0 and +inf at p = 1.
        """
        p = _check_quantile_arg(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return _standard_normal_ppf(p) * self.sd + self.mean


class StandardNormal(Normal):
    """Normal distribution with mean 0 and variance 1."""

    def __init__(self) -> None:
        super().__init__(0.0, 1.0)


@dataclass(frozen=True)
class StudentT(_Vectorized):
    """Student's t distribution with ``df`` degrees of freedom."""
    df: float

    def __post_init__(self) -> None:
        if not self.df > 0:
            raise ValidationError(f"df must be positive, got {self.df}")

    def pdf(self, x: float) -> float:
        df = self.df
        log_norm = gammaln((df + 1) / 2) - gammaln(df / 2) - 0.5 * math.log(df * math.pi)
        return math.exp(log_norm - (df + 1) / 2 * math.log1p(x * x / df))

    def _tail(self, x: float) -> float:
        # P(T > |x|)
        df = self.df
        return 0.5 * regularized_incomplete_beta(df / (x * x + df), df / 2, 0.5)

    def cdf(self, x: float) -> float:
        if math.isinf(x):
            return 0.0 if x < 0 else 1.0
        if x < 0:
            return self._tail(x)
        return 1 - self._tail(x)

    def sf(self, x: float) -> float:
        if math.isinf(x):
            return 1.0 if x < 0 else 0.0
        if x > 0:
            return self._tail(x)
        return 1 - self._tail(x)

    def ppf(self, p: float) -> float:
        """Quantile by bisection, starting from the bracket [-10.1, 10]."""
        p = _check_quantile_arg(p)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return _invert_cdf(self.cdf, p, -10.1, 10.0)


@dataclass(frozen=True)
class FDistribution(_Vectorized):
    """F distribution with numerator ``df1`` and denominator ``df2``."""
    df1: float
    df2: float

    def __post_init__(self) -> None:
        if not (self.df1 > 0 and self.df2 > 0):
            raise ValidationError(
                f"df1 and df2 must be positive, got df1={self.df1}, df2={self.df2}"
            )

    def pdf(self, x: float) -> float:
        if x <= 0:
            return 0.0
        d1, d2 = self.df1, self.df2
        log_density = (
            0.5 * (d1 * math.log(d1 * x) + d2 * math.log(d2)
                   - (d1 + d2) * math.log(d1 * x + d2))
            - math.log(x) - log_beta(d1 / 2, d2 / 2)
        )
        return math.exp(log_density)

    def cdf(self, x: float) -> float:
        if x <= 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        d1, d2 = self.df1, self.df2
        return regularized_incomplete_beta(d1 * x / (d1 * x + d2), d1 / 2, d2 / 2)

    def sf(self, x: float) -> float:
        if x <= 0:
            return 1.0
        if math.isinf(x):
            return 0.0
        d1, d2 = self.df1, self.df2
        return regularized_incomplete_beta(d2 / (d1 * x + d2), d2 / 2, d1 / 2)

    def ppf(self, p: float) -> float:
        p = _check_quantile_arg(p)
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return math.inf
        return _invert_cdf(self.cdf, p, 0.0, 10.0, expand_lower=False)


@dataclass(frozen=True)
class Kolmogorov(_Vectorized):
    """
    Limiting distribution of sqrt(n) * D for the Kolmogorov-Smirnov statistic.

    cdf(x) = sqrt(2 pi) / x * sum_k exp(-(2k - 1)^2 pi^2 / (8 x^2)),
    summed until a term drops to SERIES_TOLERANCE.
    """

    def pdf(self, x: float) -> float:
        if x <= 0 or math.isinf(x):
            return 0.0
        total = 0.0
        k = 1
        while True:
            c = (2 * k - 1) ** 2 * math.pi ** 2 / 8
            term = math.exp(-c / (x * x))
            total += term * (2 * c / x ** 4 - 1 / (x * x))
            k += 1
            if term <= SERIES_TOLERANCE:
                break
        return math.sqrt(2 * math.pi) * total

    def cdf(self, x: float) -> float:
        if x <= 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        total = 0.0
        k = 1
        while True:
            term = math.exp(-((2 * k - 1) ** 2) * math.pi ** 2 / (8 * x * x))
            total += term
            k += 1
            if abs(term) <= SERIES_TOLERANCE:
                break
        return min(1.0, math.sqrt(2 * math.pi) * total / x)

    def sf(self, x: float) -> float:
        return 1.0 - self.cdf(x)

    def ppf(self, p: float) -> float:
        """Quantile by bisection, starting from the bracket [0, 1]."""
        p = _check_quantile_arg(p)
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return math.inf
        return _invert_cdf(self.cdf, p, 0.0, 1.0, expand_lower=False)
