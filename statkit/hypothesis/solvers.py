"""
Solver entry points for hypothesis tests.

Provides t_test(), t_statistic(), correlation_test(), ks_test(),
wilcoxon_rank_sum(), permutation_test(), chi_squared_goodness_of_fit()
and shapiro_wilk(). Each builds a HypothesisDesign (or accepts a pre-built
one), runs the CPU backend and wraps the result in an HTestSolution.
"""

from __future__ import annotations

from typing import Callable, Literal
from numpy.typing import ArrayLike

from statkit.core.random import RandomSource
from statkit.hypothesis.design import HypothesisDesign
from statkit.hypothesis.solution import HTestSolution
from statkit.hypothesis.backends.cpu import CPUHypothesisBackend


Alternative = Literal["two-sided", "less", "greater"]


def _run(design: HypothesisDesign) -> HTestSolution:
    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    mu: float = 0.0,
    difference: float | None = None,
    alternative: Alternative = "two-sided",
    conf_level: float = 0.95,
) -> HTestSolution:
    """
    Student's t-test.

    Parameters
    ----------
    x : array-like or HypothesisDesign
        Sample data, at least two values.
    y : array-like or None
        Optional second sample for the pooled two-sample test.
    mu : float
        Hypothesized mean (one-sample). Default 0.
    difference : float or None
        Hypothesized mean(x) - mean(y) for the two-sample test. Defaults
        to mu, so either keyword may be used.
    alternative : str
        "two-sided" (default), "less", or "greater".
    conf_level : float
        Confidence level for the interval. Default 0.95.

    Returns
    -------
    HTestSolution
        statistic (t), parameter {'df'}, p_value, conf_int, estimate and
        extras['se'].

    Examples
    --------
    >>> t_test([1, 2, 3, 4], [3, 4, 5, 6]).statistic  # doctest: +ELLIPSIS
    -2.19089...
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_test(
            x, y,
            mu=difference if difference is not None else mu,
            alternative=alternative,
            conf_level=conf_level,
        )
    return _run(design)


def t_statistic(x: ArrayLike, mu: float = 0.0) -> float:
    """One-sample t statistic (mean(x) - mu) / (s / sqrt(n)) without the p-value."""
    return t_test(x, mu=mu).statistic


def correlation_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative = "two-sided",
) -> HTestSolution:
    """
    Test for zero Pearson correlation in a paired sample.

    Returns
    -------
    HTestSolution
        statistic (t), parameter {'df': n - 2}, p_value and
        estimate {'cor': r}.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_correlation_test(x, y, alternative=alternative)
    return _run(design)


def ks_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
) -> HTestSolution:
    """
    Two-sample Kolmogorov-Smirnov test with the asymptotic p-value.

    Returns
    -------
    HTestSolution
        statistic (D), p_value and extras {'ks': sqrt(n_eff) * D, 'n_eff'}.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_ks_test(x, y)
    return _run(design)


def wilcoxon_rank_sum(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative = "two-sided",
) -> HTestSolution:
    """
    Wilcoxon rank-sum test.

    The statistic is the sum of the ranks of x in the pooled sample
    (ties averaged); the p-value uses the normal approximation.

    Examples
    --------
    >>> wilcoxon_rank_sum([1, 4, 8], [9, 12, 15]).statistic
    6.0
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_wilcoxon_rank_sum(x, y, alternative=alternative)
    return _run(design)


def permutation_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    alternative: Alternative = "two-sided",
    k: int = 10000,
    random_source: RandomSource = None,
) -> HTestSolution:
    """
    Permutation test for a difference in means.

    Parameters
    ----------
    x, y : array-like
        The two samples.
    alternative : str
        "two-sided" (default), "greater" or "less".
    k : int
        Number of permutations. Default 10000.
    random_source : int, numpy Generator, callable or None
        Source of uniform variates; pass a seed for reproducible results.

    Returns
    -------
    HTestSolution
        statistic (observed mean(x) - mean(y)), p_value and
        extras['null_distribution'].
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_permutation_test(
            x, y, alternative=alternative, k=k, random_source=random_source,
        )
    return _run(design)


def chi_squared_goodness_of_fit(
    data: ArrayLike | HypothesisDesign,
    distribution: Callable[[float], ArrayLike] | None = None,
    significance: float = 0.05,
) -> HTestSolution:
    """
    Chi-squared goodness-of-fit test against a fitted discrete distribution.

    Parameters
    ----------
    data : array-like
        Non-negative integer observations.
    distribution : callable
        Maps the sample mean to a probability-mass array, e.g.
        poisson_distribution.
    significance : float
        One of CHI_SQUARED_SIGNIFICANCE_LEVELS.

    Returns
    -------
    HTestSolution
        statistic (X-squared), parameter {'df'} and the decision in
        ``reject``. p_value is None.

    Raises
    ------
    TableLookupError
        If the degrees of freedom or significance is not tabulated.
    """
    if isinstance(data, HypothesisDesign):
        design = data
    else:
        design = HypothesisDesign.for_chi_squared_gof(data, distribution, significance)
    return _run(design)


def shapiro_wilk(x: ArrayLike | HypothesisDesign) -> HTestSolution:
    """
    Shapiro-Wilk test of normality.

    Returns
    -------
    HTestSolution
        statistic (W) and p_value. For n > 5000 a RuntimeWarning is
        issued since the approximation is not calibrated there.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_shapiro_wilk(x)
    return _run(design)
