"""
Hypothesis testing module.

Public API:
    t_test(x, mu=0)                 - one-sample Student's t-test
    t_test(x, y, difference=0)      - pooled two-sample t-test
    t_statistic(x, mu)              - one-sample t statistic only
    correlation_test(x, y)          - Pearson correlation with t / df / p
    ks_test(x, y)                   - two-sample Kolmogorov-Smirnov test
    wilcoxon_rank_sum(x, y)         - Wilcoxon rank-sum test
    permutation_test(x, y)          - permutation test on mean difference
    chi_squared_goodness_of_fit(data, distribution, significance)
    shapiro_wilk(x)                 - Shapiro-Wilk normality test
    confidence_interval(x), confidence_upper(x), confidence_lower(x)
    sample_size(alpha, power, sd, effect), power(n, alpha, sd, effect)
"""

from statkit.hypothesis.solvers import (
    t_test,
    t_statistic,
    correlation_test,
    ks_test,
    wilcoxon_rank_sum,
    permutation_test,
    chi_squared_goodness_of_fit,
    shapiro_wilk,
)
from statkit.hypothesis.confidence import (
    confidence_interval,
    confidence_upper,
    confidence_lower,
    sample_size,
    power,
)
from statkit.hypothesis.design import HypothesisDesign
from statkit.hypothesis._common import HTestParams, VALID_ALTERNATIVES
from statkit.hypothesis.solution import HTestSolution

__all__ = [
    "t_test",
    "t_statistic",
    "correlation_test",
    "ks_test",
    "wilcoxon_rank_sum",
    "permutation_test",
    "chi_squared_goodness_of_fit",
    "shapiro_wilk",
    "confidence_interval",
    "confidence_upper",
    "confidence_lower",
    "sample_size",
    "power",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
    "VALID_ALTERNATIVES",
]
