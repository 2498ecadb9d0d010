"""
Probability distributions.

Continuous (frozen value objects with pdf / cdf / sf / ppf and *_array):
    Normal, StandardNormal, StudentT, FDistribution, Kolmogorov

Discrete probability-mass arrays:
    bernoulli_distribution, binomial_distribution, poisson_distribution

Lookup tables:
    CHI_SQUARED_TABLE, CHI_SQUARED_SIGNIFICANCE_LEVELS,
    chi_squared_critical_value, STANDARD_NORMAL_TABLE,
    cumulative_std_normal_probability, cumulative_std_logistic_probability
"""

from statkit.distributions._continuous import (
    Normal,
    StandardNormal,
    StudentT,
    FDistribution,
    Kolmogorov,
)
from statkit.distributions._discrete import (
    bernoulli_distribution,
    binomial_distribution,
    poisson_distribution,
)
from statkit.distributions._tables import (
    CHI_SQUARED_TABLE,
    CHI_SQUARED_SIGNIFICANCE_LEVELS,
    chi_squared_critical_value,
    STANDARD_NORMAL_TABLE,
    cumulative_std_normal_probability,
    cumulative_std_logistic_probability,
)

__all__ = [
    "Normal",
    "StandardNormal",
    "StudentT",
    "FDistribution",
    "Kolmogorov",
    "bernoulli_distribution",
    "binomial_distribution",
    "poisson_distribution",
    "CHI_SQUARED_TABLE",
    "CHI_SQUARED_SIGNIFICANCE_LEVELS",
    "chi_squared_critical_value",
    "STANDARD_NORMAL_TABLE",
    "cumulative_std_normal_probability",
    "cumulative_std_logistic_probability",
]
