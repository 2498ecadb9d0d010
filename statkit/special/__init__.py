"""
Special functions.

    factorial, gamma, gammaln
    beta, log_beta, incomplete_beta, regularized_incomplete_beta
    erf, inverse_erf, probit, logit

Undefined points return NaN rather than raising (gamma at 0, -1, -2, ...).
"""

from statkit.special._gamma import factorial, gamma, gammaln
from statkit.special._beta import (
    beta,
    log_beta,
    incomplete_beta,
    regularized_incomplete_beta,
)
from statkit.special._erf import erf, inverse_erf, probit, logit

__all__ = [
    "factorial",
    "gamma",
    "gammaln",
    "beta",
    "log_beta",
    "incomplete_beta",
    "regularized_incomplete_beta",
    "erf",
    "inverse_erf",
    "probit",
    "logit",
]
