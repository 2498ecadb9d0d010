"""
Discrete probability-mass arrays.

Binomial and Poisson masses are generated cell by cell with a running
coefficient update (kept in log space so neither the coefficient nor the
power overflows) until the accumulated probability reaches 1 - EPSILON.
The far tail beyond that point is dropped.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from statkit.core.compute.tolerances import EPSILON
from statkit.core.exceptions import ValidationError
from statkit.core.validation import check_positive_integer, check_probability


def bernoulli_distribution(p: float) -> NDArray[np.floating[Any]]:
    """[P(X = 0), P(X = 1)] for success probability p."""
    p = check_probability(p, "p")
    return np.array([1 - p, p], dtype=np.float64)


def binomial_distribution(trials: int, p: float) -> NDArray[np.floating[Any]]:
    """
    Binomial masses P(X = 0), P(X = 1), ... truncated at 1 - EPSILON.

    Raises:
        ValidationError: If trials is not a positive integer or p is
            outside [0, 1]
    """
    trials = check_positive_integer(trials, "trials")
    p = check_probability(p, "p")

    if p == 0.0:
        return np.array([1.0])
    if p == 1.0:
        cells = np.zeros(trials + 1)
        cells[-1] = 1.0
        return cells

    log_p = math.log(p)
    log_q = math.log1p(-p)
    log_coefficient = 0.0
    cells = []
    cumulative = 0.0
    x = 0
    while cumulative < 1 - EPSILON and x <= trials:
        cell = math.exp(log_coefficient + x * log_p + (trials - x) * log_q)
        cells.append(cell)
        cumulative += cell
        x += 1
        if x <= trials:
            log_coefficient += math.log(trials - x + 1) - math.log(x)

    return np.array(cells, dtype=np.float64)


def poisson_distribution(lam: float) -> NDArray[np.floating[Any]]:
    """
    Poisson masses P(X = 0), P(X = 1), ... truncated at 1 - EPSILON.

    Raises:
        ValidationError: If lam is not positive
    """
    if isinstance(lam, bool) or not (isinstance(lam, (int, float, np.number)) and lam > 0):
        raise ValidationError(f"lam must be a positive number, got {lam!r}")
    if not math.isfinite(lam):
        raise ValidationError(f"lam must be finite, got {lam}")

    log_lam = math.log(lam)
    log_factorial = 0.0
    cells = []
    cumulative = 0.0
    x = 0
    while cumulative < 1 - EPSILON:
        cell = math.exp(-lam + x * log_lam - log_factorial)
        cells.append(cell)
        cumulative += cell
        x += 1
        log_factorial += math.log(x)

    return np.array(cells, dtype=np.float64)
