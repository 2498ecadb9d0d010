"""
Common types for hypothesis testing.

Defines HTestParams, the payload every inferential procedure returns, and
the accepted alternative-hypothesis names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


VALID_ALTERNATIVES = ("two-sided", "less", "greater")


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Every test returns this same structure; test-specific outputs go in
    the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("t", "F", "W", "D", "X-squared", ...).
    parameter : dict or None
        Distribution parameters, e.g. {"df": 9} or {"num df": 2, "denom df": 12}.
    p_value : float or None
        p-value of the test. None for the table-based goodness-of-fit
        test, which reports a reject decision instead.
    conf_int : ndarray or None
        Confidence interval, shape (2,). None if not computed.
    conf_level : float
        Confidence level (e.g. 0.95).
    estimate : dict or None
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    null_value : dict or None
        Hypothesized value under H0, e.g. {"difference in means": 0}.
    alternative : str
        "two-sided", "less", or "greater".
    method : str
        Human-readable method name, e.g. "Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    extras : dict or None
        Test-specific additional outputs (e.g. observed/expected counts
        and the reject decision for goodness-of-fit).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float | None
    conf_int: NDArray[np.floating[Any]] | None
    conf_level: float
    estimate: dict[str, float] | None
    null_value: dict[str, float] | None
    alternative: str
    method: str
    data_name: str
    extras: dict[str, Any] | None = None
