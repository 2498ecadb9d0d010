"""
Chi-squared goodness-of-fit against a one-parameter discrete distribution.

The distribution is fitted by passing the sample mean to the supplied
mass-array generator, which costs one degree of freedom on top of the
usual one. Working down from the highest class, any class expecting
fewer than three observations is merged into the class below it; class
0 is never merged away. The statistic is compared with the tabulated
critical value, so the result is a reject decision rather than a
p-value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from statkit.core.exceptions import ValidationError
from statkit.descriptive import mean
from statkit.distributions import chi_squared_critical_value
from statkit.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from statkit.hypothesis.design import HypothesisDesign

# Parameters estimated from the data (the distribution's mean)
_ESTIMATED_PARAMETERS = 1
_MIN_EXPECTED = 3


def chi_squared_gof(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    data = design.x
    n = len(data)
    warnings_list: list[str] = []

    sample_mean = mean(data)
    masses = np.asarray(design.distribution(sample_mean), dtype=np.float64)
    if masses.ndim != 1:
        raise ValidationError(
            f"distribution must return a 1D mass array, got shape {masses.shape}"
        )

    observed = np.bincount(data.astype(np.int64)).astype(np.float64)
    expected = np.zeros_like(observed)
    covered = min(len(masses), len(observed))
    expected[:covered] = masses[:covered] * n

    observed_list = observed.tolist()
    expected_list = expected.tolist()
    merged: list[int] = []
    for k in range(len(expected_list) - 1, 0, -1):
        if expected_list[k] < _MIN_EXPECTED:
            expected_list[k - 1] += expected_list.pop(k)
            observed_list[k - 1] += observed_list.pop(k)
            merged.append(k)
    if merged:
        warnings_list.append(
            f"merged {len(merged)} class(es) with expected count below {_MIN_EXPECTED}"
        )

    observed = np.array(observed_list)
    expected = np.array(expected_list)
    if np.any(expected == 0):
        raise ValidationError(
            "distribution assigns zero probability to an observed class"
        )
    statistic = float(np.sum((observed - expected) ** 2 / expected))

    df = len(observed) - _ESTIMATED_PARAMETERS - 1
    critical = chi_squared_critical_value(df, design.significance)
    reject = critical < statistic

    return HTestParams(
        statistic=statistic,
        statistic_name="X-squared",
        parameter={"df": float(df)},
        p_value=None,
        conf_int=None,
        conf_level=1.0 - design.significance,
        estimate={"mean": sample_mean},
        null_value=None,
        alternative="two-sided",
        method="Chi-squared goodness-of-fit test",
        data_name=design.data_name,
        extras={
            "reject": reject,
            "critical_value": critical,
            "significance": design.significance,
            "observed": observed,
            "expected": expected,
            "merged_classes": tuple(sorted(merged)),
        },
    ), warnings_list
