"""
Wilcoxon rank-sum test.

The pooled sample is ranked 1..N with tied values sharing the average of
the ranks they span, so the ranks always sum to N(N + 1) / 2. The
statistic W is the rank sum of x. The p-value uses the normal
approximation with tie-corrected variance and no continuity correction.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
import numpy as np
from scipy.stats import rankdata

from statkit.distributions import StandardNormal
from statkit.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from statkit.hypothesis.design import HypothesisDesign


def wilcoxon_rank_sum(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    x = design.x
    y = design.y
    warnings_list: list[str] = []

    n, m = len(x), len(y)
    big_n = n + m
    ranks = rankdata(np.concatenate([x, y]), method='average')
    w = float(np.sum(ranks[:n]))

    _, tie_counts = np.unique(ranks, return_counts=True)
    has_ties = bool(np.any(tie_counts > 1))
    if has_ties:
        warnings_list.append("cannot compute exact p-value with ties")

    expected = n * (big_n + 1) / 2
    tie_term = float(np.sum(tie_counts ** 3 - tie_counts))
    variance = n * m / 12 * ((big_n + 1) - tie_term / (big_n * (big_n - 1))) if big_n > 1 else 0.0

    if variance <= 0:
        z = math.nan
        p_value = math.nan
    else:
        z = (w - expected) / math.sqrt(variance)
        normal = StandardNormal()
        if design.alternative == "two-sided":
            p_value = min(1.0, 2 * normal.sf(abs(z)))
        elif design.alternative == "less":
            p_value = normal.cdf(z)
        else:
            p_value = normal.sf(z)

    return HTestParams(
        statistic=w,
        statistic_name="W",
        parameter=None,
        p_value=p_value,
        conf_int=None,
        conf_level=0.95,
        estimate=None,
        null_value={"location shift": 0.0},
        alternative=design.alternative,
        method="Wilcoxon rank sum test with normal approximation",
        data_name=design.data_name,
        extras={"ranks": ranks, "z": z, "ties": has_ties},
    ), warnings_list
