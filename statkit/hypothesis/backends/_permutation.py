"""
Two-sample permutation test on the difference of means.

Each of the k rounds shuffles the pooled sample with the design's random
source and splits it at floor(N / 2). The p-value is the fraction of
rounds at least as extreme as the observed difference.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from statkit.descriptive import mean
from statkit.hypothesis._common import HTestParams
from statkit.numeric import shuffle_in_place

if TYPE_CHECKING:
    from statkit.hypothesis.design import HypothesisDesign


def permutation(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    x = design.x
    y = design.y
    k = design.k
    warnings_list: list[str] = []

    observed = mean(x) - mean(y)

    pooled = np.concatenate([x, y])
    mid = len(pooled) // 2
    if mid != len(x):
        warnings_list.append(
            f"unequal sample sizes: permuted groups have {mid} and "
            f"{len(pooled) - mid} values"
        )

    null_distribution = np.empty(k)
    for i in range(k):
        shuffle_in_place(pooled, design.uniform)
        null_distribution[i] = mean(pooled[:mid]) - mean(pooled[mid:])

    if design.alternative == "two-sided":
        extreme = np.abs(null_distribution) >= abs(observed)
    elif design.alternative == "greater":
        extreme = null_distribution >= observed
    else:
        extreme = null_distribution <= observed
    p_value = int(np.count_nonzero(extreme)) / k

    return HTestParams(
        statistic=observed,
        statistic_name="difference in means",
        parameter={"k": float(k)},
        p_value=p_value,
        conf_int=None,
        conf_level=0.95,
        estimate={"mean of x": mean(x), "mean of y": mean(y)},
        null_value={"difference in means": 0.0},
        alternative=design.alternative,
        method="Two-sample permutation test",
        data_name=design.data_name,
        extras={"null_distribution": null_distribution},
    ), warnings_list
