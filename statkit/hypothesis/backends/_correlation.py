"""
Pearson correlation test.

t = r * sqrt((n - 2) / (1 - r^2)) on n - 2 degrees of freedom. A perfect
correlation gives an infinite t and a p-value of 0.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from statkit.descriptive import sample_correlation
from statkit.hypothesis._common import HTestParams
from statkit.hypothesis.backends._t_test import t_pvalue

if TYPE_CHECKING:
    from statkit.hypothesis.design import HypothesisDesign


def pearson_correlation(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    x = design.x
    y = design.y
    warnings_list: list[str] = []

    n = len(x)
    df = float(n - 2)

    if x.min() == x.max() or y.min() == y.max():
        warnings_list.append("the standard deviation is zero")
        r = math.nan
        t_stat = math.nan
        p_value = math.nan
    else:
        r = sample_correlation(x, y)
        # rounding can push |r| a hair past 1
        r = max(-1.0, min(1.0, r))
        if abs(r) == 1.0:
            t_stat = math.copysign(math.inf, r)
        else:
            t_stat = r * math.sqrt(df / (1 - r * r))
        p_value = t_pvalue(t_stat, df, design.alternative)

    return HTestParams(
        statistic=t_stat,
        statistic_name="t",
        parameter={"df": df},
        p_value=p_value,
        conf_int=None,
        conf_level=0.95,
        estimate={"cor": r},
        null_value={"correlation": 0.0},
        alternative=design.alternative,
        method="Pearson's product-moment correlation",
        data_name=design.data_name,
    ), warnings_list
