"""
ANOVA solvers.

Public API:
    anova_oneway(y, group) -> AnovaSolution
"""

from __future__ import annotations

from typing import Any

import numpy as np

from statkit.core.result import Result
from statkit.core.compute.timing import Timer
from statkit.anova._common import AnovaParams, AnovaTableRow
from statkit.anova.design import AnovaDesign
from statkit.anova.solution import AnovaSolution
from statkit.distributions import FDistribution


def anova_oneway(y: Any, group: Any = None) -> AnovaSolution:
    """
    One-way Analysis of Variance.

    Tests whether the means of two or more groups are equal.

    Args:
        y: Response variable (1D numeric array-like) or an AnovaDesign
        group: Group labels (1D array-like or Factor, same length as y)

    Returns:
        AnovaSolution with the ANOVA table, group means and eta^2

    Examples:
        >>> result = anova_oneway([1, 2, 3, 5, 6, 7], ['a', 'a', 'a', 'b', 'b', 'b'])
        >>> round(result.f_value, 4)
        24.0
    """
    design = y if isinstance(y, AnovaDesign) else AnovaDesign.for_oneway(y, group)
    y_arr = design.y
    factor = design.factor
    k = factor.n_groups

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('group_summaries'):
        means = np.empty(k)
        sizes = np.empty(k, dtype=np.intp)
        within = np.empty(k)
        for g in range(k):
            values = y_arr[factor.group(g)]
            sizes[g] = len(values)
            means[g] = values.mean()
            # (n_i - 1) * s_i^2, zero for a single observation
            within[g] = float(np.sum((values - means[g]) ** 2))
        grand_mean = float(y_arr.mean())

    singletons = [str(level) for level, n in zip(factor.levels, sizes) if n == 1]
    if singletons:
        warnings_list.append(
            f"groups with a single observation contribute no within-group "
            f"variation: {', '.join(singletons)}"
        )

    with timer.section('sums_of_squares'):
        group_df = k - 1
        group_ss = float(np.sum(sizes * (means - grand_mean) ** 2))
        group_ms = group_ss / group_df

        residual_df = design.n - k
        residual_ss = float(np.sum(within))
        residual_ms = residual_ss / residual_df

        if residual_ms > 0:
            f_value = group_ms / residual_ms
            p_value = FDistribution(group_df, residual_df).sf(abs(f_value))
        else:
            warnings_list.append(
                "residual sum of squares is zero; F statistic is not finite"
            )
            f_value = float('inf') if group_ms > 0 else float('nan')
            p_value = 0.0 if group_ms > 0 else float('nan')

    timer.stop()

    total_ss = group_ss + residual_ss
    rows = (
        AnovaTableRow('group', group_df, group_ss, group_ms, f_value, p_value),
        AnovaTableRow('Residuals', residual_df, residual_ss, residual_ms, None, None),
    )

    params = AnovaParams(
        table=rows,
        n_obs=design.n,
        n_groups=k,
        grand_mean=grand_mean,
        group_means={str(level): float(m) for level, m in zip(factor.levels, means)},
        group_sizes={str(level): int(n) for level, n in zip(factor.levels, sizes)},
        residual_df=residual_df,
        residual_ss=residual_ss,
        residual_ms=residual_ms,
        eta_squared=group_ss / total_ss if total_ss > 0 else 0.0,
    )

    result = Result(
        params=params,
        info={'design_type': 'oneway', 'levels': factor.levels},
        timing=timer.result(),
        backend_name='cpu_anova',
        warnings=tuple(warnings_list),
    )
    return AnovaSolution(_result=result)
