"""
CPU backend for describe().

Computes every summary that the sample length allows in one pass over a
sorted copy; moments the sample is too short for are left as None and
noted in the result warnings.
"""

from __future__ import annotations

from statkit.core.result import Result
from statkit.core.compute.timing import Timer
from statkit.descriptive.design import DescriptiveDesign
from statkit.descriptive.solution import DescriptiveParams
from statkit.descriptive._moments import (
    mean, variance, sample_variance, sample_skewness, sample_kurtosis,
)
from statkit.descriptive._quantiles import quantile_sorted
from statkit.numeric import numeric_sort


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        timer = Timer()
        timer.start()

        data = design.data
        n = design.n
        warnings_list: list[str] = []

        with timer.section('moments'):
            m = mean(data)
            var = variance(data)
            s_var = sample_variance(data) if n >= 2 else None
            skew = sample_skewness(data) if n >= 3 else None
            kurt = sample_kurtosis(data) if n >= 4 else None

        if s_var is None:
            warnings_list.append("sample variance undefined for n < 2")
        if skew is None:
            warnings_list.append("skewness undefined for n < 3")
        if kurt is None:
            warnings_list.append("kurtosis undefined for n < 4")

        with timer.section('order_statistics'):
            ordered = numeric_sort(data)
            q = [quantile_sorted(ordered, p) for p in (0.0, 0.25, 0.5, 0.75, 1.0)]

        params = DescriptiveParams(
            n=n,
            mean=m,
            variance=var,
            sd=var ** 0.5,
            sample_variance=s_var,
            sample_sd=s_var ** 0.5 if s_var is not None else None,
            skewness=skew,
            kurtosis=kurt,
            minimum=q[0],
            first_quartile=q[1],
            median=q[2],
            third_quartile=q[3],
            maximum=q[4],
        )

        timer.stop()

        return Result(
            params=params,
            info={'name': design.name},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
