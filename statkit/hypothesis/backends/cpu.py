"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from statkit.core.result import Result
from statkit.core.compute.timing import Timer
from statkit.hypothesis._common import HTestParams
from statkit.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "t_one_sample":
                from statkit.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_type == "t_two_sample":
                from statkit.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "pearson_correlation":
                from statkit.hypothesis.backends._correlation import pearson_correlation
                params, warnings_list = pearson_correlation(design)
            elif test_type == "ks_two_sample":
                from statkit.hypothesis.backends._ks_test import ks_two_sample
                params, warnings_list = ks_two_sample(design)
            elif test_type == "wilcoxon_rank_sum":
                from statkit.hypothesis.backends._wilcox_test import wilcoxon_rank_sum
                params, warnings_list = wilcoxon_rank_sum(design)
            elif test_type == "permutation":
                from statkit.hypothesis.backends._permutation import permutation
                params, warnings_list = permutation(design)
            elif test_type == "chi_squared_gof":
                from statkit.hypothesis.backends._chisq_gof import chi_squared_gof
                params, warnings_list = chi_squared_gof(design)
            elif test_type == "shapiro_wilk":
                from statkit.hypothesis.backends._shapiro_wilk import shapiro_wilk
                params, warnings_list = shapiro_wilk(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
