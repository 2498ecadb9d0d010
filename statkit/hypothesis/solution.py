"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams]. Its summary() follows the layout of
R's print.htest; goodness-of-fit results add a critical-value verdict line
in place of a p-value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from statkit.core.result import Result
from statkit.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from statkit.hypothesis.design import HypothesisDesign

_RELATIONS = {
    'two-sided': "is not equal to",
    'less': "is less than",
    'greater': "is greater than",
}


@dataclass
class HTestSolution:
    """
    Outcome of a hypothesis test.

    The common fields (statistic, parameter, p_value, conf_int, estimate,
    null_value, alternative, method, data_name) are properties. Outputs
    that only some tests produce are in `extras`; the goodness-of-fit ones
    also have their own properties.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    def _extra(self, key: str) -> Any:
        extras = self._result.params.extras
        return extras.get(key) if extras else None

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Short name of the statistic, e.g. 't', 'D' or 'W'."""
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Parameters of the reference distribution, e.g. {'df': 9}."""
        return self._result.params.parameter

    @property
    def df(self) -> float | None:
        parameter = self._result.params.parameter
        return parameter.get('df') if parameter else None

    @property
    def p_value(self) -> float | None:
        """p-value, or None for tests decided against a critical value."""
        return self._result.params.p_value

    def significant(self, alpha: float = 0.05) -> bool:
        """
        True if the null hypothesis is rejected at level ``alpha``.

        Table-decided tests ignore ``alpha`` and report the decision made at
        their own significance level.
        """
        p = self._result.params.p_value
        if p is None:
            return bool(self._extra('reject'))
        return p < alpha

    @property
    def conf_int(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def estimate(self) -> dict[str, float] | None:
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float] | None:
        return self._result.params.null_value

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

    # goodness of fit

    @property
    def reject(self) -> bool | None:
        return self._extra('reject')

    @property
    def critical_value(self) -> float | None:
        return self._extra('critical_value')

    @property
    def observed(self) -> NDArray | None:
        """Observed class counts after small classes were merged."""
        return self._extra('observed')

    @property
    def expected(self) -> NDArray | None:
        """Expected class counts after small classes were merged."""
        return self._extra('expected')

    # metadata

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """
        Text report in the layout of R's print.htest.

        Example:
            Two Sample t-test

        data:  x and y
        t = -2.1909, df = 6, p-value = 0.07106
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         -4.233709  0.2337090
        sample estimates:
             mean of x      mean of y
                   2.5            4.5
        """
        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}", _statistic_line(p)]

        if p.extras and 'reject' in p.extras:
            verdict = "rejected" if p.extras['reject'] else "not rejected"
            lines.append(
                f"critical value = {p.extras['critical_value']:g} at significance "
                f"{p.extras['significance']:g}: null hypothesis {verdict}"
            )

        if p.null_value:
            name, value = next(iter(p.null_value.items()))
            lines.append(
                f"alternative hypothesis: true {name} "
                f"{_RELATIONS[p.alternative]} {value:g}"
            )

        if p.conf_int is not None:
            lo, hi = p.conf_int
            lines.append(f"{round(p.conf_level * 100):d} percent confidence interval:")
            lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        if p.estimate is not None:
            lines.append("sample estimates:")
            lines.append(" ".join(f"{name:>14s}" for name in p.estimate))
            lines.append(" ".join(f"{value:14.7g}" for value in p.estimate.values()))

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        if p.p_value is None:
            outcome = f"reject={self.reject}"
        else:
            outcome = f"p_value={p.p_value:.4g}"
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, {outcome})"
        )


def _statistic_line(p: HTestParams) -> str:
    """'t = 2.2345, df = 17.43, p-value = 0.03891'"""
    parts = []
    if p.statistic is not None:
        parts.append(f"{p.statistic_name} = {p.statistic:.5g}")
    for name, value in (p.parameter or {}).items():
        parts.append(f"{name} = {value:.5g}")
    if p.p_value is not None:
        parts.append(f"p-value = {_format_pvalue(p.p_value)}")
    return ", ".join(parts)


def _format_pvalue(p: float) -> str:
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
