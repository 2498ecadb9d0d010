"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from statkit.core.result import Result

if TYPE_CHECKING:
    from statkit.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    Moments that the sample is too short for are None (sample variance
    needs two points, skewness three, kurtosis four).
    """
    n: int
    mean: float
    variance: float
    sd: float
    sample_variance: float | None
    sample_sd: float | None
    skewness: float | None
    kurtosis: float | None
    minimum: float
    first_quartile: float
    median: float
    third_quartile: float
    maximum: float


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Population variance (divisor n)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Population standard deviation."""
        return self._result.params.sd

    @property
    def sample_variance(self) -> float | None:
        """Bessel-corrected variance, None when n < 2."""
        return self._result.params.sample_variance

    @property
    def sample_sd(self) -> float | None:
        return self._result.params.sample_sd

    @property
    def skewness(self) -> float | None:
        """Adjusted Fisher-Pearson skewness, None when n < 3."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float | None:
        """Bias-corrected excess kurtosis, None when n < 4."""
        return self._result.params.kurtosis

    @property
    def min(self) -> float:
        return self._result.params.minimum

    @property
    def first_quartile(self) -> float:
        return self._result.params.first_quartile

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def third_quartile(self) -> float:
        return self._result.params.third_quartile

    @property
    def max(self) -> float:
        return self._result.params.maximum

    @property
    def info(self) -> dict:
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
        """R-style six-number summary followed by the moments."""
        params = self._result.params
        labels = ["Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max."]
        values = [
            params.minimum, params.first_quartile, params.median,
            params.mean, params.third_quartile, params.maximum,
        ]
        cells = [f"{v:.6f}" for v in values]
        widths = [max(len(lbl), len(c)) for lbl, c in zip(labels, cells)]

        lines = [
            "  ".join(lbl.rjust(w) for lbl, w in zip(labels, widths)),
            "  ".join(c.rjust(w) for c, w in zip(cells, widths)),
            "",
            f"n = {params.n}, sd = {params.sd:.6f}, var = {params.variance:.6f}",
        ]
        extras = []
        if params.sample_sd is not None:
            extras.append(f"sample sd = {params.sample_sd:.6f}")
        if params.skewness is not None:
            extras.append(f"skewness = {params.skewness:.6f}")
        if params.kurtosis is not None:
            extras.append(f"kurtosis = {params.kurtosis:.6f}")
        if extras:
            lines.append(", ".join(extras))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, "
            f"sd={self.sd:.6g})"
        )
