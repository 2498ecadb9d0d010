"""
Solver entry point for describe().
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from statkit.descriptive.design import DescriptiveDesign
from statkit.descriptive.solution import DescriptiveSolution
from statkit.descriptive.backends.cpu import CPUDescriptiveBackend


def _ensure_design(data: ArrayLike | DescriptiveDesign) -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data)


def describe(data: ArrayLike | DescriptiveDesign) -> DescriptiveSolution:
    """
    Compute a descriptive summary of one sample.

    Computes: n, mean, population and sample variance / sd, skewness,
    excess kurtosis, and the five quantiles (0, 0.25, 0.5, 0.75, 1) under
    the package quantile rule.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        Finite, non-empty 1D sample.

    Returns
    -------
    DescriptiveSolution
    """
    design = _ensure_design(data)
    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)
