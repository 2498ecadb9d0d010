"""
ANOVA design object.

Wraps validated data and metadata for one-way ANOVA.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from statkit.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)
from statkit.core.exceptions import ValidationError
from statkit.anova.factor import Factor


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for ANOVA.

    Created via factory methods, not directly.
    """
    y: NDArray[np.floating[Any]]
    factor: Factor
    n: int

    @staticmethod
    def for_oneway(y: Any, group: Any) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA.

        Args:
            y: Response variable (1D numeric)
            group: Group labels (1D, same length as y) or a Factor

        Returns:
            AnovaDesign for one-way ANOVA
        """
        y_arr = check_array(y, "y")
        check_finite(y_arr, "y")
        check_1d(y_arr, "y")
        check_min_samples(y_arr, 2, "anova_oneway")

        if group is None:
            raise ValidationError("group: labels are required for anova_oneway")
        factor = group if isinstance(group, Factor) else Factor(group)
        check_consistent_length(y_arr, factor.codes, names=("y", "group"))

        if factor.n_groups < 2:
            raise ValidationError(
                f"group: need at least 2 groups, got {factor.n_groups}"
            )
        if factor.n_groups >= len(y_arr):
            raise ValidationError(
                f"group: {factor.n_groups} groups leave no residual degrees of "
                f"freedom for {len(y_arr)} observations"
            )

        y_arr = y_arr.copy()
        y_arr.setflags(write=False)
        return AnovaDesign(y=y_arr, factor=factor, n=len(y_arr))
