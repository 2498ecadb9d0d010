"""
Regression Design.

Holds the validated (x, y) pairs of a simple linear regression. Points can
arrive as an (n, 2) array of [x, y] rows or as two separate samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)
from statkit.core.exceptions import DimensionError


@dataclass(frozen=True)
class RegressionDesign:
    """
    Simple linear regression data.

    Immutable after construction.

    Construction:
        RegressionDesign.from_points([[0, 1], [1, 3], [2, 5]])
        RegressionDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_points(cls, points: ArrayLike) -> RegressionDesign:
        """Build from a sequence of [x, y] pairs."""
        arr = check_array(points, 'points')
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(
                f"points: expected shape (n, 2), got {arr.shape}"
            )
        return cls._build(arr[:, 0], arr[:, 1])

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """Build directly from paired samples."""
        return cls._build(check_array(x, 'x'), check_array(y, 'y'))

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> RegressionDesign:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_finite(x, 'x')
        check_finite(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_min_samples(x, 1, 'linear_regression')

        x = x.copy()
        y = y.copy()
        x.setflags(write=False)
        y.setflags(write=False)
        return cls(_x=x, _y=y, _n=len(x))

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def points(self) -> NDArray[np.floating[Any]]:
        """(n, 2) array of [x, y] rows."""
        return np.column_stack([self._x, self._y])
