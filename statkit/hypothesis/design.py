"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray, ArrayLike

from statkit.core.exceptions import ValidationError
from statkit.core.random import RandomSource, as_uniform
from statkit.core.validation import (
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_positive_integer,
    check_sample,
)
from statkit.hypothesis._common import VALID_ALTERNATIVES


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _validate_conf_level(conf_level: float) -> float:
    """Validate confidence level is in (0, 1)."""
    if not (0.0 < conf_level < 1.0):
        raise ValidationError(
            f"conf_level must be in (0, 1), got {conf_level}"
        )
    return conf_level


def _to_sample(x: ArrayLike, operation: str, name: str, min_samples: int) -> NDArray[np.floating[Any]]:
    """Convert to a finite 1D float64 array of at least min_samples values."""
    arr = check_sample(x, operation, min_samples=min_samples)
    check_finite(arr, name)
    return arr.copy()


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Numeric vectors
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Test configuration
    _mu: float = 0.0
    _alternative: str = "two-sided"
    _conf_level: float = 0.95

    # Permutation test
    _k: int = 10000
    _uniform: Callable[[], float] | None = None

    # Goodness of fit
    _distribution: Callable[[float], ArrayLike] | None = None
    _significance: float = 0.05

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def conf_level(self) -> float:
        return self._conf_level

    @property
    def k(self) -> int:
        return self._k

    @property
    def uniform(self) -> Callable[[], float] | None:
        """Zero-argument callable returning floats in [0, 1)."""
        return self._uniform

    @property
    def distribution(self) -> Callable[[float], ArrayLike] | None:
        return self._distribution

    @property
    def significance(self) -> float:
        return self._significance

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        mu: float = 0.0,
        alternative: str = "two-sided",
        conf_level: float = 0.95,
    ) -> HypothesisDesign:
        """
        Build design for t_test().

        With y the test is the pooled-variance two-sample test and mu is
        the hypothesized difference mean(x) - mean(y).
        """
        alternative = _validate_alternative(alternative)
        conf_level = _validate_conf_level(conf_level)

        x_arr = _to_sample(x, "t_test", "x", 2)
        if y is None:
            return cls(
                test_type="t_one_sample",
                _x=x_arr,
                _mu=float(mu),
                _alternative=alternative,
                _conf_level=conf_level,
                _data_name="x",
            )

        y_arr = _to_sample(y, "t_test", "y", 2)
        return cls(
            test_type="t_two_sample",
            _x=x_arr,
            _y=y_arr,
            _mu=float(mu),
            _alternative=alternative,
            _conf_level=conf_level,
            _data_name="x and y",
        )

    @classmethod
    def for_correlation_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: str = "two-sided",
    ) -> HypothesisDesign:
        """Build design for correlation_test(); x and y are paired."""
        alternative = _validate_alternative(alternative)
        x_arr = _to_sample(x, "correlation_test", "x", 0)
        y_arr = _to_sample(y, "correlation_test", "y", 0)
        check_consistent_length(x_arr, y_arr, names=("x", "y"))
        check_min_samples(x_arr, 3, "correlation_test")
        return cls(
            test_type="pearson_correlation",
            _x=x_arr,
            _y=y_arr,
            _alternative=alternative,
            _data_name="x and y",
        )

    @classmethod
    def for_ks_test(cls, x: ArrayLike, y: ArrayLike) -> HypothesisDesign:
        """Build design for the two-sample ks_test()."""
        return cls(
            test_type="ks_two_sample",
            _x=_to_sample(x, "ks_test", "x", 1),
            _y=_to_sample(y, "ks_test", "y", 1),
            _data_name="x and y",
        )

    @classmethod
    def for_wilcoxon_rank_sum(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: str = "two-sided",
    ) -> HypothesisDesign:
        """Build design for wilcoxon_rank_sum()."""
        alternative = _validate_alternative(alternative)
        return cls(
            test_type="wilcoxon_rank_sum",
            _x=_to_sample(x, "wilcoxon_rank_sum", "x", 1),
            _y=_to_sample(y, "wilcoxon_rank_sum", "y", 1),
            _alternative=alternative,
            _data_name="x and y",
        )

    @classmethod
    def for_permutation_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alternative: str = "two-sided",
        k: int = 10000,
        random_source: RandomSource = None,
    ) -> HypothesisDesign:
        """Build design for permutation_test()."""
        alternative = _validate_alternative(alternative)
        k = check_positive_integer(k, "k")
        return cls(
            test_type="permutation",
            _x=_to_sample(x, "permutation_test", "x", 1),
            _y=_to_sample(y, "permutation_test", "y", 1),
            _alternative=alternative,
            _k=k,
            _uniform=as_uniform(random_source),
            _data_name="x and y",
        )

    @classmethod
    def for_chi_squared_gof(
        cls,
        data: ArrayLike,
        distribution: Callable[[float], ArrayLike],
        significance: float,
    ) -> HypothesisDesign:
        """
        Build design for chi_squared_goodness_of_fit().

        data holds non-negative integer observations (class indices);
        distribution maps the sample mean to a probability-mass array,
        e.g. poisson_distribution.
        """
        if not callable(distribution):
            raise ValidationError(
                f"distribution must be callable, got {type(distribution).__name__}"
            )
        x_arr = _to_sample(data, "chi_squared_goodness_of_fit", "data", 1)
        if np.any(x_arr < 0) or np.any(x_arr != np.floor(x_arr)):
            raise ValidationError(
                "data: observations must be non-negative integers"
            )
        return cls(
            test_type="chi_squared_gof",
            _x=x_arr,
            _distribution=distribution,
            _significance=float(significance),
            _data_name="data",
        )

    @classmethod
    def for_shapiro_wilk(cls, x: ArrayLike) -> HypothesisDesign:
        """Build design for shapiro_wilk(); needs three non-identical values."""
        x_arr = _to_sample(x, "shapiro_wilk", "x", 3)
        if np.all(x_arr == x_arr[0]):
            raise ValidationError("x: all values are identical")
        return cls(
            test_type="shapiro_wilk",
            _x=x_arr,
            _data_name="x",
        )
