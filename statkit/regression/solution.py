"""
Regression solution types.

LinearRegressionParams is the immutable payload computed by the backend;
LinearRegressionSolution is the user-facing wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statkit.core.result import Result

if TYPE_CHECKING:
    from statkit.regression.design import RegressionDesign


@dataclass(frozen=True)
class LinearRegressionParams:
    """
    Parameter payload for simple linear regression.

    Inference fields are NaN when there are fewer than three points.
    """
    m: float
    b: float
    residual_std_error: float
    slope_se: float
    slope_t: float
    slope_p: float
    intercept_se: float
    intercept_t: float
    intercept_p: float
    r_squared: float
    df_residual: int
    rss: float
    tss: float


@dataclass
class LinearRegressionSolution:
    """
    User-facing simple linear regression results.

    ``m`` and ``b`` follow the y = m * x + b convention; ``slope`` and
    ``intercept`` are the same numbers under their long names.
    """
    _result: Result[LinearRegressionParams]
    _design: 'RegressionDesign'

    @property
    def m(self) -> float:
        return self._result.params.m

    @property
    def b(self) -> float:
        return self._result.params.b

    @property
    def slope(self) -> float:
        return self._result.params.m

    @property
    def intercept(self) -> float:
        return self._result.params.b

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, slope]"""
        return np.array([self.b, self.m])

    @property
    def residual_std_error(self) -> float:
        return self._result.params.residual_std_error

    @property
    def slope_se(self) -> float:
        return self._result.params.slope_se

    @property
    def slope_t(self) -> float:
        return self._result.params.slope_t

    @property
    def slope_p(self) -> float:
        return self._result.params.slope_p

    @property
    def intercept_se(self) -> float:
        return self._result.params.intercept_se

    @property
    def intercept_t(self) -> float:
        return self._result.params.intercept_t

    @property
    def intercept_p(self) -> float:
        return self._result.params.intercept_p

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self.m * self._design.x + self.b

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.y - self.fitted_values

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """Evaluate the fitted line at a scalar or an array of x values."""
        if np.ndim(x) == 0:
            return self.m * float(x) + self.b
        return self.m * np.asarray(x, dtype=np.float64) + self.b

    def line(self) -> Callable[[float], float]:
        """The fitted line as a plain function of x."""
        m, b = self.m, self.b
        return lambda x: m * x + b

    # --- Metadata ---

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
        """Generate R-style summary output."""
        lines = [
            "Simple Linear Regression",
            "=" * 60,
            f"Observations: {self.n}",
            f"R-squared: {_fmt(self.r_squared, '.6f')}",
            f"Residual Std. Error: {_fmt(self.residual_std_error, '.6f')} "
            f"on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'':<12} {'Estimate':>12} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 60,
        ]
        rows = (
            ("(Intercept)", self.b, self.intercept_se, self.intercept_t, self.intercept_p),
            ("x", self.m, self.slope_se, self.slope_t, self.slope_p),
        )
        for name, est, se, t, p in rows:
            lines.append(
                f"{name:<12} {est:12.6f} {_fmt(se, '12.6f')} "
                f"{_fmt(t, '10.3f')} {_fmt(p, '10.4g')}"
            )
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearRegressionSolution(n={self.n}, m={self.m:.6g}, "
            f"b={self.b:.6g}, r_squared={self.r_squared:.4f})"
        )


def _fmt(value: float, spec: str) -> str:
    if np.isnan(value):
        width = spec.split('.')[0]
        return f"{'NA':>{width}}" if width else "NA"
    return format(value, spec)
