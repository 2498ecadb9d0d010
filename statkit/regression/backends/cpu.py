"""
CPU backend for simple linear regression.

Closed-form least squares from the centred sums of squares and
cross-products, with Student-t inference on both coefficients.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np

from statkit.core.result import Result
from statkit.core.compute.timing import Timer
from statkit.core.exceptions import NumericalError
from statkit.distributions import StudentT
from statkit.regression.design import RegressionDesign
from statkit.regression.solution import LinearRegressionParams


_NAN = float('nan')


def _t_and_p(estimate: float, se: float, df: int) -> tuple[float, float]:
    """t statistic and two-sided p-value for estimate / se."""
    if se == 0:
        if estimate == 0:
            return _NAN, _NAN
        return math.copysign(math.inf, estimate), 0.0
    t = estimate / se
    return t, min(1.0, 2.0 * StudentT(df).sf(abs(t)))


class CPULeastSquaresBackend:
    """
    Reference backend for y = m * x + b.

    Implements the Backend protocol for RegressionDesign ->
    LinearRegressionParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_least_squares'

    def solve(self, design: RegressionDesign) -> Result[LinearRegressionParams]:
        """
        Fit the line by least squares.

        Algorithm:
            1. Centre x and y and form ssxx, ssyy, ssxy
            2. m = ssxy / ssxx, b = mean(y) - m * mean(x)
            3. rse = sqrt(rss / (n - 2)); coefficient SEs, t and p from it

        Raises:
            NumericalError: If all x values are equal (vertical line)
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n
        warnings_list: list[str] = []

        if n == 1:
            # One point fixes no slope; use a horizontal line through it
            timer.stop()
            warnings_list.append("single point: slope set to 0")
            params = LinearRegressionParams(
                m=0.0, b=float(y[0]),
                residual_std_error=_NAN,
                slope_se=_NAN, slope_t=_NAN, slope_p=_NAN,
                intercept_se=_NAN, intercept_t=_NAN, intercept_p=_NAN,
                r_squared=1.0, df_residual=0, rss=0.0, tss=0.0,
            )
            return Result(
                params=params, info={'method': 'least_squares', 'n': n},
                timing=timer.result(), backend_name=self.name,
                warnings=tuple(warnings_list),
            )

        with timer.section('sums_of_squares'):
            mx = float(np.mean(x))
            my = float(np.mean(y))
            dx = x - mx
            dy = y - my
            ssxx = float(dx @ dx)
            ssyy = float(dy @ dy)
            ssxy = float(dx @ dy)

        if ssxx == 0:
            raise NumericalError(
                "linear_regression: all x values are equal, slope is undefined"
            )

        with timer.section('coefficients'):
            m = ssxy / ssxx
            b = my - m * mx
            residuals = y - (m * x + b)
            rss = float(residuals @ residuals)
            if ssyy == 0:
                r_squared = 1.0
            else:
                r_squared = ssxy * ssxy / (ssxx * ssyy)

        df = n - 2
        with timer.section('inference'):
            if df > 0:
                rse = math.sqrt(rss / df)
                slope_se = rse / math.sqrt(ssxx)
                intercept_se = rse * math.sqrt(float(x @ x) / (n * ssxx))
                slope_t, slope_p = _t_and_p(m, slope_se, df)
                intercept_t, intercept_p = _t_and_p(b, intercept_se, df)
            else:
                warnings_list.append(
                    "two points: no residual degrees of freedom, inference is undefined"
                )
                rse = slope_se = intercept_se = _NAN
                slope_t = slope_p = intercept_t = intercept_p = _NAN

        timer.stop()

        params = LinearRegressionParams(
            m=m,
            b=b,
            residual_std_error=rse,
            slope_se=slope_se,
            slope_t=slope_t,
            slope_p=slope_p,
            intercept_se=intercept_se,
            intercept_t=intercept_t,
            intercept_p=intercept_p,
            r_squared=r_squared,
            df_residual=df,
            rss=rss,
            tss=ssyy,
        )

        info: dict[str, Any] = {
            'method': 'least_squares',
            'n': n,
            'ssxx': ssxx,
            'ssxy': ssxy,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
