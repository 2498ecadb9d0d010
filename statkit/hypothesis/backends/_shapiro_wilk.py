"""
Shapiro-Wilk normality test (Royston's approximation).

Coefficients come from the normal scores m_i = Phi^-1((i - 3/8) / (n + 1/4))
with the outermost one (n <= 5) or two (n > 5) replaced by polynomial
corrections in u = 1 / sqrt(n). W is transformed to an approximately
normal variable with one set of fitted constants for n < 12 and another
for n >= 12. The constants are empirical fits and must not be altered.
"""

from __future__ import annotations

import math
import warnings
from typing import TYPE_CHECKING
import numpy as np

from statkit.distributions import StandardNormal
from statkit.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from statkit.hypothesis.design import HypothesisDesign

# Approximation calibrated for 3 <= n <= 5000
_MAX_CALIBRATED_N = 5000

_C1 = (-2.706056, 4.434685, -2.071190, -0.147981, 0.221157)
_C2 = (-3.582633, 5.682633, -1.752461, -0.293762, 0.042981)


def _poly(coefficients: tuple[float, ...], u: float) -> float:
    value = 0.0
    for c in coefficients:
        value = (value + c) * u
    return value


def _coefficients(n: int) -> np.ndarray:
    if n == 3:
        return np.array([-math.sqrt(0.5), 0.0, math.sqrt(0.5)])

    normal = StandardNormal()
    m = np.array([normal.ppf((i - 0.375) / (n + 0.25)) for i in range(1, n + 1)])

    md = float(np.dot(m, m))
    c = m / math.sqrt(md)
    u = 1 / math.sqrt(n)

    an = _poly(_C1, u) + c[n - 1]
    a = np.empty(n)
    if n > 5:
        ann = _poly(_C2, u) + c[n - 2]
        phi = (md - 2 * m[n - 1] ** 2 - 2 * m[n - 2] ** 2) / (1 - 2 * an ** 2 - 2 * ann ** 2)
        a[2:n - 2] = m[2:n - 2] / math.sqrt(phi)
        a[0], a[1], a[n - 2], a[n - 1] = -an, -ann, ann, an
    else:
        phi = (md - 2 * m[n - 1] ** 2) / (1 - 2 * an ** 2)
        a[1:n - 1] = m[1:n - 1] / math.sqrt(phi)
        a[0], a[n - 1] = -an, an
    return a


def _p_value(w: float, n: int) -> float:
    if n == 3:
        # exact for n = 3
        return max(0.0, 6 / math.pi * (math.asin(math.sqrt(w)) - math.asin(math.sqrt(0.75))))

    y = math.log(1 - w) if w < 1 else -math.inf
    if n < 12:
        gamma = 0.459 * n - 2.273
        if y >= gamma:
            return 0.0
        g = -math.log(gamma - y)
        mu = -0.0006714 * n ** 3 + 0.025054 * n ** 2 - 0.39978 * n + 0.5440
        sigma = math.exp(-0.0020322 * n ** 3 + 0.062767 * n ** 2 - 0.77857 * n + 1.3822)
    else:
        u = math.log(n)
        g = y
        mu = 0.0038915 * u ** 3 - 0.083751 * u ** 2 - 0.31082 * u - 1.5851
        sigma = math.exp(0.0030302 * u ** 2 - 0.082676 * u - 0.4803)

    if math.isinf(g):
        return 1.0 if g < 0 else 0.0
    return StandardNormal().sf((g - mu) / sigma)


def shapiro_wilk(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    x = np.sort(design.x)
    n = len(x)
    warnings_list: list[str] = []

    if n > _MAX_CALIBRATED_N:
        message = f"p-value may be inaccurate for n > {_MAX_CALIBRATED_N} (n = {n})"
        warnings_list.append(message)
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    a = _coefficients(n)
    ss = float(np.sum((x - x.mean()) ** 2))
    w = min(1.0, float(np.dot(a, x)) ** 2 / ss)
    if n == 3:
        w = max(w, 0.75)

    return HTestParams(
        statistic=w,
        statistic_name="W",
        parameter=None,
        p_value=_p_value(w, n),
        conf_int=None,
        conf_level=0.95,
        estimate=None,
        null_value=None,
        alternative="two-sided",
        method="Shapiro-Wilk normality test",
        data_name=design.data_name,
    ), warnings_list
