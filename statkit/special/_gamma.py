"""
Factorial, gamma and log-gamma.

gamma uses the g=7, n=9 Lanczos approximation for non-integers, Euler's
reflection formula below 1/2, and the exact factorial for positive
integers. gammaln uses the g=607/128, n=15 Lanczos series (Godfrey's
coefficients) and stays finite far beyond the point where gamma overflows.
"""

from __future__ import annotations

import math
import numbers

from statkit.core.exceptions import ValidationError

_LANCZOS_G = 7
_LANCZOS_P = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_GODFREY_G = 607 / 128
_GODFREY_COEFFICIENTS = (
    0.99999999999999709182, 57.156235665862923517, -59.597960355475491248,
    14.136097974741747174, -0.49191381609762019978, 0.33994649984811888699e-4,
    0.46523628927048575665e-4, -0.98374475304879564677e-4,
    0.15808870322491248884e-3, -0.21026444172410488319e-3,
    0.2174396181152126432e-3, -0.16431810653676389022e-3,
    0.84418223983852743293e-4, -0.2619083840158140867e-4,
    0.36899182659531622704e-5,
)
_LOG_SQRT_2PI = math.log(math.sqrt(2 * math.pi))

# Largest argument whose gamma is representable as a float64
_GAMMA_OVERFLOW = 171.6243769563027


def factorial(n: int) -> int:
    """
    n! for a non-negative integer.

    Integral floats (5.0) are accepted.

    Raises:
        ValidationError: If n is negative or not an integer
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Real):
        raise ValidationError(f"factorial requires an integer input, got {n!r}")
    if n < 0:
        raise ValidationError("factorial requires a non-negative value")
    if not float(n).is_integer():
        raise ValidationError("factorial requires an integer input")
    return math.factorial(int(n))


def gamma(n: float) -> float:
    """
    Gamma function.

    NaN at zero and negative integers. Exact for positive integers,
    Lanczos elsewhere (about 15 significant digits).

    Examples:
        >>> gamma(5)
        24.0
        >>> round(gamma(11.5), 2)
        11899423.08
    """
    n = float(n)
    if math.isnan(n):
        return math.nan
    if n.is_integer():
        if n <= 0:
            return math.nan
        if n > _GAMMA_OVERFLOW:
            return math.inf
        return float(math.factorial(int(n) - 1))
    if n > _GAMMA_OVERFLOW:
        return math.inf

    if n < 0.5:
        return math.pi / (math.sin(math.pi * n) * gamma(1 - n))

    n -= 1
    a = _LANCZOS_P[0]
    for i in range(1, len(_LANCZOS_P)):
        a += _LANCZOS_P[i] / (n + i)
    t = n + _LANCZOS_G + 0.5
    # t ** (n + 0.5) overflows before the product does
    half = t ** ((n + 0.5) / 2)
    return math.sqrt(2 * math.pi) * half * (half * math.exp(-t)) * a


def gammaln(n: float) -> float:
    """
    Natural log of the gamma function for n > 0.

    Returns +inf for n <= 0.

    Examples:
        >>> round(gammaln(500), 4)
        2605.1159
    """
    n = float(n)
    if n <= 0:
        return math.inf

    n -= 1
    a = _GODFREY_COEFFICIENTS[0]
    for i in range(1, len(_GODFREY_COEFFICIENTS)):
        a += _GODFREY_COEFFICIENTS[i] / (n + i)

    tmp = _GODFREY_G + 0.5 + n
    return _LOG_SQRT_2PI + math.log(a) - tmp + (n + 0.5) * math.log(tmp)
