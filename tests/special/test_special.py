"""
Tests for factorial, gamma, beta and error functions.

scipy.special is the reference; tolerances follow the accuracy tier of
each approximation (see statkit.core.compute.tolerances).
"""

import math

import numpy as np
import pytest
from scipy import special as sp

from statkit.core.compute.tolerances import EXACT, SERIES, QUADRATURE, RATIONAL
from statkit.core.exceptions import ValidationError
from statkit.special import (
    factorial,
    gamma,
    gammaln,
    beta,
    log_beta,
    incomplete_beta,
    regularized_incomplete_beta,
    erf,
    inverse_erf,
    probit,
    logit,
)


# ═══════════════════════════════════════════════════════════════════════
# Factorial and gamma
# ═══════════════════════════════════════════════════════════════════════


class TestFactorial:

    def test_five(self):
        assert factorial(5) == 120

    def test_zero(self):
        assert factorial(0) == 1

    def test_integral_float(self):
        assert factorial(4.0) == 24

    def test_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            factorial(-1)

    def test_fraction(self):
        with pytest.raises(ValidationError, match="integer"):
            factorial(2.5)


class TestGamma:

    def test_integer_is_factorial(self):
        for n in range(1, 15):
            assert gamma(n) == float(math.factorial(n - 1))

    def test_five(self):
        assert gamma(5) == 24.0

    def test_eleven_and_a_half(self):
        assert gamma(11.5) == pytest.approx(11899423.08, abs=0.01)

    @pytest.mark.parametrize("n", [0, -1, -2, -10])
    def test_poles_are_nan(self, n):
        assert math.isnan(gamma(n))

    @pytest.mark.parametrize("x", [0.1, 0.5, 1.5, 2.7, 7.3, 30.25, -0.5, -2.5])
    def test_against_scipy(self, x):
        assert gamma(x) == pytest.approx(sp.gamma(x), rel=SERIES.rtol)

    def test_overflow(self):
        assert gamma(200.5) == math.inf

    @pytest.mark.parametrize("x", [0.5, 1, 3.3, 10, 100, 500, 1e4])
    def test_gammaln_against_scipy(self, x):
        assert gammaln(x) == pytest.approx(sp.gammaln(x), rel=SERIES.rtol, abs=SERIES.atol)

    def test_gammaln_non_positive(self):
        assert gammaln(0) == math.inf
        assert gammaln(-3) == math.inf


# ═══════════════════════════════════════════════════════════════════════
# Beta
# ═══════════════════════════════════════════════════════════════════════


class TestBeta:

    @pytest.mark.parametrize("a,b", [(1, 1), (2, 3), (0.5, 0.5), (10, 4.5)])
    def test_complete(self, a, b):
        assert beta(a, b) == pytest.approx(sp.beta(a, b), rel=SERIES.rtol)
        assert log_beta(a, b) == pytest.approx(sp.betaln(a, b), rel=SERIES.rtol, abs=SERIES.atol)

    @pytest.mark.parametrize("x,a,b", [
        (0.3, 2, 3),
        (0.7, 2, 3),
        (0.5, 0.5, 0.5),
        (0.1, 0.5, 4),
        (0.9, 5, 0.7),
        (0.2, 15, 20),
        (0.6, 30, 30),
    ])
    def test_regularized_against_scipy(self, x, a, b):
        assert regularized_incomplete_beta(x, a, b) == pytest.approx(
            sp.betainc(a, b, x), rel=QUADRATURE.rtol, abs=QUADRATURE.atol
        )

    def test_unnormalized(self):
        expected = sp.betainc(2, 3, 0.4) * sp.beta(2, 3)
        assert incomplete_beta(0.4, 2, 3) == pytest.approx(expected, rel=QUADRATURE.rtol)

    def test_bounds(self):
        assert regularized_incomplete_beta(0, 2, 3) == 0.0
        assert regularized_incomplete_beta(1, 2, 3) == 1.0
        assert regularized_incomplete_beta(-1, 2, 3) == 0.0

    def test_symmetry(self):
        left = regularized_incomplete_beta(0.3, 2.5, 4)
        right = regularized_incomplete_beta(0.7, 4, 2.5)
        assert left + right == pytest.approx(1.0, abs=QUADRATURE.atol)

    def test_invalid_shape(self):
        with pytest.raises(ValidationError):
            regularized_incomplete_beta(0.5, 0, 1)


# ═══════════════════════════════════════════════════════════════════════
# Error function family
# ═══════════════════════════════════════════════════════════════════════


class TestErf:

    @pytest.mark.parametrize("x", np.linspace(-3, 3, 13))
    def test_against_scipy(self, x):
        assert erf(x) == pytest.approx(sp.erf(x), abs=RATIONAL.atol)

    def test_odd(self):
        assert erf(-0.7) == pytest.approx(-erf(0.7), abs=1e-15)

    @pytest.mark.parametrize("x", [-0.9, -0.5, 0.1, 0.5, 0.9])
    def test_inverse(self, x):
        assert inverse_erf(x) == pytest.approx(sp.erfinv(x), rel=5e-3)

    def test_inverse_endpoints(self):
        assert inverse_erf(1) == math.inf
        assert inverse_erf(-1) == -math.inf

    def test_inverse_out_of_range(self):
        with pytest.raises(ValidationError):
            inverse_erf(1.5)

    def test_probit(self):
        assert probit(0.975) == pytest.approx(1.959964, rel=5e-3)
        assert probit(0.5) == pytest.approx(0.0, abs=1e-6)

    def test_probit_clamped(self):
        assert math.isfinite(probit(0))
        assert math.isfinite(probit(1))
        assert probit(0) < -3.5

    def test_logit(self):
        assert logit(0.5) == 0.0
        assert logit(0.75) == pytest.approx(math.log(3), rel=EXACT.rtol)

    @pytest.mark.parametrize("p", [0, 1, -0.2])
    def test_logit_domain(self, p):
        with pytest.raises(ValidationError):
            logit(p)
