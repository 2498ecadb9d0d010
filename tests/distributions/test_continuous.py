"""
Tests for the continuous distributions.

scipy.stats is the reference. Normal uses the Chebyshev-fitted erf, the
t and F distributions go through the quadrature incomplete beta, and the
quantiles come from Acklam's formula or bisection.
"""

import math

import numpy as np
import pytest
from scipy import stats

from statkit.core.compute.tolerances import SERIES, QUADRATURE, RATIONAL
from statkit.core.exceptions import ValidationError
from statkit.distributions import (
    Normal,
    StandardNormal,
    StudentT,
    FDistribution,
    Kolmogorov,
)


# ═══════════════════════════════════════════════════════════════════════
# Normal
# ═══════════════════════════════════════════════════════════════════════


class TestNormal:

    @pytest.mark.parametrize("x", [-3.5, -1.96, -0.3, 0.0, 0.8, 1.96, 4.0])
    def test_cdf_against_scipy(self, x):
        assert Normal().cdf(x) == pytest.approx(
            stats.norm.cdf(x), rel=RATIONAL.rtol, abs=RATIONAL.atol
        )

    def test_cdf_at_196(self):
        assert Normal(0, 1).cdf(1.96) == pytest.approx(0.975, abs=1e-4)

    def test_pdf_uses_variance(self):
        d = Normal(10, 4)
        assert d.sd == 2.0
        assert d.pdf(11) == pytest.approx(stats.norm.pdf(11, 10, 2), rel=SERIES.rtol)

    def test_sf_complements_cdf(self):
        d = Normal(1, 2.5)
        for x in (-2.0, 0.5, 1.0, 3.7):
            assert d.cdf(x) + d.sf(x) == pytest.approx(1.0, abs=1e-12)

    @pytest.mark.parametrize("p", [1e-6, 0.001, 0.02, 0.3, 0.5, 0.9, 0.975, 0.999999])
    def test_ppf_against_scipy(self, p):
        assert StandardNormal().ppf(p) == pytest.approx(stats.norm.ppf(p), rel=SERIES.rtol)

    def test_ppf_scales_by_sd(self):
        """ppf is mean + sd * z, not mean + variance * z."""
        d = Normal(10, 4)
        assert d.ppf(0.5) == 10.0
        assert d.ppf(0.975) == pytest.approx(10 + 2 * stats.norm.ppf(0.975), rel=SERIES.rtol)

    def test_ppf_endpoints(self):
        assert Normal().ppf(0) == -math.inf
        assert Normal().ppf(1) == math.inf

    def test_ppf_inverts_cdf(self):
        d = Normal(-3, 0.25)
        for p in (0.05, 0.4, 0.8):
            assert d.cdf(d.ppf(p)) == pytest.approx(p, abs=RATIONAL.atol)

    def test_standard_normal_parameters(self):
        d = StandardNormal()
        assert d.mean == 0.0
        assert d.variance == 1.0

    def test_non_positive_variance(self):
        with pytest.raises(ValidationError, match="variance"):
            Normal(0, 0)

    def test_probability_out_of_range(self):
        with pytest.raises(ValidationError, match="probability"):
            Normal().ppf(1.5)

    def test_frozen(self):
        d = Normal()
        with pytest.raises(AttributeError):
            d.mean = 3.0


# ═══════════════════════════════════════════════════════════════════════
# Student's t
# ═══════════════════════════════════════════════════════════════════════


class TestStudentT:

    @pytest.mark.parametrize("df", [1, 2.5, 5, 30])
    @pytest.mark.parametrize("x", [-4.0, -1.2, 0.0, 0.7, 2.5])
    def test_cdf_against_scipy(self, df, x):
        assert StudentT(df).cdf(x) == pytest.approx(
            stats.t.cdf(x, df), rel=QUADRATURE.rtol, abs=1e-7
        )

    @pytest.mark.parametrize("df", [1, 4, 20])
    def test_pdf_against_scipy(self, df):
        for x in (-2.0, 0.0, 1.3):
            assert StudentT(df).pdf(x) == pytest.approx(stats.t.pdf(x, df), rel=1e-7)

    def test_sf_symmetry(self):
        d = StudentT(7)
        assert d.sf(1.5) == pytest.approx(d.cdf(-1.5), abs=1e-12)
        assert d.cdf(0.0) == pytest.approx(0.5, abs=1e-12)

    def test_infinite_arguments(self):
        d = StudentT(3)
        assert d.cdf(-math.inf) == 0.0
        assert d.cdf(math.inf) == 1.0
        assert d.sf(math.inf) == 0.0

    @pytest.mark.parametrize("df", [2, 9, 60])
    @pytest.mark.parametrize("p", [0.025, 0.5, 0.95, 0.995])
    def test_ppf_against_scipy(self, df, p):
        assert StudentT(df).ppf(p) == pytest.approx(stats.t.ppf(p, df), rel=1e-5, abs=1e-6)

    def test_ppf_outside_initial_bracket(self):
        """Heavy tails push the quantile beyond 10; the bracket widens."""
        assert StudentT(1).ppf(0.999) == pytest.approx(stats.t.ppf(0.999, 1), rel=1e-5)

    def test_invalid_df(self):
        with pytest.raises(ValidationError, match="df"):
            StudentT(0)


# ═══════════════════════════════════════════════════════════════════════
# F
# ═══════════════════════════════════════════════════════════════════════


class TestFDistribution:

    @pytest.mark.parametrize("df1,df2", [(1, 10), (3, 17), (5, 5), (12, 40)])
    @pytest.mark.parametrize("x", [0.2, 1.0, 2.5, 6.0])
    def test_cdf_sf_against_scipy(self, df1, df2, x):
        d = FDistribution(df1, df2)
        assert d.cdf(x) == pytest.approx(stats.f.cdf(x, df1, df2), rel=QUADRATURE.rtol, abs=1e-7)
        assert d.sf(x) == pytest.approx(stats.f.sf(x, df1, df2), rel=QUADRATURE.rtol, abs=1e-7)

    def test_pdf_against_scipy(self):
        d = FDistribution(4, 11)
        for x in (0.3, 1.0, 3.2):
            assert d.pdf(x) == pytest.approx(stats.f.pdf(x, 4, 11), rel=1e-7)

    def test_support(self):
        d = FDistribution(2, 3)
        assert d.pdf(-1) == 0.0
        assert d.cdf(0) == 0.0
        assert d.sf(0) == 1.0
        assert d.cdf(math.inf) == 1.0

    @pytest.mark.parametrize("p", [0.1, 0.5, 0.95, 0.99])
    def test_ppf_against_scipy(self, p):
        assert FDistribution(5, 10).ppf(p) == pytest.approx(
            stats.f.ppf(p, 5, 10), rel=1e-5, abs=1e-6
        )

    def test_invalid_df(self):
        with pytest.raises(ValidationError):
            FDistribution(3, -1)


# ═══════════════════════════════════════════════════════════════════════
# Kolmogorov
# ═══════════════════════════════════════════════════════════════════════


class TestKolmogorov:

    @pytest.mark.parametrize("x", [0.4, 0.7, 1.0, 1.36, 2.0, 3.0])
    def test_cdf_against_kstwobign(self, x):
        assert Kolmogorov().cdf(x) == pytest.approx(stats.kstwobign.cdf(x), rel=SERIES.rtol, abs=1e-10)

    @pytest.mark.parametrize("x", [0.5, 0.9, 1.5])
    def test_pdf_against_kstwobign(self, x):
        assert Kolmogorov().pdf(x) == pytest.approx(stats.kstwobign.pdf(x), rel=1e-6)

    def test_sf_is_complement(self):
        assert Kolmogorov().sf(1.36) == pytest.approx(1 - Kolmogorov().cdf(1.36), abs=1e-15)

    def test_critical_value(self):
        assert Kolmogorov().sf(1.358) == pytest.approx(0.05, abs=1e-3)

    def test_support(self):
        k = Kolmogorov()
        assert k.cdf(0) == 0.0
        assert k.cdf(-1) == 0.0
        assert k.cdf(math.inf) == 1.0

    def test_ppf_inverts_cdf(self):
        assert Kolmogorov().ppf(0.95) == pytest.approx(stats.kstwobign.ppf(0.95), rel=1e-6)


# ═══════════════════════════════════════════════════════════════════════
# Array variants
# ═══════════════════════════════════════════════════════════════════════


class TestArrayVariants:

    def test_shape_is_preserved(self):
        x = np.array([[-1.0, 0.0], [1.0, 2.0]])
        out = Normal().cdf_array(x)
        assert out.shape == (2, 2)
        assert out.dtype == np.float64

    def test_matches_scalar(self):
        d = StudentT(6)
        x = [-2.0, -0.1, 0.4, 3.0]
        np.testing.assert_array_equal(d.cdf_array(x), [d.cdf(v) for v in x])
        np.testing.assert_array_equal(d.sf_array(x), [d.sf(v) for v in x])
        np.testing.assert_array_equal(d.pdf_array(x), [d.pdf(v) for v in x])

    def test_ppf_array(self):
        p = np.array([0.1, 0.5, 0.9])
        np.testing.assert_allclose(StandardNormal().ppf_array(p), stats.norm.ppf(p), rtol=SERIES.rtol)

    def test_scalar_input(self):
        out = Normal().pdf_array(0.0)
        assert out.shape == ()
        assert float(out) == pytest.approx(1 / math.sqrt(2 * math.pi))
