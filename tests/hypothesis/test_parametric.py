"""
Tests for the t-tests, the correlation test and the confidence helpers.

scipy.stats is the reference for every statistic and p-value.
"""

import math

import numpy as np
import pytest
from scipy import stats

from statkit.core.exceptions import InsufficientDataError, ValidationError
from statkit.hypothesis import (
    t_test,
    t_statistic,
    correlation_test,
    confidence_interval,
    confidence_upper,
    confidence_lower,
    sample_size,
    power,
    HypothesisDesign,
    HTestSolution,
)

P_TOL = dict(rel=1e-5, abs=1e-7)


# ═══════════════════════════════════════════════════════════════════════
# One-sample t-test
# ═══════════════════════════════════════════════════════════════════════


class TestOneSampleT:

    def test_against_scipy(self, normal_sample):
        result = t_test(normal_sample, mu=10.3)
        ref = stats.ttest_1samp(normal_sample, 10.3)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, **P_TOL)
        assert result.df == 199

    def test_small_example(self):
        x = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        result = t_test(x, mu=4)
        ref = stats.ttest_1samp(x, 4)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, **P_TOL)

    def test_uses_bessel_corrected_sd(self):
        x = np.array([2.0, 4.0, 4.0, 5.0, 7.0])
        se = np.std(x, ddof=1) / math.sqrt(5)
        assert t_statistic(x, 3.0) == pytest.approx((x.mean() - 3.0) / se)
        assert t_test(x, mu=3.0).extras['se'] == pytest.approx(se)

    def test_conf_int(self):
        x = np.array([5.1, 4.9, 5.6, 5.8, 6.0, 5.2, 4.7])
        result = t_test(x)
        se = np.std(x, ddof=1) / math.sqrt(7)
        half = stats.t.ppf(0.975, 6) * se
        np.testing.assert_allclose(result.conf_int, [x.mean() - half, x.mean() + half], rtol=1e-6)
        assert result.conf_level == 0.95

    @pytest.mark.parametrize("alternative", ["less", "greater"])
    def test_one_sided_against_scipy(self, normal_sample, alternative):
        result = t_test(normal_sample, mu=10.2, alternative=alternative)
        ref = stats.ttest_1samp(normal_sample, 10.2, alternative=alternative)
        assert result.p_value == pytest.approx(ref.pvalue, **P_TOL)

    def test_one_sided_p_values_complement(self, normal_sample):
        less = t_test(normal_sample, mu=9.9, alternative="less").p_value
        greater = t_test(normal_sample, mu=9.9, alternative="greater").p_value
        assert less + greater == pytest.approx(1.0, abs=1e-7)

    def test_one_sided_interval_is_open(self):
        result = t_test([1.0, 2.0, 3.5, 4.0], alternative="greater")
        assert result.conf_int[1] == math.inf

    def test_p_value_decreases_with_effect(self):
        x = np.array([0.2, -0.4, 0.9, 1.1, 0.3, -0.1, 0.6])
        p_values = [t_test(x + shift).p_value for shift in (0.0, 0.5, 1.0, 2.0)]
        assert all(0 <= p <= 1 for p in p_values)
        assert p_values == sorted(p_values, reverse=True)

    def test_constant_data(self):
        result = t_test([3.0, 3.0, 3.0])
        assert math.isnan(result.statistic)
        assert "data are essentially constant" in result.warnings

    def test_too_short(self):
        with pytest.raises(InsufficientDataError):
            t_test([1.0])

    def test_non_finite(self):
        with pytest.raises(ValidationError):
            t_test([1.0, np.inf, 2.0])

    def test_invalid_alternative(self):
        with pytest.raises(ValidationError, match="alternative"):
            t_test([1.0, 2.0, 3.0], alternative="two.sided")

    def test_invalid_conf_level(self):
        with pytest.raises(ValidationError, match="conf_level"):
            t_test([1.0, 2.0, 3.0], conf_level=1.0)


# ═══════════════════════════════════════════════════════════════════════
# Two-sample t-test
# ═══════════════════════════════════════════════════════════════════════


class TestTwoSampleT:

    def test_doc_example(self):
        result = t_test([1, 2, 3, 4], [3, 4, 5, 6])
        assert result.statistic == pytest.approx(-2.1908902, rel=1e-7)
        assert result.df == 6
        assert result.method == "Two Sample t-test"

    def test_against_scipy_pooled(self, two_samples):
        x, y = two_samples
        result = t_test(x, y)
        ref = stats.ttest_ind(x, y, equal_var=True)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, **P_TOL)
        assert result.df == len(x) + len(y) - 2

    def test_hypothesized_difference(self, two_samples):
        x, y = two_samples
        shifted = t_test(x, y, difference=-1.0)
        direct = t_test(x, y + (-1.0))
        assert shifted.statistic == pytest.approx(direct.statistic, rel=1e-10)
        assert t_test(x, y, mu=-1.0).statistic == pytest.approx(shifted.statistic)

    def test_estimates(self, two_samples):
        x, y = two_samples
        result = t_test(x, y)
        assert result.estimate['mean of x'] == pytest.approx(x.mean())
        assert result.estimate['mean of y'] == pytest.approx(y.mean())

    def test_accepts_design(self, two_samples):
        x, y = two_samples
        design = HypothesisDesign.for_t_test(x, y)
        assert design.test_type == "t_two_sample"
        assert t_test(design).statistic == pytest.approx(t_test(x, y).statistic)

    def test_solution_metadata(self, two_samples):
        result = t_test(*two_samples)
        assert isinstance(result, HTestSolution)
        assert result.backend_name == 'cpu_hypothesis'
        assert result.info['test_type'] == 't_two_sample'
        assert 't_two_sample' in result.timing

    def test_summary(self):
        text = t_test([1, 2, 3, 4], [3, 4, 5, 6]).summary()
        assert "Two Sample t-test" in text
        assert "data:  x and y" in text
        assert "95 percent confidence interval:" in text
        assert "true difference in means is not equal to 0" in text

    def test_repr(self):
        r = repr(t_test([1, 2, 3, 4], [3, 4, 5, 6]))
        assert r.startswith("HTestSolution(method='Two Sample t-test'")
        assert "p_value=" in r

    def test_significant(self):
        result = t_test([1, 2, 3, 4], [3, 4, 5, 6])
        assert result.significant(0.1)
        assert not result.significant(0.05)

    def test_p_value_decreases_with_abs_t(self, rng):
        base = rng.normal(0.0, 1.0, size=15)
        base = base - base.mean()
        results = [t_test(base + shift, mu=0.0) for shift in (0.1, 0.3, 0.6, 1.0, 2.0)]
        ts = [abs(r.statistic) for r in results]
        ps = [r.p_value for r in results]
        assert ts == sorted(ts)
        assert all(0.0 <= p <= 1.0 for p in ps)
        assert all(a > b for a, b in zip(ps, ps[1:]))


# ═══════════════════════════════════════════════════════════════════════
# Correlation test
# ═══════════════════════════════════════════════════════════════════════


class TestCorrelationTest:

    def test_against_scipy(self, rng):
        x = rng.normal(size=25)
        y = 0.5 * x + rng.normal(size=25)
        result = correlation_test(x, y)
        r, p = stats.pearsonr(x, y)
        assert result.estimate['cor'] == pytest.approx(r, rel=1e-10)
        assert result.p_value == pytest.approx(p, **P_TOL)
        assert result.df == 23

    def test_t_statistic(self):
        x = [1, 2, 3, 4, 5, 6]
        y = [2, 1, 4, 3, 6, 5]
        result = correlation_test(x, y)
        r = np.corrcoef(x, y)[0, 1]
        assert result.statistic == pytest.approx(r * math.sqrt(4 / (1 - r * r)))

    def test_perfect_correlation(self):
        result = correlation_test([1, 2, 3, 4], [2, 4, 6, 8])
        assert result.estimate['cor'] == pytest.approx(1.0)
        assert result.statistic > 1e6
        assert result.p_value < 1e-10

    def test_constant_input(self):
        result = correlation_test([1, 1, 1], [1, 2, 3])
        assert math.isnan(result.estimate['cor'])
        assert result.warnings

    def test_length_mismatch(self):
        with pytest.raises(ValidationError):
            correlation_test([1, 2, 3], [1, 2])

    def test_needs_three_pairs(self):
        with pytest.raises(InsufficientDataError):
            correlation_test([1, 2], [2, 1])


# ═══════════════════════════════════════════════════════════════════════
# Confidence bounds and study design
# ═══════════════════════════════════════════════════════════════════════


class TestConfidence:

    def test_interval_example(self):
        lo, hi = confidence_interval([1, 2, 3, 4, 5])
        assert lo == pytest.approx(1.0368, abs=1e-4)
        assert hi == pytest.approx(4.9632, abs=1e-4)

    def test_interval_matches_t_test(self, normal_sample):
        lo, hi = confidence_interval(normal_sample, 0.9)
        ci = t_test(normal_sample, conf_level=0.9).conf_int
        assert lo == pytest.approx(ci[0])
        assert hi == pytest.approx(ci[1])

    def test_one_sided_bounds(self, normal_sample):
        se = np.std(normal_sample, ddof=1) / math.sqrt(len(normal_sample))
        crit = stats.t.ppf(0.95, len(normal_sample) - 1)
        m = normal_sample.mean()
        assert confidence_upper(normal_sample) == pytest.approx(m + crit * se, rel=1e-8)
        assert confidence_lower(normal_sample) == pytest.approx(m - crit * se, rel=1e-8)

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            confidence_interval([1, 2, 3], 1.5)


class TestStudyDesign:

    def test_sample_size_formula(self):
        z = stats.norm.ppf(0.975) + stats.norm.ppf(0.8)
        assert sample_size(0.05, 0.8, 1.0, 0.5) == pytest.approx(2 * z * z / 0.25, rel=1e-8)

    def test_power_inverts_sample_size(self):
        n = sample_size(0.05, 0.9, 2.0, 1.5)
        assert power(n, 0.05, 2.0, 1.5) == pytest.approx(0.9, abs=1e-6)

    def test_power_grows_with_n(self):
        values = [power(n, 0.05, 1.0, 0.5) for n in (10, 40, 160)]
        assert values == sorted(values)

    def test_invalid_inputs(self):
        with pytest.raises(ValidationError):
            sample_size(0.05, 0.8, 0.0, 0.5)
        with pytest.raises(ValidationError):
            sample_size(0.05, 0.8, 1.0, 0.0)
        with pytest.raises(ValidationError):
            power(0, 0.05, 1.0, 0.5)
