"""
Tests for kernel density estimation.

With bw_method chosen so that factor * std(ddof=1) equals our bandwidth,
scipy.stats.gaussian_kde computes the same estimate.
"""

import math

import numpy as np
import pytest
from scipy import stats

from statkit.core.exceptions import ValidationError
from statkit.descriptive import interquartile_range, quantile_sorted
from statkit.density import (
    kernel_density_estimation,
    kde,
    KernelDensityEstimate,
    KERNELS,
    BANDWIDTH_METHODS,
)


class TestKernelDensityEstimation:

    def test_small_example(self):
        estimate = kernel_density_estimation([1, 2, 3], bandwidth=1.0)
        phi = stats.norm.pdf
        assert estimate(2.0) == pytest.approx((phi(1) + phi(0) + phi(1)) / 3, rel=1e-12)

    def test_against_manual_sum(self, normal_sample):
        h = 0.7
        estimate = kernel_density_estimation(normal_sample, bandwidth=h)
        for x in (6.0, 10.0, 13.5):
            u = (x - normal_sample) / h
            expected = np.sum(np.exp(-0.5 * u * u) / math.sqrt(2 * math.pi)) / (len(normal_sample) * h)
            assert estimate(x) == pytest.approx(expected, rel=1e-12)

    def test_against_gaussian_kde(self, normal_sample):
        estimate = kernel_density_estimation(normal_sample)
        factor = estimate.bandwidth / np.std(normal_sample, ddof=1)
        ref = stats.gaussian_kde(normal_sample, bw_method=factor)
        grid = np.linspace(4, 16, 25)
        np.testing.assert_allclose(estimate(grid), ref(grid), rtol=1e-10)

    def test_nrd_bandwidth(self, normal_sample):
        s = np.std(normal_sample, ddof=1)
        ordered = np.sort(normal_sample)
        spread_iqr = quantile_sorted(ordered, 0.75) - quantile_sorted(ordered, 0.25)
        assert interquartile_range(normal_sample) == spread_iqr
        spread = min(s, spread_iqr / 1.34)
        expected = 1.06 * spread * len(normal_sample) ** -0.2
        assert kernel_density_estimation(normal_sample).bandwidth == pytest.approx(expected, rel=1e-12)

    def test_integrates_to_one(self, normal_sample):
        estimate = kde(normal_sample)
        grid = np.linspace(-5, 25, 6001)
        values = estimate(grid)
        area = float(np.sum((values[1:] + values[:-1]) / 2 * np.diff(grid)))
        assert area == pytest.approx(1.0, abs=1e-6)

    def test_array_shape(self):
        estimate = kernel_density_estimation([0.0, 1.0, 2.0], bandwidth=0.5)
        out = estimate(np.zeros((2, 3)))
        assert out.shape == (2, 3)
        assert isinstance(estimate(0.0), float)

    def test_custom_kernel(self):
        def uniform(u):
            return np.where(np.abs(u) <= 1, 0.5, 0.0)

        estimate = kernel_density_estimation([0.0, 10.0], kernel=uniform, bandwidth=2.0)
        assert estimate(1.0) == pytest.approx(0.5 / 2 / 2)
        assert estimate(5.0) == 0.0

    def test_callable_bandwidth(self):
        estimate = kernel_density_estimation([1.0, 2.0, 4.0], bandwidth=lambda data: data.max() - data.min())
        assert estimate.bandwidth == 3.0

    def test_result_type(self):
        estimate = kernel_density_estimation([1.0, 2.0, 3.0])
        assert isinstance(estimate, KernelDensityEstimate)
        assert estimate.kernel is KERNELS['gaussian']
        assert 'nrd' in BANDWIDTH_METHODS

    def test_data_is_read_only(self):
        estimate = kernel_density_estimation([1.0, 2.0, 3.0])
        with pytest.raises(ValueError):
            estimate.data[0] = 0.0


class TestKernelDensityValidation:

    def test_unknown_kernel(self):
        with pytest.raises(ValidationError, match="Unknown kernel"):
            kernel_density_estimation([1.0, 2.0], kernel='epanechnikov')

    def test_unknown_bandwidth_method(self):
        with pytest.raises(ValidationError, match="Unknown bandwidth"):
            kernel_density_estimation([1.0, 2.0], bandwidth='scott')

    @pytest.mark.parametrize("bandwidth", [0.0, -1.0, float('inf')])
    def test_bad_bandwidth(self, bandwidth):
        with pytest.raises(ValidationError, match="bandwidth"):
            kernel_density_estimation([1.0, 2.0], bandwidth=bandwidth)

    def test_constant_sample_has_zero_nrd_bandwidth(self):
        with pytest.raises(ValidationError, match="positive"):
            kernel_density_estimation([2.0, 2.0, 2.0])

    def test_non_finite(self):
        with pytest.raises(ValidationError):
            kernel_density_estimation([1.0, np.nan])
