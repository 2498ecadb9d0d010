"""
Tests for one-way ANOVA.

scipy.stats.f_oneway is the reference for F and the p-value.
"""

import math

import numpy as np
import pytest
from scipy import stats

from statkit.core.exceptions import ValidationError
from statkit.anova import anova_oneway, Factor, AnovaDesign, AnovaSolution


@pytest.fixture
def three_groups(rng):
    a = rng.normal(5.0, 1.0, size=8)
    b = rng.normal(6.0, 1.0, size=11)
    c = rng.normal(5.5, 1.0, size=6)
    y = np.concatenate([a, b, c])
    g = ['a'] * 8 + ['b'] * 11 + ['c'] * 6
    return y, g, (a, b, c)


# ═══════════════════════════════════════════════════════════════════════
# Factor
# ═══════════════════════════════════════════════════════════════════════


class TestFactor:

    def test_first_seen_level_order(self):
        f = Factor(['b', 'a', 'b', 'c'])
        assert f.levels == ('b', 'a', 'c')
        assert f.codes.tolist() == [0, 1, 0, 2]
        assert f.n_groups == 3
        assert len(f) == 4

    def test_group_indices(self):
        f = Factor([1, 2, 1, 3])
        assert f.group(0).tolist() == [0, 2]

    def test_group_out_of_range(self):
        with pytest.raises(ValidationError):
            Factor(['x', 'y']).group(5)

    def test_codes_read_only(self):
        f = Factor(['x', 'y'])
        with pytest.raises(ValueError):
            f.codes[0] = 1

    def test_unhashable_label(self):
        with pytest.raises(ValidationError, match="unhashable"):
            Factor([[1], [2]])

    def test_numpy_labels(self):
        f = Factor(np.array(['u', 'v', 'u']))
        assert f.levels == ('u', 'v')

    def test_repr(self):
        assert repr(Factor(['p', 'q'])) == "Factor(n=2, levels=['p', 'q'])"


# ═══════════════════════════════════════════════════════════════════════
# One-way ANOVA
# ═══════════════════════════════════════════════════════════════════════


class TestAnovaOneway:

    def test_against_scipy(self, three_groups):
        y, g, samples = three_groups
        result = anova_oneway(y, g)
        ref = stats.f_oneway(*samples)
        assert result.f_value == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-5, abs=1e-8)

    def test_degrees_of_freedom(self, three_groups):
        y, g, _ = three_groups
        result = anova_oneway(y, g)
        assert result.group_df == 2
        assert result.residual_df == 22
        assert result.n_obs == 25
        assert result.n_groups == 3

    def test_sums_of_squares_partition(self, three_groups):
        y, g, _ = three_groups
        result = anova_oneway(y, g)
        total = float(np.sum((y - y.mean()) ** 2))
        assert result.group_ss + result.residual_ss == pytest.approx(total, rel=1e-12)
        assert result.eta_squared == pytest.approx(result.group_ss / total)
        assert result.group_ms == pytest.approx(result.group_ss / 2)
        assert result.residual_ms == pytest.approx(result.residual_ss / 22)

    def test_simple_example(self):
        result = anova_oneway([1, 2, 3, 5, 6, 7], ['a', 'a', 'a', 'b', 'b', 'b'])
        assert result.f_value == pytest.approx(24.0)
        assert result.group_ss == pytest.approx(24.0)
        assert result.residual_ss == pytest.approx(4.0)
        assert result.group_means == {'a': 2.0, 'b': 6.0}
        assert result.group_sizes == {'a': 3, 'b': 3}
        assert result.grand_mean == 4.0

    def test_table(self):
        result = anova_oneway([1, 2, 3, 5, 6, 7], ['a', 'a', 'a', 'b', 'b', 'b'])
        group_row, residual_row = result.table
        assert group_row.term == 'group'
        assert group_row.df == 1
        assert residual_row.term == 'Residuals'
        assert residual_row.f_value is None
        assert residual_row.p_value is None

    def test_accepts_factor_and_design(self):
        y = [1.0, 2.0, 4.0, 8.0, 9.0, 7.0]
        f = Factor(['x', 'x', 'y', 'y', 'z', 'z'])
        design = AnovaDesign.for_oneway(y, f)
        assert anova_oneway(design).f_value == pytest.approx(anova_oneway(y, f).f_value)

    def test_singleton_group_warns(self):
        result = anova_oneway([1.0, 2.0, 3.0, 10.0], ['a', 'a', 'a', 'b'])
        ref = stats.f_oneway([1.0, 2.0, 3.0], [10.0])
        assert result.f_value == pytest.approx(ref.statistic)
        assert any("single observation" in w for w in result.warnings)

    def test_zero_residual(self):
        result = anova_oneway([1.0, 1.0, 2.0, 2.0], ['a', 'a', 'b', 'b'])
        assert result.f_value == math.inf
        assert result.p_value == 0.0
        assert result.warnings

    def test_all_equal(self):
        result = anova_oneway([3.0, 3.0, 3.0, 3.0], ['a', 'a', 'b', 'b'])
        assert math.isnan(result.f_value)
        assert math.isnan(result.p_value)
        assert result.eta_squared == 0.0

    def test_metadata(self, three_groups):
        y, g, _ = three_groups
        result = anova_oneway(y, g)
        assert isinstance(result, AnovaSolution)
        assert result.backend_name == 'cpu_anova'
        assert 'sums_of_squares' in result.timing
        assert result.info['levels'] == ('a', 'b', 'c')

    def test_summary(self, three_groups):
        y, g, _ = three_groups
        text = anova_oneway(y, g).summary()
        assert "Residuals" in text
        assert "Signif. codes" in text
        assert "eta^2" in text
        assert repr(anova_oneway(y, g)).startswith("AnovaSolution(n=25, groups=3")


class TestAnovaValidation:

    def test_single_group(self):
        with pytest.raises(ValidationError, match="at least 2 groups"):
            anova_oneway([1.0, 2.0, 3.0], ['a', 'a', 'a'])

    def test_no_residual_df(self):
        with pytest.raises(ValidationError, match="residual"):
            anova_oneway([1.0, 2.0, 3.0], ['a', 'b', 'c'])

    def test_length_mismatch(self):
        with pytest.raises(ValidationError):
            anova_oneway([1.0, 2.0, 3.0], ['a', 'b'])

    def test_non_finite(self):
        with pytest.raises(ValidationError):
            anova_oneway([1.0, np.nan, 3.0, 4.0], ['a', 'a', 'b', 'b'])

    def test_missing_groups(self):
        with pytest.raises(ValidationError, match="group"):
            anova_oneway([1.0, 2.0, 3.0])
