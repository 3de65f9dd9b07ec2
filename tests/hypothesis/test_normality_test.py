"""
Tests for normality_test().
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.core.exceptions import InvalidParameterError, SampleTooSmallError
from statengine.distributions import normal_cdf
from statengine.hypothesis import NormalityParams, normality_test


@pytest.fixture
def normal_quantiles():
    """200 evenly spaced standard normal quantiles: symmetric, light-tailed."""
    n = 200
    return sp_stats.norm.ppf((np.arange(n) + 0.5) / n)


class TestStatistics:

    def test_z_scores_and_p_values(self, normal_values):
        result = normality_test(normal_values)
        p = result.params
        n = len(normal_values)
        assert isinstance(p, NormalityParams)
        assert p.skewness_z == pytest.approx(p.skewness / math.sqrt(6.0 / n))
        assert p.kurtosis_z == pytest.approx(p.kurtosis / math.sqrt(24.0 / n))
        assert p.skewness_p_value == pytest.approx(2.0 * (1.0 - normal_cdf(abs(p.skewness_z))), abs=1e-12)
        assert p.kurtosis_p_value == pytest.approx(2.0 * (1.0 - normal_cdf(abs(p.kurtosis_z))), abs=1e-12)

    def test_p_value_is_minimum(self, normal_values):
        p = normality_test(normal_values).params
        assert p.p_value == min(p.skewness_p_value, p.kurtosis_p_value)

    def test_statistic_is_sum_of_abs_z(self, normal_values):
        p = normality_test(normal_values).params
        assert p.statistic == pytest.approx(abs(p.skewness_z) + abs(p.kurtosis_z))

    def test_critical_value(self):
        assert normality_test([1.0, 2.0, 4.0]).critical_value == 1.96


class TestDecision:

    def test_normal_data_accepted(self, normal_quantiles):
        result = normality_test(normal_quantiles)
        assert result.conclusion == "accept null hypothesis"
        assert "consistent with a normal distribution" in result.interpretation

    def test_skewed_data_rejected(self, rng):
        result = normality_test(rng.exponential(1.0, 300))
        assert result.significant
        assert "not consistent" in result.interpretation

    def test_no_interval_or_moments(self, normal_values):
        result = normality_test(normal_values)
        assert result.confidence_interval is None
        assert result.df is None
        assert result.sample_mean is None


class TestValidation:

    def test_two_values_too_few(self):
        with pytest.raises(SampleTooSmallError) as excinfo:
            normality_test([1.0, 2.0])
        assert excinfo.value.minimum == 3

    def test_constant_rejected(self):
        with pytest.raises(InvalidParameterError):
            normality_test([5.0, 5.0, 5.0, 5.0])

    def test_constant_inexact_values_rejected(self):
        with pytest.raises(InvalidParameterError):
            normality_test([0.1] * 7)

    def test_small_sample_note(self):
        result = normality_test([1.0, 2.0, 4.0, 8.0])
        assert any("unreliable" in w for w in result.warnings)

    def test_large_sample_quiet(self, normal_values):
        assert normality_test(normal_values).warnings == ()
