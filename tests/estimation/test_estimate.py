"""
Tests for closed-form parameter estimation.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from statengine.core.exceptions import (
    InvalidParameterError,
    SampleTooSmallError,
    UnsupportedDistributionError,
)
from statengine.core.sample import Sample
from statengine.estimation import (
    EstimationSolution,
    Normal,
    estimate,
    resolve_family,
)


class TestNormal:

    def test_estimates(self):
        result = estimate([1, 2, 3, 4, 5], 'normal')
        assert result.mle['mu'] == pytest.approx(3.0)
        assert result.mle['sigma'] == pytest.approx(math.sqrt(2.0))

    def test_against_scipy_fit(self, normal_values):
        mu, sigma = sp_stats.norm.fit(normal_values)
        result = estimate(normal_values, 'normal')
        assert result.mle['mu'] == pytest.approx(mu, rel=1e-10)
        assert result.mle['sigma'] == pytest.approx(sigma, rel=1e-10)

    def test_log_likelihood(self, normal_values):
        result = estimate(normal_values, 'normal')
        expected = np.sum(sp_stats.norm.logpdf(
            normal_values, result.mle['mu'], result.mle['sigma'],
        ))
        assert result.log_likelihood == pytest.approx(expected, rel=1e-10)

    def test_constant_values_warn(self):
        result = estimate([3.0, 3.0, 3.0], 'normal')
        assert result.mle['sigma'] == 0.0
        assert any("constant" in w for w in result.warnings)

    def test_constant_inexact_values_warn(self):
        result = estimate([0.1] * 4, 'normal')
        assert result.mle['sigma'] == 0.0
        assert result.log_likelihood == math.inf


class TestExponential:

    def test_rate_is_inverse_mean(self):
        result = estimate([2.0, 4.0, 6.0], 'exponential')
        assert result.mle['lambda'] == pytest.approx(0.25)

    def test_log_likelihood(self, rng):
        values = rng.exponential(2.0, 100)
        result = estimate(values, 'exponential')
        lam = result.mle['lambda']
        expected = np.sum(sp_stats.expon.logpdf(values, scale=1.0 / lam))
        assert result.log_likelihood == pytest.approx(expected, rel=1e-10)

    def test_zero_mean_rejected(self):
        with pytest.raises(InvalidParameterError):
            estimate([0.0, 0.0], 'exponential')

    def test_negative_values_rejected(self):
        with pytest.raises(InvalidParameterError):
            estimate([1.0, -1.0, 3.0], 'exponential')


class TestPoisson:

    def test_rate_is_mean(self):
        result = estimate([0, 1, 2, 3, 4], 'poisson')
        assert result.mle['lambda'] == pytest.approx(2.0)

    def test_log_likelihood(self, rng):
        values = rng.poisson(3.0, 80).astype(float)
        result = estimate(values, 'poisson')
        expected = np.sum(sp_stats.poisson.logpmf(values, result.mle['lambda']))
        assert result.log_likelihood == pytest.approx(expected, rel=1e-9)

    def test_all_zero_counts(self):
        result = estimate([0, 0, 0], 'poisson')
        assert result.mle['lambda'] == 0.0
        assert result.log_likelihood == 0.0


class TestMleMatchesMom:
    """For these three families the two estimators coincide."""

    @pytest.mark.parametrize("distribution", ["normal", "exponential", "poisson"])
    def test_identical(self, distribution, rng):
        values = np.abs(rng.normal(5.0, 1.5, 60))
        result = estimate(values, distribution)
        for name, value in result.mle.items():
            assert result.mom[name] == pytest.approx(value, abs=1e-9)
        assert result.info['estimates_agree']

    def test_normal_agrees_with_large_offset(self):
        values = [1e8 + d for d in (0.1, 0.5, 0.9, 1.3, 0.2)]
        result = estimate(values, 'normal')
        assert result.mle['sigma'] == pytest.approx(0.4472, abs=1e-3)
        assert result.mom['sigma'] == pytest.approx(result.mle['sigma'], abs=1e-9)
        assert result.info['estimates_agree']

    def test_comparison_note(self):
        result = estimate([1.0, 2.0], 'poisson')
        assert "coincide" in result.comparison
        assert "poisson" in result.comparison


class TestDispatch:

    def test_unknown_distribution(self):
        with pytest.raises(UnsupportedDistributionError) as excinfo:
            estimate([1.0, 2.0], 'cauchy')
        assert excinfo.value.distribution == 'cauchy'
        assert 'normal' in excinfo.value.supported

    def test_unknown_reported_before_sample_checks(self):
        with pytest.raises(UnsupportedDistributionError):
            estimate([], 'weibull')

    def test_case_insensitive(self):
        assert estimate([1.0, 2.0], 'Normal').distribution == 'normal'

    def test_family_instance_passthrough(self):
        fam = Normal()
        assert resolve_family(fam) is fam

    def test_empty_sample(self):
        with pytest.raises(SampleTooSmallError):
            estimate([], 'normal')

    def test_axis_selection(self):
        sample = Sample.from_pairs([(1, 10), (2, 20), (3, 30)])
        assert estimate(sample, 'normal', axis='x').mle['mu'] == pytest.approx(2.0)
        assert estimate(sample, 'normal').mle['mu'] == pytest.approx(20.0)


class TestSolution:

    def test_type_and_metadata(self):
        result = estimate([1.0, 2.0, 3.0], 'normal')
        assert isinstance(result, EstimationSolution)
        assert result.n == 3
        assert result.backend_name == 'cpu_estimation'
        assert 'mle' in result.timing

    def test_mappings_are_copies(self):
        result = estimate([1.0, 2.0, 3.0], 'normal')
        result.mle['mu'] = 99.0
        assert result.mle['mu'] == pytest.approx(2.0)

    def test_summary(self):
        s = estimate([1.0, 2.0, 3.0], 'exponential').summary()
        assert "exponential" in s
        assert "lambda" in s
        assert "MLE" in s and "MoM" in s
