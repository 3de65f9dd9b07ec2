"""
Tests for bin_counts() and expected_counts().
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from statengine.core.exceptions import InvalidParameterError, SampleTooSmallError, ValidationError
from statengine.distributions import normal_cdf
from statengine.hypothesis import bin_counts, expected_counts, n_bins


class TestBinCount:

    @pytest.mark.parametrize("n,k", [(5, 1), (12, 2), (49, 9), (50, 10), (1000, 10)])
    def test_number_of_bins(self, n, k):
        assert n_bins(n) == k

    def test_counts_sum_to_n(self, normal_values):
        counts, edges = bin_counts(normal_values)
        assert counts.sum() == len(normal_values)
        assert len(edges) == len(counts) + 1

    def test_edges_span_range(self, normal_values):
        _, edges = bin_counts(normal_values)
        assert edges[0] == normal_values.min()
        assert edges[-1] == normal_values.max()

    def test_max_falls_in_last_bin(self):
        counts, _ = bin_counts([0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 10.0])
        # two bins of width 5: [0, 5) and [5, 10]
        assert_allclose(counts, [5, 5])

    def test_too_few_values(self):
        with pytest.raises(SampleTooSmallError):
            bin_counts([1.0, 2.0, 3.0, 4.0])

    def test_constant_values(self):
        with pytest.raises(InvalidParameterError):
            bin_counts([2.0] * 10)


class TestExpectedCounts:

    def test_uniform(self):
        values = np.arange(20.0)
        _, edges = bin_counts(values)
        assert_allclose(expected_counts(values, edges, 'uniform'), [5.0] * 4)

    def test_normal(self):
        values = np.arange(20.0)
        _, edges = bin_counts(values)
        mu, sd = values.mean(), values.std()
        expected = [
            20 * (normal_cdf((hi - mu) / sd) - normal_cdf((lo - mu) / sd))
            for lo, hi in zip(edges[:-1], edges[1:])
        ]
        assert_allclose(expected_counts(values, edges, 'normal'), expected, rtol=1e-12)

    def test_unknown_distribution(self):
        with pytest.raises(ValidationError):
            expected_counts([1.0, 2.0], [0.0, 1.0, 2.0], 'poisson')
