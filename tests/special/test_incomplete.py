"""
Tests for the regularized incomplete beta and gamma functions.

Reference values from scipy.special (betainc, gammainc, gammaincc).
"""

import warnings

import pytest
from scipy import special as sp_special

from statengine.core.compute.tolerances import INCOMPLETE_INTEGRAL
from statengine.core.exceptions import InvalidParameterError
from statengine.special import (
    regularized_incomplete_beta,
    regularized_incomplete_gamma,
    regularized_incomplete_gamma_complement,
)


class TestIncompleteBeta:

    @pytest.mark.parametrize("a,b,x", [
        (0.5, 0.5, 0.3),
        (2.0, 3.0, 0.4),
        (5.0, 0.5, 0.9),
        (10.0, 10.0, 0.5),
        (0.5, 500.0, 0.001),
        (500.0, 0.5, 0.998),
    ])
    def test_against_scipy(self, a, b, x):
        assert regularized_incomplete_beta(a, b, x) == pytest.approx(
            sp_special.betainc(a, b, x), abs=1e-8
        )

    def test_endpoints(self):
        assert regularized_incomplete_beta(2.0, 3.0, 0.0) == 0.0
        assert regularized_incomplete_beta(2.0, 3.0, 1.0) == 1.0

    def test_out_of_range_x_clamped(self):
        assert regularized_incomplete_beta(2.0, 3.0, -0.5) == 0.0
        assert regularized_incomplete_beta(2.0, 3.0, 1.5) == 1.0

    def test_symmetry_relation(self):
        a, b, x = 3.0, 7.0, 0.35
        lhs = regularized_incomplete_beta(a, b, x)
        rhs = 1.0 - regularized_incomplete_beta(b, a, 1.0 - x)
        assert lhs == pytest.approx(rhs, abs=1e-12)

    @pytest.mark.parametrize("a,b", [(0.0, 1.0), (1.0, -2.0)])
    def test_bad_shape_rejected(self, a, b):
        with pytest.raises(InvalidParameterError):
            regularized_incomplete_beta(a, b, 0.5)

    def test_no_cap_warning_in_normal_use(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            regularized_incomplete_beta(500.0, 0.5, 0.999)


class TestIncompleteGamma:

    @pytest.mark.parametrize("a,x", [
        (0.5, 0.2),
        (1.0, 1.0),
        (2.5, 1.0),     # series branch
        (2.5, 6.0),     # continued-fraction branch
        (50.0, 45.0),
        (500.0, 520.0),
    ])
    def test_lower_against_scipy(self, a, x):
        assert regularized_incomplete_gamma(a, x) == pytest.approx(
            sp_special.gammainc(a, x), abs=1e-8
        )

    @pytest.mark.parametrize("a,x", [(1.5, 0.5), (3.0, 20.0), (10.0, 60.0)])
    def test_upper_against_scipy(self, a, x):
        assert regularized_incomplete_gamma_complement(a, x) == pytest.approx(
            sp_special.gammaincc(a, x), rel=1e-8, abs=1e-14
        )

    def test_complement_sums_to_one(self):
        for a, x in [(0.7, 0.3), (4.0, 9.0)]:
            total = (regularized_incomplete_gamma(a, x)
                     + regularized_incomplete_gamma_complement(a, x))
            assert total == pytest.approx(1.0, abs=1e-12)

    def test_boundaries(self):
        assert regularized_incomplete_gamma(2.0, 0.0) == 0.0
        assert regularized_incomplete_gamma(2.0, float("inf")) == 1.0
        assert regularized_incomplete_gamma_complement(2.0, 0.0) == 1.0

    def test_bad_shape_rejected(self):
        with pytest.raises(InvalidParameterError) as excinfo:
            regularized_incomplete_gamma(0.0, 1.0)
        assert excinfo.value.parameter == "a"


class TestIncompleteIntegralTier:

    @pytest.mark.parametrize("a,x", [(0.5, 0.2), (3.0, 2.5), (12.0, 15.0)])
    def test_gamma_pair_within_tier(self, a, x):
        lower = regularized_incomplete_gamma(a, x)
        assert lower == pytest.approx(
            sp_special.gammainc(a, x),
            rel=INCOMPLETE_INTEGRAL.rtol, abs=INCOMPLETE_INTEGRAL.atol,
        )
        assert lower + regularized_incomplete_gamma_complement(a, x) == pytest.approx(
            1.0, abs=INCOMPLETE_INTEGRAL.atol
        )
