"""
Tests for critical values found by bisection.
"""

import pytest
from scipy import stats as sp_stats

from statengine.core.compute.tolerances import CRITICAL_VALUE
from statengine.core.exceptions import InvalidParameterError, ValidationError
from statengine.distributions import (
    Z_CRITICAL_CONSTANTS,
    chi_square_critical,
    critical_value,
    f_critical,
    normalize_alternative,
    t_critical,
    z_critical,
)

QUANTILE_TOL = CRITICAL_VALUE.rtol


class TestZCritical:

    def test_shortcut_constants(self):
        for alpha, expected in Z_CRITICAL_CONSTANTS.items():
            assert z_critical(alpha) == expected

    def test_0025_is_196(self):
        assert z_critical(0.025) == pytest.approx(1.96, abs=0.01)

    @pytest.mark.parametrize("alpha", [0.1, 0.2, 0.001, 0.3])
    def test_bisection_fallback(self, alpha):
        assert z_critical(alpha) == pytest.approx(sp_stats.norm.isf(alpha), abs=QUANTILE_TOL)

    @pytest.mark.parametrize("alpha", [0.0, 1.0, 1.5])
    def test_bad_alpha(self, alpha):
        with pytest.raises(InvalidParameterError):
            z_critical(alpha)


class TestTCritical:

    def test_large_df_matches_normal(self):
        assert t_critical(0.025, 1000.0) == pytest.approx(1.96, abs=0.01)

    @pytest.mark.parametrize("alpha,df", [(0.025, 4.0), (0.05, 10.0), (0.005, 29.0)])
    def test_against_scipy(self, alpha, df):
        assert t_critical(alpha, df) == pytest.approx(sp_stats.t.isf(alpha, df), abs=QUANTILE_TOL)

    def test_heavy_tail_beyond_seed_bracket(self):
        # t(1) upper 0.5% point is about 63.66, far outside [-6, 6]
        assert t_critical(0.005, 1.0) == pytest.approx(sp_stats.t.isf(0.005, 1.0), abs=QUANTILE_TOL)


class TestChiSquareCritical:

    @pytest.mark.parametrize("alpha,df", [(0.05, 1.0), (0.05, 3.0), (0.01, 9.0)])
    def test_against_scipy(self, alpha, df):
        assert chi_square_critical(alpha, df) == pytest.approx(
            sp_stats.chi2.isf(alpha, df), abs=QUANTILE_TOL
        )

    def test_many_df_beyond_seed_bracket(self):
        assert chi_square_critical(0.05, 200.0) == pytest.approx(
            sp_stats.chi2.isf(0.05, 200.0), abs=QUANTILE_TOL
        )


class TestFCritical:

    def test_against_scipy(self):
        assert f_critical(0.05, 3.0, 12.0) == pytest.approx(sp_stats.f.isf(0.05, 3.0, 12.0), abs=QUANTILE_TOL)


class TestCriticalValueDispatch:

    def test_two_sided_uses_half_alpha(self):
        assert critical_value(0.05, 'z') == 1.96

    def test_greater(self):
        assert critical_value(0.05, 'z', 'greater') == 1.645

    def test_less_is_negative_for_symmetric(self):
        assert critical_value(0.05, 'z', 'less') == -1.645
        assert critical_value(0.05, 't', 'less', df=10) == pytest.approx(
            -sp_stats.t.isf(0.05, 10), abs=QUANTILE_TOL
        )

    def test_less_is_lower_quantile_for_chisq(self):
        assert critical_value(0.05, 'chisq', 'less', df=4) == pytest.approx(
            sp_stats.chi2.ppf(0.05, 4), abs=QUANTILE_TOL
        )

    def test_f_requires_both_df(self):
        with pytest.raises(ValidationError, match="df2"):
            critical_value(0.05, 'f', df=3)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError, match="kind"):
            critical_value(0.05, 'gamma')


class TestNormalizeAlternative:

    @pytest.mark.parametrize("spelling,expected", [
        ("two.sided", "two.sided"),
        ("two-sided", "two.sided"),
        ("two-tailed", "two.sided"),
        ("left-tailed", "less"),
        ("right-tailed", "greater"),
        ("less", "less"),
    ])
    def test_aliases(self, spelling, expected):
        assert normalize_alternative(spelling) == expected

    def test_unknown(self):
        with pytest.raises(ValidationError):
            normalize_alternative("sideways")
