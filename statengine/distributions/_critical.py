"""
Critical values and direction-aware p-values.

Critical values are upper-tail quantiles: c such that P(X > c) = alpha.
They are found by monotone bisection over the matching CDF until the
bracket is narrower than BISECTION_WIDTH. Seed brackets are [-6, 6] for
z and t and [0, 100] for chi-square and F; when the seed does not enclose
the root (heavy t tails at df=1, chi-square with many df) the offending
bound is pushed outward by doubling, at most MAX_BRACKET_EXPANSIONS times.

A handful of well-known z constants short-circuit the search.
"""

from __future__ import annotations

from typing import Callable, Literal

from statengine.core.compute.tolerances import (
    BISECTION_WIDTH,
    MAX_BRACKET_EXPANSIONS,
)
from statengine.core.exceptions import ConvergenceError, ValidationError
from statengine.core.validation import check_alpha
from statengine.distributions._cdf import (
    chi_square_cdf,
    chi_square_sf,
    f_cdf,
    f_sf,
    normal_cdf,
    normal_sf,
    t_cdf,
    t_sf,
)

DistributionKind = Literal['z', 't', 'chisq', 'f']
VALID_KINDS = ('z', 't', 'chisq', 'f')

VALID_ALTERNATIVES = ("two.sided", "less", "greater")

_ALTERNATIVE_ALIASES = {
    "two.sided": "two.sided",
    "two-sided": "two.sided",
    "two_sided": "two.sided",
    "two-tailed": "two.sided",
    "less": "less",
    "left-tailed": "less",
    "greater": "greater",
    "right-tailed": "greater",
}

# Upper-tail z quantiles used without searching
Z_CRITICAL_CONSTANTS = {
    0.025: 1.96,
    0.05: 1.645,
    0.01: 2.326,
    0.005: 2.576,
}


def normalize_alternative(alternative: str) -> str:
    """
    Map any accepted spelling of a test direction to its canonical form.

    'two-tailed', 'two-sided' -> 'two.sided'; 'left-tailed' -> 'less';
    'right-tailed' -> 'greater'.
    """
    try:
        return _ALTERNATIVE_ALIASES[alternative]
    except (KeyError, TypeError):
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES} "
            f"(or two-tailed/left-tailed/right-tailed), got {alternative!r}"
        ) from None


def _bisect_quantile(
    cdf: Callable[[float], float],
    target: float,
    low: float,
    high: float,
    *,
    floor: float | None = None,
) -> float:
    """
    Find c with cdf(c) = target on a monotone increasing cdf.

    Parameters
    ----------
    cdf : callable
    target : float
        Probability in (0, 1).
    low, high : float
        Seed bracket.
    floor : float or None
        Hard lower bound of the support; low is never pushed below it.
    """
    expansions = 0
    while cdf(high) < target:
        if expansions >= MAX_BRACKET_EXPANSIONS:
            raise ConvergenceError(
                f"could not bracket quantile {target} (upper bound {high})",
                iterations=expansions,
                reason='no_bracket',
            )
        high = high + (high - low)
        expansions += 1
    while floor is None and cdf(low) > target:
        if expansions >= MAX_BRACKET_EXPANSIONS:
            raise ConvergenceError(
                f"could not bracket quantile {target} (lower bound {low})",
                iterations=expansions,
                reason='no_bracket',
            )
        low = low - (high - low)
        expansions += 1

    while high - low > BISECTION_WIDTH:
        mid = (low + high) / 2.0
        if cdf(mid) < target:
            low = mid
        else:
            high = mid
    return (low + high) / 2.0


def z_critical(alpha: float) -> float:
    """Upper-tail standard normal critical value z with P(Z > z) = alpha."""
    alpha = check_alpha(alpha)
    if alpha in Z_CRITICAL_CONSTANTS:
        return Z_CRITICAL_CONSTANTS[alpha]
    return _bisect_quantile(normal_cdf, 1.0 - alpha, -6.0, 6.0)


def t_critical(alpha: float, df: float) -> float:
    """Upper-tail Student's t critical value with df degrees of freedom."""
    alpha = check_alpha(alpha)
    return _bisect_quantile(lambda t: t_cdf(t, df), 1.0 - alpha, -6.0, 6.0)


def chi_square_critical(alpha: float, df: float) -> float:
    """Upper-tail chi-square critical value with df degrees of freedom."""
    alpha = check_alpha(alpha)
    return _bisect_quantile(
        lambda x: chi_square_cdf(x, df), 1.0 - alpha, 0.0, 100.0, floor=0.0
    )


def f_critical(alpha: float, df1: float, df2: float) -> float:
    """Upper-tail F critical value with (df1, df2) degrees of freedom."""
    alpha = check_alpha(alpha)
    return _bisect_quantile(
        lambda x: f_cdf(x, df1, df2), 1.0 - alpha, 0.0, 100.0, floor=0.0
    )


def _upper_critical(
    alpha: float, kind: str, df: float | None, df2: float | None
) -> float:
    if kind == 'z':
        return z_critical(alpha)
    if kind == 't':
        return t_critical(alpha, _require_df(df, kind))
    if kind == 'chisq':
        return chi_square_critical(alpha, _require_df(df, kind))
    return f_critical(alpha, _require_df(df, kind), _require_df(df2, kind, "df2"))


def _require_df(df: float | None, kind: str, name: str = "df") -> float:
    if df is None:
        raise ValidationError(f"{name} is required for the {kind!r} distribution")
    return df


def _check_kind(kind: str) -> str:
    if kind not in VALID_KINDS:
        raise ValidationError(
            f"kind must be one of {VALID_KINDS}, got {kind!r}"
        )
    return kind


def critical_value(
    alpha: float,
    kind: DistributionKind,
    alternative: str = "two.sided",
    df: float | None = None,
    df2: float | None = None,
) -> float:
    """
    Rejection boundary for a test at significance level alpha.

    two.sided: upper critical value at alpha/2 (reject when |stat| exceeds
    it for z/t, or when stat exceeds it for chi-square/F).
    greater:   upper critical value at alpha.
    less:      lower critical value at alpha; negative for z and t.

    Parameters
    ----------
    alpha : float
        Significance level in (0, 1).
    kind : str
        'z', 't', 'chisq' or 'f'.
    alternative : str
        Test direction (any spelling accepted by normalize_alternative).
    df, df2 : float or None
        Degrees of freedom; df2 only for 'f'.
    """
    alpha = check_alpha(alpha)
    kind = _check_kind(kind)
    alternative = normalize_alternative(alternative)

    if alternative == "two.sided":
        return _upper_critical(alpha / 2.0, kind, df, df2)
    if alternative == "greater":
        return _upper_critical(alpha, kind, df, df2)
    # less
    if kind in ('z', 't'):
        return -_upper_critical(alpha, kind, df, df2)
    return _upper_critical(1.0 - alpha, kind, df, df2)


def p_value(
    statistic: float,
    kind: DistributionKind,
    alternative: str = "two.sided",
    df: float | None = None,
    df2: float | None = None,
) -> float:
    """
    p-value of a test statistic under its null distribution.

    less:      P(X <= stat)
    greater:   P(X >= stat)
    two.sided: 2 * min(P(X <= stat), P(X >= stat)), capped at 1.
               For z and t this equals 2 * P(X >= |stat|).
    """
    kind = _check_kind(kind)
    alternative = normalize_alternative(alternative)
    statistic = float(statistic)

    if kind == 'z':
        lower, upper = normal_cdf(statistic), normal_sf(statistic)
    elif kind == 't':
        d = _require_df(df, kind)
        lower, upper = t_cdf(statistic, d), t_sf(statistic, d)
    elif kind == 'chisq':
        d = _require_df(df, kind)
        lower, upper = chi_square_cdf(statistic, d), chi_square_sf(statistic, d)
    else:
        d1 = _require_df(df, kind)
        d2 = _require_df(df2, kind, "df2")
        lower, upper = f_cdf(statistic, d1, d2), f_sf(statistic, d1, d2)

    if alternative == "less":
        return lower
    if alternative == "greater":
        return upper
    return min(1.0, 2.0 * min(lower, upper))
