"""
Cumulative distribution functions built on the special functions.

    normal_cdf(z)         = (1 + erf(z / sqrt 2)) / 2
    t_cdf(t, df)          : tail = I_{df/(df+t^2)}(df/2, 1/2) / 2, mirrored by sign
    chi_square_cdf(x, df) = P(df/2, x/2)
    f_cdf(x, d1, d2)      = I_{d1 x/(d1 x + d2)}(d1/2, d2/2)

Survival functions (upper tails) are provided next to each CDF and are
computed from the same tail quantity rather than as 1 - cdf where that
keeps small p-values from cancelling to zero.
"""

from __future__ import annotations

import math

from statengine.core.exceptions import InvalidParameterError
from statengine.special import (
    erf,
    regularized_incomplete_beta,
    regularized_incomplete_gamma,
    regularized_incomplete_gamma_complement,
)

_SQRT2 = math.sqrt(2.0)


def _check_df(df: float, name: str = "df") -> float:
    df = float(df)
    if not (df > 0.0) or math.isinf(df):
        raise InvalidParameterError(
            f"{name} must be positive and finite, got {df}",
            parameter=name,
            value=df,
        )
    return df


# --- Normal ---

def normal_cdf(z: float) -> float:
    """Standard normal CDF."""
    return 0.5 * (1.0 + erf(float(z) / _SQRT2))


def normal_sf(z: float) -> float:
    """Standard normal upper tail, 1 - normal_cdf(z)."""
    return 0.5 * (1.0 - erf(float(z) / _SQRT2))


# --- Student's t ---

def _t_tail(t: float, df: float) -> float:
    """P(T > |t|) for T ~ t(df)."""
    if math.isinf(t):
        return 0.0
    x = df / (df + t * t)
    return 0.5 * regularized_incomplete_beta(df / 2.0, 0.5, x)


def t_cdf(t: float, df: float) -> float:
    """Student's t CDF with df degrees of freedom (df may be fractional)."""
    df = _check_df(df)
    t = float(t)
    if math.isnan(t):
        return math.nan
    tail = _t_tail(t, df)
    return 1.0 - tail if t >= 0.0 else tail


def t_sf(t: float, df: float) -> float:
    """Student's t upper tail, P(T > t)."""
    df = _check_df(df)
    t = float(t)
    if math.isnan(t):
        return math.nan
    tail = _t_tail(t, df)
    return tail if t >= 0.0 else 1.0 - tail


# --- Chi-square ---

def chi_square_cdf(x: float, df: float) -> float:
    """Chi-square CDF, P(df/2, x/2)."""
    df = _check_df(df)
    x = float(x)
    if x <= 0.0:
        return 0.0
    return regularized_incomplete_gamma(df / 2.0, x / 2.0)


def chi_square_sf(x: float, df: float) -> float:
    """Chi-square upper tail, Q(df/2, x/2)."""
    df = _check_df(df)
    x = float(x)
    if x <= 0.0:
        return 1.0
    return regularized_incomplete_gamma_complement(df / 2.0, x / 2.0)


# --- F ---

def f_cdf(x: float, df1: float, df2: float) -> float:
    """F distribution CDF with (df1, df2) degrees of freedom."""
    df1 = _check_df(df1, "df1")
    df2 = _check_df(df2, "df2")
    x = float(x)
    if x <= 0.0:
        return 0.0
    if math.isinf(x):
        return 1.0
    z = df1 * x / (df1 * x + df2)
    return regularized_incomplete_beta(df1 / 2.0, df2 / 2.0, z)


def f_sf(x: float, df1: float, df2: float) -> float:
    """F distribution upper tail, via the complementary beta argument."""
    df1 = _check_df(df1, "df1")
    df2 = _check_df(df2, "df2")
    x = float(x)
    if x <= 0.0:
        return 1.0
    if math.isinf(x):
        return 0.0
    z = df2 / (df2 + df1 * x)
    return regularized_incomplete_beta(df2 / 2.0, df1 / 2.0, z)
