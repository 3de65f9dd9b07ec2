"""
Densities and probability mass functions.

Arguments outside a distribution's support (or invalid parameters) give 0
rather than raising, so these can be evaluated over arbitrary plotting
grids.
"""

from __future__ import annotations

import math

from statengine.special import combination, log_gamma


def normal_pdf(x: float, mean: float = 0.0, sd: float = 1.0) -> float:
    """Normal density N(mean, sd^2)."""
    if sd <= 0.0:
        return 0.0
    z = (float(x) - mean) / sd
    return math.exp(-0.5 * z * z) / (sd * math.sqrt(2.0 * math.pi))


def t_pdf(x: float, df: float) -> float:
    """Student's t density."""
    if df <= 0.0:
        return 0.0
    log_c = (
        log_gamma((df + 1.0) / 2.0)
        - log_gamma(df / 2.0)
        - 0.5 * math.log(df * math.pi)
    )
    return math.exp(log_c - (df + 1.0) / 2.0 * math.log1p(float(x) ** 2 / df))


def chi_square_pdf(x: float, df: float) -> float:
    """Chi-square density; 0 for x <= 0."""
    x = float(x)
    if x <= 0.0 or df <= 0.0:
        return 0.0
    k = df / 2.0
    return math.exp(
        (k - 1.0) * math.log(x) - x / 2.0 - k * math.log(2.0) - log_gamma(k)
    )


def binomial_pmf(k: int, n: int, p: float) -> float:
    """Binomial(n, p) mass at k."""
    if k < 0 or k > n or p < 0.0 or p > 1.0:
        return 0.0
    return combination(n, k) * p ** k * (1.0 - p) ** (n - k)


def poisson_pmf(k: int, lam: float) -> float:
    """Poisson(lam) mass at k."""
    if k < 0 or lam <= 0.0:
        return 0.0
    return math.exp(k * math.log(lam) - lam - log_gamma(k + 1.0))
