"""
Special functions module.

Self-contained approximations underlying every distribution function in
statengine. Pure math, no statistical semantics.

Public API:
    erf(x), erfc(x)                              - Abramowitz-Stegun 7.1.26
    gamma(x), log_gamma(x)                       - Lanczos (g=7, n=9)
    beta(a, b), log_beta(a, b)                   - via log_gamma
    regularized_incomplete_beta(a, b, x)         - I_x(a, b)
    regularized_incomplete_gamma(a, x)           - P(a, x)
    regularized_incomplete_gamma_complement(a, x) - Q(a, x)
    factorial(n), combination(n, k)
"""

from statengine.special._erf import erf, erfc
from statengine.special._gamma import gamma, log_gamma, beta, log_beta
from statengine.special._incomplete import (
    regularized_incomplete_beta,
    regularized_incomplete_gamma,
    regularized_incomplete_gamma_complement,
)
from statengine.special._combinatorics import factorial, combination

__all__ = [
    "erf",
    "erfc",
    "gamma",
    "log_gamma",
    "beta",
    "log_beta",
    "regularized_incomplete_beta",
    "regularized_incomplete_gamma",
    "regularized_incomplete_gamma_complement",
    "factorial",
    "combination",
]
