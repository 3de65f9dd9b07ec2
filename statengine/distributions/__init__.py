"""
Distribution functions module.

CDFs, upper tails, densities and critical values for the normal,
Student's t, chi-square and F distributions, all evaluated through
statengine.special (no numerical quadrature).

Public API:
    normal_cdf(z), normal_sf(z)
    t_cdf(t, df), t_sf(t, df)
    chi_square_cdf(x, df), chi_square_sf(x, df)
    f_cdf(x, df1, df2), f_sf(x, df1, df2)
    z_critical(alpha), t_critical(alpha, df),
    chi_square_critical(alpha, df), f_critical(alpha, df1, df2)
    critical_value(alpha, kind, alternative, df, df2)
    p_value(statistic, kind, alternative, df, df2)
    normal_pdf, t_pdf, chi_square_pdf, binomial_pmf, poisson_pmf
"""

from statengine.distributions._cdf import (
    normal_cdf,
    normal_sf,
    t_cdf,
    t_sf,
    chi_square_cdf,
    chi_square_sf,
    f_cdf,
    f_sf,
)
from statengine.distributions._critical import (
    VALID_ALTERNATIVES,
    Z_CRITICAL_CONSTANTS,
    normalize_alternative,
    z_critical,
    t_critical,
    chi_square_critical,
    f_critical,
    critical_value,
    p_value,
)
from statengine.distributions._pdf import (
    normal_pdf,
    t_pdf,
    chi_square_pdf,
    binomial_pmf,
    poisson_pmf,
)

__all__ = [
    "normal_cdf",
    "normal_sf",
    "t_cdf",
    "t_sf",
    "chi_square_cdf",
    "chi_square_sf",
    "f_cdf",
    "f_sf",
    "VALID_ALTERNATIVES",
    "Z_CRITICAL_CONSTANTS",
    "normalize_alternative",
    "z_critical",
    "t_critical",
    "chi_square_critical",
    "f_critical",
    "critical_value",
    "p_value",
    "normal_pdf",
    "t_pdf",
    "chi_square_pdf",
    "binomial_pmf",
    "poisson_pmf",
]
