"""
Tolerance tiers and iteration caps for the numerical engine.

Defines precision expectations for the different approximation families:
- closed-form rational approximations (erf): ~1.5e-7 absolute
- Lanczos gamma: near machine precision
- incomplete beta/gamma integrals and the CDFs built on them: 1e-4 for tests
- bisection critical values: bracket width 1e-4

Used by the special-function routines, the critical-value search and the
test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Abramowitz-Stegun 7.1.26 maximum absolute error
ERF_APPROX = ToleranceTier(
    rtol=0.0,
    atol=1.5e-7,
    name='erf_approx',
    description='Rational erf approximation, |error| <= 1.5e-7',
)

# Lanczos (g=7, n=9) gamma function
LANCZOS = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='lanczos',
    description='Lanczos gamma, close to double precision',
)

# Incomplete beta/gamma integrals and the t / chi-square / F CDFs
INCOMPLETE_INTEGRAL = ToleranceTier(
    rtol=1e-4,
    atol=1e-4,
    name='incomplete_integral',
    description='Series / continued-fraction incomplete integrals',
)

# Critical values found by bisection
CRITICAL_VALUE = ToleranceTier(
    rtol=1e-3,
    atol=1e-4,
    name='critical_value',
    description='Bisection over a CDF to bracket width 1e-4',
)


# Convergence target for series and continued fractions
SERIES_EPS = 1e-12

# Hard caps that guarantee termination of the iterative routines
MAX_SERIES_TERMS = 200
MAX_CONTINUED_FRACTION_TERMS = 200

# Bisection stops once the bracket is narrower than this
BISECTION_WIDTH = 1e-4

# Number of times a seed bracket may be doubled before giving up
MAX_BRACKET_EXPANSIONS = 60

# Lentz's tiny value guarding against division by zero
FPMIN = 1e-300
