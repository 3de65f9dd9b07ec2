"""
Error function via Abramowitz & Stegun formula 7.1.26.

    erf(x) = 1 - (a1 t + a2 t^2 + a3 t^3 + a4 t^4 + a5 t^5) exp(-x^2),
    t = 1 / (1 + p x),  x >= 0

Maximum absolute error 1.5e-7. Odd symmetry is applied explicitly, so
erf(-x) == -erf(x) holds exactly.
"""

import math

_P = 0.3275911
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429


def erf(x: float) -> float:
    """Error function, |error| <= 1.5e-7."""
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        # The coefficients sum to 1 - 1e-9, not 1
        return 0.0
    sign = 1.0 if x >= 0.0 else -1.0
    ax = abs(x)
    t = 1.0 / (1.0 + _P * ax)
    poly = t * (_A1 + t * (_A2 + t * (_A3 + t * (_A4 + t * _A5))))
    return sign * (1.0 - poly * math.exp(-ax * ax))


def erfc(x: float) -> float:
    """Complementary error function, 1 - erf(x)."""
    return 1.0 - erf(x)
