"""Factorials and binomial coefficients for the discrete mass functions."""

import math


def factorial(n: int) -> float:
    """n! for integer n >= 0; 0 for negative n."""
    n = int(n)
    if n < 0:
        return 0.0
    return float(math.factorial(n))


def combination(n: int, k: int) -> float:
    """Binomial coefficient C(n, k); 0 when k is outside [0, n]."""
    n, k = int(n), int(k)
    if k < 0 or k > n:
        return 0.0
    return float(math.comb(n, k))
