"""
Single-source moment and order statistics on 1-D float arrays.

Every other module (backends, estimators, hypothesis tests) calls these
rather than re-deriving means or standard deviations inline.

Conventions:
    sample_variance / sample_sd   : denominator n - 1 (0 for n <= 1)
    population_variance           : denominator n
    skewness, excess_kurtosis     : population-moment form, both the
                                    central moments and the standard
                                    deviation use denominator n
        g1 = m3 / m2^1.5,  g2 = m4 / m2^2 - 3

None of these functions modify their input; sorting works on a copy.
Constant input is detected exactly (every value equal to the first), so
its deviations are exact zeros even when the computed mean is off by
rounding, as it is for values like 0.1 that are not exact in binary.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.validation import check_consistent_length, check_min_samples


def mean(values: NDArray[np.floating[Any]]) -> float:
    """Arithmetic mean; requires n >= 1."""
    check_min_samples(len(values), 1, "values")
    return float(np.sum(values) / len(values))


def is_constant(values: NDArray[np.floating[Any]]) -> bool:
    """True when every value equals the first (and for n <= 1)."""
    return len(values) <= 1 or bool(np.all(values == values[0]))


def deviations(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """values - mean(values); exact zeros for constant input."""
    if is_constant(values):
        return np.zeros(len(values), dtype=np.float64)
    return values - mean(values)


def sample_variance(values: NDArray[np.floating[Any]]) -> float:
    """Bessel-corrected variance, 0 when n <= 1."""
    n = len(values)
    if n <= 1:
        return 0.0
    diffs = deviations(values)
    return float(np.sum(diffs ** 2) / (n - 1))


def sample_sd(values: NDArray[np.floating[Any]]) -> float:
    """Bessel-corrected standard deviation, 0 when n <= 1."""
    return float(np.sqrt(sample_variance(values)))


def population_variance(values: NDArray[np.floating[Any]]) -> float:
    """Variance with denominator n; requires n >= 1."""
    check_min_samples(len(values), 1, "values")
    diffs = deviations(values)
    return float(np.sum(diffs ** 2) / len(values))


def median(values: NDArray[np.floating[Any]]) -> float:
    """Median; mean of the two middle order statistics for even n."""
    check_min_samples(len(values), 1, "values")
    ordered = np.sort(values)
    n = len(ordered)
    mid = n // 2
    if n % 2 == 0:
        return float((ordered[mid - 1] + ordered[mid]) / 2.0)
    return float(ordered[mid])


def minimum(values: NDArray[np.floating[Any]]) -> float:
    check_min_samples(len(values), 1, "values")
    return float(np.min(values))


def maximum(values: NDArray[np.floating[Any]]) -> float:
    check_min_samples(len(values), 1, "values")
    return float(np.max(values))


def _central_moments(values: NDArray[np.floating[Any]]) -> tuple[float, float, float]:
    """(m2, m3, m4) with denominator n."""
    n = len(values)
    check_min_samples(n, 1, "values")
    diffs = deviations(values)
    m2 = float(np.sum(diffs ** 2) / n)
    m3 = float(np.sum(diffs ** 3) / n)
    m4 = float(np.sum(diffs ** 4) / n)
    return m2, m3, m4


def skewness(values: NDArray[np.floating[Any]]) -> float:
    """
    Population-moment skewness g1 = m3 / m2^1.5.

    NaN when the values are constant (m2 == 0).
    """
    m2, m3, _ = _central_moments(values)
    if m2 == 0:
        return float('nan')
    return m3 / m2 ** 1.5


def excess_kurtosis(values: NDArray[np.floating[Any]]) -> float:
    """
    Population-moment excess kurtosis g2 = m4 / m2^2 - 3.

    NaN when the values are constant (m2 == 0).
    """
    m2, _, m4 = _central_moments(values)
    if m2 == 0:
        return float('nan')
    return m4 / m2 ** 2 - 3.0


def pearson_correlation(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> float:
    """
    Pearson product-moment correlation of paired values.

    Returns 0 when either variable has zero spread.
    """
    check_consistent_length(x, y, names=("x", "y"))
    check_min_samples(len(x), 1, "x")
    dx = deviations(x)
    dy = deviations(y)
    sxx = float(np.sum(dx ** 2))
    syy = float(np.sum(dy ** 2))
    if sxx == 0.0 or syy == 0.0:
        return 0.0
    r = float(np.sum(dx * dy) / np.sqrt(sxx * syy))
    # Rounding can push |r| a hair past 1 for perfectly linear data
    return max(-1.0, min(1.0, r))


def correlation_strength(r: float) -> str:
    """
    Verbal label for a correlation coefficient.

    |r| < 0.1 none, < 0.3 weak, < 0.7 moderate, otherwise strong.
    """
    strength = abs(r)
    if strength < 0.1:
        return "No correlation"
    sign = "positive" if r > 0 else "negative"
    if strength < 0.3:
        return f"Weak {sign} correlation"
    if strength < 0.7:
        return f"Moderate {sign} correlation"
    return f"Strong {sign} correlation"
