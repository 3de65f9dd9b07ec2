"""
Equal-width binning of a continuous sample for goodness-of-fit testing.

The number of bins is min(10, floor(n / 5)) so that each bin expects
about five or more observations under a uniform null. Bins span
[min, max]; a value equal to max falls into the last bin.
"""

from __future__ import annotations

from typing import Any, Literal
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from statengine.core.exceptions import InvalidParameterError, ValidationError
from statengine.core.validation import (
    check_array,
    check_finite,
    check_min_samples,
)
from statengine.descriptive import _moments
from statengine.distributions import normal_cdf

MAX_BINS = 10
MIN_PER_BIN = 5

ExpectedDistribution = Literal['uniform', 'normal']
VALID_EXPECTED = ('uniform', 'normal')


def n_bins(n: int) -> int:
    """Number of bins used for a sample of size n."""
    return min(MAX_BINS, n // MIN_PER_BIN)


def bin_counts(
    values: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Count values into equal-width bins over [min, max].

    Returns
    -------
    counts : ndarray, shape (k,)
    edges : ndarray, shape (k + 1,)

    Raises
    ------
    SampleTooSmallError
        If n < 5 (no bin could be formed).
    InvalidParameterError
        If all values are equal (zero bin width).
    """
    arr = check_array(values, "values")
    check_finite(arr, "values")
    check_min_samples(len(arr), MIN_PER_BIN, "values")

    k = n_bins(len(arr))
    lo, hi = _moments.minimum(arr), _moments.maximum(arr)
    width = (hi - lo) / k
    if width == 0.0:
        raise InvalidParameterError(
            "values: all values are equal; bins would have zero width",
            parameter="values",
            value=lo,
        )

    index = np.minimum(np.floor((arr - lo) / width).astype(np.int64), k - 1)
    counts = np.bincount(index, minlength=k).astype(np.float64)
    edges = lo + width * np.arange(k + 1, dtype=np.float64)
    edges[-1] = hi
    return counts, edges


def expected_counts(
    values: ArrayLike,
    bins: ArrayLike,
    distribution: ExpectedDistribution = 'uniform',
) -> NDArray[np.floating[Any]]:
    """
    Expected count per bin under a reference distribution.

    uniform: n / k in every bin.
    normal:  n * (Phi(upper) - Phi(lower)) for a normal with the sample
             mean and population standard deviation of values.

    Parameters
    ----------
    values : array-like
        The sample that was binned.
    bins : array-like
        Bin edges, as returned by bin_counts().
    distribution : {'uniform', 'normal'}
    """
    arr = check_array(values, "values")
    check_finite(arr, "values")
    edges = check_array(bins, "bins")
    check_min_samples(len(edges), 2, "bins")
    if distribution not in VALID_EXPECTED:
        raise ValidationError(
            f"distribution must be one of {VALID_EXPECTED}, got {distribution!r}"
        )

    n = len(arr)
    k = len(edges) - 1
    if distribution == 'uniform':
        return np.full(k, n / k, dtype=np.float64)

    mu = _moments.mean(arr)
    sd = math.sqrt(_moments.population_variance(arr))
    if sd == 0.0:
        raise InvalidParameterError(
            "values: standard deviation is 0; cannot fit a normal distribution",
            parameter="values",
            value=0.0,
        )
    cdf = np.array([normal_cdf((e - mu) / sd) for e in edges])
    return n * np.diff(cdf)
