"""
Solver dispatch for hypothesis tests.

Provides z_test(), t_test(), two_sample_t_test(), chisq_gof(),
chisq_gof_sample() and normality_test(). Every sample argument accepts a
Sample, a sequence of (x, y) pairs or {'x', 'y'} mappings, or a plain 1D
sequence of values (treated as y, with x = index).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Literal
from numpy.typing import ArrayLike

from statengine.core.protocols import Backend
from statengine.core.sample import Axis, Sample
from statengine.hypothesis._common import HTestParams
from statengine.hypothesis.design import HypothesisDesign
from statengine.hypothesis.solution import HTestSolution
from statengine.hypothesis.backends.cpu import CPUHypothesisBackend
from statengine.hypothesis._binning import bin_counts, expected_counts

Alternative = Literal[
    "two.sided", "less", "greater",
    "two-sided", "two-tailed", "left-tailed", "right-tailed",
]


def _get_backend() -> Backend[HypothesisDesign, HTestParams]:
    return CPUHypothesisBackend()


def _run(design: HypothesisDesign) -> HTestSolution:
    result = _get_backend().solve(design)
    return HTestSolution(_result=result, _design=design)


def z_test(
    sample: Any,
    mu: float,
    sigma: float,
    *,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
    axis: Axis = 'y',
) -> HTestSolution:
    """
    One-sample z-test with known population standard deviation.

    Parameters
    ----------
    sample : sample-like
    mu : float
        Hypothesized mean.
    sigma : float
        Known population standard deviation, > 0.
    alpha : float
        Significance level in (0, 1). Default 0.05.
    alternative : str
        "two.sided" (default), "less" or "greater"; the tailed spellings
        are accepted too.
    axis : {'x', 'y'}

    Returns
    -------
    HTestSolution
        params is a ZTestParams.

    Raises
    ------
    InvalidParameterError
        If sigma <= 0 or alpha is outside (0, 1).
    SampleTooSmallError
        If the sample is empty.
    """
    return _run(HypothesisDesign.for_z_test(
        sample, mu, sigma, alpha=alpha, alternative=alternative, axis=axis,
    ))


def t_test(
    sample: Any,
    mu: float = 0.0,
    *,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
    axis: Axis = 'y',
) -> HTestSolution:
    """
    One-sample Student's t-test, H0: mean = mu, df = n - 1.

    Returns
    -------
    HTestSolution
        params is a TTestParams.

    Raises
    ------
    SampleTooSmallError
        If n < 2.
    InvalidParameterError
        If the sample standard deviation is 0.
    """
    return _run(HypothesisDesign.for_t_test(
        sample, mu, alpha=alpha, alternative=alternative, axis=axis,
    ))


def two_sample_t_test(
    sample_a: Any,
    sample_b: Any,
    *,
    alpha: float = 0.05,
    alternative: Alternative = "two.sided",
    axis: Axis = 'y',
) -> HTestSolution:
    """
    Independent two-sample t-test assuming equal variances.

    The pooled variance is ((n1-1) s1^2 + (n2-1) s2^2) / (n1 + n2 - 2)
    and df = n1 + n2 - 2. The interval is centred on mean(a) - mean(b).
    Swapping a and b negates the statistic and the mean difference and
    leaves df and the two-sided p-value unchanged.

    Returns
    -------
    HTestSolution
        params is a TwoSampleTTestParams.
    """
    return _run(HypothesisDesign.for_two_sample_t_test(
        sample_a, sample_b, alpha=alpha, alternative=alternative, axis=axis,
    ))


def chisq_gof(
    observed: ArrayLike,
    expected: ArrayLike,
    *,
    alpha: float = 0.05,
) -> HTestSolution:
    """
    Pearson's chi-squared goodness-of-fit test.

    df = len(observed) - 1, with no reduction for parameters that were
    estimated when building the expected counts.

    Raises
    ------
    InvalidParameterError
        If lengths differ or any expected count is <= 0.
    """
    return _run(HypothesisDesign.for_chisq_gof(observed, expected, alpha=alpha))


def chisq_gof_sample(
    sample: Any,
    *,
    distribution: Literal['uniform', 'normal'] = 'uniform',
    alpha: float = 0.05,
    axis: Axis = 'y',
) -> HTestSolution:
    """
    Bin one coordinate of a sample and test it against a reference shape.

    Uses bin_counts() (min(10, n // 5) equal-width bins) and
    expected_counts() for the uniform or fitted-normal expectation.
    """
    values = Sample.coerce(sample).values(axis)
    observed, edges = bin_counts(values)
    expected = expected_counts(values, edges, distribution)
    design = HypothesisDesign.for_chisq_gof(observed, expected, alpha=alpha)
    result = _get_backend().solve(design)
    result = replace(result, info={
        **result.info,
        "distribution": distribution,
        "bin_edges": edges,
        "axis": axis,
    })
    return HTestSolution(_result=result, _design=design)


def normality_test(
    sample: Any,
    *,
    alpha: float = 0.05,
    axis: Axis = 'y',
) -> HTestSolution:
    """
    Skewness/kurtosis normality heuristic.

    The p-value is the minimum of the skewness and kurtosis two-sided
    p-values; not a joint test.

    Raises
    ------
    SampleTooSmallError
        If n < 3.
    """
    return _run(HypothesisDesign.for_normality(sample, alpha=alpha, axis=axis))
