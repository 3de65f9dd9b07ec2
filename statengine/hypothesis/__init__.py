"""
Hypothesis testing module.

Public API:
    z_test(sample, mu, sigma)            - One-sample z-test, known sigma
    t_test(sample, mu)                   - One-sample t-test
    two_sample_t_test(a, b)              - Pooled-variance two-sample t-test
    chisq_gof(observed, expected)        - Chi-squared goodness of fit
    chisq_gof_sample(sample, distribution) - Bin, then chisq_gof
    normality_test(sample)               - Skewness/kurtosis heuristic
    bin_counts(values), expected_counts(values, bins, distribution)
"""

from statengine.hypothesis.solvers import (
    z_test,
    t_test,
    two_sample_t_test,
    chisq_gof,
    chisq_gof_sample,
    normality_test,
)
from statengine.hypothesis._binning import bin_counts, expected_counts, n_bins
from statengine.hypothesis.design import HypothesisDesign
from statengine.hypothesis._common import (
    HTestParams,
    ZTestParams,
    TTestParams,
    TwoSampleTTestParams,
    ChiSquareGOFParams,
    NormalityParams,
)
from statengine.hypothesis.solution import HTestSolution

__all__ = [
    "z_test",
    "t_test",
    "two_sample_t_test",
    "chisq_gof",
    "chisq_gof_sample",
    "normality_test",
    "bin_counts",
    "expected_counts",
    "n_bins",
    "HypothesisDesign",
    "HTestParams",
    "ZTestParams",
    "TTestParams",
    "TwoSampleTTestParams",
    "ChiSquareGOFParams",
    "NormalityParams",
    "HTestSolution",
]
