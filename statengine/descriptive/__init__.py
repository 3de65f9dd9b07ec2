"""
Descriptive statistics module.

Public API:
    describe(sample)   - All statistics at once, per axis plus correlation
    mean(sample, axis) - Arithmetic mean
    sd(sample, axis)   - Standard deviation (n - 1)
    var(sample, axis)  - Variance (n - 1)
    median(sample, axis)
    skewness(sample, axis) - Population-moment skewness
    kurtosis(sample, axis) - Population-moment excess kurtosis
    cor(sample)        - Pearson correlation of x and y
    correlation_strength(r) - Verbal label for r
"""

from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive.solution import (
    AxisSummary,
    DescriptiveParams,
    DescriptiveSolution,
)
from statengine.descriptive.solvers import (
    describe,
    mean,
    sd,
    var,
    median,
    skewness,
    kurtosis,
    cor,
)
from statengine.descriptive._moments import correlation_strength

__all__ = [
    "describe",
    "mean",
    "sd",
    "var",
    "median",
    "skewness",
    "kurtosis",
    "cor",
    "correlation_strength",
    "DescriptiveDesign",
    "AxisSummary",
    "DescriptiveParams",
    "DescriptiveSolution",
]
