"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus individual
axis-level functions: mean(), sd(), var(), median(), skewness(),
kurtosis(), cor().
"""

from __future__ import annotations

from typing import Any

from statengine.core.protocols import Backend
from statengine.core.sample import Axis, Sample
from statengine.descriptive import _moments
from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive.solution import DescriptiveParams, DescriptiveSolution
from statengine.descriptive.backends.cpu import CPUDescriptiveBackend


def _get_backend() -> Backend[DescriptiveDesign, DescriptiveParams]:
    return CPUDescriptiveBackend()


def _ensure_design(data: Any) -> DescriptiveDesign:
    """Convert raw input to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_sample(data)


def describe(data: Any) -> DescriptiveSolution:
    """
    Compute all descriptive statistics at once.

    Computes count, per-axis mean, median, sd, variance, min, max,
    skewness and excess kurtosis, and the Pearson correlation of x and y.

    Parameters
    ----------
    data : Sample, sequence of pairs/points, 1D values, or DescriptiveDesign

    Returns
    -------
    DescriptiveSolution
    """
    design = _ensure_design(data)
    result = _get_backend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)


def mean(data: Any, axis: Axis = 'y') -> float:
    """Mean of one coordinate."""
    return _moments.mean(Sample.coerce(data).values(axis))


def sd(data: Any, axis: Axis = 'y') -> float:
    """Sample standard deviation (n - 1) of one coordinate; 0 for n <= 1."""
    return _moments.sample_sd(Sample.coerce(data).values(axis))


def var(data: Any, axis: Axis = 'y') -> float:
    """Sample variance (n - 1) of one coordinate; 0 for n <= 1."""
    return _moments.sample_variance(Sample.coerce(data).values(axis))


def median(data: Any, axis: Axis = 'y') -> float:
    """Median of one coordinate."""
    return _moments.median(Sample.coerce(data).values(axis))


def skewness(data: Any, axis: Axis = 'y') -> float:
    """Population-moment skewness of one coordinate."""
    return _moments.skewness(Sample.coerce(data).values(axis))


def kurtosis(data: Any, axis: Axis = 'y') -> float:
    """Population-moment excess kurtosis of one coordinate."""
    return _moments.excess_kurtosis(Sample.coerce(data).values(axis))


def cor(data: Any) -> float:
    """Pearson correlation between the x and y coordinates."""
    sample = Sample.coerce(data)
    return _moments.pearson_correlation(sample.x, sample.y)
