"""
Solver dispatch for parameter estimation.
"""

from __future__ import annotations

from typing import Any

from statengine.core.protocols import Backend
from statengine.core.sample import Axis
from statengine.estimation.design import EstimationDesign
from statengine.estimation.families import Family
from statengine.estimation.solution import EstimationParams, EstimationSolution
from statengine.estimation.backends.cpu import CPUEstimationBackend


def _get_backend() -> Backend[EstimationDesign, EstimationParams]:
    return CPUEstimationBackend()


def estimate(
    data: Any,
    distribution: str | Family = 'normal',
    *,
    axis: Axis = 'y',
) -> EstimationSolution:
    """
    Closed-form MLE and method-of-moments estimates for one coordinate.

    Parameters
    ----------
    data : Sample, sequence of pairs/points, or 1D values
    distribution : {'normal', 'exponential', 'poisson'} or Family
    axis : {'x', 'y'}

    Returns
    -------
    EstimationSolution

    Raises
    ------
    UnsupportedDistributionError
        If the distribution tag is unknown.
    SampleTooSmallError
        If the sample is empty.
    InvalidParameterError
        If the values are outside the family's support (negative values
        for exponential/poisson, zero mean for exponential).

    Examples
    --------
    >>> sol = estimate([2.0, 4.0, 6.0], 'exponential')
    >>> sol.mle['lambda']
    0.25
    """
    design = EstimationDesign.for_distribution(data, distribution, axis=axis)
    result = _get_backend().solve(design)
    return EstimationSolution(_result=result, _design=design)
