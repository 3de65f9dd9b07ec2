"""
Parameter estimation module.

Public API:
    estimate(sample, distribution, axis) - MLE and MoM for normal,
                                           exponential or poisson
"""

from statengine.estimation.design import EstimationDesign
from statengine.estimation.families import (
    Family,
    Normal,
    Exponential,
    Poisson,
    resolve_family,
    SUPPORTED_DISTRIBUTIONS,
)
from statengine.estimation.solution import EstimationParams, EstimationSolution
from statengine.estimation.solvers import estimate

__all__ = [
    "estimate",
    "EstimationDesign",
    "EstimationParams",
    "EstimationSolution",
    "Family",
    "Normal",
    "Exponential",
    "Poisson",
    "resolve_family",
    "SUPPORTED_DISTRIBUTIONS",
]
